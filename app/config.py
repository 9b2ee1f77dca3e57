import os
from functools import lru_cache
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

DEFAULT_PLANTNET_BASE_URL = "https://my-api.plantnet.org/v2"
DEFAULT_TRANSLATE_BASE_URL = "https://translate.googleapis.com"
DEFAULT_HTTP_TIMEOUT = 30.0


class Settings(BaseModel):
    """Configuración del servicio, leída de variables de entorno (y de .env)."""

    plantnet_api_key: Optional[str] = Field(None, description="API key de Pl@ntNet")
    plantnet_base_url: str = DEFAULT_PLANTNET_BASE_URL
    translate_base_url: str = DEFAULT_TRANSLATE_BASE_URL
    source_language: str = "en"
    target_language: str = "it"
    log_level: str = "INFO"
    cors_allow_origins: List[str] = ["*"]
    http_timeout: float = Field(
        DEFAULT_HTTP_TIMEOUT, gt=0, description="Timeout en segundos de las llamadas salientes"
    )

    @field_validator("plantnet_api_key", mode="before")
    @classmethod
    def empty_key_is_missing(cls, v):
        if v is None or not str(v).strip():
            return None
        return str(v).strip()

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        values = {
            "plantnet_api_key": env.get("PLANTNET_API_KEY"),
            "plantnet_base_url": env.get("PLANTNET_BASE_URL"),
            "translate_base_url": env.get("TRANSLATE_BASE_URL"),
            "source_language": env.get("TRANSLATE_SOURCE_LANG"),
            "target_language": env.get("TRANSLATE_TARGET_LANG"),
            "log_level": env.get("LOG_LEVEL"),
            "cors_allow_origins": env.get("CORS_ALLOW_ORIGINS"),
            "http_timeout": env.get("HTTP_TIMEOUT"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
