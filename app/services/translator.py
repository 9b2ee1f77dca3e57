import logging
from typing import Optional

import httpx

from app.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_TRANSLATE_BASE_URL

logger = logging.getLogger(__name__)


class GoogleTranslator:
    """
    Traductor basado en el endpoint público translate_a/single de Google.

    translate() nunca lanza excepciones: ante cualquier fallo devuelve el
    texto original y deja un warning en el log.
    """

    def __init__(
        self,
        source_language: str = "en",
        target_language: str = "it",
        base_url: str = DEFAULT_TRANSLATE_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.source_language = source_language
        self.target_language = target_language
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def translate(self, text: str) -> str:
        if not text:
            return ""

        params = {
            "client": "gtx",
            "sl": self.source_language,
            "tl": self.target_language,
            "dt": "t",
            "q": text,
        }

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(
                    f"{self.base_url}/translate_a/single", params=params
                )
            response.raise_for_status()
            return self._extract_translation(response.json()) or text
        except Exception as e:
            logger.warning("Traducción no realizada para %r: %s", text, e)
            return text

    @staticmethod
    def _extract_translation(data) -> str:
        # Estructura típica: [[["traducción", "original", ...], ...], ...]
        translated = data[0][0][0]
        if not isinstance(translated, str):
            raise ValueError(f"Formato de traducción inesperado: {translated!r}")
        return translated
