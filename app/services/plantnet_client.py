import logging
from typing import Any, Dict, Optional

import httpx

from app.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_PLANTNET_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_ORGAN = "leaf"


class PlantNetAPIError(Exception):
    """Pl@ntNet respondió con un código HTTP distinto de 2xx."""

    def __init__(self, status_code: int, details: str):
        super().__init__(f"PlantNet API error {status_code}: {details}")
        self.status_code = status_code
        self.details = details


class PlantNetClient:
    """Cliente mínimo del endpoint /identify/all de Pl@ntNet."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_PLANTNET_BASE_URL,
        organ: str = DEFAULT_ORGAN,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("PLANTNET_API_KEY no está configurada")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.organ = organ
        self.timeout = timeout
        self._transport = transport

    async def identify(self, image_data: bytes) -> Dict[str, Any]:
        """
        Envía una sola imagen a Pl@ntNet y devuelve el JSON de la respuesta.

        Lanza PlantNetAPIError si el estado HTTP no es de éxito; los errores
        de red de httpx se propagan tal cual.
        """
        files = {"images": ("photo.jpg", image_data, "image/jpeg")}
        data = {"organs": self.organ}

        async with httpx.AsyncClient(
            transport=self._transport, timeout=self.timeout, follow_redirects=True
        ) as client:
            response = await client.post(
                f"{self.base_url}/identify/all",
                params={"api-key": self.api_key},
                files=files,
                data=data,
            )

        if not response.is_success:
            logger.error(
                "Error de la API de PlantNet: %s %s", response.status_code, response.text
            )
            raise PlantNetAPIError(response.status_code, response.text)

        return response.json()
