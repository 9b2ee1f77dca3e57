import base64
import logging
import re
from typing import Any, Dict, Optional, Protocol, Union

from app.models import IdentificationResult

logger = logging.getLogger(__name__)

_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/]")


class PlantIdentifier(Protocol):
    async def identify(self, image_data: bytes) -> Dict[str, Any]: ...


class Translator(Protocol):
    async def translate(self, text: str) -> str: ...


def decode_image(image_base64: str) -> bytes:
    """
    Decodifica base64 de forma tolerante: descarta caracteres fuera del
    alfabeto (saltos de línea, espacios, '=' sobrantes) y repone el padding.
    No se valida que el resultado sea un JPEG.
    """
    cleaned = _NON_BASE64.sub("", image_base64.replace("-", "+").replace("_", "/"))
    if len(cleaned) % 4 == 1:
        # Un carácter suelto no codifica ningún byte
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


def best_match(data: Any) -> Optional[Dict[str, Any]]:
    """
    Primer resultado de Pl@ntNet; se asume que ya viene ordenado por score.
    Una respuesta con forma inesperada cuenta como "sin resultados".
    """
    if not isinstance(data, dict):
        return None
    results = data.get("results")
    if not isinstance(results, list) or not results:
        return None
    best = results[0]
    return best if isinstance(best, dict) else None


def _score(value: Any) -> Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def _first_text(*values: Any) -> str:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return ""


class IdentificationService:

    def __init__(self, identifier: PlantIdentifier, translator: Translator):
        self.identifier = identifier
        self.translator = translator

    async def identify(self, image_base64: str) -> IdentificationResult:
        image_data = decode_image(image_base64)

        data = await self.identifier.identify(image_data)

        best = best_match(data)
        if not best:
            logger.warning("Ningún resultado útil de PlantNet")
            return IdentificationResult.empty()

        species = best.get("species")
        if not isinstance(species, dict):
            species = {}
        scientific_name = _first_text(
            species.get("scientificNameWithoutAuthor"),
            species.get("scientificName"),
        )
        common_names = species.get("commonNames")
        if not isinstance(common_names, list):
            common_names = []
        common_name_en = _first_text(*common_names[:1])

        common_name = await self.translator.translate(common_name_en)

        return IdentificationResult(
            scientificName=scientific_name,
            commonName=common_name or common_name_en,
            reliability=_score(best.get("score")),
        )
