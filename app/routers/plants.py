import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.models import (
    ErrorResponse,
    IdentificationRequest,
    IdentificationResult,
    UpstreamErrorResponse,
)
from app.services.identification_service import IdentificationService
from app.services.plantnet_client import PlantNetAPIError, PlantNetClient
from app.services.translator import GoogleTranslator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plants", tags=["plants"])


def get_identification_service(
    settings: Settings = Depends(get_settings),
) -> Optional[IdentificationService]:
    """Construye el servicio por petición; None si falta la API key."""
    if not settings.plantnet_api_key:
        return None

    return IdentificationService(
        identifier=PlantNetClient(
            api_key=settings.plantnet_api_key,
            base_url=settings.plantnet_base_url,
            timeout=settings.http_timeout,
        ),
        translator=GoogleTranslator(
            source_language=settings.source_language,
            target_language=settings.target_language,
            base_url=settings.translate_base_url,
            timeout=settings.http_timeout,
        ),
    )


def _error(status_code: int, model) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=model.model_dump(exclude_none=True))


@router.post(
    "/identify",
    response_model=IdentificationResult,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": UpstreamErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": IdentificationRequest.model_json_schema()}},
        }
    },
)
async def identify_plant(
    request: Request,
    service: Optional[IdentificationService] = Depends(get_identification_service),
):
    """
    Identifica una planta a partir de una foto en base64.

    Body: {"imageBase64": "<base64>"}. Devuelve el mejor resultado de Pl@ntNet
    con el nombre común traducido al italiano. Todos los errores se devuelven
    como JSON con la clave "error".
    """
    try:
        raw_body = await request.body()
        body = json.loads(raw_body or b"{}")

        try:
            payload = IdentificationRequest.model_validate(body)
        except ValidationError:
            logger.error("Falta imageBase64 o no es una cadena")
            return _error(400, ErrorResponse(error="Missing imageBase64"))

        if service is None:
            logger.error("Falta PLANTNET_API_KEY en las variables de entorno")
            return _error(500, ErrorResponse(error="Missing PLANTNET_API_KEY"))

        try:
            result = await service.identify(payload.imageBase64)
        except PlantNetAPIError as e:
            return _error(502, UpstreamErrorResponse(status=e.status_code, details=e.details))

        return JSONResponse(status_code=200, content=result.model_dump())

    except Exception as e:
        logger.exception("Error interno identificando la planta")
        return _error(500, ErrorResponse(error="Internal server error", details=str(e)))
