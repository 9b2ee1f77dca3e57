from pydantic import BaseModel, Field
from typing import Optional, Union

ALLERGENICITY_PLACEHOLDER = "N/D"

class IdentificationRequest(BaseModel):
    imageBase64: str = Field(..., min_length=1, description="Foto de la planta codificada en base64")

class IdentificationResult(BaseModel):
    scientificName: str = Field(..., description="Nombre científico sin autor")
    commonName: str = Field(..., description="Nombre común traducido")
    reliability: Union[int, float] = Field(0, description="Puntuación de Pl@ntNet (0-1)")
    allergenicity: str = Field(ALLERGENICITY_PLACEHOLDER, description="Siempre 'N/D'")

    @classmethod
    def empty(cls) -> "IdentificationResult":
        return cls(scientificName="", commonName="", reliability=0)

class HealthResponse(BaseModel):
    status: str = Field(..., description="Estado del servicio")
    service: str = Field(..., description="Nombre del servicio")

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Descripción del error")
    details: Optional[str] = Field(None, description="Detalle técnico del error")

class UpstreamErrorResponse(BaseModel):
    error: str = Field("PlantNet API error", description="Descripción del error")
    status: int = Field(..., description="Código HTTP devuelto por Pl@ntNet")
    details: str = Field(..., description="Cuerpo de la respuesta de Pl@ntNet")
