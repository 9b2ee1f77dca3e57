from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import get_settings
from app.logging_config import setup_logging
from app.models import ErrorResponse
from app.routers import health, plants

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(
    title="Plant-Identify-MS",
    description="API para identificar plantas con Pl@ntNet y traducir el nombre común al italiano",
    version="1.0.0"
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_as_json(request: Request, exc: StarletteHTTPException):
    """Cualquier método no soportado responde con el mismo cuerpo JSON."""
    if exc.status_code == 405:
        return JSONResponse(
            status_code=405,
            content=ErrorResponse(error="Method not allowed").model_dump(exclude_none=True),
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)

# Incluir routers
app.include_router(health.router)
app.include_router(plants.router)

@app.get("/")
async def root():
    """Endpoint raíz con información básica de la API"""
    return {
        "message": "Plant-Identify-MS API está funcionando",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "identify_plant": "/plants/identify"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
