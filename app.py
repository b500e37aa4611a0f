"""
FastAPI Application Entry Point - Rastreo de Contactos Web API

Este módulo define la aplicación principal FastAPI que expone
el rastreo temporal de contactos a través de una API REST local.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.core.config import TRACING_CONFIG
from src.utils.logger import get_logger

# Routers
from api.routers import traces, outbreak

logger = get_logger(__name__)

# Crear instancia FastAPI
app = FastAPI(
    title="Rastreo de Contactos API",
    description="API REST para rastreo temporal de contactos con latencia de incubación",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configurar CORS para desarrollo local
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar routers
app.include_router(traces.router, prefix="/api", tags=["Trazas"])
app.include_router(outbreak.router, prefix="/api", tags=["Brote"])


@app.get("/")
async def root():
    """Endpoint raíz - información de la API."""
    return {
        "message": "Rastreo de Contactos API",
        "version": "1.0.0",
        "incubation_latency": TRACING_CONFIG.incubation_latency,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.on_event("startup")
async def startup_event():
    """Evento de inicio - inicializar recursos."""
    logger.info("Iniciando Rastreo de Contactos API v1.0.0")
    logger.info("Documentación disponible en: http://localhost:8000/docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Evento de cierre - limpieza de recursos."""
    logger.info("Cerrando Rastreo de Contactos API")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
