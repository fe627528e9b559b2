"""
Archivo principal de la aplicación FastAPI - StockCare
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from stockcare.core.config import get_settings
from stockcare.core.logging import setup_logging
from stockcare.api import api_router
import logging

settings = get_settings()

# Configurar logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestión del ciclo de vida de la aplicación"""
    # Startup
    logger.info("🚀 Iniciando StockCare API...")
    logger.info(f"🌍 Ambiente: {settings.ENVIRONMENT}")
    logger.info(f"🔑 Debug: {settings.DEBUG}")
    logger.info(
        f"💊 Alerta de stock bajo: {settings.LOW_STOCK_DAYS} días - "
        f"requerimiento: {settings.REQUIREMENT_DAYS_TO_COVER} días"
    )
    logger.info("🎯 StockCare API lista para recibir requests")
    yield

    # Shutdown
    logger.info("🛑 Cerrando StockCare API...")


def create_application() -> FastAPI:
    """Factory function para crear la aplicación FastAPI"""

    app_config = {
        "title": settings.PROJECT_NAME,
        "description": """
## StockCare API

Cálculo de suficiencia de stock de medicamentos para residencias.

### Características principales:
- 💊 Consumo diario a partir del patrón de dosis
- 📅 Balance de pastillas al final del tratamiento
- 🚨 Clasificación ok / bajo / crítico con revisión obligatoria
- 📋 Requerimiento mensual de faltantes
        """,
        "version": settings.VERSION,
        "license_info": {
            "name": "MIT License",
        },
        "lifespan": lifespan,
    }

    app = FastAPI(**app_config)

    # Configurar middlewares
    setup_middlewares(app)

    # Configurar rutas
    setup_routes(app)

    return app


def setup_middlewares(app: FastAPI):
    """Configurar middlewares de la aplicación"""

    cors_config = {
        "allow_origins": settings.CORS_ORIGINS,
        "allow_credentials": True,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
    }

    logger.info("🔧 CORS configurado")
    logger.info(f"🌐 Orígenes permitidos: {cors_config['allow_origins']}")

    app.add_middleware(CORSMiddleware, **cors_config)


def setup_routes(app: FastAPI):
    """Configurar rutas de la aplicación"""

    # Endpoint raíz
    @app.get("/")
    async def root():
        return {
            "message": "🏥 StockCare API",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "documentation": "/docs",
            "health": "/health",
            "api": "/api"
        }

    # Health check general
    @app.get("/health")
    async def health_check():
        """Health check de la aplicación"""
        return {
            "status": "healthy",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT
        }

    # Incluir router principal de la API
    app.include_router(
        api_router,
        prefix="/api"
    )

    logger.info("🛣️ Rutas configuradas correctamente")


# Crear la aplicación
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stockcare.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
