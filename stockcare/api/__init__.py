# stockcare/api/__init__.py
"""
Router principal de la API
"""
from fastapi import APIRouter, Depends

from stockcare.core.config import Settings, get_settings

# Importar todos los routers
from . import stock, dashboard, reports

# Router principal de la API
api_router = APIRouter()

api_router.include_router(
    stock.router,
    prefix="/stock",
    tags=["stock"]
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"]
)

api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["reports"]
)


# Endpoints adicionales de la API
@api_router.get("/health")
async def api_health(settings: Settings = Depends(get_settings)):
    """Health check específico de la API"""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION
    }


@api_router.get("/info")
async def api_info(settings: Settings = Depends(get_settings)):
    """Información de la API"""
    return {
        "api": {
            "version": settings.VERSION,
            "available_endpoints": [
                "/stock/assess",
                "/stock/assess/batch",
                "/stock/inventory",
                "/stock/administer",
                "/stock/fraction",
                "/dashboard/stock-summary",
                "/reports/requirements"
            ]
        },
        "alerts": {
            "low_stock_days": settings.LOW_STOCK_DAYS,
            "requirement_days_to_cover": settings.REQUIREMENT_DAYS_TO_COVER
        }
    }
