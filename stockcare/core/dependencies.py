"""
Dependencias globales de la aplicación
"""
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

from fastapi import HTTPException, status

from stockcare.core.config import Settings

logger = logging.getLogger(__name__)


def today_in_timezone(timezone: str) -> date:
    """Fecha de hoy en la zona horaria configurada"""
    try:
        tz = ZoneInfo(timezone)
    except ZoneInfoNotFoundError:
        logger.warning(f"Zona horaria desconocida '{timezone}', usando la hora local")
        return date.today()
    return datetime.now(tz).date()


def resolve_reference_date(reference_date: Optional[date], settings: Settings) -> date:
    """La fecha de referencia enviada por el cliente o el día de hoy"""
    if reference_date is not None:
        return reference_date
    return today_in_timezone(settings.DEFAULT_TIMEZONE)


def check_batch_size(size: int, settings: Settings):
    """Rechazar lotes mayores al máximo configurado"""
    if size > settings.MAX_BATCH_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Máximo {settings.MAX_BATCH_SIZE} medicamentos por solicitud (recibidos {size})"
        )
