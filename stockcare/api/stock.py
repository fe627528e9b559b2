"""
Endpoints de evaluación de stock
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
import logging

from stockcare.core.config import Settings, get_settings
from stockcare.core.dependencies import check_batch_size, resolve_reference_date
from stockcare.schemas.medication import (
    AdministrationRequest,
    StockAssessRequest,
    StockBatchRequest,
)
from stockcare.schemas.stock import (
    AdministrationResponse,
    FractionResponse,
    StockAssessmentResponse,
)
from stockcare.services.consumption import (
    InvalidDoseError,
    dose_units_per_administration,
    stock_after_administration,
)
from stockcare.services.fraction_formatter import decimal_to_fraction
from stockcare.services.stock_projector import normalize_stock
from stockcare.services.stock_service import StockService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/assess", response_model=StockAssessmentResponse)
async def assess_medication(
        request: StockAssessRequest,
        settings: Settings = Depends(get_settings)
):
    """
    Evaluar si el stock de un medicamento alcanza para el tratamiento
    """
    reference_date = resolve_reference_date(request.reference_date, settings)
    stock_service = StockService(reference_date, settings.LOW_STOCK_DAYS)

    assessment = stock_service.assess(request.medication.to_domain())
    return StockAssessmentResponse.from_assessment(assessment, reference_date)


@router.post("/assess/batch", response_model=List[StockAssessmentResponse])
async def assess_medications(
        request: StockBatchRequest,
        settings: Settings = Depends(get_settings)
):
    """
    Evaluar varios medicamentos con la misma fecha de referencia
    """
    check_batch_size(len(request.medications), settings)
    reference_date = resolve_reference_date(request.reference_date, settings)
    stock_service = StockService(reference_date, settings.LOW_STOCK_DAYS)

    assessments = stock_service.assess_many(request.to_domain())
    return [StockAssessmentResponse.from_assessment(item, reference_date) for item in assessments]


@router.post("/inventory", response_model=List[StockAssessmentResponse])
async def list_inventory(
        request: StockBatchRequest,
        status_filter: str = Query(
            "all", alias="status", pattern="^(all|ok|low|critical)$",
            description="Filtrar por estado: all, ok, low, critical"
        ),
        search: Optional[str] = Query(None, description="Buscar por medicamento o residente"),
        settings: Settings = Depends(get_settings)
):
    """
    Inventario global de medicamentos activos, ordenado por días restantes
    """
    check_batch_size(len(request.medications), settings)
    reference_date = resolve_reference_date(request.reference_date, settings)
    stock_service = StockService(reference_date, settings.LOW_STOCK_DAYS)

    items = stock_service.inventory(request.to_domain(), status_filter=status_filter, search=search)
    return [StockAssessmentResponse.from_assessment(item, reference_date) for item in items]


@router.post("/administer", response_model=AdministrationResponse)
async def administer_dose(request: AdministrationRequest):
    """
    Calcular el stock resultante al administrar una dosis
    """
    medication = request.medication.to_domain()

    try:
        units = dose_units_per_administration(medication, request.amount)
        remaining = stock_after_administration(medication.current_stock, units)
    except InvalidDoseError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    logger.info(f"Dosis administrada de {medication.name}: {units} unidades, stock {remaining}")
    return AdministrationResponse(
        id=medication.id,
        name=medication.name,
        units=units,
        previous_stock=normalize_stock(medication.current_stock),
        current_stock=remaining,
    )


@router.get("/fraction", response_model=FractionResponse)
async def format_fraction(value: float = Query(..., description="Cantidad decimal (ej: 0.25)")):
    """
    Representar una cantidad decimal como fracción de pastilla
    """
    if value <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="La cantidad debe ser mayor a 0"
        )
    return FractionResponse(value=value, fraction=decimal_to_fraction(value))
