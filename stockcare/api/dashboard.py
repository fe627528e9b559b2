"""
Endpoints específicos del dashboard
"""
from fastapi import APIRouter, Depends

from stockcare.core.config import Settings, get_settings
from stockcare.core.dependencies import check_batch_size, resolve_reference_date
from stockcare.schemas.medication import StockBatchRequest
from stockcare.schemas.stock import StockSummaryResponse
from stockcare.services.stock_service import StockService

router = APIRouter()


@router.post("/stock-summary", response_model=StockSummaryResponse)
async def get_stock_summary(
        request: StockBatchRequest,
        settings: Settings = Depends(get_settings)
):
    """
    Contadores de stock bajo, crítico y por revisar de los medicamentos activos
    """
    check_batch_size(len(request.medications), settings)
    reference_date = resolve_reference_date(request.reference_date, settings)
    stock_service = StockService(reference_date, settings.LOW_STOCK_DAYS)

    summary = stock_service.summarize(request.to_domain())
    return StockSummaryResponse.from_summary(summary, reference_date)
