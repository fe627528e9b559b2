# stockcare/api/reports.py
"""
Endpoints de reportes
"""
from fastapi import APIRouter, Depends

from stockcare.core.config import Settings, get_settings
from stockcare.core.dependencies import check_batch_size
from stockcare.schemas.medication import RequirementRequest
from stockcare.schemas.stock import RequirementReportResponse
from stockcare.services.requirement_service import build_requirement_report

router = APIRouter()


@router.post("/requirements", response_model=RequirementReportResponse)
async def get_requirement_report(
        request: RequirementRequest,
        settings: Settings = Depends(get_settings)
):
    """Requerimiento del periodo: medicamentos faltantes, en reserva y por revisar"""
    check_batch_size(len(request.medications), settings)
    days_to_cover = request.days_to_cover or settings.REQUIREMENT_DAYS_TO_COVER

    report = build_requirement_report(request.to_domain(), days_to_cover)
    return RequirementReportResponse.from_report(report)
