"""
Esquemas Pydantic para respuestas de stock
"""
from pydantic import BaseModel
from typing import Optional, List, Union
from datetime import date

from stockcare.models.medication import StockStatus, TreatmentWindowState
from stockcare.services.requirement_service import RequirementLine, RequirementReport
from stockcare.services.stock_service import StockAssessment, StockSummary


class StockAssessmentResponse(BaseModel):
    """Evaluación de stock de un medicamento"""
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    resident_id: Optional[Union[int, str]] = None
    resident_name: Optional[str] = None
    reference_date: date

    daily_doses: float
    daily_usage: float
    usage_known: bool
    current_stock: float
    simple_days_remaining: int

    treatment_window: TreatmentWindowState
    days_passed: Optional[int] = None
    pills_needed: Optional[float] = None
    treatment_balance: Optional[float] = None
    end_date: Optional[date] = None

    status: StockStatus
    is_low_stock: bool
    is_critical: bool
    needs_review: bool
    reasons: List[str] = []
    supply_label: Optional[str] = None

    @classmethod
    def from_assessment(cls, assessment: StockAssessment, reference_date: date) -> "StockAssessmentResponse":
        medication = assessment.medication
        return cls(
            id=medication.id,
            name=medication.name,
            resident_id=medication.resident_id,
            resident_name=medication.resident_name,
            reference_date=reference_date,
            daily_doses=assessment.daily_doses,
            daily_usage=assessment.daily_usage,
            usage_known=assessment.usage_known,
            current_stock=assessment.current_stock,
            simple_days_remaining=assessment.simple_days_remaining,
            treatment_window=assessment.treatment_window,
            days_passed=assessment.days_passed,
            pills_needed=assessment.pills_needed,
            treatment_balance=assessment.treatment_balance,
            end_date=assessment.end_date,
            status=assessment.status,
            is_low_stock=assessment.is_low_stock,
            is_critical=assessment.is_critical,
            needs_review=assessment.needs_review,
            reasons=[reason.value for reason in assessment.reasons],
            supply_label=assessment.supply_label,
        )


class StockSummaryResponse(BaseModel):
    """Contadores de stock para el dashboard"""
    reference_date: date
    total: int = 0
    ok: int = 0
    low: int = 0
    critical: int = 0
    needs_review: int = 0
    suspended: int = 0

    @classmethod
    def from_summary(cls, summary: StockSummary, reference_date: date) -> "StockSummaryResponse":
        return cls(
            reference_date=reference_date,
            total=summary.total,
            ok=summary.ok,
            low=summary.low,
            critical=summary.critical,
            needs_review=summary.needs_review,
            suspended=summary.suspended,
        )


class AdministrationResponse(BaseModel):
    """Resultado de administrar una dosis"""
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    units: float
    previous_stock: float
    current_stock: float


class FractionResponse(BaseModel):
    value: float
    fraction: str


class RequirementLineResponse(BaseModel):
    """Línea del reporte de requerimiento"""
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    resident_name: Optional[str] = None
    daily_usage: float
    current_stock: float
    needed_for_period: int
    deficit: int

    @classmethod
    def from_line(cls, line: RequirementLine) -> "RequirementLineResponse":
        return cls(
            id=line.medication.id,
            name=line.medication.name,
            resident_name=line.medication.resident_name,
            daily_usage=line.daily_usage,
            current_stock=line.current_stock,
            needed_for_period=line.needed_for_period,
            deficit=line.deficit,
        )


class RequirementReportResponse(BaseModel):
    """Reporte de requerimiento: faltantes, reserva y por revisar"""
    days_to_cover: int
    total_deficit: int
    missing: List[RequirementLineResponse] = []
    reserve: List[RequirementLineResponse] = []
    needs_review: List[RequirementLineResponse] = []

    @classmethod
    def from_report(cls, report: RequirementReport) -> "RequirementReportResponse":
        return cls(
            days_to_cover=report.days_to_cover,
            total_deficit=report.total_deficit,
            missing=[RequirementLineResponse.from_line(line) for line in report.missing],
            reserve=[RequirementLineResponse.from_line(line) for line in report.reserve],
            needs_review=[RequirementLineResponse.from_line(line) for line in report.needs_review],
        )
