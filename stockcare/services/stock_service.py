"""
Servicio de evaluación de stock de medicamentos
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional
import logging

from stockcare.models.medication import (
    Medication,
    StockStatus,
    TreatmentWindowState,
)
from stockcare.services.consumption import calculate_daily_usage, coerce_dose_type
from stockcare.services.dosage_parser import parse_dosage_pattern
from stockcare.services.fraction_formatter import format_quantity
from stockcare.services.status_classifier import (
    LOW_STOCK_DAYS,
    StockAlertReason,
    classify_stock,
)
from stockcare.services.stock_projector import project_stock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockAssessment:
    """Resultado derivado; se recalcula cada vez, nunca se guarda"""
    medication: Medication
    daily_doses: float
    daily_usage: float
    usage_known: bool
    current_stock: float
    simple_days_remaining: int
    treatment_window: TreatmentWindowState
    status: StockStatus
    needs_review: bool
    reasons: List[StockAlertReason] = field(default_factory=list)
    days_passed: Optional[int] = None
    pills_needed: Optional[float] = None
    treatment_balance: Optional[float] = None
    end_date: Optional[date] = None

    @property
    def is_low_stock(self) -> bool:
        return self.status == StockStatus.LOW

    @property
    def is_critical(self) -> bool:
        return self.status == StockStatus.CRITICAL

    @property
    def supply_label(self) -> Optional[str]:
        return supply_label(self)


@dataclass(frozen=True)
class StockSummary:
    """Contadores del dashboard (solo medicamentos activos)"""
    total: int = 0
    ok: int = 0
    low: int = 0
    critical: int = 0
    needs_review: int = 0
    suspended: int = 0


def assess(
        medication: Medication,
        reference_date: date,
        low_stock_days: int = LOW_STOCK_DAYS
) -> StockAssessment:
    """
    Evaluar si el stock de un medicamento cubre el tratamiento.

    Patrón de dosis -> consumo diario -> proyección -> clasificación.
    """
    dosage = parse_dosage_pattern(medication.dosage_pattern)
    daily_usage = calculate_daily_usage(
        dosage.daily_doses,
        medication.dose_type,
        medication.pill_fraction
    )
    projection = project_stock(
        medication.current_stock,
        daily_usage,
        medication.start_date,
        medication.treatment_days,
        reference_date,
        usage_known=dosage.usage_known
    )
    classification = classify_stock(dosage.usage_known, projection, low_stock_days)

    if classification.needs_review:
        logger.info(
            f"Medicamento {medication.id} ({medication.name}) requiere revisión: "
            f"{[reason.value for reason in classification.reasons]}"
        )

    return StockAssessment(
        medication=medication,
        daily_doses=dosage.daily_doses,
        daily_usage=daily_usage,
        usage_known=dosage.usage_known,
        current_stock=projection.current_stock,
        simple_days_remaining=projection.simple_days_remaining,
        treatment_window=projection.treatment_window,
        status=classification.status,
        needs_review=classification.needs_review,
        reasons=classification.reasons,
        days_passed=projection.days_passed,
        pills_needed=projection.pills_needed,
        treatment_balance=projection.treatment_balance,
        end_date=projection.end_date,
    )


def supply_label(assessment: StockAssessment) -> Optional[str]:
    """Etiqueta del kardex: "Faltan X" o "Sobran X" según el balance"""
    balance = assessment.treatment_balance
    if balance is None:
        return None

    dose_type = coerce_dose_type(assessment.medication.dose_type)
    if balance < 0:
        return f"Faltan {format_quantity(abs(balance), dose_type)}"
    return f"Sobran {format_quantity(balance, dose_type)}"


class StockService:
    """Evaluación de stock para listados, dashboard y kardex"""

    def __init__(self, reference_date: date, low_stock_days: int = LOW_STOCK_DAYS):
        self.reference_date = reference_date
        self.low_stock_days = low_stock_days

    def assess(self, medication: Medication) -> StockAssessment:
        return assess(medication, self.reference_date, self.low_stock_days)

    def assess_many(self, medications: Iterable[Medication]) -> List[StockAssessment]:
        return [self.assess(medication) for medication in medications]

    def summarize(self, medications: Iterable[Medication]) -> StockSummary:
        """Contar medicamentos activos por estado de stock"""
        counts = {"total": 0, "ok": 0, "low": 0, "critical": 0, "needs_review": 0, "suspended": 0}

        for medication in medications:
            if not medication.is_active:
                counts["suspended"] += 1
                continue

            assessment = self.assess(medication)
            counts["total"] += 1
            counts[assessment.status.value] += 1
            if assessment.needs_review:
                counts["needs_review"] += 1

        logger.info(f"Resumen de stock: {counts}")
        return StockSummary(**counts)

    def inventory(
            self,
            medications: Iterable[Medication],
            status_filter: Optional[str] = None,
            search: Optional[str] = None
    ) -> List[StockAssessment]:
        """
        Inventario global de medicamentos activos.

        Filtra por estado ("all", "ok", "low", "critical") y por nombre de
        medicamento o residente; ordena por días restantes.
        """
        wanted = None
        if status_filter and status_filter != "all":
            wanted = StockStatus(status_filter)

        term = search.strip().lower() if search else ""

        items = []
        for medication in medications:
            if not medication.is_active:
                continue
            if term and not _matches(medication, term):
                continue

            assessment = self.assess(medication)
            if wanted is not None and assessment.status != wanted:
                continue
            items.append(assessment)

        items.sort(key=lambda item: (item.simple_days_remaining, item.medication.name or ""))
        return items


def _matches(medication: Medication, term: str) -> bool:
    for value in (medication.name, medication.resident_name):
        if value and term in value.lower():
            return True
    return False
