"""
Clasificación del stock en ok / low / critical
"""
from dataclasses import dataclass, field
from typing import List
import enum

from stockcare.models.medication import StockStatus, TreatmentWindowState
from stockcare.services.stock_projector import StockProjection

LOW_STOCK_DAYS = 5


class StockAlertReason(str, enum.Enum):
    """Señales que dispararon la clasificación"""
    USAGE_UNKNOWN = "usage_unknown"
    OUT_OF_STOCK = "out_of_stock"
    LOW_DAYS_REMAINING = "low_days_remaining"
    TREATMENT_DEFICIT = "treatment_deficit"
    INVALID_TREATMENT_WINDOW = "invalid_treatment_window"


@dataclass(frozen=True)
class StockClassification:
    status: StockStatus
    needs_review: bool
    reasons: List[StockAlertReason] = field(default_factory=list)


def classify_stock(
        usage_known: bool,
        projection: StockProjection,
        low_stock_days: int = LOW_STOCK_DAYS
) -> StockClassification:
    """
    Clasificar el stock de un medicamento.

    Ante la duda se alerta: un uso desconocido es crítico y requiere
    revisión, y basta con que una de las dos señales (días restantes o
    déficit del tratamiento) se active para marcar stock bajo.
    """
    reasons: List[StockAlertReason] = []
    window_invalid = projection.treatment_window == TreatmentWindowState.INVALID
    if window_invalid:
        reasons.append(StockAlertReason.INVALID_TREATMENT_WINDOW)

    if not usage_known:
        reasons.insert(0, StockAlertReason.USAGE_UNKNOWN)
        return StockClassification(StockStatus.CRITICAL, needs_review=True, reasons=reasons)

    if projection.current_stock == 0:
        reasons.insert(0, StockAlertReason.OUT_OF_STOCK)
        return StockClassification(StockStatus.CRITICAL, needs_review=window_invalid, reasons=reasons)

    if projection.simple_days_remaining <= low_stock_days:
        reasons.append(StockAlertReason.LOW_DAYS_REMAINING)
    if projection.has_balance and projection.treatment_balance < 0:
        reasons.append(StockAlertReason.TREATMENT_DEFICIT)

    status = StockStatus.LOW if reasons else StockStatus.OK
    return StockClassification(status, needs_review=window_invalid, reasons=reasons)
