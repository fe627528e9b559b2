"""
Requerimiento mensual de medicamentos (faltantes y reserva)
"""
from dataclasses import dataclass, field
from typing import Iterable, List
import math
import logging

from stockcare.models.medication import Medication
from stockcare.services.consumption import calculate_daily_usage
from stockcare.services.dosage_parser import parse_dosage_pattern
from stockcare.services.stock_projector import normalize_stock

logger = logging.getLogger(__name__)

DAYS_TO_COVER = 30


@dataclass(frozen=True)
class RequirementLine:
    medication: Medication
    daily_usage: float
    current_stock: float
    needed_for_period: int
    deficit: int
    usage_known: bool

    @property
    def is_missing(self) -> bool:
        return self.deficit > 0


@dataclass(frozen=True)
class RequirementReport:
    days_to_cover: int
    missing: List[RequirementLine] = field(default_factory=list)
    reserve: List[RequirementLine] = field(default_factory=list)
    needs_review: List[RequirementLine] = field(default_factory=list)

    @property
    def total_deficit(self) -> int:
        return sum(line.deficit for line in self.missing)


def calculate_requirement(medication: Medication, days_to_cover: int = DAYS_TO_COVER) -> RequirementLine:
    """Pastillas necesarias para el periodo y faltante redondeado hacia arriba"""
    dosage = parse_dosage_pattern(medication.dosage_pattern)
    daily_usage = calculate_daily_usage(
        dosage.daily_doses,
        medication.dose_type,
        medication.pill_fraction
    )
    stock = normalize_stock(medication.current_stock)

    needed = math.ceil(daily_usage * days_to_cover)
    deficit = needed - stock

    return RequirementLine(
        medication=medication,
        daily_usage=daily_usage,
        current_stock=stock,
        needed_for_period=needed,
        deficit=math.ceil(deficit) if deficit > 0 else 0,
        usage_known=dosage.usage_known,
    )


def build_requirement_report(
        medications: Iterable[Medication],
        days_to_cover: int = DAYS_TO_COVER
) -> RequirementReport:
    """
    Separar los medicamentos activos en faltantes, reserva y por revisar.

    Un medicamento con uso desconocido no se da por cubierto.
    """
    report = RequirementReport(days_to_cover=days_to_cover)

    for medication in medications:
        if not medication.is_active:
            continue

        line = calculate_requirement(medication, days_to_cover)
        if not line.usage_known:
            report.needs_review.append(line)
        elif line.is_missing:
            report.missing.append(line)
        else:
            report.reserve.append(line)

    logger.info(
        f"Requerimiento de {days_to_cover} días: {len(report.missing)} faltantes, "
        f"{len(report.reserve)} en reserva, {len(report.needs_review)} por revisar"
    )
    return report
