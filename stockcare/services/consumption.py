"""
Consumo diario de pastillas y descuento de stock por administración
"""
from typing import Any, Optional
import math
import logging

from stockcare.models.medication import DoseType, Medication
from stockcare.services.fraction_formatter import parse_fraction_string
from stockcare.services.stock_projector import normalize_stock

logger = logging.getLogger(__name__)

DEFAULT_PILL_FRACTION = 1.0


class InvalidDoseError(ValueError):
    """Cantidad administrada no válida (cero, negativa o no numérica)"""


def coerce_dose_type(value: Any) -> DoseType:
    """Tipos desconocidos se tratan como dosis completa (multiplicador 1)"""
    if isinstance(value, DoseType):
        return value
    try:
        return DoseType(str(value).strip().lower())
    except ValueError:
        return DoseType.DOSAGE


def resolve_pill_fraction(pill_fraction: Any) -> float:
    """Fracción por dosis; 1 si falta, no se puede leer o no es positiva"""
    value = parse_fraction_string(pill_fraction)
    if value is None or value <= 0:
        return DEFAULT_PILL_FRACTION
    return value


def calculate_daily_usage(daily_doses: float, dose_type: Any, pill_fraction: Any = None) -> float:
    """Pastillas consumidas por día"""
    multiplier = 1.0
    if coerce_dose_type(dose_type) == DoseType.FRACTION:
        multiplier = resolve_pill_fraction(pill_fraction)
    return daily_doses * multiplier


def calculate_total_pills(daily_usage: float, treatment_days: int) -> float:
    """Pastillas necesarias para todo el tratamiento"""
    return daily_usage * treatment_days


def dose_units_per_administration(medication: Medication, amount: Optional[Any] = None) -> float:
    """
    Unidades de stock que consume una administración.

    Con fracción se descuenta la fracción de pastilla; con dosis en mg cada
    toma consume una unidad. `amount` permite indicar otra cantidad.
    """
    if amount is None:
        if coerce_dose_type(medication.dose_type) == DoseType.FRACTION:
            return resolve_pill_fraction(medication.pill_fraction)
        return 1.0

    units = parse_fraction_string(amount)
    if units is None or units <= 0:
        raise InvalidDoseError(f"Cantidad de dosis no válida: {amount}")
    return units


def stock_after_administration(current_stock: Any, units: float) -> float:
    """Stock resultante después de administrar; nunca es negativo"""
    if not math.isfinite(units) or units <= 0:
        raise InvalidDoseError(f"Cantidad de dosis no válida: {units}")

    remaining = max(0.0, normalize_stock(current_stock) - units)
    logger.debug(f"Stock actualizado: {current_stock} -> {remaining} ({units} unidades)")
    return remaining
