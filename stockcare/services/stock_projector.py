"""
Proyección de stock: días restantes y balance al final del tratamiento
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional, Tuple
import math
import logging

from stockcare.models.medication import TreatmentWindowState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockProjection:
    """Proyecciones independientes del stock actual"""
    current_stock: float
    daily_usage: float
    simple_days_remaining: int
    treatment_window: TreatmentWindowState
    days_passed: Optional[int] = None
    pills_needed: Optional[float] = None
    treatment_balance: Optional[float] = None
    end_date: Optional[date] = None

    @property
    def has_balance(self) -> bool:
        return self.treatment_balance is not None


def normalize_stock(value: Any) -> float:
    """Stock negativo, NaN o no numérico se normaliza a 0"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        stock = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(stock) or stock < 0:
        return 0.0
    return stock


def to_day(value: Any) -> Tuple[Optional[date], bool]:
    """
    Truncar una fecha al día calendario.

    Devuelve (fecha, válida). Un valor ausente es (None, True); un valor que
    no se puede interpretar es (None, False).
    """
    if value is None:
        return None, True
    if isinstance(value, datetime):
        return value.date(), True
    if isinstance(value, date):
        return value, True
    if not isinstance(value, str):
        return None, False

    raw = value.strip()
    if not raw:
        return None, True
    try:
        return date.fromisoformat(raw), True
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date(), True
    except ValueError:
        return None, False


def read_treatment_days(value: Any) -> Tuple[Optional[int], bool]:
    """Días de tratamiento como entero positivo; (None, False) si no es válido"""
    if value is None:
        return None, True
    if isinstance(value, bool):
        return None, False
    if isinstance(value, str):
        if not value.strip():
            return None, True
        try:
            value = float(value.strip())
        except ValueError:
            return None, False
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None, False
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        return None, False
    return value, True


def calculate_remaining_days(current_stock: float, daily_usage: float) -> int:
    """Días que alcanza el stock ignorando el fin del tratamiento"""
    if not daily_usage or daily_usage <= 0:
        return 0
    return int(math.floor(current_stock / daily_usage))


def calculate_pills_needed(daily_usage: float, treatment_days: int, days_passed: int) -> float:
    """Pastillas necesarias desde hoy hasta el fin del tratamiento"""
    if days_passed < 0:
        # Aún no inicia: se requiere el curso completo
        return treatment_days * daily_usage
    if days_passed < treatment_days:
        return (treatment_days - days_passed) * daily_usage
    return 0.0


def treatment_end_date(start_date: Any, treatment_days: Any) -> Optional[date]:
    """Fecha de fin del tratamiento (inicio + días)"""
    start, start_ok = to_day(start_date)
    days, days_ok = read_treatment_days(treatment_days)
    if not (start_ok and days_ok) or start is None or days is None:
        return None
    return start + timedelta(days=days)


def project_stock(
        current_stock: Any,
        daily_usage: float,
        start_date: Any,
        treatment_days: Any,
        today: Any,
        usage_known: bool = True
) -> StockProjection:
    """
    Proyectar el stock contra la ventana de tratamiento.

    `today` es obligatorio: este módulo nunca consulta el reloj del sistema.
    Si falta la fecha de inicio o la duración, solo se calculan los días
    restantes; si alguna es inválida la ventana queda marcada como inválida.
    Con un consumo desconocido no hay pastillas necesarias ni balance.
    """
    stock = normalize_stock(current_stock)
    simple_days = calculate_remaining_days(stock, daily_usage)

    start, start_ok = to_day(start_date)
    days, days_ok = read_treatment_days(treatment_days)
    reference, reference_ok = to_day(today)

    if not (start_ok and days_ok and reference_ok) or (reference is None and start is not None):
        logger.warning(
            f"Ventana de tratamiento inválida: inicio={start_date!r}, "
            f"días={treatment_days!r}, referencia={today!r}"
        )
        return StockProjection(
            current_stock=stock,
            daily_usage=daily_usage,
            simple_days_remaining=simple_days,
            treatment_window=TreatmentWindowState.INVALID,
        )

    if start is None or days is None:
        return StockProjection(
            current_stock=stock,
            daily_usage=daily_usage,
            simple_days_remaining=simple_days,
            treatment_window=TreatmentWindowState.MISSING,
        )

    days_passed = (reference - start).days
    pills_needed = None
    balance = None
    if usage_known:
        pills_needed = calculate_pills_needed(daily_usage, days, days_passed)
        balance = stock - pills_needed

    return StockProjection(
        current_stock=stock,
        daily_usage=daily_usage,
        simple_days_remaining=simple_days,
        treatment_window=TreatmentWindowState.COMPUTED,
        days_passed=days_passed,
        pills_needed=pills_needed,
        treatment_balance=balance,
        end_date=start + timedelta(days=days),
    )
