"""
Representación de cantidades de pastillas como fracciones para mostrar
"""
from typing import Any, Optional
import math

from stockcare.models.medication import DoseType

KNOWN_FRACTIONS = {
    0.25: "1/4",
    0.5: "1/2",
    0.75: "3/4",
    1.0: "1",
}


def parse_fraction_string(text: Any) -> Optional[float]:
    """Convertir "1/4", "0.5" o "1" a decimal; None si no es válido"""
    if text is None or isinstance(text, bool):
        return None

    if isinstance(text, (int, float)):
        value = float(text)
    else:
        raw = str(text).strip()
        try:
            if "/" in raw:
                numerator, denominator = raw.split("/", 1)
                value = float(numerator) / float(denominator)
            else:
                value = float(raw)
        except (ValueError, ZeroDivisionError):
            return None

    if not math.isfinite(value):
        return None
    return value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_plain(value: float) -> str:
    """Dos decimales, eliminando el sufijo ".00" (ej: 40.00 -> "40")"""
    text = f"{value:.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    if text == "-0":
        text = "0"
    return text


def decimal_to_fraction(value: Any) -> str:
    """
    Convertir un decimal a fracción legible.

    0.25 -> "1/4", 0.5 -> "1/2", 0.75 -> "3/4", 1 -> "1". Otros valores
    menores a 1 se aproximan a "1/n"; los mayores se muestran como número.
    """
    number = parse_fraction_string(value)
    if number is None:
        return ""

    for known, label in KNOWN_FRACTIONS.items():
        if math.isclose(number, known):
            return label

    if 0 < number < 1:
        denominator = 1 / number
        if math.isfinite(denominator):
            return f"1/{_round_half_up(denominator)}"

    return format_plain(number)


def format_quantity(value: float, dose_type: DoseType = DoseType.FRACTION) -> str:
    """Cantidad de pastillas para mostrar en el kardex"""
    if dose_type == DoseType.FRACTION and 0 < value < 1:
        return decimal_to_fraction(value)
    return format_plain(value)
