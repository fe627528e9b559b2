"""
Interpretación del patrón de dosis (ej: "1-0-1-0", "1 cada 8 horas")
"""
from dataclasses import dataclass
from typing import Any, Optional
import re
import logging

logger = logging.getLogger(__name__)

PATTERN_DELIMITER = "-"

# Número al inicio del segmento, como lo leería un parseFloat
_LEADING_NUMBER = re.compile(r"^\s*\+?(\d+(?:\.\d*)?|\.\d+)")
_EMBEDDED_NUMBER = re.compile(r"\d+(?:\.\d+)?")


@dataclass(frozen=True)
class DosageParseResult:
    """Resultado de interpretar un patrón de dosis"""
    daily_doses: float
    parsed: bool

    @property
    def usage_known(self) -> bool:
        """Un patrón sin números o que suma cero se considera uso desconocido"""
        return self.parsed and self.daily_doses > 0


def _parse_segment(segment: str) -> Optional[float]:
    match = _LEADING_NUMBER.match(segment)
    if not match:
        return None
    return float(match.group(1))


def parse_dosage_pattern(pattern: Any) -> DosageParseResult:
    """
    Calcular el total de dosis diarias a partir del patrón.

    Con guiones se suma cada franja horaria (segmentos inválidos valen 0);
    en texto libre se suman todos los números encontrados. Nunca lanza
    excepciones: la ausencia de números es una condición de los datos.
    """
    if not pattern or not isinstance(pattern, str):
        return DosageParseResult(daily_doses=0.0, parsed=False)

    if PATTERN_DELIMITER in pattern:
        values = [_parse_segment(segment) for segment in pattern.split(PATTERN_DELIMITER)]
        numbers = [value for value in values if value is not None]
    else:
        numbers = [float(token) for token in _EMBEDDED_NUMBER.findall(pattern)]

    if not numbers:
        logger.debug(f"Patrón de dosis sin valores numéricos: '{pattern}'")
        return DosageParseResult(daily_doses=0.0, parsed=False)

    return DosageParseResult(daily_doses=sum(numbers), parsed=True)


def calculate_daily_doses(pattern: Any) -> float:
    """Total de dosis por día (0 si el patrón no se pudo interpretar)"""
    return parse_dosage_pattern(pattern).daily_doses
