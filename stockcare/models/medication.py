"""
Modelo de dominio de Medicamento para el cálculo de stock
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union
import enum


class DoseType(str, enum.Enum):
    """Forma en que se expresa cada dosis"""
    FRACTION = "fraction"  # fracción de pastilla (pill_fraction)
    DOSAGE = "dosage"      # cantidad en mg, consume 1 unidad por dosis


class MedicationStatus(str, enum.Enum):
    """Estados del medicamento"""
    ACTIVE = "active"
    SUSPENDED = "suspended"


class StockStatus(str, enum.Enum):
    """Clasificación del stock"""
    OK = "ok"
    LOW = "low"
    CRITICAL = "critical"


class TreatmentWindowState(str, enum.Enum):
    """Estado de la ventana de tratamiento (fecha de inicio + días)"""
    COMPUTED = "computed"
    MISSING = "missing"
    INVALID = "invalid"


DateLike = Union[date, datetime, str, None]


@dataclass(frozen=True)
class Medication:
    """
    Registro de medicamento tal como llega del inventario.

    Los campos numéricos y de fecha se conservan sin normalizar: el motor de
    cálculo decide cómo degradar los valores inválidos.
    """
    dosage_pattern: Optional[str] = None
    dose_type: DoseType = DoseType.FRACTION
    pill_fraction: Union[float, str, None] = None
    dose_amount: Union[float, str, None] = None
    current_stock: Union[float, str, None] = 0
    start_date: DateLike = None
    treatment_days: Union[int, float, str, None] = None
    status: MedicationStatus = MedicationStatus.ACTIVE

    # Identificación (solo se devuelve en listados y reportes)
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    resident_id: Optional[Union[int, str]] = None
    resident_name: Optional[str] = None

    def __repr__(self):
        return f"<Medication(id={self.id}, name='{self.name}', pattern='{self.dosage_pattern}')>"

    @property
    def is_active(self) -> bool:
        """Solo los medicamentos activos participan en las alertas"""
        return self.status == MedicationStatus.ACTIVE
