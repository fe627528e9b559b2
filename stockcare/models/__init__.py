# stockcare/models/__init__.py

from .medication import (
    DoseType,
    Medication,
    MedicationStatus,
    StockStatus,
    TreatmentWindowState,
)

__all__ = [
    "DoseType",
    "Medication",
    "MedicationStatus",
    "StockStatus",
    "TreatmentWindowState",
]
