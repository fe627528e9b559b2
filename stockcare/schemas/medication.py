"""
Esquemas Pydantic para Medicamentos (entrada del cálculo de stock)
"""
from pydantic import BaseModel, validator, Field
from typing import Optional, List, Union
from datetime import date

from stockcare.models.medication import DoseType, Medication, MedicationStatus
from stockcare.services.consumption import coerce_dose_type


class MedicationStockInput(BaseModel):
    """
    Medicamento tal como lo envía el inventario.

    Acepta las claves en snake_case o en camelCase (dosagePattern, doseType,
    pillFraction, doseAmount, currentStock, startDate, treatmentDays). Los
    valores numéricos y fechas se aceptan sin validar: el cálculo los degrada
    de forma conservadora en lugar de rechazarlos.
    """
    id: Optional[Union[int, str]] = Field(None, description="ID del medicamento")
    name: Optional[str] = Field(None, max_length=255, description="Nombre del medicamento")
    resident_id: Optional[Union[int, str]] = Field(None, alias="residentId", description="ID del residente")
    resident_name: Optional[str] = Field(None, alias="residentName", max_length=255)

    dosage_pattern: Optional[str] = Field(
        None, alias="dosagePattern", max_length=100, description="Patrón de dosis (ej: 1-0-1-0)"
    )
    dose_type: DoseType = Field(DoseType.FRACTION, alias="doseType", description="fraction o dosage")
    pill_fraction: Optional[Union[float, str]] = Field(
        None, alias="pillFraction", description="Fracción de pastilla por dosis (0.25, 0.5, 0.75, 1)"
    )
    dose_amount: Optional[Union[float, str]] = Field(None, alias="doseAmount", description="Dosis en mg")
    current_stock: Optional[Union[float, str]] = Field(0, alias="currentStock", description="Pastillas en stock")
    start_date: Optional[str] = Field(None, alias="startDate", description="Inicio del tratamiento")
    treatment_days: Optional[Union[int, float, str]] = Field(
        None, alias="treatmentDays", description="Duración del tratamiento en días"
    )
    status: MedicationStatus = Field(MedicationStatus.ACTIVE, description="active o suspended")

    class Config:
        populate_by_name = True

    @validator('dosage_pattern', pre=True)
    def validate_dosage_pattern(cls, v):
        if v is None:
            return v
        return str(v).strip()

    @validator('start_date', pre=True)
    def validate_start_date(cls, v):
        # Un número no es un timestamp: queda como texto y la fecha resulta inválida
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, date):
            return v.isoformat()
        return str(v)

    @validator('dose_type', pre=True)
    def validate_dose_type(cls, v):
        if v is None or v == "":
            return DoseType.FRACTION
        return coerce_dose_type(v)

    @validator('status', pre=True)
    def validate_status(cls, v):
        if v is None or v == "":
            return MedicationStatus.ACTIVE
        return str(getattr(v, "value", v)).strip().lower()

    def to_domain(self) -> Medication:
        """Convertir al registro de dominio que consume el cálculo"""
        return Medication(
            dosage_pattern=self.dosage_pattern,
            dose_type=self.dose_type,
            pill_fraction=self.pill_fraction,
            dose_amount=self.dose_amount,
            current_stock=self.current_stock,
            start_date=self.start_date,
            treatment_days=self.treatment_days,
            status=self.status,
            id=self.id,
            name=self.name,
            resident_id=self.resident_id,
            resident_name=self.resident_name,
        )


class StockAssessRequest(BaseModel):
    """Evaluar un medicamento"""
    medication: MedicationStockInput
    reference_date: Optional[date] = Field(
        None, alias="referenceDate", description="Fecha de referencia (por defecto hoy)"
    )

    class Config:
        populate_by_name = True


class StockBatchRequest(BaseModel):
    """Evaluar varios medicamentos con la misma fecha de referencia"""
    medications: List[MedicationStockInput] = Field(default=[])
    reference_date: Optional[date] = Field(None, alias="referenceDate")

    class Config:
        populate_by_name = True

    def to_domain(self) -> List[Medication]:
        return [medication.to_domain() for medication in self.medications]


class RequirementRequest(BaseModel):
    """Requerimiento de medicamentos para un periodo"""
    medications: List[MedicationStockInput] = Field(default=[])
    days_to_cover: Optional[int] = Field(None, alias="daysToCover", ge=1, le=365)

    class Config:
        populate_by_name = True

    def to_domain(self) -> List[Medication]:
        return [medication.to_domain() for medication in self.medications]


class AdministrationRequest(BaseModel):
    """Administración de una dosis"""
    medication: MedicationStockInput
    amount: Optional[Union[float, str]] = Field(
        None, description="Unidades a descontar (por defecto la fracción o 1)"
    )
