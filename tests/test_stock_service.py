from datetime import date

import pytest

from stockcare.models.medication import (
    DoseType,
    Medication,
    MedicationStatus,
    StockStatus,
    TreatmentWindowState,
)
from stockcare.services.stock_service import StockService, assess, supply_label


def test_scenario_deficit_with_low_days(make_medication, today):
    assessment = assess(make_medication(), today)

    assert assessment.daily_usage == 2
    assert assessment.days_passed == 7
    assert assessment.pills_needed == 46
    assert assessment.treatment_balance == -42
    assert assessment.simple_days_remaining == 2
    assert assessment.status == StockStatus.LOW
    assert assessment.is_low_stock
    assert not assessment.is_critical


def test_scenario_day_eight_of_thirty(make_medication):
    assessment = assess(make_medication(), date(2026, 2, 9))

    assert assessment.days_passed == 8
    assert assessment.pills_needed == (30 - 8) * 2
    assert assessment.treatment_balance == -40
    assert assessment.status == StockStatus.LOW


def test_scenario_without_treatment_window(make_medication, today):
    assessment = assess(make_medication(start_date=None, treatment_days=None), today)

    assert assessment.treatment_window == TreatmentWindowState.MISSING
    assert assessment.treatment_balance is None
    assert assessment.simple_days_remaining == 2
    assert assessment.status == StockStatus.LOW
    assert not assessment.needs_review


@pytest.mark.parametrize("overrides", [
    {},
    {"start_date": None, "treatment_days": None},
    {"dosage_pattern": "PRN"},
    {"start_date": "no es fecha"},
])
def test_scenario_zero_stock_is_critical(make_medication, today, overrides):
    assessment = assess(make_medication(current_stock=0, **overrides), today)
    assert assessment.status == StockStatus.CRITICAL
    assert assessment.is_critical


def test_scenario_unparseable_pattern(make_medication, today):
    assessment = assess(make_medication(dosage_pattern="PRN", current_stock=100), today)

    assert not assessment.usage_known
    assert assessment.needs_review
    assert assessment.status == StockStatus.CRITICAL


@pytest.mark.parametrize("pattern", ["PRN", "0-0-0-0"])
def test_unknown_usage_has_no_balance_or_label(make_medication, today, pattern):
    assessment = assess(make_medication(dosage_pattern=pattern, current_stock=30), today)

    assert assessment.treatment_window == TreatmentWindowState.COMPUTED
    assert assessment.days_passed == 7
    assert assessment.end_date == date(2026, 3, 3)
    assert assessment.pills_needed is None
    assert assessment.treatment_balance is None
    assert assessment.supply_label is None
    assert assessment.status == StockStatus.CRITICAL
    assert assessment.needs_review


def test_scenario_treatment_not_started(make_medication):
    medication = make_medication(current_stock=60, start_date=date(2026, 3, 1))
    assessment = assess(medication, date(2026, 2, 8))

    assert assessment.days_passed < 0
    assert assessment.pills_needed == 60
    assert assessment.treatment_balance == 0
    assert assessment.simple_days_remaining == 30
    assert assessment.status == StockStatus.OK


def test_invalid_dates_flag_review(make_medication, today):
    assessment = assess(make_medication(current_stock=100, start_date="31/02/2026"), today)

    assert assessment.treatment_window == TreatmentWindowState.INVALID
    assert assessment.simple_days_remaining == 50
    assert assessment.status == StockStatus.LOW
    assert assessment.needs_review


def test_negative_stock_is_normalized(make_medication, today):
    assessment = assess(make_medication(current_stock=-10), today)
    assert assessment.current_stock == 0
    assert assessment.status == StockStatus.CRITICAL


SEVERITY = {StockStatus.OK: 0, StockStatus.LOW: 1, StockStatus.CRITICAL: 2}


@pytest.mark.parametrize("overrides", [
    {},
    {"start_date": None},
    {"dosage_pattern": "1-1-1-1", "pill_fraction": 0.25},
    {"start_date": "fecha inválida"},
    {"dosage_pattern": ""},
])
def test_status_never_worsens_as_stock_grows(make_medication, today, overrides):
    previous = None
    for stock in [0, 0.5, 1, 2, 5, 10, 11, 12, 20, 40, 46, 60, 100, 500]:
        severity = SEVERITY[assess(make_medication(current_stock=stock, **overrides), today).status]
        if previous is not None:
            assert severity <= previous
        previous = severity


def test_supply_label(make_medication, today):
    deficit = assess(make_medication(), today)
    assert supply_label(deficit) == "Faltan 42"

    surplus = assess(make_medication(current_stock=50), today)
    assert surplus.supply_label == "Sobran 4"

    half = make_medication(dosage_pattern="0.5-0-0-0", current_stock=12, pill_fraction=1)
    assert assess(half, today).supply_label == "Sobran 1/2"

    assert assess(make_medication(start_date=None), today).supply_label is None


def test_supply_label_for_dosage_type_uses_decimals(make_medication, today):
    medication = make_medication(
        dose_type=DoseType.DOSAGE,
        dosage_pattern="0.5-0-0-0",
        current_stock=12,
    )
    assert assess(medication, today).supply_label == "Sobran 0.50"


def _resident_medications():
    return [
        Medication(id=1, name="Metformina", resident_name="Ana", dosage_pattern="1-0-1-0",
                   current_stock=100, start_date="2026-02-01", treatment_days=30),
        Medication(id=2, name="Losartán", resident_name="Luis", dosage_pattern="1-0-0-0",
                   current_stock=3),
        Medication(id=3, name="Paracetamol", resident_name="Ana", dosage_pattern="PRN",
                   current_stock=10),
        Medication(id=4, name="Omeprazol", resident_name="Luis", dosage_pattern="1-0-0-0",
                   current_stock=0),
        Medication(id=5, name="Aspirina", resident_name="Ana", dosage_pattern="1-0-0-0",
                   current_stock=0, status=MedicationStatus.SUSPENDED),
    ]


def test_summary_counts_only_active(today):
    summary = StockService(today).summarize(_resident_medications())

    assert summary.total == 4
    assert summary.ok == 1
    assert summary.low == 1
    assert summary.critical == 2
    assert summary.needs_review == 1
    assert summary.suspended == 1


def test_inventory_sorted_by_days_remaining(today):
    items = StockService(today).inventory(_resident_medications())

    assert [item.medication.id for item in items] == [4, 3, 2, 1]


def test_inventory_filters(today):
    service = StockService(today)
    medications = _resident_medications()

    critical = service.inventory(medications, status_filter="critical")
    assert {item.medication.id for item in critical} == {3, 4}

    low = service.inventory(medications, status_filter="low")
    assert [item.medication.id for item in low] == [2]

    everything = service.inventory(medications, status_filter="all", search="  ana ")
    assert [item.medication.id for item in everything] == [3, 1]

    by_name = service.inventory(medications, search="LOSAR")
    assert [item.medication.id for item in by_name] == [2]
