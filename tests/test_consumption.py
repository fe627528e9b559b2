import pytest

from stockcare.models.medication import DoseType
from stockcare.services.consumption import (
    InvalidDoseError,
    calculate_daily_usage,
    calculate_total_pills,
    coerce_dose_type,
    dose_units_per_administration,
    resolve_pill_fraction,
    stock_after_administration,
)


def test_fraction_dose_multiplies_by_pill_fraction():
    assert calculate_daily_usage(2, DoseType.FRACTION, 0.5) == 1
    assert calculate_daily_usage(3, "fraction", "1/4") == 0.75


def test_dosage_dose_counts_one_unit_per_dose():
    # La cantidad en mg no se descuenta del stock de pastillas
    assert calculate_daily_usage(2, DoseType.DOSAGE, 0.5) == 2


@pytest.mark.parametrize("fraction", [None, "", "media", 0, -0.5])
def test_missing_or_invalid_fraction_defaults_to_one(fraction):
    assert resolve_pill_fraction(fraction) == 1.0
    assert calculate_daily_usage(2, DoseType.FRACTION, fraction) == 2


def test_zero_doses_give_zero_usage():
    assert calculate_daily_usage(0, DoseType.FRACTION, 0.5) == 0


def test_unknown_dose_type_is_full_dose():
    assert coerce_dose_type("pill") == DoseType.DOSAGE
    assert coerce_dose_type(" Fraction ") == DoseType.FRACTION
    assert calculate_daily_usage(2, "pill", 0.25) == 2


def test_total_pills_for_treatment():
    assert calculate_total_pills(1.5, 30) == 45


def test_administration_units(make_medication):
    half_pill = make_medication(pill_fraction="0.5")
    assert dose_units_per_administration(half_pill) == 0.5
    assert dose_units_per_administration(make_medication(dose_type=DoseType.DOSAGE, dose_amount=500)) == 1
    assert dose_units_per_administration(half_pill, amount="3/4") == 0.75


@pytest.mark.parametrize("amount", [0, -1, "abc"])
def test_administration_rejects_invalid_amount(make_medication, amount):
    with pytest.raises(InvalidDoseError):
        dose_units_per_administration(make_medication(), amount=amount)


def test_stock_after_administration_never_negative():
    assert stock_after_administration(4, 1) == 3
    assert stock_after_administration(0.25, 0.5) == 0
    assert stock_after_administration("abc", 1) == 0


def test_stock_after_administration_rejects_zero_units():
    with pytest.raises(InvalidDoseError):
        stock_after_administration(4, 0)
