from datetime import date

import pytest
from fastapi.testclient import TestClient

from stockcare.main import app
from stockcare.models.medication import DoseType, Medication

TODAY = date(2026, 2, 8)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_medication():
    """Medicamento base: 2 pastillas diarias, curso de 30 días iniciado el 1 de febrero"""
    def _make(**overrides):
        fields = {
            "id": 1,
            "name": "Losartán",
            "dosage_pattern": "1-0-1",
            "dose_type": DoseType.FRACTION,
            "pill_fraction": 1,
            "current_stock": 4,
            "start_date": date(2026, 2, 1),
            "treatment_days": 30,
        }
        fields.update(overrides)
        return Medication(**fields)
    return _make
