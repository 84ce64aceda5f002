# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from hearth.api.http import app  # ensures imports resolve; run tests from repo root


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def purchase_inputs():
    # 300k home, 20% down, 7% / 30y: the 240k reference loan
    return {
        "homePrice": 300_000,
        "downPayment": 60_000,
        "interestRate": 7.0,
        "loanTerm": 30,
        "loanProgram": 0,
        "propertyTaxRate": 0,
        "insurance": 0,
        "hoa": 0,
    }


def by_label(results):
    return {r.label: r for r in results}
