import pytest

from risk_assessment_dashboard.services.risk_service import assess_risk


@pytest.fixture
def parameters():
    """A complete, valid form submission."""
    return {
        "department": "Finans",
        "risk": "Operasyonel Risk",
        "value_chain_step": "Operasyonlar",
        "probability": 6,
        "frequency": 6,
        "severity": 10,
    }


@pytest.fixture
def make_assessment(parameters):
    """Factory building assessments that differ from the default submission."""

    def _make(**overrides):
        return assess_risk({**parameters, **overrides})

    return _make
