"""
Data model for a single risk assessment.

A ``RiskAssessment`` is immutable once created: the session list only ever
gains or loses whole records.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from risk_assessment_dashboard.helpers import classify_risk_degree


@dataclass(frozen=True)
class RiskAssessment:
    department: str
    risk: str
    value_chain_step: str
    probability: float
    frequency: float
    severity: float
    risk_score: float
    financial_impact: str
    timestamp: str

    @property
    def risk_degree(self) -> str:
        """Qualitative degree derived from the score; not stored or exported."""
        return classify_risk_degree(self.risk_score)

    def to_row(self) -> Dict[str, Any]:
        """Return the record as a flat dict keyed by attribute name."""
        return asdict(self)
