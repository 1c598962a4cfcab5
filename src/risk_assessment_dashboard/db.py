"""
Session store for the risk assessment dashboard.

Assessments live in an ordered list kept inside a mutable mapping, normally
Streamlit's ``st.session_state``, so they last exactly as long as the browser
session. Records are immutable: the store can add and remove them but has no
update operation.
"""

import logging
from typing import List, MutableMapping

from risk_assessment_dashboard.exceptions import RecordNotFoundError
from risk_assessment_dashboard.models import RiskAssessment

logger = logging.getLogger(__name__)

STORE_KEY = "risk_assessments"


def connect_to_database(state: MutableMapping) -> List[RiskAssessment]:
    """Return the session's assessment list, creating it on first use."""
    if STORE_KEY not in state:
        state[STORE_KEY] = []
    return state[STORE_KEY]


def create_record(records: List[RiskAssessment], record: RiskAssessment) -> int:
    """Append a record and return its index."""
    records.append(record)
    return len(records) - 1


def _check_index(records: List[RiskAssessment], index: int) -> None:
    if not 0 <= index < len(records):
        raise RecordNotFoundError(index, len(records))


def list_records(records: List[RiskAssessment]) -> List[RiskAssessment]:
    """Return a copy of the records in insertion order."""
    return list(records)


def delete_record(records: List[RiskAssessment], index: int) -> RiskAssessment:
    """Remove the record at ``index``; the others keep their relative order."""
    _check_index(records, index)
    removed = records.pop(index)
    logger.info("Deleted assessment %d (%s / %s)", index, removed.department, removed.risk)
    return removed
