"""
Risk Service Module

Turns raw form input into validated ``RiskAssessment`` records and exports
saved assessments to Excel. Validation problems are raised as
``ValidationError`` subclasses for the caller to show to the user.
"""

import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from risk_assessment_dashboard.exceptions import (
    EmptyExportError,
    MissingRatingError,
    MissingSelectionError,
)
from risk_assessment_dashboard.helpers import (
    EXPORT_FILE_NAME,
    classify_financial_impact,
    classify_risk_degree,
    compute_risk_score,
    export_workbook,
    records_to_df,
    workbook_bytes,
)
from risk_assessment_dashboard.models import RiskAssessment

logger = logging.getLogger(__name__)

SELECTION_FIELDS = ("department", "risk", "value_chain_step")
RATING_FIELDS = ("probability", "frequency", "severity")


def _to_rating(value: Any) -> Optional[float]:
    """Coerce a rating to float; None when missing, non-numeric or zero."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number == 0 or not math.isfinite(number):
        return None
    return number


def _ratings(parameters: Mapping[str, Any]) -> Dict[str, float]:
    ratings = {name: _to_rating(parameters.get(name)) for name in RATING_FIELDS}
    missing = {name: "required" for name, value in ratings.items() if value is None}
    if missing:
        raise MissingRatingError(field_errors=missing)
    return ratings


def assess_risk(parameters: Mapping[str, Any]) -> RiskAssessment:
    """
    Assess risk based on the provided parameters.

    Args:
        parameters: department, risk and value_chain_step selections plus the
            probability, frequency and severity ratings.

    Returns:
        RiskAssessment: the new record, scored and timestamped.

    Raises:
        MissingSelectionError: a selection is empty.
        MissingRatingError: a rating is missing, non-numeric or zero.
    """
    missing = {name: "required" for name in SELECTION_FIELDS if not parameters.get(name)}
    if missing:
        logger.warning("Rejected assessment, missing selections: %s", ", ".join(missing))
        raise MissingSelectionError(field_errors=missing)

    try:
        ratings = _ratings(parameters)
    except MissingRatingError as e:
        logger.warning("Rejected assessment, missing ratings: %s", ", ".join(e.field_errors))
        raise

    score = compute_risk_score(ratings["probability"], ratings["frequency"], ratings["severity"])
    record = RiskAssessment(
        department=parameters["department"],
        risk=parameters["risk"],
        value_chain_step=parameters["value_chain_step"],
        probability=ratings["probability"],
        frequency=ratings["frequency"],
        severity=ratings["severity"],
        risk_score=score,
        financial_impact=classify_financial_impact(score),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    logger.info(
        "Assessed %s / %s / %s: score=%.2f (%s)",
        record.department, record.risk, record.value_chain_step, score, record.risk_degree,
    )
    return record


def score_risk(risk_data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Score the risk based on the provided risk data.

    Args:
        risk_data: a mapping holding probability, frequency and severity.

    Returns:
        dict: risk_score, risk_degree and financial_impact.
    """
    ratings = _ratings(risk_data)
    score = compute_risk_score(ratings["probability"], ratings["frequency"], ratings["severity"])
    return {
        "risk_score": score,
        "risk_degree": classify_risk_degree(score),
        "financial_impact": classify_financial_impact(score),
    }


def _require_records(records: List[RiskAssessment]) -> None:
    if not records:
        logger.warning("Export requested with no saved assessments")
        raise EmptyExportError()


def export_assessments(
    records: List[RiskAssessment], path: Union[str, Path] = EXPORT_FILE_NAME
) -> Path:
    """Write the saved assessments to an Excel workbook, one row per record."""
    _require_records(records)
    written = export_workbook(records_to_df(records), path)
    logger.info("Exported %d assessments to %s", len(records), written)
    return written


def export_assessments_bytes(records: List[RiskAssessment]) -> bytes:
    """Render the saved assessments as workbook bytes for a download button."""
    _require_records(records)
    data = workbook_bytes(records_to_df(records))
    logger.info("Prepared workbook with %d assessments", len(records))
    return data
