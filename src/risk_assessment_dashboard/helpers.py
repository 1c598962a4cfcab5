import io
import pandas as pd
import numpy as np
from pathlib import Path
from typing import Dict, Iterable, Union

from risk_assessment_dashboard.catalog import DEPARTMENTS

EXPORT_FILE_NAME = "risk_degerlendirmeleri.xlsx"
EXPORT_SHEET_NAME = "Risk Değerlendirmeleri"

PROBABILITY_RANGE = (0.1, 10.0)
FREQUENCY_RANGE = (0.1, 10.0)
SEVERITY_RANGE = (0.1, 100.0)

RECORD_COLUMNS = [
    "department", "risk", "value_chain_step",
    "probability", "frequency", "severity",
    "risk_score", "financial_impact", "timestamp",
]

# (exclusive lower bound, financial impact, risk degree), highest first
SCORE_BRACKETS = [
    (400, ">20M", "Very High"),
    (200, "10–20M", "High"),
    (70, "5–10M", "Medium"),
    (20, "1–5M", "Low"),
]
LOWEST_BRACKET = ("0–1M", "Very Low")

# Lowest to highest, used for the matrix columns
RISK_DEGREES = [LOWEST_BRACKET[1]] + [degree for _, _, degree in reversed(SCORE_BRACKETS)]

PROBABILITY_DESCRIPTIONS: Dict[float, str] = {
    10: "Beklenir, kesin",
    8: "Yüksek/oldukça mümkün",
    6: "Olası",
    3: "Mümkün, fakat düşük",
    1: "Beklenmez fakat mümkün",
    0.1: "Beklenmez",
}

FREQUENCY_DESCRIPTIONS: Dict[float, str] = {
    10: "Hemen hemen sürekli (Hergün)",
    8: "Sık (Ayda bir veya birkaç defa)",
    6: "Ara sıra (6 ayda 1)",
    3: "Sık değil (Yılda birkaç defa)",
    1: "Seyrek (3 yılda 1)",
    0.1: "Çok seyrek (>3 yıl)",
}


def compute_risk_score(probability: float, frequency: float, severity: float) -> float:
    """Calculate risk score."""
    return probability * frequency * severity


def classify_financial_impact(score: float) -> str:
    """Map a risk score to its financial impact bracket."""
    for lower, impact, _ in SCORE_BRACKETS:
        if score > lower:
            return impact
    return LOWEST_BRACKET[0]


def classify_risk_degree(score: float) -> str:
    """Map a risk score to its qualitative risk degree."""
    for lower, _, degree in SCORE_BRACKETS:
        if score > lower:
            return degree
    return LOWEST_BRACKET[1]


def describe_probability(value: float) -> str:
    """Description of a canonical probability rating, '' for any other value."""
    return PROBABILITY_DESCRIPTIONS.get(value, "")


def describe_frequency(value: float) -> str:
    """Description of a canonical frequency rating, '' for any other value."""
    return FREQUENCY_DESCRIPTIONS.get(value, "")


def records_to_df(records: Iterable) -> pd.DataFrame:
    """Build a DataFrame with one row per assessment, or an empty one."""
    rows = [record.to_row() for record in records]
    if not rows:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def build_matrix(df: pd.DataFrame) -> np.ndarray:
    """Build department x risk degree matrix of assessment counts."""
    matrix = np.zeros((len(DEPARTMENTS), len(RISK_DEGREES)), dtype=int)
    for _, row in df.iterrows():
        try:
            dept = DEPARTMENTS.index(row["department"])
            degree = RISK_DEGREES.index(classify_risk_degree(float(row["risk_score"])))
        except (ValueError, KeyError, TypeError):
            continue
        matrix[dept, degree] += 1
    return matrix


def workbook_bytes(df: pd.DataFrame) -> bytes:
    """Render the assessments as an in-memory .xlsx workbook."""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=EXPORT_SHEET_NAME, index=False)
    return buffer.getvalue()


def export_workbook(df: pd.DataFrame, path: Union[str, Path] = EXPORT_FILE_NAME) -> Path:
    """Write the assessments to a single-sheet workbook at ``path``."""
    path = Path(path)
    df.to_excel(path, sheet_name=EXPORT_SHEET_NAME, index=False, engine="openpyxl")
    return path
