"""Exceptions raised by the risk assessment service layer."""

from typing import Any, Dict, Optional


class RiskAssessmentError(Exception):
    """Base exception for all risk assessment errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class ValidationError(RiskAssessmentError):
    """Raised when a submitted assessment is incomplete."""

    def __init__(
        self,
        message: str,
        error_code: str = "VALIDATION_ERROR",
        field_errors: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message, error_code)
        self.field_errors = field_errors or {}
        if self.field_errors:
            self.details["field_errors"] = self.field_errors


class MissingSelectionError(ValidationError):
    """Department, risk or value-chain step was not selected."""

    def __init__(
        self,
        message: str = "Lütfen departman, risk ve değer zinciri adımı seçin",
        field_errors: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message, "MISSING_SELECTION", field_errors)


class MissingRatingError(ValidationError):
    """A rating is missing, not a number, or zero."""

    def __init__(
        self,
        message: str = "Lütfen tüm değerleri girin",
        field_errors: Optional[Dict[str, str]] = None,
    ):
        super().__init__(message, "MISSING_RATING", field_errors)


class EmptyExportError(RiskAssessmentError):
    """Raised when an export is requested with no saved assessments."""

    def __init__(self, message: str = "Dışa aktarılacak değerlendirme bulunamadı"):
        super().__init__(message, "EMPTY_EXPORT")


class RecordNotFoundError(RiskAssessmentError, IndexError):
    """Raised for an index outside the saved assessment list."""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"No assessment at index {index} (list holds {size})",
            "RECORD_NOT_FOUND",
            {"index": index, "size": size},
        )
