"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict, Iterable, List

from fieldcheck.models.issue import ValidationIssue, ValidationReport


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """Body used when the error is surfaced over HTTP."""
        return {"message": str(self), "status": "error"}


class ValidationError(AppError):
    """Raised when one or more required fields are empty."""

    def __init__(self, validation_issues: Iterable[ValidationIssue]):
        self.validation_issues: List[ValidationIssue] = list(validation_issues)
        super().__init__(
            f"Validation result: {self.validation_issues!r}", status_code=400
        )

    def report(self) -> ValidationReport:
        """Wrap the issues in the wire model."""
        return ValidationReport(validation_issues=self.validation_issues)

    def to_dict(self) -> Dict[str, Any]:
        return self.report().model_dump()


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(error.to_dict()),
    }
