"""
fieldcheck: report empty required fields on dataclasses and pydantic models.

Core modules:
- validator: recursive walk and issue collection
- fields: per-field directive and display-name metadata
- models: wire models for issues
- utils.error_handling: error hierarchy and HTTP responses
"""

from fieldcheck.fields import FieldDescriptor, describe, required
from fieldcheck.models import ValidationIssue, ValidationReport
from fieldcheck.utils.error_handling import AppError, ValidationError, to_response
from fieldcheck.validator import collect_issues, validate

__all__ = [
    "validate",
    "collect_issues",
    "required",
    "describe",
    "FieldDescriptor",
    "ValidationIssue",
    "ValidationReport",
    "AppError",
    "ValidationError",
    "to_response",
]
