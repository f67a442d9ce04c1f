"""Pydantic models for validation results."""

from fieldcheck.models.issue import ValidationIssue, ValidationReport  # noqa: F401
