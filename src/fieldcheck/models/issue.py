"""Wire models for validation results."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ValidationIssue(BaseModel):
    """A single required field that was found empty."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    msg: str

    @classmethod
    def required_but_empty(cls, field_name: str) -> "ValidationIssue":
        return cls(
            field_name=field_name,
            msg=f"Field '{field_name}' is required but empty",
        )


class ValidationReport(BaseModel):
    """Envelope embedded in API error bodies; key names are part of the contract."""

    validation_issues: List[ValidationIssue] = Field(default_factory=list)
