"""
Per-field metadata for the struct kinds the validator understands.

Two struct kinds are recognised:
- dataclasses, which declare the directive in ``field(metadata=...)``
- pydantic models, which declare it in ``Field(json_schema_extra=...)``

The display name prefers the serialization name (``"json"`` metadata or a
pydantic alias) over the attribute name.
"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

VALIDATOR_TAG = "validate"
DISPLAY_NAME_TAG = "json"
REQUIRED = "required"


@dataclass(frozen=True)
class FieldDescriptor:
    """What the validator needs to know about one struct field."""

    name: str
    display_name: str
    directive: Optional[str]
    annotation: Any

    @property
    def is_required(self) -> bool:
        return self.directive == REQUIRED


def required(json: Optional[str] = None, **kwargs: Any) -> Any:
    """
    Declare a required dataclass field.

    ``json`` sets the display name reported in issues; remaining keyword
    arguments go straight to ``dataclasses.field``.
    """
    metadata: Dict[str, Any] = dict(kwargs.pop("metadata", None) or {})
    metadata[VALIDATOR_TAG] = REQUIRED
    if json is not None:
        metadata[DISPLAY_NAME_TAG] = json
    return dataclasses.field(metadata=metadata, **kwargs)


def is_struct_type(tp: Any) -> bool:
    if not isinstance(tp, type) or typing.get_origin(tp) is not None:
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_struct_instance(obj: Any) -> bool:
    return not isinstance(obj, type) and is_struct_type(type(obj))


def describe(struct_type: type) -> List[FieldDescriptor]:
    """Return descriptors for every field of ``struct_type`` in declaration order."""
    if issubclass(struct_type, BaseModel):
        return _describe_model(struct_type)
    return _describe_dataclass(struct_type)


def _describe_dataclass(struct_type: type) -> List[FieldDescriptor]:
    hints = _type_hints(struct_type)
    descriptors = []
    for f in dataclasses.fields(struct_type):
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                display_name=f.metadata.get(DISPLAY_NAME_TAG) or f.name,
                directive=f.metadata.get(VALIDATOR_TAG),
                annotation=hints.get(f.name, f.type),
            )
        )
    return descriptors


def _describe_model(model: type) -> List[FieldDescriptor]:
    descriptors = []
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        display_name = (
            extra.get(DISPLAY_NAME_TAG)
            or info.serialization_alias
            or info.alias
            or name
        )
        descriptors.append(
            FieldDescriptor(
                name=name,
                display_name=display_name,
                directive=extra.get(VALIDATOR_TAG),
                annotation=info.annotation,
            )
        )
    return descriptors


def _type_hints(struct_type: type) -> Dict[str, Any]:
    # Unresolvable forward references leave the raw string annotation in place.
    try:
        return typing.get_type_hints(struct_type, include_extras=True)
    except NameError:
        return {}
