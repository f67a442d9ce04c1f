"""
Field descriptor tests.

Run with: pytest tests/unit/test_fields.py -v
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional

import pytest
from pydantic import BaseModel, Field

from fieldcheck.fields import (
    FieldDescriptor,
    describe,
    is_struct_instance,
    is_struct_type,
    required,
)


@dataclass
class Shipment:
    tracking: str = required(json="tracking_number")
    carrier: str = field(default="", metadata={"validate": "optional"})
    weight: float = 0.0
    parcels: List["Parcel"] = field(default_factory=list)


@dataclass
class Parcel:
    label: str = required(default="", metadata={"owner": "ops"})


class Invoice(BaseModel):
    number: str = Field("", json_schema_extra={"validate": "required"}, alias="invoiceNumber")
    total: float = 0.0
    memo: Optional[str] = Field(None, json_schema_extra={"validate": "required", "json": "note"})


class TestRequiredHelper:
    """required() builds a dataclass field carrying the directive."""

    def test_sets_directive_and_display_name(self):
        metadata = fields(Shipment)[0].metadata
        assert metadata["validate"] == "required"
        assert metadata["json"] == "tracking_number"

    def test_preserves_existing_metadata(self):
        metadata = fields(Parcel)[0].metadata
        assert dict(metadata) == {"owner": "ops", "validate": "required"}

    def test_passes_field_options_through(self):
        assert Parcel().label == ""


class TestDescribeDataclass:
    """Descriptors come back in declaration order."""

    def test_declaration_order(self):
        assert [d.name for d in describe(Shipment)] == [
            "tracking",
            "carrier",
            "weight",
            "parcels",
        ]

    def test_display_name_and_directive(self):
        tracking, carrier, weight, _ = describe(Shipment)
        assert tracking == FieldDescriptor(
            name="tracking",
            display_name="tracking_number",
            directive="required",
            annotation=str,
        )
        assert tracking.is_required is True
        assert carrier.directive == "optional"
        assert carrier.is_required is False
        assert weight.directive is None
        assert weight.display_name == "weight"

    def test_forward_references_are_resolved(self):
        parcels = describe(Shipment)[3]
        assert parcels.annotation == List[Parcel]


class TestDescribeModel:
    """Pydantic models expose the same descriptors."""

    def test_alias_is_display_name(self):
        number, total, memo = describe(Invoice)
        assert number.display_name == "invoiceNumber"
        assert number.is_required is True
        assert total.directive is None
        assert total.display_name == "total"

    def test_json_extra_overrides_attribute_name(self):
        memo = describe(Invoice)[2]
        assert memo.display_name == "note"
        assert memo.annotation == Optional[str]


class TestStructDetection:
    """Only dataclasses and pydantic models are structs."""

    @pytest.mark.parametrize("tp", [Shipment, Parcel, Invoice])
    def test_struct_types(self, tp):
        assert is_struct_type(tp) is True

    @pytest.mark.parametrize("tp", [int, str, list, List[Parcel], object, None, "Parcel"])
    def test_non_struct_types(self, tp):
        assert is_struct_type(tp) is False

    def test_struct_instances(self):
        assert is_struct_instance(Parcel()) is True
        assert is_struct_instance(Invoice()) is True

    def test_struct_class_is_not_an_instance(self):
        assert is_struct_instance(Parcel) is False
        assert is_struct_instance(Invoice) is False
