"""Tests for SchemaField, ContainerKind and TRAVERSAL_ORDER."""

import pytest

from crd_schema_walk.schema.fields import TRAVERSAL_ORDER, ContainerKind, SchemaField
from crd_schema_walk.schema.props import JSONSchemaProps


class TestSchemaField:
    def test_has_eleven_members(self) -> None:
        assert len(SchemaField) == 11

    def test_values_are_document_keys(self) -> None:
        assert SchemaField.ALL_OF == "allOf"
        assert SchemaField.NOT == "not"
        assert SchemaField.ADDITIONAL_PROPERTIES == "additionalProperties"
        assert SchemaField.PATTERN_PROPERTIES == "patternProperties"

    @pytest.mark.parametrize("schema_field", list(SchemaField))
    def test_attribute_exists_on_schema_props(self, schema_field: SchemaField) -> None:
        node = JSONSchemaProps()
        assert getattr(node, schema_field.attribute) is None

    def test_not_maps_to_not_underscore(self) -> None:
        assert SchemaField.NOT.attribute == "not_"

    def test_kinds(self) -> None:
        assert SchemaField.ITEMS.kind is ContainerKind.SCHEMA_OR_ARRAY
        assert SchemaField.ONE_OF.kind is ContainerKind.SEQUENCE
        assert SchemaField.NOT.kind is ContainerKind.OPTIONAL
        assert SchemaField.DEFINITIONS.kind is ContainerKind.MAPPING
        assert SchemaField.ADDITIONAL_ITEMS.kind is ContainerKind.SCHEMA_OR_BOOL
        assert SchemaField.DEPENDENCIES.kind is ContainerKind.DEPENDENCY_MAPPING

    def test_every_kind_is_used(self) -> None:
        assert {f.kind for f in SchemaField} == set(ContainerKind)


class TestTraversalOrder:
    def test_order(self) -> None:
        assert [str(f) for f in TRAVERSAL_ORDER] == [
            "items",
            "allOf",
            "oneOf",
            "anyOf",
            "not",
            "properties",
            "additionalProperties",
            "patternProperties",
            "dependencies",
            "additionalItems",
            "definitions",
        ]

    def test_is_immutable_tuple(self) -> None:
        assert isinstance(TRAVERSAL_ORDER, tuple)
