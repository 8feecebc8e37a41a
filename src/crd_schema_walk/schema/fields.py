"""SchemaField and ContainerKind StrEnums describing the walkable schema fields.

Every field of ``JSONSchemaProps`` that can hold child schemas is listed in
``SchemaField``, keyed by its document name (``"allOf"``, ``"not"``, ...).
Each member also carries the Python attribute that stores it and the
``ContainerKind`` that decides how the walker reaches (and persists) the
children inside it.

``TRAVERSAL_ORDER`` is the fixed order in which the walker descends into
child fields.
"""

from __future__ import annotations

from enum import StrEnum, auto


class ContainerKind(StrEnum):
    """How child schemas are stored inside a field.

    - SEQUENCE:           ordered list, children addressed by position.
    - OPTIONAL:           a single child or None.
    - MAPPING:            name -> child; values are written back after a walk.
    - SCHEMA_OR_ARRAY:    ``items`` union (single child and/or ordered list).
    - SCHEMA_OR_BOOL:     boolean-or-schema union; only the schema is a child.
    - DEPENDENCY_MAPPING: name -> schema-or-string-list union; string lists
                          are never treated as children.
    """

    SEQUENCE = auto()
    OPTIONAL = auto()
    MAPPING = auto()
    SCHEMA_OR_ARRAY = auto()
    SCHEMA_OR_BOOL = auto()
    DEPENDENCY_MAPPING = auto()


class SchemaField(StrEnum):
    """Schema fields that may contain child schemas, valued by document key."""

    ITEMS = "items"
    ALL_OF = "allOf"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    NOT = "not"
    PROPERTIES = "properties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    PATTERN_PROPERTIES = "patternProperties"
    DEPENDENCIES = "dependencies"
    ADDITIONAL_ITEMS = "additionalItems"
    DEFINITIONS = "definitions"

    @property
    def attribute(self) -> str:
        """Name of the ``JSONSchemaProps`` attribute holding this field."""
        return _ATTRIBUTES[self]

    @property
    def kind(self) -> ContainerKind:
        """Container kind used to walk this field."""
        return _KINDS[self]


_ATTRIBUTES: dict[SchemaField, str] = {
    SchemaField.ITEMS: "items",
    SchemaField.ALL_OF: "all_of",
    SchemaField.ONE_OF: "one_of",
    SchemaField.ANY_OF: "any_of",
    SchemaField.NOT: "not_",
    SchemaField.PROPERTIES: "properties",
    SchemaField.ADDITIONAL_PROPERTIES: "additional_properties",
    SchemaField.PATTERN_PROPERTIES: "pattern_properties",
    SchemaField.DEPENDENCIES: "dependencies",
    SchemaField.ADDITIONAL_ITEMS: "additional_items",
    SchemaField.DEFINITIONS: "definitions",
}

_KINDS: dict[SchemaField, ContainerKind] = {
    SchemaField.ITEMS: ContainerKind.SCHEMA_OR_ARRAY,
    SchemaField.ALL_OF: ContainerKind.SEQUENCE,
    SchemaField.ONE_OF: ContainerKind.SEQUENCE,
    SchemaField.ANY_OF: ContainerKind.SEQUENCE,
    SchemaField.NOT: ContainerKind.OPTIONAL,
    SchemaField.PROPERTIES: ContainerKind.MAPPING,
    SchemaField.ADDITIONAL_PROPERTIES: ContainerKind.SCHEMA_OR_BOOL,
    SchemaField.PATTERN_PROPERTIES: ContainerKind.MAPPING,
    SchemaField.DEPENDENCIES: ContainerKind.DEPENDENCY_MAPPING,
    SchemaField.ADDITIONAL_ITEMS: ContainerKind.SCHEMA_OR_BOOL,
    SchemaField.DEFINITIONS: ContainerKind.MAPPING,
}

# Member definition order is the walk order.
TRAVERSAL_ORDER: tuple[SchemaField, ...] = tuple(SchemaField)
