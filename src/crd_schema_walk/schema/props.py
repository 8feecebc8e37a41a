"""JSONSchemaProps dataclass and the union wrappers used inside it.

Mirrors the shape of a CustomResourceDefinition validation schema. Fields use
snake_case attribute names; ``not`` is spelled ``not_`` because ``not`` is a
Python keyword. Every field defaults to None, meaning "absent".
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class JSONSchemaPropsOrArray:
    """Value of ``items``: a single schema, a list of schemas, or (leniently) both.

    Attributes:
        schema:       Schema applied to every array element.
        json_schemas: Positional (tuple-typed) element schemas.
    """

    schema: JSONSchemaProps | None = None
    json_schemas: list[JSONSchemaProps] | None = None


@dataclass(slots=True)
class JSONSchemaPropsOrBool:
    """Value of ``additionalProperties`` / ``additionalItems``.

    Attributes:
        allows: Boolean form of the keyword. Ignored when ``schema`` is set.
        schema: Schema form of the keyword.
    """

    allows: bool = True
    schema: JSONSchemaProps | None = None


@dataclass(slots=True)
class JSONSchemaPropsOrStringArray:
    """A ``dependencies`` value: a schema dependency or a property-name list.

    Attributes:
        schema:   Schema dependency.
        property: Property dependency (names that must also be present).
    """

    schema: JSONSchemaProps | None = None
    property: list[str] | None = None


@dataclass(slots=True)
class JSONSchemaProps:
    """One node of a structural schema document.

    The composition fields (``items``, ``all_of``, ``one_of``, ``any_of``,
    ``not_``, ``properties``, ``additional_properties``,
    ``pattern_properties``, ``dependencies``, ``additional_items``,
    ``definitions``) hold child nodes. All other fields are plain values.

    Mapping-valued fields accept any ``MutableMapping``; a plain ``dict`` is
    the usual choice.
    """

    id: str | None = None
    schema: str | None = None
    ref: str | None = None
    description: str | None = None
    type: str | None = None
    format: str | None = None
    title: str | None = None
    default: Any = None
    maximum: float | None = None
    exclusive_maximum: bool | None = None
    minimum: float | None = None
    exclusive_minimum: bool | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool | None = None
    multiple_of: float | None = None
    enum: list[Any] | None = None
    max_properties: int | None = None
    min_properties: int | None = None
    required: list[str] | None = None
    items: JSONSchemaPropsOrArray | None = None
    all_of: list[JSONSchemaProps] | None = None
    one_of: list[JSONSchemaProps] | None = None
    any_of: list[JSONSchemaProps] | None = None
    not_: JSONSchemaProps | None = None
    properties: MutableMapping[str, JSONSchemaProps] | None = None
    additional_properties: JSONSchemaPropsOrBool | None = None
    pattern_properties: MutableMapping[str, JSONSchemaProps] | None = None
    dependencies: MutableMapping[str, JSONSchemaPropsOrStringArray] | None = None
    additional_items: JSONSchemaPropsOrBool | None = None
    definitions: MutableMapping[str, JSONSchemaProps] | None = None
    example: Any = None
    nullable: bool | None = None
    x_preserve_unknown_fields: bool | None = None
    x_embedded_resource: bool | None = None
    x_int_or_string: bool | None = None
    x_list_map_keys: list[str] | None = None
    x_list_type: str | None = None
    x_map_type: str | None = None
