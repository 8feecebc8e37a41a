"""crd-schema-walk - visitor-driven traversal and editing of CRD validation schemas."""

from __future__ import annotations

from crd_schema_walk.protocols import SchemaVisitor
from crd_schema_walk.schema import (
    TRAVERSAL_ORDER,
    ContainerKind,
    JSONSchemaProps,
    JSONSchemaPropsOrArray,
    JSONSchemaPropsOrBool,
    JSONSchemaPropsOrStringArray,
    SchemaField,
)
from crd_schema_walk.visitors import FuncVisitor, RecordingVisitor, VisitEvent
from crd_schema_walk.walker import SchemaWalker, edit_schema, walk

__version__: str = "0.1.0"
__all__: list[str] = [
    "TRAVERSAL_ORDER",
    "ContainerKind",
    "FuncVisitor",
    "JSONSchemaProps",
    "JSONSchemaPropsOrArray",
    "JSONSchemaPropsOrBool",
    "JSONSchemaPropsOrStringArray",
    "RecordingVisitor",
    "SchemaField",
    "SchemaVisitor",
    "SchemaWalker",
    "VisitEvent",
    "edit_schema",
    "walk",
]
