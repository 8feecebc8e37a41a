"""Schema subpackage: the document model walked by the engine.

Re-exports the public API for the schema module:
- JSONSchemaProps: dataclass for one schema node
- JSONSchemaPropsOrArray / JSONSchemaPropsOrBool / JSONSchemaPropsOrStringArray:
  union wrappers used by ``items``, ``additional*`` and ``dependencies``
- SchemaField / ContainerKind: StrEnums describing the walkable fields
- TRAVERSAL_ORDER: the fixed order in which child fields are walked
"""

from crd_schema_walk.schema.fields import TRAVERSAL_ORDER, ContainerKind, SchemaField
from crd_schema_walk.schema.props import (
    JSONSchemaProps,
    JSONSchemaPropsOrArray,
    JSONSchemaPropsOrBool,
    JSONSchemaPropsOrStringArray,
)

__all__ = [
    "TRAVERSAL_ORDER",
    "ContainerKind",
    "JSONSchemaProps",
    "JSONSchemaPropsOrArray",
    "JSONSchemaPropsOrBool",
    "JSONSchemaPropsOrStringArray",
    "SchemaField",
]
