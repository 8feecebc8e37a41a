"""SchemaVisitor Protocol: the extension point of the schema walker.

Defines the structural interface every visitor must satisfy. Visitors do not
inherit from any base class; any object with a conformant ``visit`` method
passes ``isinstance`` checks.

Example::

    from crd_schema_walk import SchemaVisitor, edit_schema

    class DropDescriptions:
        def visit(self, schema, level):
            if schema is not None:
                schema.description = None
            return self

    assert isinstance(DropDescriptions(), SchemaVisitor)  # True, structural conformance
    edit_schema(root, DropDescriptions())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from crd_schema_walk.schema.props import JSONSchemaProps


@runtime_checkable
class SchemaVisitor(Protocol):
    """Structural protocol for schema visitors.

    ``visit`` is called once for each schema node, before its children.

    - ``schema`` is the live node; edits made to it are kept.
    - ``level`` is the node's depth: 0 for the root, parent + 1 for children.
    - Returning ``None`` skips every child of the node.
    - Returning a visitor (``self`` or another one) walks each direct child
      with it. Once all children are done, that returned visitor is called
      one more time with ``schema=None`` and ``level + 1``.
    """

    def visit(
        self, schema: JSONSchemaProps | None, level: int
    ) -> SchemaVisitor | None: ...
