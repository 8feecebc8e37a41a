"""SchemaWalker: depth-first, visitor-driven traversal of a JSONSchemaProps tree.

``edit_schema`` hands each node of the schema to a ``SchemaVisitor`` in
preorder. The visitor returned for a node walks that node's direct children,
field by field in ``TRAVERSAL_ORDER``, and is then called once with ``None``
to signal that the subtree is done.

Children are reached in one of three ways:

- Sequences (``allOf``, ``oneOf``, ``anyOf``, ``items`` list form) are walked
  by index. The element objects are live, so edits need no write-back.
- Optional single children (``not``, ``items`` schema form, the schema form
  of ``additionalProperties`` / ``additionalItems``) are walked directly when
  present.
- Mappings (``properties``, ``patternProperties``, ``definitions``,
  ``dependencies``) are walked as get / walk / put-back. A ``MutableMapping``
  is free to hand out copies from ``__getitem__``, so every value is stored
  again under its key once its subtree has been walked.

The walker keeps no state beyond the current visitor and holds no references
once ``edit_schema`` returns. It does not detect cycles: a cyclic graph
recurses until the interpreter raises ``RecursionError``. Exceptions raised
by a visitor propagate unchanged, but every node already descended into
still gets its ``None`` notification on the way out. The mapping write-back
for the entry being walked is skipped in that case.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from crd_schema_walk.schema.fields import TRAVERSAL_ORDER, ContainerKind

if TYPE_CHECKING:
    from crd_schema_walk.protocols import SchemaVisitor
    from crd_schema_walk.schema.props import (
        JSONSchemaProps,
        JSONSchemaPropsOrStringArray,
    )

__all__ = ["SchemaWalker", "edit_schema", "walk"]

logger = logging.getLogger(__name__)


def edit_schema(schema: JSONSchemaProps, visitor: SchemaVisitor) -> None:
    """Walk ``schema`` with ``visitor``, keeping every edit the visitor makes.

    The root is visited at level 0. Nothing is returned; the effect of the
    walk is whatever the visitors did to the (caller-owned) schema.

    Args:
        schema:  Root of the schema tree. Must not be modified by anyone else
                 while the walk is running.
        visitor: Visitor called for the root node.
    """
    logger.debug("walking schema with %s", type(visitor).__name__)
    SchemaWalker(visitor).walk_schema(schema, 0)
    logger.debug("finished walking schema with %s", type(visitor).__name__)


walk = edit_schema


@dataclass(frozen=True, slots=True)
class SchemaWalker:
    """Walks schema nodes with one visitor, persisting the visitor's edits.

    A new ``SchemaWalker`` is created for every visitor returned from
    ``visit``, so each walker only ever dispatches to a single visitor.
    """

    visitor: SchemaVisitor

    def walk_schema(self, schema: JSONSchemaProps, level: int) -> None:
        """Visit ``schema`` at ``level``, then its children unless told not to."""
        sub_visitor = self.visitor.visit(schema, level)
        if sub_visitor is None:
            logger.debug("descent skipped at level %d", level)
            return

        next_level = level + 1
        sub_walker = SchemaWalker(sub_visitor)
        try:
            for schema_field in TRAVERSAL_ORDER:
                value = getattr(schema, schema_field.attribute)
                if value is None:
                    continue
                sub_walker._walk_field(schema_field.kind, value, next_level)
        finally:
            # delivered even while an exception unwinds the walk
            sub_visitor.visit(None, next_level)

    # ------------------------------------------------------------------
    # Per-container helpers
    # ------------------------------------------------------------------

    def _walk_field(self, kind: ContainerKind, value: Any, level: int) -> None:
        if kind is ContainerKind.SEQUENCE:
            self._walk_slice(value, level)
            return

        if kind is ContainerKind.OPTIONAL:
            self._walk_ptr(value, level)
            return

        if kind is ContainerKind.MAPPING:
            self._walk_map(value, level)
            return

        if kind is ContainerKind.SCHEMA_OR_ARRAY:
            # Only one form is meaningful, but both are walked when present.
            self._walk_ptr(value.schema, level)
            self._walk_slice(value.json_schemas, level)
            return

        if kind is ContainerKind.SCHEMA_OR_BOOL:
            self._walk_ptr(value.schema, level)
            return

        if kind is ContainerKind.DEPENDENCY_MAPPING:
            self._walk_dependencies(value, level)
            return

        raise AssertionError(f"Unhandled container kind: {kind!r}")

    def _walk_map(
        self, defs: MutableMapping[str, JSONSchemaProps] | None, level: int
    ) -> None:
        """Walk the values of ``defs``, storing each one back under its key."""
        if defs is None:
            return
        for name in list(defs):
            definition = defs[name]
            self.walk_schema(definition, level)
            # __getitem__ may have returned a copy; put the edited value back
            defs[name] = definition

    def _walk_dependencies(
        self,
        deps: MutableMapping[str, JSONSchemaPropsOrStringArray] | None,
        level: int,
    ) -> None:
        """Walk the schema form of each dependency; property lists are skipped."""
        if deps is None:
            return
        for name in list(deps):
            dep = deps[name]
            self._walk_ptr(dep.schema, level)
            deps[name] = dep

    def _walk_slice(self, defs: Sequence[JSONSchemaProps] | None, level: int) -> None:
        """Walk the items of ``defs`` by position."""
        if defs is None:
            return
        for i in range(len(defs)):
            self.walk_schema(defs[i], level)

    def _walk_ptr(self, definition: JSONSchemaProps | None, level: int) -> None:
        """Walk ``definition`` if it is present."""
        if definition is None:
            return
        self.walk_schema(definition, level)
