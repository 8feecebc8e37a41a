"""Ready-made SchemaVisitor implementations.

- ``FuncVisitor`` adapts a plain ``func(schema, level)`` callable.
- ``RecordingVisitor`` records every ``visit`` call as a ``VisitEvent``,
  which is handy for tests and for inspecting the shape of a walk.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crd_schema_walk.schema.props import JSONSchemaProps

__all__ = ["FuncVisitor", "RecordingVisitor", "VisitEvent"]


@dataclass(frozen=True, slots=True)
class VisitEvent:
    """One ``visit`` call observed during a walk.

    Attributes:
        level:  Level passed to ``visit``.
        schema: Node passed to ``visit``; None for the end-of-children call.
    """

    level: int
    schema: JSONSchemaProps | None = None

    def __post_init__(self) -> None:
        if self.level < 0:
            msg = f"level must be >= 0, got {self.level}"
            raise ValueError(msg)

    @property
    def is_terminal(self) -> bool:
        """True for the call signalling that all children have been visited."""
        return self.schema is None


@dataclass(slots=True)
class FuncVisitor:
    """Visitor that calls ``func(schema, level)`` for every schema node.

    ``func`` is not called for end-of-children notifications. When ``func``
    returns exactly ``False`` the children of that node are skipped; any other
    return value (including None) continues the walk with this visitor.

    Example::

        def strip_examples(schema, level):
            schema.example = None

        edit_schema(root, FuncVisitor(strip_examples))
    """

    func: Callable[[JSONSchemaProps, int], bool | None]

    def __post_init__(self) -> None:
        if not callable(self.func):
            msg = f"func must be callable, got {type(self.func)!r}"
            raise TypeError(msg)

    def visit(self, schema: JSONSchemaProps | None, level: int) -> FuncVisitor | None:
        if schema is None:
            return None
        if self.func(schema, level) is False:
            return None
        return self


@dataclass(slots=True)
class RecordingVisitor:
    """Visitor that records each call and optionally prunes descent.

    Attributes:
        descend_into: Optional predicate ``(schema, level) -> bool``. When it
            returns False for a node, that node's children are skipped.
            Defaults to descending everywhere.
        events: Every ``visit`` call, in call order, including the
            end-of-children calls (``schema=None``).
    """

    descend_into: Callable[[JSONSchemaProps, int], bool] | None = None
    events: list[VisitEvent] = field(default_factory=list)

    def visit(
        self, schema: JSONSchemaProps | None, level: int
    ) -> RecordingVisitor | None:
        self.events.append(VisitEvent(level=level, schema=schema))
        if schema is None:
            return None
        if self.descend_into is not None and not self.descend_into(schema, level):
            return None
        return self

    @property
    def nodes(self) -> list[JSONSchemaProps]:
        """Schema nodes seen, in visit (preorder) order."""
        return [e.schema for e in self.events if e.schema is not None]

    @property
    def levels(self) -> list[int]:
        """Levels of the schema nodes seen, aligned with ``nodes``."""
        return [e.level for e in self.events if not e.is_terminal]

    @property
    def terminal_events(self) -> list[VisitEvent]:
        """End-of-children notifications, in call order."""
        return [e for e in self.events if e.is_terminal]
