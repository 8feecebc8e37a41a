"""pytest plugin for crd-schema-walk.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from crd_schema_walk import JSONSchemaProps, RecordingVisitor, edit_schema


@pytest.fixture(scope="session")
def record_schema_walk() -> Any:
    """Fixture that returns a callable recording every visit of a walk.

    The fixture is session-scoped because the returned callable is stateless
    (a fresh RecordingVisitor is created per call).

    Usage in tests::

        def test_visits_property(record_schema_walk):
            root = JSONSchemaProps(properties={"spec": JSONSchemaProps()})
            recorder = record_schema_walk(root)
            assert recorder.levels == [0, 1]

    Returns:
        A callable ``_record(schema, descend_into=None) -> RecordingVisitor``
        that walks ``schema`` with a new ``RecordingVisitor`` and returns it
        once the walk has finished.
    """

    def _record(
        schema: JSONSchemaProps,
        descend_into: Callable[[JSONSchemaProps, int], bool] | None = None,
    ) -> RecordingVisitor:
        recorder = RecordingVisitor(descend_into=descend_into)
        edit_schema(schema, recorder)
        return recorder

    return _record
