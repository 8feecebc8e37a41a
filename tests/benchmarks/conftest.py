"""Deterministic schema generators for performance benchmarks.

All generators produce fixed, reproducible schemas. No random values.
Two shapes: a wide CRD-like schema with many properties per level, and a
deep chain of nested ``items`` schemas.
"""

from __future__ import annotations

import pytest

from crd_schema_walk import JSONSchemaProps, JSONSchemaPropsOrArray


def generate_wide_schema(width: int, depth: int) -> JSONSchemaProps:
    """Object schema with ``width`` properties per level, ``depth`` levels deep."""
    if depth == 0:
        return JSONSchemaProps(type="string", description="leaf")
    return JSONSchemaProps(
        type="object",
        description=f"object at depth {depth}",
        properties={
            f"field_{i}": generate_wide_schema(width, depth - 1) for i in range(width)
        },
    )


def generate_deep_schema(depth: int) -> JSONSchemaProps:
    """Chain of array schemas nested through ``items`` (built iteratively)."""
    schema = JSONSchemaProps(type="string")
    for _ in range(depth):
        schema = JSONSchemaProps(
            type="array", items=JSONSchemaPropsOrArray(schema=schema)
        )
    return schema


@pytest.fixture
def wide_schema() -> JSONSchemaProps:
    """10 x 10 x 10 properties: 1111 nodes."""
    return generate_wide_schema(width=10, depth=3)


@pytest.fixture
def deep_schema() -> JSONSchemaProps:
    """150 nested items schemas, well inside the default recursion limit."""
    return generate_deep_schema(150)
