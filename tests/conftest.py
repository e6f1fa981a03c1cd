"""Shared test fixtures for filterql."""

from __future__ import annotations

import pytest

from filterql.compiler.transpiler import Transpiler
from filterql.dialect.base import DEFAULT_FORMATTER
from filterql.render.context import RenderContext

FIELDS: dict[int, str] = {1: "id", 2: "name", 3: "date_joined", 4: "age"}


@pytest.fixture
def fields() -> dict[int, str]:
    return dict(FIELDS)


@pytest.fixture
def transpiler() -> Transpiler:
    return Transpiler(table_name="data")


@pytest.fixture
def ctx() -> RenderContext:
    """Render context for the base formatter with the sample field map."""
    return RenderContext(formatter=DEFAULT_FORMATTER, fields=dict(FIELDS), macros={})


SAMPLE_MACROS_YAML = """\
# Reusable filters for the sample "data" table.
adults: [">", ["field", 4], 17]
named_jerry: ["=", ["field", 2], "Jerry"]
adult_jerry: ["and", ["macro", "adults"], ["macro", "named_jerry"]]
never_joined:
  - is-empty
  - [field, 3]
"""
