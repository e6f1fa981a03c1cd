"""sqlglot check of compiled filter queries.

The transpiler always emits one ``SELECT`` per call. The check parses that
text with the matching sqlglot dialect; anything else (a syntax error, a
second statement, a non-SELECT) is reported so the API can return it as
warnings next to the SQL.
"""

from __future__ import annotations

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

# Map filterql dialect names to sqlglot dialect identifiers.
_DIALECT_MAP: dict[str, str] = {
    "postgres": "postgres",
    "mysql": "mysql",
    "sqlserver": "tsql",
}


def validate_sql(sql: str, dialect_name: str) -> list[str]:
    """Check that ``sql`` is a single well-formed SELECT in ``dialect_name``.

    Returns a list of problems (empty if valid). Never raises for bad SQL.
    """
    sg_dialect = _DIALECT_MAP.get(dialect_name)
    if sg_dialect is None:
        return [f"Unknown dialect '{dialect_name}', skipping SQL validation"]

    try:
        statements = [s for s in sqlglot.parse(sql, read=sg_dialect) if s is not None]
    except SqlglotError as exc:
        return [str(exc)]
    if len(statements) != 1:
        return [f"Expected one SELECT statement, found {len(statements)}"]
    if not isinstance(statements[0], exp.Select):
        return [f"Expected a SELECT statement, found {statements[0].key.upper()}"]
    return []
