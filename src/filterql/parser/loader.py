"""YAML macro-file loader.

A macro file maps macro names to expressions in raw (nested-list) form::

    adults: [">", ["field", 4], 17]
    named_jerry: ["=", ["field", 2], "Jerry"]
    adult_jerry: ["and", ["macro", "adults"], ["macro", "named_jerry"]]
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from filterql.ast.nodes import Expr
from filterql.ast.parser import parse_expression
from filterql.errors import MacroFileError, TranspileError

logger = logging.getLogger("filterql.loader")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 1_000_000  # 1M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 64

# Anchors/aliases would let a document share or nest lists into themselves.
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:\[,])&(\w+)", re.MULTILINE)


class MacroLoader:
    """Loads macro tables from YAML using ruamel.yaml's safe loader."""

    def __init__(self) -> None:
        self._yaml = YAML(typ="safe")

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_yaml_safety(content: str) -> None:
        """Pre-parse checks on raw YAML text."""
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise MacroFileError(
                f"Macro file exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise MacroFileError("YAML anchors/aliases are not supported in macro files")

    @staticmethod
    def _check_shape(data: Any) -> None:
        """Post-parse defense-in-depth: node count and nesting depth."""
        count = 0
        stack: list[tuple[Any, int]] = [(data, 0)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > _MAX_NODE_COUNT:
                raise MacroFileError(
                    f"Macro file exceeds maximum node count ({_MAX_NODE_COUNT:,})"
                )
            if depth > _MAX_DEPTH:
                raise MacroFileError(f"Macro file exceeds maximum nesting depth ({_MAX_DEPTH})")
            if isinstance(node, dict):
                stack.extend((v, depth + 1) for v in node.values())
            elif isinstance(node, list):
                stack.extend((v, depth + 1) for v in node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> dict[str, Expr]:
        """Load a macro file from disk."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except OSError as exc:
            raise MacroFileError(f"Cannot read macro file {path}: {exc}") from exc
        macros = self.load_string(content, filename=str(path))
        logger.info("loaded %d macros from %s", len(macros), path)
        return macros

    def load_string(self, content: str, filename: str = "<string>") -> dict[str, Expr]:
        """Load a macro table from YAML text."""
        self._check_yaml_safety(content)
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise MacroFileError(f"Invalid YAML in {filename}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise MacroFileError(
                f"Macro file {filename} must contain a mapping, got {type(data).__name__}"
            )
        self._check_shape(data)

        macros: dict[str, Expr] = {}
        for name, raw in data.items():
            try:
                macros[str(name)] = parse_expression(raw)
            except TranspileError as exc:
                raise MacroFileError(f"Macro '{name}' in {filename}: {exc}") from exc
        return macros


def load_macros(path: str | Path) -> dict[str, Expr]:
    """Load a macro table from a YAML file."""
    return MacroLoader().load(Path(path))


def load_macros_text(content: str) -> dict[str, Expr]:
    """Load a macro table from YAML text."""
    return MacroLoader().load_string(content)
