"""Tests for the raw nested-list expression parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

from filterql.ast.builder import and_, eq, field, gt, is_empty, lt, macro, ne, not_, not_empty, or_
from filterql.ast.nodes import CustomNode, Value
from filterql.ast.parser import parse_expression
from filterql.errors import CircularDependencyError, ExpressionSyntaxError


@dataclass(frozen=True)
class Like(CustomNode):
    tag: ClassVar[str] = "like"

    value: Value
    pattern: str


class TestParseExpression:
    def test_documented_example(self) -> None:
        raw = [
            "and",
            ["!=", ["field", 3], None],
            ["or", [">", ["field", 4], 25], ["=", ["field", 2], "Jerry"]],
        ]
        expected = and_(ne(field(3), None), or_(gt(field(4), 25), eq(field(2), "Jerry")))
        assert parse_expression(raw) == expected

    def test_membership(self) -> None:
        assert parse_expression(["=", ["field", 4], 25, 26, 27]) == eq(field(4), 25, 26, 27)

    def test_every_builtin_tag(self) -> None:
        raw = [
            "or",
            ["not", ["<", ["field", 4], 30]],
            [
                "and",
                ["is-empty", ["field", 3]],
                ["and", ["not-empty", ["field", 2]], ["macro", "adults"]],
            ],
        ]
        expected = or_(
            not_(lt(field(4), 30)),
            and_(is_empty(field(3)), and_(not_empty(field(2)), macro("adults"))),
        )
        assert parse_expression(raw) == expected

    def test_bare_field_expression(self) -> None:
        assert parse_expression(["field", 1]) == field(1)

    def test_tuples_accepted(self) -> None:
        assert parse_expression(("=", ("field", 2), "Jerry")) == eq(field(2), "Jerry")

    def test_literal_scalars(self) -> None:
        node = parse_expression(["=", ["field", 1], 1, 2.5, "x", True, None])
        assert node.values == (1, 2.5, "x", True, None)


class TestSharing:
    def test_shared_sublist_becomes_shared_node(self) -> None:
        x = ["=", ["field", 2], "Jerry"]
        node = parse_expression(["and", x, x])
        assert node.left is node.right

    def test_distinct_equal_sublists_stay_distinct(self) -> None:
        node = parse_expression(["and", ["=", ["field", 2], "J"], ["=", ["field", 2], "J"]])
        assert node.left == node.right
        assert node.left is not node.right

    def test_self_containing_list_rejected(self) -> None:
        raw: list = ["not"]
        raw.append(raw)
        with pytest.raises(CircularDependencyError):
            parse_expression(raw)

    def test_indirect_self_containing_list_rejected(self) -> None:
        inner: list = ["not"]
        outer = ["and", ["=", ["field", 1], 1], inner]
        inner.append(outer)
        with pytest.raises(CircularDependencyError):
            parse_expression(outer)


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        "raw",
        [
            [],
            "and",
            42,
            None,
            ["bogus", 1],
            ["and", ["field", 1]],
            ["and", ["field", 1], ["field", 2], ["field", 3]],
            ["not"],
            ["<", ["field", 1]],
            ["=", ["field", 1]],
            ["is-empty"],
            ["macro"],
            ["macro", 3],
            ["field", "1"],
            ["field", True],
            ["field"],
            ["=", ["field", 1], {"a": 1}],
            ["=", ["field", 1], ["not", ["field", 2]]],
        ],
    )
    def test_rejected(self, raw: object) -> None:
        with pytest.raises(ExpressionSyntaxError):
            parse_expression(raw)

    def test_error_path_points_at_child(self) -> None:
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression(["and", ["field", 1], ["or", ["field", 2], ["bogus"]]])
        assert exc_info.value.path == "[2][2]"
        assert "bogus" in str(exc_info.value)

    @pytest.mark.parametrize(
        "raw",
        [
            [["field", 1]],
            [{"a": 1}, 1],
            [1, ["field", 1]],
            ["and", ["field", 1], [["field", 2], 3]],
        ],
    )
    def test_non_string_tag_rejected(self, raw: object) -> None:
        with pytest.raises(ExpressionSyntaxError, match="tag must be a string"):
            parse_expression(raw)

    def test_error_code(self) -> None:
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            parse_expression(["nope"])
        assert exc_info.value.code == "EXPRESSION_SYNTAX"


class TestCustomTags:
    def test_custom_parser(self) -> None:
        custom = {"like": lambda args, expr, val: Like(value=val(args[0]), pattern=args[1])}
        node = parse_expression(["and", ["like", ["field", 2], "J%"], ["field", 1]], custom)
        assert node.left == Like(value=field(2), pattern="J%")

    def test_custom_parser_can_recurse(self) -> None:
        @dataclass(frozen=True)
        class Both(CustomNode):
            tag: ClassVar[str] = "both"

            first: object
            second: object

        custom = {"both": lambda args, expr, val: Both(expr(args[0]), expr(args[1]))}
        node = parse_expression(["both", ["field", 1], ["=", ["field", 2], "x"]], custom)
        assert node == Both(field(1), eq(field(2), "x"))

    def test_unregistered_custom_tag_rejected(self) -> None:
        with pytest.raises(ExpressionSyntaxError):
            parse_expression(["like", ["field", 2], "J%"])
