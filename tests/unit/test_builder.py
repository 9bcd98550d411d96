"""
tests/unit/test_builder.py
==========================
Tests for silly_solve/symbolic/builder.py — nested-data loading.
"""

from fractions import Fraction

import pytest

from silly_solve.core.exceptions import InvalidExpression
from silly_solve.core.types import (
    Application,
    Identifier,
    IdentifierSyntax,
    Number,
    Variable,
)
from silly_solve.symbolic.builder import ExpressionLoader, app, eq, identifier, num, var


class TestShorthands:
    def test_identifier_syntax(self):
        assert identifier("x") == Identifier("x")
        assert identifier(":x") == Identifier("x", IdentifierSyntax.TAGGED)

    @pytest.mark.parametrize("bad", ["", ":", 3, None])
    def test_identifier_rejects(self, bad):
        with pytest.raises(InvalidExpression):
            identifier(bad)

    def test_num_rejects_bool_and_str(self):
        with pytest.raises(InvalidExpression):
            num(True)
        with pytest.raises(InvalidExpression):
            num("3")

    def test_app_and_eq(self):
        assert eq("y", app("*", 2, "x")) == Application(
            "=",
            (var("y"), Application("*", (num(2), var("x")))),
        )


class TestExpressionLoader:
    def test_from_list_nested(self):
        expr = ExpressionLoader.from_list(["=", ":a", ["/", 1, 2]])
        assert expr == Application(
            "=",
            (
                Variable(Identifier("a", IdentifierSyntax.TAGGED)),
                Application("/", (Number(1), Number(2))),
            ),
        )

    def test_passthrough(self):
        node = Number(Fraction(1, 2))
        assert ExpressionLoader.from_list(node) is node
        assert ExpressionLoader.from_list(Identifier("x")) == Variable(Identifier("x"))

    def test_unknown_operators_allowed(self):
        assert ExpressionLoader.from_list(["r", "s"]).operator == "r"

    def test_nullary_application(self):
        assert ExpressionLoader.from_list(["="]) == Application("=", ())

    @pytest.mark.parametrize("bad", [[], [1, 2], [["+"], 1], {"x": 1}, True, None])
    def test_rejects(self, bad):
        with pytest.raises(InvalidExpression):
            ExpressionLoader.from_list(bad)

    def test_to_list_inverts_from_list(self):
        data = ["=", ":a", ["+", "x", Fraction(1, 2)], 3]
        assert ExpressionLoader.to_list(ExpressionLoader.from_list(data)) == data

    def test_constants_dicts(self):
        consts = ExpressionLoader.constants_from_dict({"x": 1, ":y": Fraction(1, 2)})
        assert consts == {
            Identifier("x"): 1,
            Identifier("y", IdentifierSyntax.TAGGED): Fraction(1, 2),
        }
        assert ExpressionLoader.constants_to_dict(consts) == {"x": 1, ":y": Fraction(1, 2)}

    def test_constants_reject_non_numeric(self):
        with pytest.raises(InvalidExpression):
            ExpressionLoader.constants_from_dict({"x": "1"})
