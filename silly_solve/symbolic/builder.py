"""
silly_solve/symbolic/builder.py
===============================
Tree construction helpers.

Collaborators usually already hold equations as nested Python data.
ExpressionLoader converts that data form to trees and back:

    ["=", "y", ["*", 2, "x"]]   ↔   (= y (* 2 x))
    ":a"                        ↔   Variable(:a)   (tagged syntax)
    Fraction(1, 2)              ↔   Number(1/2)

Text parsing is deliberately not handled here.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Any, Dict, List, Mapping, Sequence

from silly_solve.core.exceptions import InvalidExpression
from silly_solve.core.types import (
    Application,
    Constants,
    Expression,
    Identifier,
    IdentifierSyntax,
    Number,
    Numeric,
    Operator,
    Variable,
)

logger = logging.getLogger(__name__)

TAG_PREFIX = ":"


# ─────────────────────────────────────────────
#  SHORTHANDS
# ─────────────────────────────────────────────

def identifier(name: str) -> Identifier:
    """``"x"`` → plain identifier, ``":x"`` → tagged identifier."""
    if not isinstance(name, str) or not name.lstrip(TAG_PREFIX):
        raise InvalidExpression(f"Invalid variable name {name!r}")
    if name.startswith(TAG_PREFIX):
        return Identifier(name[len(TAG_PREFIX):], IdentifierSyntax.TAGGED)
    return Identifier(name)


def num(value: Numeric) -> Number:
    if isinstance(value, bool) or not isinstance(value, (int, Fraction, float)):
        raise InvalidExpression(f"Not a numeric literal: {value!r}")
    return Number(value)


def var(name: str) -> Variable:
    return Variable(identifier(name))


def app(operator: str, *args: Any) -> Application:
    return Application(operator, tuple(ExpressionLoader.from_list(a) for a in args))


def eq(*args: Any) -> Application:
    return app(Operator.EQUALS.value, *args)


# ─────────────────────────────────────────────
#  LOADER
# ─────────────────────────────────────────────

class ExpressionLoader:
    """Convert between nested Python data and expression trees.

    Data form:
        number                  → Number
        "name" / ":name"        → Variable (plain / tagged)
        [operator, arg, ...]    → Application
        Expression              → passed through unchanged
    """

    @classmethod
    def from_list(cls, data: Any) -> Expression:
        if isinstance(data, Expression):
            return data
        if isinstance(data, Identifier):
            return Variable(data)
        if isinstance(data, (int, Fraction, float)) and not isinstance(data, bool):
            return Number(data)
        if isinstance(data, str):
            return var(data)
        if isinstance(data, (list, tuple)):
            if not data:
                raise InvalidExpression("Empty list is not an expression")
            head, *args = data
            if not isinstance(head, str) or not head:
                raise InvalidExpression(
                    f"Operator must be a non-empty string, got {head!r}",
                    context={"data": repr(data)},
                )
            return Application(head, tuple(cls.from_list(a) for a in args))
        raise InvalidExpression(
            f"Cannot build an expression from {type(data).__name__}: {data!r}",
            context={"data": repr(data)},
        )

    @classmethod
    def from_system(cls, data: Sequence[Any]) -> List[Expression]:
        equations = [cls.from_list(item) for item in data]
        logger.debug("Loaded %d equation(s).", len(equations))
        return equations

    @classmethod
    def constants_from_dict(cls, data: Mapping[Any, Numeric]) -> Constants:
        consts: Constants = {}
        for key, value in data.items():
            ident = key if isinstance(key, Identifier) else identifier(key)
            consts[ident] = num(value).value
        return consts

    @classmethod
    def to_list(cls, expr: Expression) -> Any:
        if isinstance(expr, Number):
            return expr.value
        if isinstance(expr, Variable):
            return str(expr.identifier)
        if isinstance(expr, Application):
            return [expr.operator, *(cls.to_list(a) for a in expr.args)]
        raise InvalidExpression(f"Not an expression: {expr!r}")

    @classmethod
    def constants_to_dict(cls, consts: Mapping[Identifier, Numeric]) -> Dict[str, Numeric]:
        return {str(k): v for k, v in consts.items()}
