"""
silly_solve/symbolic/evaluator.py
=================================
Numeric evaluation of an expression tree under variable bindings.

Not used by the solve loop itself; it is how callers check a solution
and how the tests check that simplification preserves meaning.
"""

from __future__ import annotations

from typing import Mapping, Optional

from silly_solve.core.exceptions import UnboundVariable, UnknownOperator
from silly_solve.core.registry import OperatorRegistry
from silly_solve.core.types import (
    Application,
    Expression,
    Identifier,
    Number,
    Numeric,
    Variable,
    is_equation,
)


def evaluate(expr: Expression, bindings: Optional[Mapping[Identifier, Numeric]] = None) -> Numeric:
    """Compute the value of ``expr``.

    Raises:
        UnboundVariable:   a variable has no entry in ``bindings``.
        UnknownOperator:   an operator is not in the registry (``=`` included).
        ZeroDivisionError, OperatorArityError: from the operator evaluators.
    """
    bindings = bindings or {}
    if isinstance(expr, Number):
        return expr.value
    if isinstance(expr, Variable):
        try:
            return bindings[expr.identifier]
        except KeyError:
            raise UnboundVariable(
                f"No value bound for variable '{expr.identifier}'",
                identifier=expr.identifier,
            ) from None
    if isinstance(expr, Application):
        desc = OperatorRegistry.lookup(expr.operator)
        if desc is None:
            raise UnknownOperator(
                f"Cannot evaluate operator '{expr.operator}'",
                symbol=expr.operator,
            )
        return desc.evaluate([evaluate(arg, bindings) for arg in expr.args])
    raise TypeError(f"Not an expression: {expr!r}")


def satisfies(
    equation: Expression,
    bindings: Mapping[Identifier, Numeric],
    tolerance: float = 1e-9,
) -> bool:
    """True if every side of an equality evaluates to the same value."""
    if not is_equation(equation):
        raise UnknownOperator(f"Not an equation: {equation}", symbol=getattr(equation, "operator", ""))
    values = [evaluate(arg, bindings) for arg in equation.args]
    return all(abs(v - values[0]) <= tolerance for v in values[1:])
