"""
silly_solve/symbolic/constants.py
=================================
Constant extraction and substitution for the solve loop.

    find_consts(eqns)              → {identifier: value}
    propagate_consts(eqns, consts) → eqns with known variables replaced

Extraction only trusts the canonical equality form the simplifier
produces, (= constant operand ...). Every other shape is ignored so that
a smarter solver may still make progress on it.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from silly_solve.core.types import (
    Application,
    Constants,
    Expression,
    Identifier,
    Number,
    Numeric,
    Variable,
    is_equation,
)

logger = logging.getLogger(__name__)


def is_canonical_equality(expr: Expression) -> bool:
    """(= c a b ...): a leading constant and no other constant."""
    if not is_equation(expr) or len(expr.args) < 2:
        return False
    head, *rest = expr.args
    return isinstance(head, Number) and not any(isinstance(a, Number) for a in rest)


def find_consts(equations: Sequence[Expression]) -> Constants:
    """Collect variable → constant bindings from canonical top-level equalities.

    A variable bound by several equations takes the value of the last one.
    Non-variable operands of a canonical equality are skipped.
    """
    found: Constants = {}
    for eqn in equations:
        if not is_canonical_equality(eqn):
            continue
        value = eqn.args[0].value
        for operand in eqn.args[1:]:
            if isinstance(operand, Variable):
                found[operand.identifier] = value
    if found:
        logger.debug("Extracted constants: %s", _format(found))
    return found


def _substitute(expr: Expression, consts: Mapping[Identifier, Numeric]) -> Expression:
    """Replace known variables bottom-up. Unchanged subtrees keep their identity."""
    if isinstance(expr, Variable):
        if expr.identifier in consts:
            return Number(consts[expr.identifier])
        return expr
    if isinstance(expr, Application):
        args = [_substitute(arg, consts) for arg in expr.args]
        if any(new is not old for new, old in zip(args, expr.args)):
            return expr.with_args(args)
    return expr


def propagate_consts(
    equations: Sequence[Expression],
    consts: Mapping[Identifier, Numeric],
) -> List[Expression]:
    """Replace every Variable whose identifier is in ``consts`` with its Number.

    Substitution can never introduce a new variable, so the second pass of
    the fixpoint loop always confirms the first.
    """
    current = list(equations)
    if not consts:
        return current
    while True:
        new = [_substitute(eqn, consts) for eqn in current]
        if all(n is c for n, c in zip(new, current)):
            return new
        current = new


def _format(consts: Mapping[Identifier, Numeric]) -> str:
    return ", ".join(f"{k}={v}" for k, v in consts.items())
