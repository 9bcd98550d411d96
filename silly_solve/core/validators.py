"""
silly_solve/core/validators.py
==============================
Input validation utilities for silly-solve.

Validates:
    - Expression trees (node types, numeric literals, identifiers, operators)
    - Equation lists (every item is a well-formed tree)
    - Constant maps (Identifier keys, numeric values)

These validators run at API boundaries, not inside the rewrite loop.
Each validate_* function returns a list of error strings; empty = valid.
ensure_valid_equations() raises InvalidExpression instead.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Iterable, List, Mapping

from silly_solve.core.exceptions import InvalidExpression
from silly_solve.core.types import (
    Application,
    Identifier,
    Number,
    Variable,
)

NUMERIC_TYPES = (int, Fraction, float)


def is_numeric_value(value: object) -> bool:
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool)


# ─── EXPRESSION VALIDATION ────────────────────────────────────────

def validate_identifier(identifier: object, where: str = "expression") -> List[str]:
    if not isinstance(identifier, Identifier):
        return [f"{where}: expected Identifier, got {type(identifier).__name__}"]
    if not isinstance(identifier.name, str) or not identifier.name:
        return [f"{where}: identifier name must be a non-empty string"]
    return []


def validate_expression(expr: object, where: str = "expression") -> List[str]:
    """Validate an expression tree recursively.

    Checks:
        1. Every node is a Number, Variable or Application
        2. Number values are int, Fraction or float (bool rejected)
        3. Variables carry a non-empty Identifier
        4. Application operators are non-empty strings
    """
    errors: List[str] = []

    if isinstance(expr, Number):
        if not is_numeric_value(expr.value):
            errors.append(
                f"{where}: numeric literal {expr.value!r} has unsupported type "
                f"{type(expr.value).__name__}"
            )
    elif isinstance(expr, Variable):
        errors.extend(validate_identifier(expr.identifier, where))
    elif isinstance(expr, Application):
        if not isinstance(expr.operator, str) or not expr.operator:
            errors.append(f"{where}: operator must be a non-empty string, got {expr.operator!r}")
        for i, arg in enumerate(expr.args):
            errors.extend(validate_expression(arg, f"{where}.args[{i}]"))
    else:
        errors.append(f"{where}: not an Expression ({type(expr).__name__})")

    return errors


def validate_equations(equations: Iterable[object]) -> List[str]:
    """Validate a list of equations. Returns list of errors.

    Shape is not enforced: non-equalities and unknown operators are legal
    and simply left alone by the solver.
    """
    errors: List[str] = []
    for i, eqn in enumerate(equations):
        errors.extend(validate_expression(eqn, f"equations[{i}]"))
    return errors


def validate_constants(consts: Mapping[object, object]) -> List[str]:
    errors: List[str] = []
    for key, value in consts.items():
        errors.extend(validate_identifier(key, f"constants[{key!r}]"))
        if not is_numeric_value(value):
            errors.append(f"constants[{key!s}]: value {value!r} is not a number")
    return errors


def ensure_valid_equations(equations: Iterable[object], consts: Mapping[object, object]) -> None:
    """Raise InvalidExpression if the solver input is malformed."""
    errors = validate_equations(equations) + validate_constants(consts)
    if errors:
        raise InvalidExpression(
            f"Invalid equation system ({len(errors)} error(s)): {errors[0]}",
            context={"errors": errors},
        )
