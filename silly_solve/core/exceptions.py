"""
silly_solve/core/exceptions.py
==============================
Custom exception hierarchy for silly-solve.

All exceptions carry structured context so callers can
programmatically handle different failure modes.
"""

from __future__ import annotations

from typing import Any, List, Optional


class SillySolveError(Exception):
    """Base exception for all silly-solve errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class ContradictoryEquation(SillySolveError):
    """Raised when an equality holds two or more distinct constants.

    This is a hard failure: the equation system has no solution,
    and continuing with either value would be incorrect.
    """

    def __init__(self, message: str, equation: Any, constants: List[Any]):
        super().__init__(
            message,
            context={"equation": str(equation), "constants": list(constants)},
        )
        self.equation = equation
        self.constants = list(constants)


class OperatorArityError(SillySolveError):
    """Raised when an operator evaluator receives an operand count it
    does not support (e.g. ``**`` with three operands, ``max`` with none)."""

    def __init__(self, message: str, symbol: str, arity: int):
        super().__init__(message, context={"symbol": symbol, "arity": arity})
        self.symbol = symbol
        self.arity = arity


class UnboundVariable(SillySolveError):
    """Raised when evaluation meets a variable with no binding."""

    def __init__(self, message: str, identifier: Any):
        super().__init__(message, context={"identifier": str(identifier)})
        self.identifier = identifier


class UnknownOperator(SillySolveError):
    """Raised when evaluation meets an operator it cannot compute."""

    def __init__(self, message: str, symbol: str):
        super().__init__(message, context={"symbol": symbol})
        self.symbol = symbol


class InvalidExpression(SillySolveError):
    """Raised when input data cannot be turned into, or is not, a
    well-formed expression tree."""

    pass


class IterationLimitExceeded(SillySolveError):
    """Raised when a configured pass or iteration cap is reached before
    a fixpoint. Only possible when the caller opted into a cap."""

    def __init__(self, message: str, limit: int, context: Optional[dict] = None):
        super().__init__(message, context)
        self.limit = limit
