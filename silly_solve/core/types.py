"""
silly_solve/core/types.py
=========================
Foundation type system for silly-solve.
Every module imports from here. No circular dependencies.

Expression trees are tagged, immutable and hashable:
  - Number       leaf numeric literal (int | Fraction | float)
  - Variable     leaf naming an unknown, via an Identifier
  - Application  n-ary operator node: (operator arg1 arg2 ...)

An Equation is simply an Application whose operator is ``=``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import Dict, List, Optional, Tuple, Union

Numeric = Union[int, Fraction, float]


# ─────────────────────────────────────────────
#  ENUMERATIONS
# ─────────────────────────────────────────────

class Operator(Enum):
    """The closed set of operator symbols the solver understands.

    Applications may carry any symbol; only these ones are ever rewritten.
    """
    ADD      = "+"
    MULTIPLY = "*"
    SUBTRACT = "-"
    DIVIDE   = "/"
    POWER    = "**"
    MAX      = "max"
    MIN      = "min"
    EQUALS   = "="

    @classmethod
    def lookup(cls, symbol: str) -> Optional["Operator"]:
        try:
            return cls(symbol)
        except ValueError:
            return None


class IdentifierSyntax(Enum):
    """Surface syntax of a variable name. Display only.

    PLAIN:  x
    TAGGED: :x
    """
    PLAIN  = "plain"
    TAGGED = "tagged"


class SolveStatus(Enum):
    RUNNING = "running"
    SOLVED  = "solved"
    STUCK   = "stuck"


# ─────────────────────────────────────────────
#  EXPRESSION TREE
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Identifier:
    """Name of an unknown plus the syntax it was written in.

    The syntax tag takes part in equality and hashing, so ``x`` and ``:x``
    are distinct keys and never get conflated.
    """
    name:   str
    syntax: IdentifierSyntax = IdentifierSyntax.PLAIN

    def __str__(self) -> str:
        if self.syntax is IdentifierSyntax.TAGGED:
            return f":{self.name}"
        return self.name

    def __repr__(self) -> str:
        return f"Identifier({self!s})"


class Expression:
    """Base class for all expression tree nodes. Structure only."""

    __slots__ = ()


@dataclass(frozen=True)
class Number(Expression):
    """Numeric literal. Exact values with denominator 1 are stored as int."""
    value: Numeric

    def __post_init__(self):
        if isinstance(self.value, Fraction) and self.value.denominator == 1:
            object.__setattr__(self, "value", int(self.value))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Number({self.value!s})"


@dataclass(frozen=True)
class Variable(Expression):
    identifier: Identifier

    def __str__(self) -> str:
        return str(self.identifier)

    def __repr__(self) -> str:
        return f"Variable({self.identifier!s})"


@dataclass(frozen=True)
class Application(Expression):
    """Operator applied to an ordered operand tuple.

    Example:
        Application("+", (Number(1), Variable(Identifier("x"))))  ~  (+ 1 x)
    """
    operator: str
    args:     Tuple[Expression, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @property
    def op(self) -> Optional[Operator]:
        return Operator.lookup(self.operator)

    def with_args(self, args) -> "Application":
        return Application(self.operator, tuple(args))

    def __str__(self) -> str:
        if not self.args:
            return f"({self.operator})"
        return f"({self.operator} {' '.join(str(a) for a in self.args)})"

    def __repr__(self) -> str:
        return f"Application{self!s}"


Constants = Dict[Identifier, Numeric]


def is_number(expr: object) -> bool:
    return isinstance(expr, Number)


def is_equation(expr: object) -> bool:
    return isinstance(expr, Application) and expr.operator == Operator.EQUALS.value


def is_variable(value: object) -> bool:
    """True for anything naming an unknown in either identifier syntax.

    Accepts Variable nodes, Identifier values, and non-empty strings in the
    nested-data form used by ExpressionLoader (``"x"`` or ``":x"``).
    """
    if isinstance(value, (Variable, Identifier)):
        return True
    if isinstance(value, str):
        return bool(value.lstrip(":"))
    return False


# ─────────────────────────────────────────────
#  SOLVE RESULTS
# ─────────────────────────────────────────────

@dataclass
class SolveStep:
    """One iteration of the solve loop."""
    iteration:        int
    extracted:        Constants
    equations_before: int
    equations_after:  int

    @property
    def made_progress(self) -> bool:
        return bool(self.extracted) or self.equations_after != self.equations_before


@dataclass
class SolveTrace:
    """Ordered record of how a solve call reached its terminal state."""
    steps:  List[SolveStep]
    status: SolveStatus

    @property
    def iterations(self) -> int:
        return len(self.steps)


@dataclass
class SolveResult:
    """Complete output of ConstantSolver.solve().

    ``remaining`` is empty exactly when ``status`` is SOLVED. A non-empty
    ``remaining`` is a partial solution to hand to a more capable solver.
    """
    remaining: List[Expression]
    constants: Constants
    status:    SolveStatus
    trace:     Optional[SolveTrace] = None

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    def as_tuple(self) -> Tuple[List[Expression], Constants]:
        return self.remaining, self.constants

    def summary(self) -> str:
        iterations = self.trace.iterations if self.trace else "?"
        return (
            f"Status: {self.status.value}\n"
            f"Constants: {len(self.constants)}\n"
            f"Remaining equations: {len(self.remaining)}\n"
            f"Iterations: {iterations}"
        )
