"""
silly_solve/__init__.py — Public API exports
"""

from silly_solve.core.config import (
    DEFAULT_CONFIG,
    SillySolveConfig,
    SimplifierConfig,
    SolverConfig,
)
from silly_solve.core.exceptions import (
    ContradictoryEquation,
    InvalidExpression,
    IterationLimitExceeded,
    OperatorArityError,
    SillySolveError,
    UnboundVariable,
    UnknownOperator,
)
from silly_solve.core.registry import (
    OperatorDescriptor,
    OperatorRegistry,
    inverse_of,
    is_commutative,
    is_invertible,
    is_operator,
)
from silly_solve.core.types import (
    Application,
    Expression,
    Identifier,
    IdentifierSyntax,
    Number,
    Operator,
    SolveResult,
    SolveStatus,
    SolveStep,
    SolveTrace,
    Variable,
    is_equation,
    is_variable,
)
from silly_solve.symbolic import (
    ConstantSolver,
    ExpressionLoader,
    Simplifier,
    app,
    eq,
    evaluate,
    find_consts,
    num,
    propagate_consts,
    satisfies,
    simplify,
    solve_for_consts,
    var,
)
from silly_solve.version import __version__

__all__ = [
    "simplify",
    "solve_for_consts",
    "is_variable",
    "is_operator",
    "is_commutative",
    "is_invertible",
    "inverse_of",
    "find_consts",
    "propagate_consts",
    "evaluate",
    "satisfies",
    "ConstantSolver",
    "Simplifier",
    "ExpressionLoader",
    "OperatorRegistry",
    "OperatorDescriptor",
    "app",
    "eq",
    "num",
    "var",
    "Expression",
    "Number",
    "Variable",
    "Application",
    "Identifier",
    "IdentifierSyntax",
    "Operator",
    "SolveResult",
    "SolveStatus",
    "SolveStep",
    "SolveTrace",
    "is_equation",
    "SillySolveConfig",
    "SimplifierConfig",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "SillySolveError",
    "ContradictoryEquation",
    "OperatorArityError",
    "UnboundVariable",
    "UnknownOperator",
    "InvalidExpression",
    "IterationLimitExceeded",
    "__version__",
]
