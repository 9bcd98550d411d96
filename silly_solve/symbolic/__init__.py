"""silly_solve/symbolic — Rewriting and solving layer."""

from silly_solve.symbolic.builder import ExpressionLoader, app, eq, identifier, num, var
from silly_solve.symbolic.constants import find_consts, is_canonical_equality, propagate_consts
from silly_solve.symbolic.evaluator import evaluate, satisfies
from silly_solve.symbolic.simplifier import RULES, RewriteRule, Simplifier, rewrite_node, simplify
from silly_solve.symbolic.solver import ConstantSolver, solve_for_consts
from silly_solve.symbolic.trace import SolveTraceBuilder

__all__ = [
    "ConstantSolver",
    "Simplifier",
    "SolveTraceBuilder",
    "ExpressionLoader",
    "RewriteRule",
    "RULES",
    "simplify",
    "rewrite_node",
    "solve_for_consts",
    "find_consts",
    "propagate_consts",
    "is_canonical_equality",
    "evaluate",
    "satisfies",
    "identifier",
    "num",
    "var",
    "app",
    "eq",
]
