"""
silly_solve/symbolic/simplifier.py
==================================
Bottom-up, fixpoint term rewriting over expression trees.

Each pass rewrites children before their parent. At every node the
first matching rule below is applied (once per pass):

    1. Unary collapse          (+ x) → x, likewise * max min
    2. Neutral element         (+ 0 x) → x, (* 1 x) → x
    3. Tautology removal       (= x x ...) → None
    4. Constant evaluation     (op 1 2 3) → n
    5. Commutative folding     (+ 1 x 2 y) → (+ 3 x y)
    6. Invertible decomposition (- x y z) → (+ x (- y) (- z))
    7. Equality normalization  (= x 10) → (= 10 x)

Passes repeat over the whole tree until one of them changes nothing.
Rules 1-2 shrink the tree and rules 4-7 only ever move a node towards
a canonical shape none of them rewrites again, so the loop terminates.

Unary invertible nodes such as (- x) are never decomposed, so the sign
of a negated operand survives, e.g. (- 0 x) → (+ 0 (- x)) → (- x).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from silly_solve.core.config import SimplifierConfig
from silly_solve.core.exceptions import ContradictoryEquation, IterationLimitExceeded
from silly_solve.core.registry import OperatorRegistry
from silly_solve.core.types import Application, Expression, Number, Operator, is_equation

logger = logging.getLogger(__name__)


class RewriteRule(Enum):
    UNARY_COLLAPSE           = "unary-collapse"
    NEUTRAL_ELEMENT          = "neutral-element"
    TAUTOLOGY                = "tautology"
    CONSTANT_EVALUATION      = "constant-evaluation"
    COMMUTATIVE_FOLDING      = "commutative-folding"
    INVERTIBLE_DECOMPOSITION = "invertible-decomposition"
    EQUALITY_NORMALIZATION   = "equality-normalization"


_UNARY_COLLAPSIBLE = frozenset({
    Operator.ADD.value, Operator.MULTIPLY.value, Operator.MAX.value, Operator.MIN.value,
})

_NEUTRAL_ELEMENTS = {
    Operator.ADD.value:      0,
    Operator.MULTIPLY.value: 1,
}


def _partition(args) -> Tuple[List[Number], List[Expression]]:
    """Stable split into (numeric literals, everything else)."""
    numbers: List[Number] = []
    others: List[Expression] = []
    for arg in args:
        (numbers if isinstance(arg, Number) else others).append(arg)
    return numbers, others


# ─────────────────────────────────────────────
#  RULES  (guard, rewrite) in priority order
# ─────────────────────────────────────────────

def _is_unary_collapsible(node: Application) -> bool:
    return node.operator in _UNARY_COLLAPSIBLE and len(node.args) == 1


def _unary_collapse(node: Application) -> Optional[Expression]:
    return node.args[0]


def _has_leading_neutral(node: Application) -> bool:
    if node.operator not in _NEUTRAL_ELEMENTS or len(node.args) != 2:
        return False
    head = node.args[0]
    return isinstance(head, Number) and head.value == _NEUTRAL_ELEMENTS[node.operator]


def _drop_neutral(node: Application) -> Optional[Expression]:
    return node.args[1]


def _is_tautology(node: Application) -> bool:
    if not is_equation(node):
        return False
    return all(arg == node.args[0] for arg in node.args[1:])


def _remove(node: Application) -> Optional[Expression]:
    return None


def _is_all_constant(node: Application) -> bool:
    return OperatorRegistry.is_operator(node.operator) and all(
        isinstance(arg, Number) for arg in node.args
    )


def _evaluate(node: Application) -> Optional[Expression]:
    desc = OperatorRegistry.get(node.operator)
    return Number(desc.evaluate([arg.value for arg in node.args]))


def _is_mixed_commutative(node: Application) -> bool:
    if not OperatorRegistry.is_commutative(node.operator):
        return False
    has_number = any(isinstance(arg, Number) for arg in node.args)
    has_other = any(not isinstance(arg, Number) for arg in node.args)
    return has_number and has_other


def _fold_commutative(node: Application) -> Optional[Expression]:
    numbers, others = _partition(node.args)
    if len(numbers) == 1 and node.args[0] is numbers[0]:
        return node  # already (op c ...)
    folded = OperatorRegistry.get(node.operator).evaluate([n.value for n in numbers])
    return node.with_args([Number(folded), *others])


def _is_decomposable(node: Application) -> bool:
    return OperatorRegistry.is_invertible(node.operator) and len(node.args) >= 2


def _decompose(node: Application) -> Optional[Expression]:
    head, *tail = node.args
    inverse = OperatorRegistry.inverse_of(node.operator)
    return Application(inverse, (head, *(Application(node.operator, (y,)) for y in tail)))


def _has_misplaced_constant(node: Application) -> bool:
    if not is_equation(node):
        return False
    positions = [i for i, arg in enumerate(node.args) if isinstance(arg, Number)]
    return bool(positions) and positions != [0]


def _normalize_equality(node: Application) -> Optional[Expression]:
    numbers, others = _partition(node.args)
    head = numbers[0]
    distinct: List[object] = []
    for n in numbers:
        if all(n.value != seen for seen in distinct):
            distinct.append(n.value)
    if len(distinct) > 1:
        raise ContradictoryEquation(
            f"Contradictory equation {node}: constants {', '.join(map(str, distinct))} "
            "cannot all be equal",
            equation=node,
            constants=distinct,
        )
    return node.with_args([head, *others])


Rule = Tuple[RewriteRule, Callable[[Application], bool], Callable[[Application], Optional[Expression]]]

RULES: Tuple[Rule, ...] = (
    (RewriteRule.UNARY_COLLAPSE,           _is_unary_collapsible,   _unary_collapse),
    (RewriteRule.NEUTRAL_ELEMENT,          _has_leading_neutral,    _drop_neutral),
    (RewriteRule.TAUTOLOGY,                _is_tautology,           _remove),
    (RewriteRule.CONSTANT_EVALUATION,      _is_all_constant,        _evaluate),
    (RewriteRule.COMMUTATIVE_FOLDING,      _is_mixed_commutative,   _fold_commutative),
    (RewriteRule.INVERTIBLE_DECOMPOSITION, _is_decomposable,        _decompose),
    (RewriteRule.EQUALITY_NORMALIZATION,   _has_misplaced_constant, _normalize_equality),
)


def rewrite_node(node: Expression) -> Optional[Expression]:
    """Apply the first matching rule to a single node (children untouched).

    Leaves and nodes no rule matches are returned as-is.
    """
    if not isinstance(node, Application):
        return node
    for rule, matches, rewrite in RULES:
        if matches(node):
            result = rewrite(node)
            if result is not node:
                logger.debug("%s: %s → %s", rule.value, node, result)
            return result
    return node


def _bottom_up(expr: Expression) -> Optional[Expression]:
    """One full pass: rewrite every child, then the node itself."""
    if not isinstance(expr, Application):
        return expr
    args: List[Expression] = []
    changed = False
    for arg in expr.args:
        new = _bottom_up(arg)
        if new is not arg:
            changed = True
        if new is not None:
            args.append(new)
    node = expr.with_args(args) if changed else expr
    return rewrite_node(node)


class Simplifier:
    """Rewrites one expression tree to its fixpoint under RULES.

    Usage:
        Simplifier().simplify(expr)
        Simplifier(SimplifierConfig(max_passes=100)).simplify(expr)
    """

    def __init__(self, config: Optional[SimplifierConfig] = None):
        self.config = config or SimplifierConfig()

    def simplify(self, expr: Expression) -> Optional[Expression]:
        """Return the fixpoint of ``expr``; None if it was a tautology.

        Raises:
            ContradictoryEquation: an equality holds distinct constants.
            IterationLimitExceeded: only when config.max_passes is set.
        """
        current: Optional[Expression] = expr
        passes = 0
        while current is not None:
            new = _bottom_up(current)
            passes += 1
            if new == current:
                break
            current = new
            limit = self.config.max_passes
            if current is not None and limit is not None and passes >= limit:
                raise IterationLimitExceeded(
                    f"Simplification of {expr} did not settle within {limit} passes",
                    limit=limit,
                    context={"expression": str(expr), "last": str(current)},
                )
        logger.debug("Simplified %s → %s in %d pass(es)", expr, current, passes)
        return current


_DEFAULT_SIMPLIFIER = Simplifier()


def simplify(expr: Expression) -> Optional[Expression]:
    """Rewrite ``expr`` to its fixpoint. Returns None for a removed tautology."""
    return _DEFAULT_SIMPLIFIER.simplify(expr)
