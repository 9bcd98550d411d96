"""
silly_solve/symbolic/solver.py
==============================
Fixpoint solve loop: extract constants, substitute them, re-simplify,
and repeat until every equation is gone or an iteration changes nothing.

States:
    RUNNING → SOLVED   no equations remain
    RUNNING → STUCK    neither equations nor constants changed

STUCK is a normal outcome, not an error: the remaining equations are
what this solver could not resolve and should be handed to a more
capable one (or to the user).

Each non-stuck iteration removes an equation or learns a constant,
both finite, so the loop terminates without an iteration bound.
"""
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from silly_solve.core.config import SillySolveConfig
from silly_solve.core.exceptions import IterationLimitExceeded
from silly_solve.core.types import (
    Constants,
    Expression,
    Identifier,
    Numeric,
    SolveResult,
    SolveStatus,
)
from silly_solve.core.validators import ensure_valid_equations
from silly_solve.symbolic.constants import find_consts, propagate_consts
from silly_solve.symbolic.simplifier import Simplifier
from silly_solve.symbolic.trace import SolveTraceBuilder

logger = logging.getLogger(__name__)


class ConstantSolver:
    """Solves monotonic equation systems by constant propagation.

    Usage:
        solver = ConstantSolver()
        result = solver.solve(equations, {Identifier("y"): 1})
        if not result.solved:
            hand_off(result.remaining)
    """

    def __init__(self, config: Optional[SillySolveConfig] = None):
        self.config = config or SillySolveConfig()
        self._simplifier = Simplifier(self.config.simplifier)

    def solve(
        self,
        equations: Sequence[Expression],
        consts: Optional[Mapping[Identifier, Numeric]] = None,
    ) -> SolveResult:
        """Run the solve loop to a terminal state.

        Args:
            equations: Equation trees. Never mutated.
            consts:    Known constants to seed the loop with. Copied.

        Raises:
            InvalidExpression:      malformed input (when validate_input is on).
            ContradictoryEquation:  the system has no solution.
            IterationLimitExceeded: only when a cap is configured.
        """
        cfg = self.config.solver
        eqns: List[Expression] = list(equations)
        known: Constants = dict(consts or {})
        if cfg.validate_input:
            ensure_valid_equations(eqns, known)

        trace = SolveTraceBuilder()
        status = SolveStatus.RUNNING
        iteration = 0

        while status is SolveStatus.RUNNING:
            iteration += 1
            extracted = find_consts(eqns)
            new_known = self._merge(known, extracted)
            substituted = propagate_consts(eqns, new_known)
            new_eqns = [
                simplified
                for simplified in (self._simplifier.simplify(e) for e in substituted)
                if simplified is not None
            ]
            logger.debug(
                "Iteration %d: %d → %d equation(s), %d constant(s)",
                iteration, len(eqns), len(new_eqns), len(new_known),
            )
            if cfg.record_trace:
                trace.add_iteration(extracted, len(eqns), len(new_eqns))

            if not new_eqns:
                status = SolveStatus.SOLVED
            elif new_eqns == eqns and new_known == known:
                status = SolveStatus.STUCK
            elif cfg.max_iterations is not None and iteration >= cfg.max_iterations:
                raise IterationLimitExceeded(
                    f"Solve loop still running after {iteration} iterations",
                    limit=cfg.max_iterations,
                    context={
                        "remaining": [str(e) for e in new_eqns],
                        "constants": {str(k): v for k, v in new_known.items()},
                    },
                )
            eqns, known = new_eqns, new_known

        logger.info(
            "Solve finished: %s after %d iteration(s), %d constant(s), %d equation(s) left",
            status.value, iteration, len(known), len(eqns),
        )
        return SolveResult(
            remaining=eqns,
            constants=known,
            status=status,
            trace=trace.build(status) if cfg.record_trace else None,
        )

    @staticmethod
    def _merge(known: Constants, extracted: Constants) -> Constants:
        """Extracted values override known ones on key collision."""
        for key, value in extracted.items():
            if key in known and known[key] != value:
                logger.warning(
                    "Constant %s overwritten: %s → %s", key, known[key], value,
                )
        return {**known, **extracted}


_DEFAULT_SOLVER = ConstantSolver()


def solve_for_consts(
    equations: Sequence[Expression],
    consts: Optional[Mapping[Identifier, Numeric]] = None,
) -> Tuple[List[Expression], Constants]:
    """Solve ``equations`` as far as constant propagation allows.

    Returns (remaining equations, constants). Remaining is empty when the
    system was fully solved.
    """
    return _DEFAULT_SOLVER.solve(equations, consts).as_tuple()
