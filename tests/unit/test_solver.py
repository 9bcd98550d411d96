"""
tests/unit/test_solver.py
=========================
Tests for silly_solve/symbolic/solver.py — the constant-propagation
solve loop.

Tests cover:
    - SOLVED / STUCK terminal states
    - Iteration counts and per-iteration trace
    - Tagged identifiers and multi-operand equalities
    - Contradictions surfaced from later iterations
    - Known-constant overrides (with warning)
    - Input validation and optional iteration cap
"""

import logging
from fractions import Fraction

import pytest

from silly_solve.core.config import SillySolveConfig, SolverConfig
from silly_solve.core.exceptions import (
    ContradictoryEquation,
    InvalidExpression,
    IterationLimitExceeded,
)
from silly_solve.core.types import Identifier, IdentifierSyntax, SolveStatus
from silly_solve.symbolic.builder import ExpressionLoader
from silly_solve.symbolic.solver import ConstantSolver, solve_for_consts

E = ExpressionLoader.from_list
C = ExpressionLoader.constants_from_dict


# ═══════════════════════════════════════════════════════════════════
#  Fully solvable systems
# ═══════════════════════════════════════════════════════════════════


class TestSolved:
    def test_dependent_chain(self, dependent_system):
        remaining, consts = solve_for_consts(dependent_system)
        assert remaining == []
        assert consts == C({"x": 3, "y": 6, "z": 9})

    def test_dependent_chain_status_and_iterations(self, dependent_system):
        result = ConstantSolver().solve(dependent_system)
        assert result.solved
        assert result.status is SolveStatus.SOLVED
        assert result.trace.iterations == 4
        assert result.trace.status is SolveStatus.SOLVED

    def test_trace_records_extracted_constants(self, dependent_system):
        trace = ConstantSolver().solve(dependent_system).trace
        assert [step.extracted for step in trace.steps] == [
            {},
            C({"x": 3}),
            C({"y": 6}),
            C({"z": 9}),
        ]
        assert [step.iteration for step in trace.steps] == [1, 2, 3, 4]
        assert trace.steps[-1].equations_after == 0

    def test_tagged_multi_operand_equality(self):
        remaining, consts = solve_for_consts([E(["=", ":a", ":b", ":c", 10])])
        assert remaining == []
        assert consts == C({":a": 10, ":b": 10, ":c": 10})

    def test_rational_result(self):
        remaining, consts = solve_for_consts(
            ExpressionLoader.from_system([["=", "a", 10], ["=", "b", ["/", "a", 4]]])
        )
        assert remaining == []
        assert consts[Identifier("b")] == Fraction(5, 2)

    def test_empty_system(self):
        result = ConstantSolver().solve([])
        assert result.solved
        assert result.constants == {}
        assert result.trace.iterations == 1

    def test_tautologies_only(self):
        remaining, consts = solve_for_consts([E(["=", "x", "x"])])
        assert remaining == []
        assert consts == {}


# ═══════════════════════════════════════════════════════════════════
#  Stuck systems
# ═══════════════════════════════════════════════════════════════════


class TestStuck:
    def test_stuck_with_initial_constant(self, stuck_system):
        result = ConstantSolver().solve(stuck_system, C({"y": 1}))
        assert result.status is SolveStatus.STUCK
        assert not result.solved
        assert result.remaining == [E(["=", ["+", "p", "q"], ["r", "s"]])]
        assert result.constants == C({"y": 1, "x": 1})
        assert result.trace.iterations == 3

    def test_stuck_tuple_form(self, stuck_system):
        remaining, consts = solve_for_consts(stuck_system, C({"y": 1}))
        assert len(remaining) == 1
        assert consts == C({"x": 1, "y": 1})

    def test_unconstrained_variables(self):
        eqn = E(["=", "x", "y"])
        result = ConstantSolver().solve([eqn])
        assert result.status is SolveStatus.STUCK
        assert result.remaining == [eqn]
        assert result.constants == {}

    def test_non_equations_survive(self):
        remaining, _ = solve_for_consts([E(["r", "x"])], C({"x": 2}))
        assert remaining == [E(["r", 2])]

    def test_summary_mentions_status(self, stuck_system):
        summary = ConstantSolver().solve(stuck_system, C({"y": 1})).summary()
        assert "Status: stuck" in summary
        assert "Remaining equations: 1" in summary
        assert "Iterations: 3" in summary


# ═══════════════════════════════════════════════════════════════════
#  Identifiers
# ═══════════════════════════════════════════════════════════════════


class TestIdentifierSyntax:
    def test_plain_and_tagged_are_distinct(self):
        remaining, consts = solve_for_consts(
            ExpressionLoader.from_system([["=", "x", 1], ["=", ":x", 2]])
        )
        assert remaining == []
        assert consts[Identifier("x")] == 1
        assert consts[Identifier("x", IdentifierSyntax.TAGGED)] == 2

    def test_tagged_constant_does_not_bind_plain_variable(self):
        eqn = E(["=", "y", ["+", "x", 1]])
        result = ConstantSolver().solve([eqn], C({":x": 5}))
        assert result.status is SolveStatus.STUCK


# ═══════════════════════════════════════════════════════════════════
#  Known constants
# ═══════════════════════════════════════════════════════════════════


class TestKnownConstants:
    def test_initial_constants_are_not_mutated(self, dependent_system):
        initial = C({"w": 7})
        _, consts = solve_for_consts(dependent_system, initial)
        assert initial == C({"w": 7})
        assert consts[Identifier("w")] == 7

    def test_input_equations_not_mutated(self, dependent_system):
        snapshot = list(dependent_system)
        solve_for_consts(dependent_system)
        assert dependent_system == snapshot

    def test_extracted_overrides_known(self, caplog):
        with caplog.at_level(logging.WARNING, logger="silly_solve.symbolic.solver"):
            remaining, consts = solve_for_consts([E(["=", 1, "x"])], C({"x": 5}))
        assert remaining == []
        assert consts == C({"x": 1})
        assert any("overwritten" in r.getMessage() for r in caplog.records)

    def test_same_value_is_not_reported(self, caplog):
        with caplog.at_level(logging.WARNING, logger="silly_solve.symbolic.solver"):
            solve_for_consts([E(["=", 1, "x"])], C({"x": 1}))
        assert not caplog.records


# ═══════════════════════════════════════════════════════════════════
#  Failures
# ═══════════════════════════════════════════════════════════════════


class TestFailures:
    def test_contradiction_across_equations(self):
        with pytest.raises(ContradictoryEquation):
            solve_for_consts(ExpressionLoader.from_system([["=", 1, "x"], ["=", 2, "x"]]))

    def test_contradiction_against_known_constant(self):
        with pytest.raises(ContradictoryEquation):
            solve_for_consts([E(["=", "y", ["+", "x", 1]]), E(["=", "y", 5])], C({"x": 1}))

    def test_raw_data_rejected(self):
        with pytest.raises(InvalidExpression) as exc:
            ConstantSolver().solve([["=", "x", 1]])
        assert exc.value.context["errors"]

    def test_string_constant_keys_rejected(self):
        with pytest.raises(InvalidExpression):
            ConstantSolver().solve([E(["=", "x", 1])], {"x": 1})

    def test_validation_can_be_disabled(self):
        cfg = SillySolveConfig(solver=SolverConfig(validate_input=False))
        result = ConstantSolver(cfg).solve([E(["=", "x", 1])])
        assert result.solved

    def test_iteration_cap(self, dependent_system):
        cfg = SillySolveConfig(solver=SolverConfig(max_iterations=2))
        with pytest.raises(IterationLimitExceeded) as exc:
            ConstantSolver(cfg).solve(dependent_system)
        assert exc.value.limit == 2
        assert "remaining" in exc.value.context

    def test_cap_large_enough(self, dependent_system):
        result = ConstantSolver(SillySolveConfig.bounded(10)).solve(dependent_system)
        assert result.solved


# ═══════════════════════════════════════════════════════════════════
#  Config and logging
# ═══════════════════════════════════════════════════════════════════


class TestSolverOptions:
    def test_trace_can_be_disabled(self, dependent_system):
        cfg = SillySolveConfig(solver=SolverConfig(record_trace=False))
        result = ConstantSolver(cfg).solve(dependent_system)
        assert result.trace is None
        assert "Iterations: ?" in result.summary()

    def test_finish_is_logged(self, dependent_system, caplog):
        with caplog.at_level(logging.INFO, logger="silly_solve.symbolic.solver"):
            ConstantSolver().solve(dependent_system)
        assert any("Solve finished: solved" in r.getMessage() for r in caplog.records)
