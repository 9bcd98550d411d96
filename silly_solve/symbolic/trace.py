"""
silly_solve/symbolic/trace.py
=============================
SolveTrace builder — records what each solve-loop iteration did.
"""

from __future__ import annotations
from typing import List

from silly_solve.core.types import Constants, SolveStatus, SolveStep, SolveTrace


class SolveTraceBuilder:
    """Builds a SolveTrace incrementally."""

    def __init__(self):
        self._steps: List[SolveStep] = []

    def add_iteration(
        self,
        extracted: Constants,
        equations_before: int,
        equations_after: int,
    ) -> "SolveTraceBuilder":
        self._steps.append(
            SolveStep(
                iteration=len(self._steps) + 1,
                extracted=dict(extracted),
                equations_before=equations_before,
                equations_after=equations_after,
            )
        )
        return self

    @property
    def iterations(self) -> int:
        return len(self._steps)

    def build(self, status: SolveStatus) -> SolveTrace:
        return SolveTrace(steps=list(self._steps), status=status)
