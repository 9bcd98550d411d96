"""
silly_solve/core/config.py
==========================
Global configuration for silly-solve.
All knobs in one place. Every loop terminates on its own; the caps
below exist only for callers that want bounded execution.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SimplifierConfig:
    max_passes: Optional[int] = None    # None → run to fixpoint


@dataclass
class SolverConfig:
    max_iterations: Optional[int] = None   # None → run until solved or stuck
    record_trace:   bool = True
    validate_input: bool = True


@dataclass
class SillySolveConfig:
    simplifier: SimplifierConfig = field(default_factory=SimplifierConfig)
    solver:     SolverConfig     = field(default_factory=SolverConfig)

    def __post_init__(self):
        for name, cap in (
            ("simplifier.max_passes", self.simplifier.max_passes),
            ("solver.max_iterations", self.solver.max_iterations),
        ):
            if cap is not None and cap < 1:
                raise ValueError(f"{name} must be >= 1 or None, got {cap}")

    @classmethod
    def bounded(cls, limit: int) -> "SillySolveConfig":
        """Preset that caps both the rewrite passes and the solve loop."""
        return cls(
            simplifier=SimplifierConfig(max_passes=limit),
            solver=SolverConfig(max_iterations=limit),
        )


# Singleton default config
DEFAULT_CONFIG = SillySolveConfig()
