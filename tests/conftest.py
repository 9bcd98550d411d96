"""
tests/conftest.py
==================
Shared pytest fixtures for all silly-solve tests.
"""

import pytest

from silly_solve.core.types import Identifier, IdentifierSyntax
from silly_solve.symbolic.builder import ExpressionLoader


# ─── IDENTIFIERS ──────────────────────────────────────────────────


@pytest.fixture
def x():
    return Identifier("x")


@pytest.fixture
def tagged_x():
    return Identifier("x", IdentifierSyntax.TAGGED)


# ─── SYSTEMS ──────────────────────────────────────────────────────


@pytest.fixture
def dependent_system():
    """x = 3, y = 2x, z = x + y  →  {x: 3, y: 6, z: 9}"""
    return ExpressionLoader.from_system([
        ["=", "x", 3],
        ["=", "y", ["*", 2, "x"]],
        ["=", "z", ["+", "x", "y"]],
    ])


@pytest.fixture
def stuck_system():
    """One equation resolves once y is known; the other never does."""
    return ExpressionLoader.from_system([
        ["=", ["+", "p", "q"], ["r", "s"]],
        ["=", "x", "y"],
    ])


@pytest.fixture
def budget_system():
    """Spreadsheet-style cells, listed out of dependency order."""
    return ExpressionLoader.from_system([
        ["=", "margin", ["/", "profit", "revenue"]],
        ["=", "profit", ["-", "revenue", "cost"]],
        ["=", "cost", ["+", 500, ["*", "units", 10]]],
        ["=", "revenue", ["*", "units", "price"]],
        ["=", "units", 120],
        ["=", "price", 25],
    ])
