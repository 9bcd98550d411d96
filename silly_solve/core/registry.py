"""
silly_solve/core/registry.py
============================
Operator registry: the fixed table of arithmetic operators the
simplifier knows how to evaluate and rewrite.

Built once at import time and exposed read-only. There is no
registration API; the operator set is closed (see types.Operator).

Pattern: OperatorRegistry.get("+")            → OperatorDescriptor
         OperatorRegistry.is_commutative("*") → True
         OperatorRegistry.inverse_of("-")     → "+"
"""
from __future__ import annotations

import operator as _op
from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Sequence

from silly_solve.core.exceptions import OperatorArityError
from silly_solve.core.types import Numeric, Operator


@dataclass(frozen=True)
class OperatorDescriptor:
    """Registry entry for one operator.

    ``inverse`` is set only for operators expressible as their inverse
    applied to negated/reciprocal trailing operands.
    """
    symbol:      str
    evaluator:   Callable[[Sequence[Numeric]], Numeric]
    commutative: bool = False
    inverse:     Optional[str] = None

    @property
    def invertible(self) -> bool:
        return self.inverse is not None

    def evaluate(self, operands: Sequence[Numeric]) -> Numeric:
        return _exact(self.evaluator(list(operands)))


# ─── EVALUATORS ───────────────────────────────────────────────────

def _exact(value: Numeric) -> Numeric:
    if isinstance(value, Fraction) and value.denominator == 1:
        return int(value)
    return value


def _rational(x: Numeric) -> Numeric:
    return Fraction(x) if isinstance(x, int) else x


def _require(symbol: str, operands: List[Numeric], minimum: int, maximum: Optional[int] = None) -> None:
    n = len(operands)
    if n < minimum or (maximum is not None and n > maximum):
        expected = f"{minimum}" if maximum == minimum else f"at least {minimum}"
        raise OperatorArityError(
            f"Operator '{symbol}' expects {expected} operand(s), got {n}",
            symbol=symbol,
            arity=n,
        )


def _add(operands: List[Numeric]) -> Numeric:
    return sum(operands, 0)


def _multiply(operands: List[Numeric]) -> Numeric:
    return reduce(_op.mul, operands, 1)


def _subtract(operands: List[Numeric]) -> Numeric:
    _require("-", operands, 1)
    if len(operands) == 1:
        return -operands[0]
    return reduce(_op.sub, operands)


def _divide(operands: List[Numeric]) -> Numeric:
    _require("/", operands, 1)
    if len(operands) == 1:
        return 1 / _rational(operands[0])
    head, *rest = operands
    return reduce(_op.truediv, rest, _rational(head))


def _power(operands: List[Numeric]) -> Numeric:
    _require("**", operands, 2, 2)
    base, exponent = operands
    if isinstance(exponent, int) and not isinstance(base, float):
        return Fraction(base) ** exponent
    return base ** exponent


def _max(operands: List[Numeric]) -> Numeric:
    _require("max", operands, 1)
    return max(operands)


def _min(operands: List[Numeric]) -> Numeric:
    _require("min", operands, 1)
    return min(operands)


_TABLE = MappingProxyType({
    Operator.ADD:      OperatorDescriptor("+", _add, commutative=True),
    Operator.MULTIPLY: OperatorDescriptor("*", _multiply, commutative=True),
    Operator.SUBTRACT: OperatorDescriptor("-", _subtract, inverse="+"),
    Operator.DIVIDE:   OperatorDescriptor("/", _divide, inverse="*"),
    Operator.POWER:    OperatorDescriptor("**", _power),
    Operator.MAX:      OperatorDescriptor("max", _max, commutative=True),
    Operator.MIN:      OperatorDescriptor("min", _min, commutative=True),
})


class OperatorRegistry:
    """Read-only view over the built-in operator table.

    Usage:
        desc = OperatorRegistry.get("/")
        desc.evaluate([1, 3])           # Fraction(1, 3)
        OperatorRegistry.inverse_of("/")  # "*"
    """
    _store: Mapping[Operator, OperatorDescriptor] = _TABLE

    @classmethod
    def lookup(cls, symbol: str) -> Optional[OperatorDescriptor]:
        op = Operator.lookup(symbol)
        if op is None:
            return None
        return cls._store.get(op)

    @classmethod
    def get(cls, symbol: str) -> OperatorDescriptor:
        desc = cls.lookup(symbol)
        if desc is None:
            raise KeyError(
                f"Operator '{symbol}' not registered. "
                f"Available: {cls.list_all()}"
            )
        return desc

    @classmethod
    def list_all(cls) -> List[str]:
        return [desc.symbol for desc in cls._store.values()]

    @classmethod
    def is_operator(cls, symbol: str) -> bool:
        return cls.lookup(symbol) is not None

    @classmethod
    def is_commutative(cls, symbol: str) -> bool:
        desc = cls.lookup(symbol)
        return desc is not None and desc.commutative

    @classmethod
    def is_invertible(cls, symbol: str) -> bool:
        desc = cls.lookup(symbol)
        return desc is not None and desc.invertible

    @classmethod
    def inverse_of(cls, symbol: str) -> Optional[str]:
        desc = cls.lookup(symbol)
        return desc.inverse if desc else None


def is_operator(symbol: str) -> bool:
    return OperatorRegistry.is_operator(symbol)


def is_commutative(symbol: str) -> bool:
    return OperatorRegistry.is_commutative(symbol)


def is_invertible(symbol: str) -> bool:
    return OperatorRegistry.is_invertible(symbol)


def inverse_of(symbol: str) -> Optional[str]:
    return OperatorRegistry.inverse_of(symbol)
