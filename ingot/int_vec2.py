"""Two-dimensional vectors of 32-bit integer components."""

from __future__ import annotations

import numbers
from functools import total_ordering
from typing import Callable, Optional, Tuple

from .bounds import _I32_RANGE, _U32_RANGE, _cast_int, _require_int

_BITS = 32


def _trunc_div(a: int, b: int) -> int:
    """Divide two integers, rounding the quotient toward zero."""
    if b == 0:
        raise ZeroDivisionError(
            "divisor must not be equal to 0 to avoid causing division by zero error!"
        )
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _shift_amount(value: int, direction: str) -> int:
    if not 0 <= value < _BITS:
        raise OverflowError(f"attempt to shift {direction} with overflow")
    return value


@total_ordering
class IntVec2:
    """A two-dimensional vector of fixed-width integers."""

    __slots__ = ("_x", "_y")

    _range: Tuple[int, int] = _I32_RANGE

    def __init__(self, x=0, y=None):
        if y is None:
            y = x
        self._x = self._coerce(x, "x")
        self._y = self._coerce(y, "y")

    @classmethod
    def _coerce(cls, value, name: str) -> int:
        return _require_int(value, name, *cls._range)

    def _checked(self, value: int, operation: str) -> int:
        lo, hi = self._range
        if not lo <= value <= hi:
            raise OverflowError(f"attempt to {operation} with overflow")
        return value

    def _wrap(self, value: int) -> int:
        return _cast_int(value, *self._range)

    def _check_same(self, other) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    def _operand(self, other, scalar: bool) -> Optional[Tuple[int, int]]:
        """Return the components of a vector or, if allowed, a scalar operand."""
        if type(other) is type(self):
            return other._x, other._y
        if (
            scalar
            and isinstance(other, numbers.Integral)
            and not isinstance(other, bool)
        ):
            value = self._coerce(other, "value")
            return value, value
        return None

    def _combine(
        self, other, func: Callable[[int, int], int], scalar: bool = True
    ) -> Optional[Tuple[int, int]]:
        pair = self._operand(other, scalar)
        if pair is None:
            return None
        return func(self._x, pair[0]), func(self._y, pair[1])

    def _build(self, result):
        if result is None:
            return NotImplemented
        return type(self)(*result)

    def _update(self, result):
        if result is None:
            return NotImplemented
        self._x, self._y = result
        return self

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value) -> None:
        self._x = self._coerce(value, "value")

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value) -> None:
        self._y = self._coerce(value, "value")

    def with_x(self, value):
        """Return a copy with `x` replaced."""
        return type(self)(value, self._y)

    def with_y(self, value):
        """Return a copy with `y` replaced."""
        return type(self)(self._x, value)

    def set(self, other) -> None:
        """Copy the components of another vector of the same kind."""
        self._check_same(other)
        self._x, self._y = other._x, other._y

    @classmethod
    def convert(cls, other):
        """Build this kind of vector from any vector with `x` and `y` components."""
        try:
            x, y = other.x, other.y
        except AttributeError:
            raise TypeError(
                f"cannot convert {type(other).__name__} to {cls.__name__}"
            ) from None
        return cls(_cast_int(x, *cls._range), _cast_int(y, *cls._range))

    def _add(self, other):
        return self._combine(
            other, lambda a, b: self._checked(a + b, "add"), scalar=False
        )

    def _sub(self, other):
        return self._combine(
            other, lambda a, b: self._checked(a - b, "subtract"), scalar=False
        )

    def _mul(self, other):
        return self._combine(other, lambda a, b: self._checked(a * b, "multiply"))

    def _div(self, other):
        pair = self._operand(other, True)
        if pair is None:
            return None
        if 0 in pair:
            raise ZeroDivisionError(
                "divisor must not be equal to 0 to avoid causing division by zero error!"
            )
        return self._combine(
            other, lambda a, b: self._checked(_trunc_div(a, b), "divide")
        )

    def _and(self, other):
        return self._combine(other, lambda a, b: a & b)

    def _shl(self, other):
        return self._combine(
            other, lambda a, b: self._wrap(a << _shift_amount(b, "left"))
        )

    def _shr(self, other):
        return self._combine(other, lambda a, b: a >> _shift_amount(b, "right"))

    def __add__(self, other):
        return self._build(self._add(other))

    def __iadd__(self, other):
        return self._update(self._add(other))

    def __sub__(self, other):
        return self._build(self._sub(other))

    def __isub__(self, other):
        return self._update(self._sub(other))

    def __mul__(self, other):
        return self._build(self._mul(other))

    def __imul__(self, other):
        return self._update(self._mul(other))

    def __floordiv__(self, other):
        return self._build(self._div(other))

    def __ifloordiv__(self, other):
        return self._update(self._div(other))

    def __and__(self, other):
        return self._build(self._and(other))

    def __iand__(self, other):
        return self._update(self._and(other))

    def __lshift__(self, other):
        return self._build(self._shl(other))

    def __ilshift__(self, other):
        return self._update(self._shl(other))

    def __rshift__(self, other):
        return self._build(self._shr(other))

    def __irshift__(self, other):
        return self._update(self._shr(other))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._x, self._y) == (other._x, other._y)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._x, self._y) < (other._x, other._y)

    def __hash__(self):
        return hash((type(self).__name__, self._x, self._y))

    def __str__(self):
        return f"{self._x},{self._y}"

    def __repr__(self):
        return f"{type(self).__name__}(x={self._x!r}, y={self._y!r})"


class IVec2(IntVec2):
    """A vector of signed 32-bit integers."""

    __slots__ = ()
    _range = _I32_RANGE

    def _neg(self, value: int) -> int:
        return self._checked(-value, "negate")

    def x_flipped(self):
        return type(self)(self._neg(self._x), self._y)

    def y_flipped(self):
        return type(self)(self._x, self._neg(self._y))

    def flipped(self):
        return type(self)(self._neg(self._x), self._neg(self._y))


class UVec2(IntVec2):
    """A vector of unsigned 32-bit integers."""

    __slots__ = ()
    _range = _U32_RANGE