"""Two-dimensional vectors of floating-point components."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from functools import total_ordering
from typing import Optional, Tuple

from .bounds import _require_number, _to_f32


def _shortest_digits(value: float, single: bool) -> str:
    """Return the shortest digit string that reads back as the same value."""
    if not single:
        return repr(value)
    for precision in range(1, 18):
        text = f"{value:.{precision}g}"
        if _to_f32(float(text)) == value:
            return text
    return repr(value)


def _format_component(value: float, single: bool) -> str:
    """Format a component in plain positional notation, without a trailing `.0`."""
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    text = format(Decimal(_shortest_digits(value, single)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@total_ordering
class FloatVec2:
    """A two-dimensional vector whose length is computed lazily and cached."""

    __slots__ = ("_x", "_y", "_len")

    _single = False

    def __init__(self, x=0.0, y=None):
        if y is None:
            y = x
        self._x = self._coerce(x, "x")
        self._y = self._coerce(y, "y")
        self._len: Optional[float] = None

    @classmethod
    def _coerce(cls, value, name: str) -> float:
        return cls._round(_require_number(value, name))

    @classmethod
    def _round(cls, value: float) -> float:
        return _to_f32(value) if cls._single else value

    def _check_same(self, other) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    def _operand(self, other) -> Optional[Tuple[float, float]]:
        """Return the components of a vector or a scalar operand, or None."""
        if type(other) is type(self):
            return other._x, other._y
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            value = self._coerce(other, "value")
            return value, value
        return None

    def _assign(self, x: float, y: float) -> None:
        x = self._coerce(x, "x")
        y = self._coerce(y, "y")
        if (x, y) != (self._x, self._y):
            self._x = x
            self._y = y
            self._len = None

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value) -> None:
        self._assign(value, self._y)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value) -> None:
        self._assign(self._x, value)

    def with_x(self, value):
        """Return a copy with `x` replaced."""
        return type(self)(self._coerce(value, "value"), self._y)

    def with_y(self, value):
        """Return a copy with `y` replaced."""
        return type(self)(self._x, self._coerce(value, "value"))

    def set(self, other) -> None:
        """Copy the components of another vector of the same kind."""
        self._check_same(other)
        self._assign(other._x, other._y)

    @property
    def squared_len(self) -> float:
        return self._round(self._x * self._x + self._y * self._y)

    @property
    def length(self) -> float:
        if self._len is None:
            self._len = self._round(math.hypot(self._x, self._y))
        return self._len

    def normalized(self):
        """Return a vector of length 1 pointing the same way."""
        return self / self.length

    def x_flipped(self):
        return type(self)(-self._x, self._y)

    def y_flipped(self):
        return type(self)(self._x, -self._y)

    def flipped(self):
        return type(self)(-self._x, -self._y)

    @classmethod
    def convert(cls, other):
        """Build this kind of vector from any vector with `x` and `y` components."""
        try:
            x, y = other.x, other.y
        except AttributeError:
            raise TypeError(
                f"cannot convert {type(other).__name__} to {cls.__name__}"
            ) from None
        return cls(float(x), float(y))

    def _sum(self, other, sign: int):
        if type(other) is not type(self):
            return None
        rnd = self._round
        return rnd(self._x + sign * other._x), rnd(self._y + sign * other._y)

    def _product(self, other):
        pair = self._operand(other)
        if pair is None:
            return None
        rnd = self._round
        return rnd(self._x * pair[0]), rnd(self._y * pair[1])

    def _quotient(self, other):
        pair = self._operand(other)
        if pair is None:
            return None
        ox, oy = pair
        if ox == 0 or oy == 0:
            raise ZeroDivisionError(
                "divisor must not be equal to 0.0 to avoid causing division by zero error!"
            )
        rnd = self._round
        return rnd(self._x / ox), rnd(self._y / oy)

    def _build(self, result):
        if result is None:
            return NotImplemented
        return type(self)(*result)

    def _update(self, result):
        if result is None:
            return NotImplemented
        self._assign(*result)
        return self

    def __add__(self, other):
        return self._build(self._sum(other, 1))

    def __iadd__(self, other):
        return self._update(self._sum(other, 1))

    def __sub__(self, other):
        return self._build(self._sum(other, -1))

    def __isub__(self, other):
        return self._update(self._sum(other, -1))

    def __mul__(self, other):
        return self._build(self._product(other))

    def __imul__(self, other):
        return self._update(self._product(other))

    def __truediv__(self, other):
        return self._build(self._quotient(other))

    def __itruediv__(self, other):
        return self._update(self._quotient(other))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._x, self._y) == (other._x, other._y)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._x, self._y) < (other._x, other._y)

    __hash__ = None

    def __str__(self):
        single = self._single
        return f"{_format_component(self._x, single)},{_format_component(self._y, single)}"

    def __repr__(self):
        return f"{type(self).__name__}(x={self._x!r}, y={self._y!r})"


class DVec2(FloatVec2):
    """A vector of double-precision floats."""

    __slots__ = ()


class FVec2(FloatVec2):
    """A vector of single-precision floats."""

    __slots__ = ()
    _single = True