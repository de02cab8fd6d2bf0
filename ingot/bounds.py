"""Closed ranges between a minimum and a maximum value."""

from __future__ import annotations

import math
import numbers
import random
import struct
from functools import total_ordering
from typing import Optional, Tuple

_I32_RANGE = (-(2**31), 2**31 - 1)
_U32_RANGE = (0, 2**32 - 1)


def _to_f32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _require_number(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, not {type(value).__name__}")
    result = float(value)
    if math.isnan(result):
        raise ValueError(f"{name} must be a number!")
    return result


def _require_int(value, name: str, lo: int, hi: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    result = int(value)
    if not lo <= result <= hi:
        raise ValueError(f"{name} must lie between {lo} and {hi}")
    return result


def _cast_int(value, lo: int, hi: int) -> int:
    """Cast like a numeric `as` conversion: wrap integers, saturate floats."""
    if isinstance(value, numbers.Integral):
        return (int(value) - lo) % (hi - lo + 1) + lo
    number = float(value)
    if math.isnan(number):
        return 0
    if number >= hi:
        return hi
    if number <= lo:
        return lo
    return math.trunc(number)


def _endpoints(other) -> Tuple[object, object]:
    """Return the two values a bound can be built from."""
    from .seqs import Seq

    if isinstance(other, Bound):
        return other.min, other.max
    if isinstance(other, Seq):
        return other.a, other.b
    raise TypeError(f"cannot convert {type(other).__name__} to a bound")


@total_ordering
class Bound:
    """A boundary between a minimum and a maximum value."""

    __slots__ = ("_min", "_max")

    _integral = False
    _single = False
    _range: Optional[Tuple[int, int]] = None

    def __init__(self, a=0, b=0):
        a = self._coerce(a, "a")
        b = self._coerce(b, "b")
        self._min = min(a, b)
        self._max = max(a, b)

    @classmethod
    def _coerce(cls, value, name: str):
        if cls._integral:
            return _require_int(value, name, *cls._range)
        number = _require_number(value, name)
        return _to_f32(number) if cls._single else number

    @classmethod
    def _cast(cls, value):
        if cls._integral:
            return _cast_int(value, *cls._range)
        number = float(value)
        return _to_f32(number) if cls._single else number

    def _check_same(self, other) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def middle(self):
        if self._integral:
            return (self._min + self._max) >> 1
        total = self._min + self._max
        if self._single:
            total = _to_f32(total)
        return total * 0.5

    def is_intersect(self, other) -> bool:
        """Return True if both boundaries overlap."""
        self._check_same(other)
        return self._min <= other._max and self._max >= other._min

    def intersect(self, other):
        """Return the overlap of both boundaries, or None if there is none."""
        if not self.is_intersect(other):
            return None
        return type(self)(max(self._min, other._min), min(self._max, other._max))

    def has(self, value) -> bool:
        return self._min <= value <= self._max

    def __contains__(self, value) -> bool:
        return self.has(value)

    def rand(self):
        """Return a random value inside this boundary."""
        if self._integral:
            return random.randint(self._min, self._max)
        value = random.uniform(self._min, self._max)
        if self._single:
            value = _to_f32(value)
        return min(max(value, self._min), self._max)

    @classmethod
    def convert(cls, other):
        """Build this kind of bound from another bound or sequence."""
        a, b = _endpoints(other)
        return cls(cls._cast(a), cls._cast(b))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._min, self._max) == (other._min, other._max)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._min, self._max) < (other._min, other._max)

    def __hash__(self):
        return hash((type(self).__name__, self._min, self._max))

    def __repr__(self):
        return f"{type(self).__name__}(min={self._min!r}, max={self._max!r})"


class DBound(Bound):
    """A bound of double-precision floats."""

    __slots__ = ()


class FBound(Bound):
    """A bound of single-precision floats."""

    __slots__ = ()
    _single = True


class IBound(Bound):
    """A bound of signed 32-bit integers."""

    __slots__ = ()
    _integral = True
    _range = _I32_RANGE


class UBound(Bound):
    """A bound of unsigned 32-bit integers."""

    __slots__ = ()
    _integral = True
    _range = _U32_RANGE