"""Directed sequences between two distinct values."""

from __future__ import annotations

from functools import total_ordering

from .bounds import Bound, _require_number, _to_f32


@total_ordering
class Seq:
    """A sequence running from `a` to `b`."""

    __slots__ = ("_a", "_b")

    _single = False

    def __init__(self, a, b):
        a = self._round(_require_number(a, "a"))
        b = self._round(_require_number(b, "b"))
        if a == b:
            raise ValueError("a must not be equal to b!")
        self._a = a
        self._b = b

    @classmethod
    def _round(cls, value: float) -> float:
        return _to_f32(value) if cls._single else value

    @classmethod
    def _cast(cls, value) -> float:
        return cls._round(float(value))

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    def normalize(self, value) -> float:
        """Map a value of this sequence onto the range 0 to 1."""
        value = self._round(_require_number(value, "value"))
        rnd = self._round
        return rnd(rnd(value - self._a) / rnd(self._b - self._a))

    def unnormalize(self, value) -> float:
        """Map a value in the range 0 to 1 onto this sequence."""
        value = self._round(_require_number(value, "value"))
        span = self._round(self._b - self._a)
        return self._round(value * span + self._a)

    @classmethod
    def convert(cls, other):
        """Build this kind of sequence from another sequence or a bound."""
        if isinstance(other, Seq):
            a, b = other.a, other.b
        elif isinstance(other, Bound):
            if other.min == other.max:
                name = type(other).__name__
                raise ValueError(f"{name} min must not be equal to {name} max!")
            a, b = other.min, other.max
        else:
            raise TypeError(f"cannot convert {type(other).__name__} to a sequence")
        return cls(cls._cast(a), cls._cast(b))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._a, self._b) == (other._a, other._b)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self._a, self._b) < (other._a, other._b)

    def __hash__(self):
        return hash((type(self).__name__, self._a, self._b))

    def __repr__(self):
        return f"{type(self).__name__}(a={self._a!r}, b={self._b!r})"


class DSeq(Seq):
    """A sequence of double-precision floats."""

    __slots__ = ()


class FSeq(Seq):
    """A sequence of single-precision floats."""

    __slots__ = ()
    _single = True