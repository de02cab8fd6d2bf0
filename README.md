# ingot

Small numeric value types with no dependencies:

- **Bounds** (`ingot.bounds`): `DBound`, `FBound`, `IBound` and `UBound` hold a minimum
  and a maximum. You can test membership, overlap and intersection, and draw random values
  from them.
- **Sequences** (`ingot.seqs`): `DSeq` and `FSeq` run from `a` to `b`. They map values onto
  the range 0 to 1 and back.
- **Float 2D vectors** (`ingot.float_vec2`): `DVec2` and `FVec2` support arithmetic, a
  cached length and normalisation.
- **Integer 2D vectors** (`ingot.int_vec2`): `IVec2` and `UVec2` support arithmetic, bitwise
  AND and shifts.

The `D*` types use double precision. The `F*` types round every value to single precision.
The `I*` types hold signed 32-bit integers and the `U*` types hold unsigned 32-bit integers.
If a value is out of range, or of the wrong kind, the constructor raises `ValueError` or
`TypeError`.

## Installation

```
pip install ingot
```

## Bounds

```python
from ingot.bounds import DBound, IBound

b = DBound(5.0, 1.0)           # the two ends are put in order
b.min, b.max, b.middle         # 1.0, 5.0, 3.0
3.0 in b                       # True (same as b.has(3.0))
b.is_intersect(DBound(4.0, 9.0))  # True
b.intersect(DBound(4.0, 9.0))  # DBound(min=4.0, max=5.0)
b.intersect(DBound(7.0, 9.0))  # None
b.rand()                       # a random float between 1.0 and 5.0
IBound.convert(b)              # IBound(min=1, max=5)
```

- The middle of an integer bound is rounded down.
- `is_intersect` and `intersect` take only a bound of the same type.
- `convert` accepts any bound or sequence. When it converts to an integer type, floats are
  truncated and clamped to the type's range, and integers wrap around.

## Sequences

```python
from ingot.seqs import DSeq, FSeq

s = DSeq(10.0, 20.0)
s.a, s.b             # 10.0, 20.0
s.normalize(15.0)    # 0.5
s.unnormalize(0.25)  # 12.5
FSeq.convert(s)      # FSeq(a=10.0, b=20.0)
```

The two ends of a sequence must differ. If they are equal, `ValueError` is raised, and so
is converting a bound whose minimum equals its maximum. A sequence may run downwards
(`a > b`).

## Float vectors

```python
from ingot.float_vec2 import DVec2

v = DVec2(3.0, 4.0)
v.length         # 5.0 (computed on first use, then cached)
v.squared_len    # 25.0
v.normalized()   # DVec2(x=0.6, y=0.8)
v.with_x(1.0)    # DVec2(x=1.0, y=4.0)
v.flipped()      # DVec2(x=-3.0, y=-4.0)
str(v)           # "3,4"
DVec2(2.0)       # DVec2(x=2.0, y=2.0): one argument fills both components
```

- `x` and `y` can be assigned, and `set(other)` copies another vector of the same type.
- `+` and `-` take another vector of the same type.
- `*` and `/` take either a vector of the same type, which works per component, or a plain
  number.
- The in-place forms (`+=`, `-=`, `*=`, `/=`) change the vector itself.
- Dividing by zero raises `ZeroDivisionError`.
- Float vectors can be compared but cannot be hashed.

## Integer vectors

```python
from ingot.int_vec2 import IVec2, UVec2

w = IVec2(2, 2)
w + IVec2(1, 0)    # IVec2(x=3, y=2)
w * 3              # IVec2(x=6, y=6)
w // IVec2(2, 1)   # IVec2(x=1, y=2)
w & 3              # IVec2(x=2, y=2)
w << 1             # IVec2(x=4, y=4)
w.flipped()        # IVec2(x=-2, y=-2)
str(w)             # "2,2"
UVec2.convert(w)   # UVec2(x=2, y=2)
```

- `+` and `-` take another vector of the same type.
- `*`, `//`, `&`, `<<` and `>>` take either a vector of the same type or a plain integer.
- `//` truncates toward zero.
- The results are checked as follows:
  - Overflow in `+`, `-`, `*`, `//` or negation raises `OverflowError`.
  - A shift amount outside 0 to 31 also raises `OverflowError`.
  - `<<` wraps the result to 32 bits.
  - Division by zero raises `ZeroDivisionError`.
- Only `IVec2` has `x_flipped()`, `y_flipped()` and `flipped()`.
- Integer vectors are hashable.

## Comparing values

Values of the same type compare component by component: `(min, max)` for bounds, `(a, b)`
for sequences and `(x, y)` for vectors. Values of different types are never equal, and
ordering them raises `TypeError`.

## What is not included

The package has only 2D vectors. It has no 3D or 4D vectors, no matrices, and no
conversions between vectors and bounds. It is a library only and has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```