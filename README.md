# rxrecip

Computes 64-bit fixed-point reciprocals. With a reciprocal, code can replace
a division by an unsigned integer constant with a multiplication.

For a divisor `d`, `reciprocal(d)` returns `2**x // d` for the largest
integer `x` such that the result stays below `2**64`.

## Installation

```
pip install rxrecip
```

## Usage

```python
from rxrecip.reciprocal import reciprocal, reciprocal_fast

reciprocal(3)           # 12297829382473034410
reciprocal(65537)       # 18446462603027742720
reciprocal(0xffffffff)  # 9223372039002259456

reciprocal_fast(13)     # same value as reciprocal(13)
```

`reciprocal_fast` returns the same value as `reciprocal`.

## Inputs and errors

Both functions take an `int` divisor in the unsigned 64-bit range
`1 .. 2**64 - 1`.

- A divisor that is not an `int` raises `TypeError`. This includes `bool`.
- A zero divisor raises `ValueError`.
- A negative divisor raises `ValueError`, and so does a divisor of `2**64` or more.
- A power of two is accepted, but it has no reciprocal below `2**64`. The
  result wraps modulo `2**64`, so these divisors return `0`.

## Running the tests

```
pip install -e ".[test]"
pytest
```