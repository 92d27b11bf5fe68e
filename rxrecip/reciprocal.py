"""Fixed-point reciprocals of 64-bit unsigned divisors."""

from __future__ import annotations

__all__ = ["reciprocal", "reciprocal_fast"]

_UINT64_BITS = 64
_UINT64_MASK = (1 << _UINT64_BITS) - 1


def _check_divisor(divisor: int) -> None:
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise TypeError(f"divisor must be an int, not {type(divisor).__name__}")
    if divisor == 0:
        raise ValueError("divisor must not be zero")
    if not 0 < divisor <= _UINT64_MASK:
        raise ValueError(f"divisor {divisor} is outside the unsigned 64-bit range")


def reciprocal(divisor: int) -> int:
    """Return 2**x // divisor for the highest x such that the result is below 2**64.

    The divisor must be a non-zero unsigned 64-bit value that is not a power
    of two. For a power of two the quotient does not fit in 64 bits and the
    result wraps around modulo 2**64.
    """
    _check_divisor(divisor)
    exponent = (_UINT64_BITS - 1) + divisor.bit_length()
    return ((1 << exponent) // divisor) & _UINT64_MASK


def reciprocal_fast(divisor: int) -> int:
    """Return the same value as :func:`reciprocal`."""
    return reciprocal(divisor)