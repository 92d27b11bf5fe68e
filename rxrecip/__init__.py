"""Fixed-point 64-bit reciprocals of unsigned integer divisors (see rxrecip.reciprocal)."""

__version__ = "1.0.0"
__all__ = ["reciprocal"]