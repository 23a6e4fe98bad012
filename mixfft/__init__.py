"""Twiddle tables, number theory helpers and butterfly kernels for mixed-radix FFTs."""

__version__ = "0.1.0"
__all__ = ["__version__"]