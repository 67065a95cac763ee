"""Solvers for short competitive-programming problems on arrays, strings and integers."""

__version__ = "0.1.0"
__all__ = ["__version__"]