"""Timing and memory-estimate comparison of insertion, quick, merge and heap sort."""

__version__ = "0.1.0"

__all__ = ["__version__"]