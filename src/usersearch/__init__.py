"""Fuzzy multi-field user search."""

__version__ = "0.1.0"

__all__ = ["__version__"]
