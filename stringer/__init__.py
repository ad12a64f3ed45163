"""Discover GitHub composite actions and store their descriptions as JSON."""

__version__ = "0.1.0"
__all__ = ["__version__"]