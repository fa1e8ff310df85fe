"""Rule helpers: move validation and outcome checks."""

from . import referee

__all__ = ["referee"]
