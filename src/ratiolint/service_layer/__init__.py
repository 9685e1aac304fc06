"""Service layer: validation of proposed test names."""

from .validator import validate

__all__ = ["validate"]
