"""Testing utilities for torchpoly."""

from . import strategies

__all__ = [
    "strategies",
]
