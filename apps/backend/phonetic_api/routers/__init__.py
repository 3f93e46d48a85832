"""Router package exports."""

from . import convert, health

__all__ = [
    "convert",
    "health",
]
