"""Route group exports."""

from . import distributors, health

__all__ = ["distributors", "health"]
