"""API route modules."""

from . import seats

__all__ = ["seats"]
