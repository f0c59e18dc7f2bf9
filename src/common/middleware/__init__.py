"""Common middleware for Radar."""

from .observability import StructlogContextMiddleware

__all__ = ["StructlogContextMiddleware"]
