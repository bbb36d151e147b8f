"""Base building blocks shared by the resolvers."""

from .cell_cache import BoundedCellCache

__all__ = ['BoundedCellCache']
