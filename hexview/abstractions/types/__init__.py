# hexview/abstractions/types/__init__.py
"""Type definitions for the abstractions layer."""

from .cell_types import (
    GeoCoordinate, CellRecord, ViewportBounds, CacheKey, format_cell_index
)

__all__ = [
    'GeoCoordinate',
    'CellRecord',
    'ViewportBounds',
    'CacheKey',
    'format_cell_index'
]
