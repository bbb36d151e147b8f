"""Foundation layer - pure types with no hexview dependencies."""

from .types import GeoCoordinate, CellRecord, ViewportBounds, CacheKey

__all__ = [
    'GeoCoordinate',
    'CellRecord',
    'ViewportBounds',
    'CacheKey'
]
