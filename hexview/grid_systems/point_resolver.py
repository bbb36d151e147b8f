# hexview/grid_systems/point_resolver.py
"""Resolve single coordinates to H3 cell records through a bounded cache."""

from typing import Optional

from ..abstractions.types import CacheKey, CellRecord, GeoCoordinate
from ..base import BoundedCellCache
from ..exceptions import InvalidCoordinateError
from ..infrastructure.logging import get_logger
from .indexing import H3IndexingPrimitive

logger = get_logger(__name__)


class PointCellResolver:
    """
    Coordinate + resolution -> CellRecord, memoised in a BoundedCellCache.
    
    Coordinates are quantized to ``precision`` decimal places for the cache
    key only; cache misses are resolved from the exact input coordinate.
    The first coordinate resolved in a quantum therefore decides the record
    served for the whole quantum until it is evicted.
    """
    
    def __init__(self,
                 cache: Optional[BoundedCellCache] = None,
                 primitive=None,
                 precision: int = 6):
        """
        Initialize resolver.
        
        Args:
            cache: Cache owned by this resolver (a new 100-entry cache if None)
            primitive: Indexing primitive (H3IndexingPrimitive if None)
            precision: Decimal places used to quantize cache keys
        """
        if precision < 0:
            raise ValueError(f"Precision must be non-negative, got: {precision}")
        self.cache = cache if cache is not None else BoundedCellCache()
        self.primitive = primitive or H3IndexingPrimitive()
        self.precision = precision
    
    def cache_key(self, coord: GeoCoordinate, resolution: int) -> CacheKey:
        return (
            round(coord.latitude, self.precision),
            round(coord.longitude, self.precision),
            resolution
        )
    
    def resolve(self, coord: GeoCoordinate, resolution: int) -> CellRecord:
        """
        Resolve the cell containing ``coord`` at ``resolution``.
        
        Raises:
            InvalidCoordinateError: Latitude/longitude out of range (checked
                before the cache or H3 are consulted)
            IndexingFailure: H3 rejected the input; nothing is cached
        """
        if not isinstance(coord, GeoCoordinate):
            coord = GeoCoordinate(*coord)
        if not coord.is_valid():
            raise InvalidCoordinateError(
                f"Invalid coordinate: latitude {coord.latitude} must be within [-90, 90] "
                f"and longitude {coord.longitude} within [-180, 180]"
            )
        
        key = self.cache_key(coord, resolution)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        
        identifier = self.primitive.point_to_cell(coord.latitude, coord.longitude, resolution)
        boundary = self.primitive.cell_to_boundary(identifier)
        actual_resolution = self.primitive.cell_resolution(identifier)
        
        if actual_resolution != resolution:
            logger.warning(
                f"Cell {identifier} reports resolution {actual_resolution}, requested {resolution}",
                extra={'context': {'cell': identifier, 'resolution': resolution}}
            )
        
        record = CellRecord(
            identifier=identifier,
            resolution=actual_resolution,
            boundary=tuple(boundary)
        )
        self.cache.put(key, record)
        
        logger.debug(
            f"Cache miss for {key}, resolved {identifier}",
            extra={'context': {'cell': identifier, 'resolution': actual_resolution}}
        )
        return record
    
    def reset_cache(self) -> None:
        """Clear the resolver's cache. Results are unchanged, only their cost."""
        self.cache.clear()
