# hexview/services/cell_service.py
"""Entry point used by map front-ends: cursor cells and viewport grids."""

from typing import Dict, Iterable, List, Optional, Any

from ..abstractions.types import CellRecord, GeoCoordinate, ViewportBounds
from ..base import BoundedCellCache
from ..grid_systems import (
    H3IndexingPrimitive,
    MultiResolutionEnumerator,
    PointCellResolver,
    ViewportCellEnumerator,
    grid_resolutions,
    resolution_for_zoom
)
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


class CellService:
    """
    Facade over the resolver and enumerators.
    
    Each service owns its own cache. Instances are not thread-safe: share
    one per thread of control, or serialize calls. Nothing here debounces
    input; throttle pan/zoom events before calling.
    """
    
    def __init__(self,
                 resolver: PointCellResolver,
                 enumerator: ViewportCellEnumerator,
                 max_grid_resolution: int = 8):
        self.resolver = resolver
        self.enumerator = enumerator
        self.multi_enumerator = MultiResolutionEnumerator(enumerator)
        self.max_grid_resolution = max_grid_resolution
    
    def resolution_for_zoom(self, zoom: int) -> int:
        return resolution_for_zoom(zoom)
    
    def resolve_cell(self, lat: float, lng: float, resolution: int) -> CellRecord:
        """Cell containing (lat, lng). Raises InvalidCoordinateError / IndexingFailure."""
        return self.resolver.resolve(GeoCoordinate(lat, lng), resolution)
    
    def enumerate_viewport_cells(self, bounds: ViewportBounds, resolution: int) -> List[CellRecord]:
        return self.enumerator.enumerate(bounds, resolution)
    
    def enumerate_multi_resolution(self,
                                   bounds: ViewportBounds,
                                   resolutions: Iterable[int]) -> Dict[int, List[CellRecord]]:
        return self.multi_enumerator.enumerate_many(bounds, resolutions)
    
    def reset_cache(self) -> None:
        """Clear the point cache (testing/debugging)."""
        self.resolver.reset_cache()
        logger.debug("Cell cache reset")
    
    def cache_stats(self) -> Dict[str, Any]:
        return self.resolver.cache.stats()
    
    def cell_at_cursor(self, lat: float, lng: float, zoom: int) -> CellRecord:
        """Cell under the cursor at the resolution matching ``zoom``."""
        return self.resolve_cell(lat, lng, resolution_for_zoom(zoom))
    
    def viewport_grid(self,
                      bounds: ViewportBounds,
                      zoom: int,
                      multi_resolution: bool = False) -> Dict[int, List[CellRecord]]:
        """
        Grid cells for the visible map.
        
        The zoom-derived resolution is clamped to ``max_grid_resolution``; in
        multi-resolution mode the coarser and finer neighbours are added.
        The first key of the result is always the pivot resolution.
        """
        resolutions = grid_resolutions(
            resolution_for_zoom(zoom),
            multi_resolution=multi_resolution,
            max_resolution=self.max_grid_resolution
        )
        return self.multi_enumerator.enumerate_many(bounds, resolutions)


def create_cell_service(config=None, primitive=None) -> CellService:
    """
    Build a CellService from configuration.
    
    Args:
        config: Config instance (defaults to the package config)
        primitive: Indexing primitive shared by resolver and enumerator
        
    Returns:
        CellService with a fresh cache
    """
    if config is None:
        from ..config import config
    
    primitive = primitive or H3IndexingPrimitive()
    cache = BoundedCellCache(capacity=config.get('cells.cache.capacity', 100))
    resolver = PointCellResolver(
        cache=cache,
        primitive=primitive,
        precision=config.get('cells.cache.coordinate_precision', 6)
    )
    enumerator = ViewportCellEnumerator(
        primitive=primitive,
        min_steps=config.get('cells.enumeration.min_steps', 10),
        max_steps=config.get('cells.enumeration.max_steps', 50)
    )
    
    logger.debug(f"Created cell service (cache capacity {cache.capacity})")
    return CellService(
        resolver=resolver,
        enumerator=enumerator,
        max_grid_resolution=config.get('cells.enumeration.max_grid_resolution', 8)
    )
