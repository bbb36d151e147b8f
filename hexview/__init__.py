"""hexview - resolve map coordinates and viewports to H3 hexagonal cells."""

__version__ = "0.1.0"

from .abstractions.types import GeoCoordinate, CellRecord, ViewportBounds, format_cell_index
from .base import BoundedCellCache
from .exceptions import (
    CellResolutionError,
    InvalidCoordinateError,
    IndexingFailure,
    InvalidViewportBoundsError,
    CacheMisconfigurationError
)
from .grid_systems import (
    H3IndexingPrimitive,
    PointCellResolver,
    ViewportCellEnumerator,
    MultiResolutionEnumerator,
    resolution_for_zoom,
    describe_resolution,
    grid_resolutions
)
from .services import CellService, create_cell_service

__all__ = [
    'GeoCoordinate',
    'CellRecord',
    'ViewportBounds',
    'format_cell_index',
    'BoundedCellCache',
    'CellResolutionError',
    'InvalidCoordinateError',
    'IndexingFailure',
    'InvalidViewportBoundsError',
    'CacheMisconfigurationError',
    'H3IndexingPrimitive',
    'PointCellResolver',
    'ViewportCellEnumerator',
    'MultiResolutionEnumerator',
    'resolution_for_zoom',
    'describe_resolution',
    'grid_resolutions',
    'CellService',
    'create_cell_service'
]
