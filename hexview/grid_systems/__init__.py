# hexview/grid_systems/__init__.py
"""H3 cell resolution components."""

from .indexing import H3IndexingPrimitive
from .resolution_mapper import (
    resolution_for_zoom,
    describe_resolution,
    grid_resolutions,
    MIN_RESOLUTION,
    MAX_RESOLUTION
)
from .point_resolver import PointCellResolver
from .viewport_enumerator import ViewportCellEnumerator, MultiResolutionEnumerator

__all__ = [
    'H3IndexingPrimitive',
    'resolution_for_zoom',
    'describe_resolution',
    'grid_resolutions',
    'MIN_RESOLUTION',
    'MAX_RESOLUTION',
    'PointCellResolver',
    'ViewportCellEnumerator',
    'MultiResolutionEnumerator'
]
