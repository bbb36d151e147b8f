# hexview/grid_systems/indexing.py
"""Adapter over the H3 library: the only module that calls ``h3`` directly."""

import logging
from typing import Tuple

import h3  # type: ignore

from ..abstractions.types import GeoCoordinate
from ..exceptions import IndexingFailure

logger = logging.getLogger(__name__)

# Errors h3 raises for out-of-domain input (bad lat/lng, resolution, cell)
H3_INPUT_ERRORS = (h3.H3BaseException, ValueError, TypeError)


class H3IndexingPrimitive:
    """
    Coordinate-to-cell and cell-to-geometry operations backed by ``h3`` (v4 API).
    
    Any object exposing ``point_to_cell``, ``cell_to_boundary`` and
    ``cell_resolution`` can stand in for this class.
    """
    
    def point_to_cell(self, latitude: float, longitude: float, resolution: int) -> str:
        try:
            return h3.latlng_to_cell(latitude, longitude, resolution)
        except H3_INPUT_ERRORS as e:
            raise IndexingFailure(
                f"H3 rejected point ({latitude}, {longitude}) at resolution {resolution}: {e}", e
            ) from e
    
    def cell_to_boundary(self, identifier: str) -> Tuple[GeoCoordinate, ...]:
        """Boundary ring as (lat, lng) vertices, not repeating the first vertex."""
        try:
            boundary = h3.cell_to_boundary(identifier)
        except H3_INPUT_ERRORS as e:
            raise IndexingFailure(f"H3 rejected cell {identifier!r}: {e}", e) from e
        return tuple(GeoCoordinate(float(lat), float(lng)) for lat, lng in boundary)
    
    def cell_resolution(self, identifier: str) -> int:
        try:
            return h3.get_resolution(identifier)
        except H3_INPUT_ERRORS as e:
            raise IndexingFailure(f"H3 rejected cell {identifier!r}: {e}", e) from e
