# hexview/abstractions/types/cell_types.py
"""Cell resolution type definitions."""

import math
from dataclasses import dataclass
from typing import Dict, Any, NamedTuple, Tuple

from shapely.geometry import Polygon, box

from ...exceptions import InvalidViewportBoundsError

# (quantized latitude, quantized longitude, resolution)
CacheKey = Tuple[float, float, int]


class GeoCoordinate(NamedTuple):
    """WGS84 point in degrees, latitude first (H3 ordering)."""
    latitude: float
    longitude: float
    
    def is_valid(self) -> bool:
        """Check latitude/longitude ranges. NaN is never valid."""
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


def format_cell_index(identifier: str, max_length: int = 20) -> str:
    """Truncate a cell identifier for display.
    
    >>> format_cell_index("8a2a100dac47fff", 10)
    '8a2a100dac...'
    """
    if len(identifier) <= max_length:
        return identifier
    return f"{identifier[:max_length]}..."


@dataclass(frozen=True)
class CellRecord:
    """Resolved H3 cell: identifier, resolution and boundary ring."""
    identifier: str
    resolution: int
    boundary: Tuple[GeoCoordinate, ...]
    
    def to_polygon(self) -> Polygon:
        """
        Boundary ring as a shapely polygon (lng, lat -> x, y).

        Rings crossing the antimeridian are unwrapped by shifting negative
        longitudes east by 360, so x may exceed 180 for those cells.
        """
        coords = [(point.longitude, point.latitude) for point in self.boundary]
        lngs = [lng for lng, _ in coords]
        if lngs and max(lngs) - min(lngs) > 180:
            coords = [(lng + 360 if lng < 0 else lng, lat) for lng, lat in coords]
        return Polygon(coords)
    
    def display_index(self, max_length: int = 20) -> str:
        return format_cell_index(self.identifier, max_length)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            'identifier': self.identifier,
            'resolution': self.resolution,
            'boundary': [[point.latitude, point.longitude] for point in self.boundary]
        }


@dataclass(frozen=True)
class ViewportBounds:
    """Rectangular geographic viewport.
    
    Inverted (``north < south``) and antimeridian-spanning (``east < west``)
    boxes are rejected rather than silently producing an empty result.
    Cell polygons are unwrapped across the antimeridian instead, see
    CellRecord.to_polygon.
    """
    north: float
    south: float
    east: float
    west: float
    
    def __post_init__(self):
        self.validate()
    
    def validate(self) -> None:
        """Raise InvalidViewportBoundsError unless the box is well formed."""
        values = (self.north, self.south, self.east, self.west)
        if not all(math.isfinite(v) for v in values):
            raise InvalidViewportBoundsError(f"Viewport bounds must be finite, got {self}")
        if self.north < self.south:
            raise InvalidViewportBoundsError(
                f"Inverted viewport: north ({self.north}) < south ({self.south})"
            )
        if self.east < self.west:
            raise InvalidViewportBoundsError(
                f"Viewport crosses the antimeridian or is inverted: "
                f"east ({self.east}) < west ({self.west})"
            )
    
    @classmethod
    def from_tuple(cls, bounds: Tuple[float, float, float, float]) -> 'ViewportBounds':
        """Build from (min_lng, min_lat, max_lng, max_lat)."""
        min_lng, min_lat, max_lng, max_lat = bounds
        return cls(north=max_lat, south=min_lat, east=max_lng, west=min_lng)
    
    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy) in lng/lat degrees."""
        return (self.west, self.south, self.east, self.north)
    
    def expanded(self, margin: float) -> 'ViewportBounds':
        """Grow the box by ``margin`` degrees on every side."""
        return ViewportBounds(
            north=self.north + margin,
            south=self.south - margin,
            east=self.east + margin,
            west=self.west - margin
        )
    
    def to_box(self) -> Polygon:
        return box(*self.bounds)
