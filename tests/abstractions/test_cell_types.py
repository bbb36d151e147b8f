"""Tests for cell resolution types."""

import math

import pytest
from shapely.geometry import Polygon

from hexview.abstractions.types import (
    CellRecord, GeoCoordinate, ViewportBounds, format_cell_index
)
from hexview.exceptions import InvalidViewportBoundsError
from hexview.grid_systems import H3IndexingPrimitive


class TestGeoCoordinate:
    
    @pytest.mark.parametrize("lat,lng", [(0, 0), (90, 180), (-90, -180), (40.7128, -74.006)])
    def test_valid(self, lat, lng):
        assert GeoCoordinate(lat, lng).is_valid()
        
    @pytest.mark.parametrize("lat,lng", [
        (90.0001, 0), (-91, 0), (0, 180.5), (0, -181), (math.nan, 0), (0, math.inf)
    ])
    def test_invalid(self, lat, lng):
        assert not GeoCoordinate(lat, lng).is_valid()


class TestCellRecord:
    
    def test_polygon_uses_lng_lat_order(self):
        record = CellRecord(
            identifier='abc',
            resolution=1,
            boundary=(GeoCoordinate(0.0, 10.0), GeoCoordinate(1.0, 10.0), GeoCoordinate(1.0, 11.0))
        )
        polygon = record.to_polygon()
        
        assert isinstance(polygon, Polygon)
        assert polygon.bounds == (10.0, 0.0, 11.0, 1.0)
        
    def test_antimeridian_ring_is_unwrapped(self):
        record = CellRecord(
            identifier='abc',
            resolution=1,
            boundary=(
                GeoCoordinate(0.0, 179.0), GeoCoordinate(1.0, 179.5),
                GeoCoordinate(1.0, -179.5), GeoCoordinate(0.0, -179.0)
            )
        )
        polygon = record.to_polygon()
        
        assert polygon.is_valid
        assert polygon.bounds == (179.0, 0.0, 181.0, 1.0)
        
    def test_h3_antimeridian_cell_polygon(self):
        identifier = '817ebffffffffff'
        primitive = H3IndexingPrimitive()
        record = CellRecord(identifier, primitive.cell_resolution(identifier),
                            primitive.cell_to_boundary(identifier))
        polygon = record.to_polygon()
        
        min_x, _, max_x, _ = polygon.bounds
        assert max_x - min_x < 180
        assert polygon.is_valid

        
    def test_to_dict(self):
        record = CellRecord('abc', 3, (GeoCoordinate(1.0, 2.0),))
        assert record.to_dict() == {
            'identifier': 'abc',
            'resolution': 3,
            'boundary': [[1.0, 2.0]]
        }
        
    def test_records_are_immutable(self):
        record = CellRecord('abc', 3, ())
        with pytest.raises(AttributeError):
            record.resolution = 4


class TestFormatCellIndex:
    
    def test_truncates_long_index(self):
        assert format_cell_index("8a2a100dac47fff", 10) == "8a2a100dac..."
        
    def test_short_index_unchanged(self):
        assert format_cell_index("8a2a100dac47fff") == "8a2a100dac47fff"
        assert CellRecord("8a2a100dac47fff", 10, ()).display_index(4) == "8a2a..."


class TestViewportBounds:
    
    def test_inverted_latitudes_rejected(self):
        with pytest.raises(InvalidViewportBoundsError):
            ViewportBounds(north=10, south=20, east=5, west=0)
            
    def test_antimeridian_rejected(self):
        with pytest.raises(InvalidViewportBoundsError):
            ViewportBounds(north=10, south=0, east=-179, west=179)
            
    def test_non_finite_rejected(self):
        with pytest.raises(InvalidViewportBoundsError):
            ViewportBounds(north=math.nan, south=0, east=1, west=0)
            
    def test_degenerate_box_allowed(self):
        bounds = ViewportBounds(north=1, south=1, east=2, west=2)
        assert bounds.bounds == (2, 1, 2, 1)
        
    def test_from_tuple_and_expand(self):
        bounds = ViewportBounds.from_tuple((-74.01, 40.70, -74.00, 40.71))
        assert bounds.north == 40.71
        assert bounds.west == -74.01
        
        expanded = bounds.expanded(1.0)
        assert expanded.to_box().bounds == pytest.approx((-75.01, 39.70, -73.00, 41.71))
