"""Tests for single point cell resolution."""

import logging
import math

import h3
import pytest

from hexview.abstractions.types import GeoCoordinate
from hexview.base import BoundedCellCache
from hexview.exceptions import IndexingFailure, InvalidCoordinateError
from hexview.grid_systems import PointCellResolver

NYC = GeoCoordinate(40.7128, -74.0060)


@pytest.fixture
def resolver(counting_primitive):
    return PointCellResolver(cache=BoundedCellCache(capacity=3), primitive=counting_primitive)


class TestPointCellResolver:
    """Test PointCellResolver."""
    
    def test_resolve_nyc(self, resolver):
        record = resolver.resolve(NYC, 10)
        
        assert record.resolution == 10
        assert len(record.boundary) in (6, 7)
        assert record.identifier == h3.latlng_to_cell(NYC.latitude, NYC.longitude, 10)
        
    def test_boundary_is_simple_ring(self, resolver):
        for resolution in (2, 5, 9, 15):
            record = resolver.resolve(NYC, resolution)
            assert len(record.boundary) in (5, 6, 7)
            
            polygon = record.to_polygon()
            assert polygon.is_valid
            assert polygon.contains(polygon.representative_point())
            
    def test_pentagon_has_five_vertices(self, resolver):
        pentagon = h3.get_pentagons(0)[0]
        lat, lng = h3.cell_to_latlng(pentagon)
        
        record = resolver.resolve(GeoCoordinate(lat, lng), 0)
        
        assert record.identifier == pentagon
        assert len(record.boundary) == 5
        
    def test_repeat_resolution_is_identical(self, resolver, counting_primitive):
        first = resolver.resolve(NYC, 10)
        second = resolver.resolve(NYC, 10)
        
        assert first == second
        assert counting_primitive.calls['point_to_cell'] == 1
        
    def test_quantized_coordinates_share_an_entry(self, resolver, counting_primitive):
        resolver.resolve(GeoCoordinate(40.7128000001, -74.0060000004), 10)
        resolver.resolve(NYC, 10)
        
        assert counting_primitive.calls['point_to_cell'] == 1
        assert resolver.cache.stats()['hits'] == 1
        
    def test_resolution_is_part_of_the_key(self, resolver, counting_primitive):
        coarse = resolver.resolve(NYC, 5)
        fine = resolver.resolve(NYC, 6)
        
        assert coarse.resolution == 5
        assert fine.resolution == 6
        assert counting_primitive.calls['point_to_cell'] == 2
        
    def test_eviction_forces_fresh_lookup(self, resolver, counting_primitive):
        """After capacity + 1 distinct keys the first one is recomputed."""
        points = [GeoCoordinate(40.0 + i / 10, -74.0) for i in range(4)]
        for point in points:
            resolver.resolve(point, 7)
        assert counting_primitive.calls['point_to_cell'] == 4
        
        resolver.resolve(points[-1], 7)
        assert counting_primitive.calls['point_to_cell'] == 4
        
        resolver.resolve(points[0], 7)
        assert counting_primitive.calls['point_to_cell'] == 5
        
    @pytest.mark.parametrize("lat,lng", [(91, 0), (-90.5, 0), (0, 181), (0, -180.1), (math.nan, 0)])
    def test_invalid_coordinates_never_reach_h3(self, resolver, counting_primitive, lat, lng):
        with pytest.raises(InvalidCoordinateError):
            resolver.resolve(GeoCoordinate(lat, lng), 7)
            
        assert sum(counting_primitive.calls.values()) == 0
        assert len(resolver.cache) == 0
        assert resolver.cache.stats()['misses'] == 0
        
    def test_indexing_failure_is_not_cached(self, resolver):
        with pytest.raises(IndexingFailure) as exc_info:
            resolver.resolve(NYC, 16)
            
        assert exc_info.value.original_exception is not None
        assert len(resolver.cache) == 0
        
    def test_rejected_point_propagates(self, make_primitive):
        resolver = PointCellResolver(primitive=make_primitive(reject=lambda lat, lng: True))
        
        with pytest.raises(IndexingFailure):
            resolver.resolve(NYC, 7)
        assert len(resolver.cache) == 0
        
    def test_reset_cache_keeps_results(self, resolver, counting_primitive):
        before = resolver.resolve(NYC, 10)
        resolver.reset_cache()
        after = resolver.resolve(NYC, 10)
        
        assert before == after
        assert counting_primitive.calls['point_to_cell'] == 2
        
    def test_accepts_plain_tuples(self, resolver):
        assert resolver.resolve((NYC.latitude, NYC.longitude), 8).resolution == 8
        
    def test_negative_precision_rejected(self):
        with pytest.raises(ValueError):
            PointCellResolver(precision=-1)
        
    def test_resolution_mismatch_is_recorded_and_cached(self, make_primitive, caplog):
        class CoarsePrimitive(make_primitive):
            def cell_resolution(self, identifier):
                super().cell_resolution(identifier)
                return 9
        
        primitive = CoarsePrimitive()
        resolver = PointCellResolver(primitive=primitive)
        
        with caplog.at_level(logging.WARNING, logger='hexview'):
            record = resolver.resolve(NYC, 10)
            
        assert record.resolution == 9
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].context == {'cell': record.identifier, 'resolution': 10}
        
        assert resolver.resolve(NYC, 10) is record
        assert primitive.calls['point_to_cell'] == 1
