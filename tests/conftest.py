"""Shared fixtures for hexview tests."""

import shutil
import tempfile
from collections import Counter
from pathlib import Path

import pytest
import yaml

from hexview.config.config import Config
from hexview.exceptions import IndexingFailure
from hexview.grid_systems import H3IndexingPrimitive
from hexview.services import create_cell_service


class CountingPrimitive(H3IndexingPrimitive):
    """Real H3 primitive that counts calls and can reject chosen points."""
    
    def __init__(self, reject=None):
        self.calls = Counter()
        self.reject = reject
    
    def point_to_cell(self, latitude, longitude, resolution):
        self.calls['point_to_cell'] += 1
        if self.reject is not None and self.reject(latitude, longitude):
            raise IndexingFailure(f"Rejected ({latitude}, {longitude})")
        return super().point_to_cell(latitude, longitude, resolution)
    
    def cell_to_boundary(self, identifier):
        self.calls['cell_to_boundary'] += 1
        return super().cell_to_boundary(identifier)
    
    def cell_resolution(self, identifier):
        self.calls['cell_resolution'] += 1
        return super().cell_resolution(identifier)


@pytest.fixture
def test_data_dir():
    """Create a temporary directory for test data."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def test_config_file(test_data_dir):
    """Write a small config file overriding the cache and sampling bounds."""
    config_data = {
        'cells': {
            'cache': {'capacity': 5},
            'enumeration': {'max_steps': 20}
        },
        'logging': {'level': 'DEBUG'}
    }
    
    config_path = test_data_dir / "test_config.yml"
    with open(config_path, 'w') as f:
        yaml.dump(config_data, f)
    
    return config_path


@pytest.fixture
def test_config(test_config_file):
    """Config instance loaded from the test config file."""
    return Config(test_config_file)


@pytest.fixture
def counting_primitive():
    return CountingPrimitive()


@pytest.fixture
def make_primitive():
    """Factory for counting primitives with a rejection predicate."""
    return CountingPrimitive


@pytest.fixture
def cell_service(counting_primitive):
    """Service on default settings backed by the counting primitive."""
    return create_cell_service(Config(), primitive=counting_primitive)
