# hexview/grid_systems/viewport_enumerator.py
"""Enumerate the H3 cells covering a viewport by regular sampling."""

import logging
import time
from typing import Dict, Iterable, List, Set

import numpy as np

from ..abstractions.types import CellRecord, ViewportBounds
from ..exceptions import IndexingFailure
from ..infrastructure.logging import get_logger, log_operation
from .indexing import H3IndexingPrimitive

logger = get_logger(__name__)


class ViewportCellEnumerator:
    """
    Approximate viewport coverage: sample a regular lat/lng lattice over the
    box and collect the distinct cells hit.
    
    Cells that overlap the box without containing any sample point can be
    missed. Sampling goes straight to the primitive, not through the point
    cache, and samples the primitive rejects are skipped.
    """
    
    def __init__(self, primitive=None, min_steps: int = 10, max_steps: int = 50):
        """
        Initialize enumerator.
        
        Args:
            primitive: Indexing primitive (H3IndexingPrimitive if None)
            min_steps: Lower bound on sampling intervals per axis
            max_steps: Upper bound on sampling intervals per axis
        """
        if min_steps <= 0 or max_steps < min_steps:
            raise ValueError(
                f"Step bounds must satisfy 0 < min_steps <= max_steps, "
                f"got: {min_steps}, {max_steps}"
            )
        self.primitive = primitive or H3IndexingPrimitive()
        self.min_steps = min_steps
        self.max_steps = max_steps
    
    def step_count(self, resolution: int) -> int:
        """Sampling intervals per axis: clamp(2 ** resolution, min_steps, max_steps)."""
        if resolution <= 0:
            return self.min_steps
        # Avoid huge integers for absurd resolutions
        return max(self.min_steps, min(self.max_steps, 2 ** min(resolution, 32)))
    
    def sample_axes(self, bounds: ViewportBounds, resolution: int):
        """Latitude and longitude sample values, both edges included."""
        steps = self.step_count(resolution)
        # unique() collapses a zero-extent axis to a single sample
        lats = np.unique(np.linspace(bounds.south, bounds.north, steps + 1))
        lngs = np.unique(np.linspace(bounds.west, bounds.east, steps + 1))
        return lats, lngs
    
    def enumerate(self, bounds: ViewportBounds, resolution: int) -> List[CellRecord]:
        """
        Distinct cells hit by the sampling lattice, in first-hit order.
        
        Args:
            bounds: Viewport to cover
            resolution: H3 resolution (callers usually clamp to <= 8)
            
        Returns:
            CellRecords unique by identifier
            
        Raises:
            InvalidViewportBoundsError: Inverted or antimeridian-spanning bounds
        """
        bounds.validate()
        start_time = time.perf_counter()
        
        lats, lngs = self.sample_axes(bounds, resolution)
        cells: List[CellRecord] = []
        seen: Set[str] = set()
        skipped = 0
        
        for lat in lats:
            for lng in lngs:
                try:
                    identifier = self.primitive.point_to_cell(float(lat), float(lng), resolution)
                    if identifier in seen:
                        continue
                    
                    record = CellRecord(
                        identifier=identifier,
                        resolution=self.primitive.cell_resolution(identifier),
                        boundary=tuple(self.primitive.cell_to_boundary(identifier))
                    )
                except IndexingFailure as e:
                    skipped += 1
                    logger.debug(f"Skipping sample ({lat}, {lng}): {e}")
                    continue
                
                seen.add(identifier)
                cells.append(record)
        
        logger.log_performance(
            'enumerate_viewport',
            time.perf_counter() - start_time,
            level=logging.DEBUG,
            items_processed=len(lats) * len(lngs),
            cells=len(cells),
            skipped=skipped,
            resolution=resolution
        )
        
        return cells


class MultiResolutionEnumerator:
    """Run a ViewportCellEnumerator once per requested resolution."""
    
    def __init__(self, enumerator: ViewportCellEnumerator):
        self.enumerator = enumerator
    
    @log_operation('enumerate_multi_resolution')
    def enumerate_many(self,
                       bounds: ViewportBounds,
                       resolutions: Iterable[int]) -> Dict[int, List[CellRecord]]:
        """
        Enumerate ``bounds`` independently at each resolution.
        
        No deduplication across resolutions; callers compare bucket keys to
        their own pivot resolution to tell coarser and finer layers apart.
        Repeated resolutions are enumerated once. Keys keep request order.
        """
        results: Dict[int, List[CellRecord]] = {}
        for resolution in resolutions:
            if resolution in results:
                continue
            results[resolution] = self.enumerator.enumerate(bounds, resolution)
        return results
