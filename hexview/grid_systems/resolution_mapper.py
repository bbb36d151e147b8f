# hexview/grid_systems/resolution_mapper.py
"""Map viewport zoom levels to H3 resolutions."""

from typing import List

MIN_RESOLUTION = 0
MAX_RESOLUTION = 15

# (highest zoom level, H3 resolution) - zooms above the last threshold map to 15
ZOOM_THRESHOLDS = [
    (2, 0),
    (4, 1),
    (5, 2),
    (6, 3),
    (7, 4),
    (8, 5),
    (9, 6),
    (10, 7),
    (11, 8),
    (12, 9),
    (13, 10),
    (14, 11),
    (15, 12),
    (16, 13),
    (17, 14),
]

# Label and approximate average cell area per H3 resolution
RESOLUTION_DESCRIPTIONS = {
    0: ('Continental', '4,357,449 km²'),
    1: ('Country', '609,788 km²'),
    2: ('State', '86,801 km²'),
    3: ('Large city', '12,393 km²'),
    4: ('City district', '1,770 km²'),
    5: ('Neighborhood', '252.9 km²'),
    6: ('Large building', '36.1 km²'),
    7: ('City block', '5.16 km²'),
    8: ('Building', '0.737 km²'),
    9: ('Parking lot', '0.105 km²'),
    10: ('House', '0.015 km²'),
    11: ('Room', '2,149 m²'),
    12: ('Small room', '307 m²'),
    13: ('Furniture', '43.9 m²'),
    14: ('Person', '6.3 m²'),
    15: ('Hand', '0.9 m²'),
}


def resolution_for_zoom(zoom: int) -> int:
    """
    Select the H3 resolution for a map zoom level.
    
    Step function over ZOOM_THRESHOLDS, non-decreasing in zoom and clamped
    to [0, 15] for any integer input.
    """
    for max_zoom, resolution in ZOOM_THRESHOLDS:
        if zoom <= max_zoom:
            return resolution
    return MAX_RESOLUTION


def describe_resolution(resolution: int) -> str:
    """Human-readable scale label, e.g. ``'City block (~5.16 km²)'``."""
    if resolution not in RESOLUTION_DESCRIPTIONS:
        raise ValueError(
            f"Resolution must be between {MIN_RESOLUTION} and {MAX_RESOLUTION}, got: {resolution}"
        )
    label, area = RESOLUTION_DESCRIPTIONS[resolution]
    return f"{label} (~{area})"


def grid_resolutions(resolution: int,
                     multi_resolution: bool = False,
                     max_resolution: int = 8) -> List[int]:
    """
    Resolutions a viewport grid layer should enumerate.
    
    The pivot is ``resolution`` clamped to ``max_resolution`` so the sampling
    cost stays bounded. In multi-resolution mode the coarser (pivot - 1) and
    finer (pivot + 1) companions follow the pivot when they stay within
    [0, max_resolution].
    
    Args:
        resolution: Resolution derived from the current zoom
        multi_resolution: Include the neighbouring resolutions
        max_resolution: Ceiling for every returned resolution
        
    Returns:
        Ordered list with the pivot first
    """
    pivot = max(MIN_RESOLUTION, min(resolution, max_resolution))
    resolutions = [pivot]
    
    if multi_resolution:
        if pivot > MIN_RESOLUTION:
            resolutions.append(pivot - 1)
        if pivot < max_resolution:
            resolutions.append(pivot + 1)
            
    return resolutions
