"""Core area algorithms for geoarea.

This module contains:

- The ring area engine (spherical excess approximation)
- Polygon, multi-polygon and collection composition
- Geometry dispatch
- The settings-driven AreaCalculator with batch processing

All area functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects)

Key functions:
- ring_area: Signed area of a ring
- polygon_area: Exterior minus holes
- multi_polygon_area: Sum over polygons
- collection_area: Sum over nested geometries
- geometry_area: Area of any GeoJSON geometry

Key classes:
- AreaCalculator: Applies settings and logging, measures batches
"""

from geoarea.core.area import (
    collection_area,
    geometry_area,
    multi_polygon_area,
    polygon_area,
    ring_area,
)
from geoarea.core.calculator import AreaCalculator, measure_geometry

__all__ = [
    # Calculator
    "AreaCalculator",
    # Area functions
    "collection_area",
    "geometry_area",
    "measure_geometry",
    "multi_polygon_area",
    "polygon_area",
    "ring_area",
]
