"""geoarea - Area of GeoJSON geometries on a sphere.

geoarea computes the surface area, in square meters, of GeoJSON geometries
(Polygon, MultiPolygon and GeometryCollection; points and lines have no
area) using the Chamberlain–Duquette spherical excess approximation on a
WGS-84 radius sphere.

Example:
    >>> from geoarea import geometry_area
    >>> geometry_area({"type": "Point", "coordinates": [139.77, 35.72]})
    0.0
"""

__version__ = "0.1.0"

from geoarea.core import (
    AreaCalculator,
    collection_area,
    geometry_area,
    multi_polygon_area,
    polygon_area,
    ring_area,
)
from geoarea.io import to_geometry

__all__ = [
    "AreaCalculator",
    "__version__",
    "collection_area",
    "geometry_area",
    "multi_polygon_area",
    "polygon_area",
    "ring_area",
    "to_geometry",
]
