"""Domain models for geoarea.

This module contains the value types that represent GeoJSON geometries in
memory. All models are:

- Immutable (frozen dataclasses with slots)
- Picklable, so they can be sent to worker processes
- Independent of any serialized geometry format

Key classes:
- Position: A longitude/latitude pair
- Ring: A closed boundary
- Polygon: Exterior ring plus holes
- MultiPolygon: Independent polygons
- ZeroAreaGeometry: Point and line kinds
- GeometryCollection: Nested heterogeneous geometries
"""

from geoarea.domain.geometry import (
    ZERO_AREA_TYPES,
    Geometry,
    GeometryCollection,
    GeometryKey,
    GeometryType,
    MultiPolygon,
    Polygon,
    ZeroAreaGeometry,
)
from geoarea.domain.position import Position, Ring

__all__: list[str] = [
    # Enums
    "GeometryKey",
    "GeometryType",
    "ZERO_AREA_TYPES",
    # Core types
    "Position",
    "Ring",
    "Polygon",
    "MultiPolygon",
    "ZeroAreaGeometry",
    "GeometryCollection",
    "Geometry",
]
