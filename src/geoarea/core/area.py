"""Area of GeoJSON geometries on a sphere.

This module provides the area engine:
- Signed ring area (Chamberlain–Duquette spherical excess approximation)
- Polygon area (exterior minus holes)
- Multi-polygon and geometry collection sums
- Dispatch over the geometry variants

Reference:
    Robert G. Chamberlain and William H. Duquette, "Some Algorithms for
    Polygons on a Sphere", JPL Publication 07-03, Jet Propulsion
    Laboratory, Pasadena, CA, June 2007.

All functions are pure and stateless. Sums run left to right so results
are reproducible.
"""

import math
from collections.abc import Iterable
from typing import Any

from geoarea.config.settings import WGS84_RADIUS
from geoarea.domain import (
    GeometryCollection,
    MultiPolygon,
    Polygon,
    Ring,
    ZeroAreaGeometry,
)
from geoarea.exceptions import UnsupportedGeometryTypeError
from geoarea.io.converter import to_geometry


def _rad(degrees: float) -> float:
    return math.pi * degrees / 180


def ring_area(ring: Any, radius: float = WGS84_RADIUS) -> float:
    """Calculate the approximate signed area of a ring projected on a sphere.

    The area is positive if the ring is oriented clockwise and negative
    if it is counter-clockwise. Positions are read cyclically with index 0
    as the anchor, so closed and unclosed rings both work.

    Args:
        ring: Ring or GeoJSON array of [lon, lat] positions
        radius: Sphere radius in meters

    Returns:
        Signed area in square meters. Returns 0.0 for rings with fewer
        than three positions.

    Examples:
        >>> ring_area([
        ...     [139.7643756866455, 35.65645937572578],
        ...     [139.78179931640625, 35.633720988098574],
        ...     [139.75862503051758, 35.623256366178964],
        ...     [139.7643756866455, 35.65645937572578],
        ... ])
        3571505.5755534363
    """
    ring = Ring.from_coordinates(ring)
    if ring.is_degenerate:
        return 0.0

    n = len(ring)
    total = 0.0
    for i in range(1, n + 1):
        previous = ring[i - 1]
        current = ring[i % n]
        following = ring[(i + 1) % n]
        total += (_rad(following.longitude) - _rad(previous.longitude)) * math.sin(
            _rad(current.latitude)
        )

    return total * (radius * radius / 2)


def polygon_area(polygon: Any, radius: float = WGS84_RADIUS) -> float:
    """Calculate the area of a polygon, holes subtracted.

    Every ring contributes its absolute area, so the winding of individual
    rings does not matter. Holes larger than the exterior give a negative
    result, which is returned as is.

    Args:
        polygon: Polygon or GeoJSON array of rings, exterior first
        radius: Sphere radius in meters

    Returns:
        Net area in square meters

    Raises:
        EmptyPolygonError: If the polygon has no exterior ring

    Examples:
        >>> polygon_area([[
        ...     [139.77551, 35.72106],
        ...     [139.76766, 35.71514],
        ...     [139.76914, 35.70896],
        ...     [139.7733, 35.71014],
        ...     [139.77961, 35.7187],
        ...     [139.77551, 35.72106],
        ... ]])
        755022.0928111264
    """
    polygon = Polygon.from_coordinates(polygon)

    area = abs(ring_area(polygon.exterior, radius))
    for hole in polygon.holes:
        area -= abs(ring_area(hole, radius))
    return area


def multi_polygon_area(polygons: Any, radius: float = WGS84_RADIUS) -> float:
    """Sum the areas of independent polygons.

    Args:
        polygons: MultiPolygon or GeoJSON array of polygons
        radius: Sphere radius in meters

    Returns:
        Summed area in square meters; 0.0 when there are no polygons
    """
    multi_polygon = MultiPolygon.from_coordinates(polygons)

    total = 0.0
    for polygon in multi_polygon.polygons:
        total += polygon_area(polygon, radius)
    return total


def collection_area(geometries: Iterable[Any], radius: float = WGS84_RADIUS) -> float:
    """Sum the areas of heterogeneous, possibly nested, geometries.

    Args:
        geometries: GeometryCollection or iterable of geometries
        radius: Sphere radius in meters

    Returns:
        Summed area in square meters; 0.0 when there are no geometries

    Raises:
        GeometryError: If any member cannot be read as a geometry
    """
    if isinstance(geometries, GeometryCollection):
        geometries = geometries.geometries
    # every member is validated before any of them is measured
    geometries = [to_geometry(geometry) for geometry in geometries]

    total = 0.0
    for geometry in geometries:
        total += geometry_area(geometry, radius)
    return total


def geometry_area(geometry: Any, radius: float = WGS84_RADIUS) -> float:
    """Calculate the area of a GeoJSON geometry.

    Accepts domain geometries, mappings with either symbolic
    (GeometryKey) or string keys, and ``__geo_interface__`` objects.
    Points and lines have no area.

    Nested collections are walked recursively, so nesting a few hundred
    levels deep exceeds the interpreter recursion limit and raises
    RecursionError. Real-world GeoJSON nests far less.

    Args:
        geometry: Geometry input
        radius: Sphere radius in meters

    Returns:
        Area in square meters

    Raises:
        UnsupportedGeometryError: If the type tag is unknown or the payload
            member is missing
        MalformedShapeError: If the payload has the wrong shape

    Examples:
        >>> geometry_area({"type": "Point", "coordinates": [139.77, 35.72]})
        0.0
    """
    geometry = to_geometry(geometry)

    if isinstance(geometry, GeometryCollection):
        return collection_area(geometry.geometries, radius)
    if isinstance(geometry, MultiPolygon):
        return multi_polygon_area(geometry, radius)
    if isinstance(geometry, Polygon):
        return polygon_area(geometry, radius)
    if isinstance(geometry, ZeroAreaGeometry):
        return 0.0

    raise UnsupportedGeometryTypeError(type(geometry).__name__)
