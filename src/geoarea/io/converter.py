"""Conversion from GeoJSON geometry mappings to domain models.

Geometry mappings arrive in one of two key conventions: symbolic keys
(GeometryKey members) or their string values ("type", "coordinates",
"geometries"). Each mapping is read with the convention its type key is
spelled in, so nested geometries may each use their own. Objects exposing
``__geo_interface__`` (shapely geometries, for example) are read through
the mapping they return.

All shape checking happens here, before any area is computed.
"""

from collections.abc import Callable, Hashable, Mapping
from typing import Any

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
from geoarea.domain.position import COORDINATE_CONTAINERS
from geoarea.exceptions import (
    InvalidCoordinatesError,
    MissingPayloadError,
    UnsupportedGeometryTypeError,
)

KeyResolver = Callable[[GeometryKey], Hashable]

DOMAIN_GEOMETRIES = (ZeroAreaGeometry, Polygon, MultiPolygon, GeometryCollection)


def _symbolic_key(key: GeometryKey) -> Hashable:
    return key


def _string_key(key: GeometryKey) -> Hashable:
    return key.value


def key_resolver(data: Mapping[Any, Any]) -> KeyResolver:
    """Pick the key convention a geometry mapping is written in.

    Args:
        data: Geometry mapping

    Returns:
        Function mapping a GeometryKey to the key used in ``data``
    """
    if GeometryKey.TYPE in data:
        return _symbolic_key
    return _string_key


def parse_geometry_type(value: Any) -> GeometryType:
    """Parse a type tag into a GeometryType.

    Args:
        value: Type tag, either a GeometryType or its string value

    Returns:
        Matching GeometryType

    Raises:
        UnsupportedGeometryTypeError: If the tag is not a GeoJSON geometry type
    """
    if isinstance(value, GeometryType):
        return value
    if not isinstance(value, str):
        raise UnsupportedGeometryTypeError(value)
    try:
        return GeometryType(value)
    except ValueError:
        raise UnsupportedGeometryTypeError(value) from None


def mapping_to_geometry(data: Mapping[Any, Any]) -> Geometry:
    """Convert a geometry mapping to a domain geometry.

    Args:
        data: Mapping with a type member and a coordinates or geometries member

    Returns:
        Domain geometry

    Raises:
        MissingPayloadError: If the type or the payload member is absent
        UnsupportedGeometryTypeError: If the type tag is unknown
        MalformedShapeError: If the payload has the wrong shape
    """
    resolve = key_resolver(data)

    type_key = resolve(GeometryKey.TYPE)
    if type_key not in data:
        raise MissingPayloadError(None, GeometryKey.TYPE.value)
    kind = parse_geometry_type(data[type_key])

    if kind is GeometryType.GEOMETRY_COLLECTION:
        geometries_key = resolve(GeometryKey.GEOMETRIES)
        if geometries_key not in data:
            raise MissingPayloadError(kind.value, GeometryKey.GEOMETRIES.value)
        members = data[geometries_key]
        if not isinstance(members, COORDINATE_CONTAINERS):
            raise InvalidCoordinatesError("geometries", members)
        return GeometryCollection(geometries=tuple(to_geometry(g) for g in members))

    coordinates_key = resolve(GeometryKey.COORDINATES)
    if coordinates_key not in data:
        raise MissingPayloadError(kind.value, GeometryKey.COORDINATES.value)
    coordinates = data[coordinates_key]

    if kind is GeometryType.POLYGON:
        return Polygon.from_coordinates(coordinates)
    if kind is GeometryType.MULTI_POLYGON:
        return MultiPolygon.from_coordinates(coordinates)
    if kind in ZERO_AREA_TYPES:
        return ZeroAreaGeometry(kind=kind)

    raise UnsupportedGeometryTypeError(kind.value)


def to_geometry(value: Any) -> Geometry:
    """Normalize any accepted geometry input to a domain geometry.

    Accepts domain geometries (returned unchanged), mappings in either key
    convention, and objects implementing ``__geo_interface__``.

    Args:
        value: Geometry input

    Returns:
        Domain geometry

    Raises:
        GeometryError: If the input cannot be read as a geometry
    """
    if isinstance(value, DOMAIN_GEOMETRIES):
        return value
    if not isinstance(value, Mapping) and hasattr(value, "__geo_interface__"):
        value = value.__geo_interface__
    if not isinstance(value, Mapping):
        raise InvalidCoordinatesError("geometry", value)
    return mapping_to_geometry(value)
