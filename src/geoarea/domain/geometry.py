"""Geometry variants of the GeoJSON model.

Geometries form a closed union. Polygons and multi-polygons keep their
rings; point and line kinds keep only their type, since their coordinates
never contribute area. Collections nest any of the variants, themselves
included.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, TypeAlias

from geoarea.domain.position import COORDINATE_CONTAINERS, Ring
from geoarea.exceptions import EmptyPolygonError, InvalidCoordinatesError


class GeometryType(str, Enum):
    """GeoJSON geometry type tags."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


ZERO_AREA_TYPES = frozenset(
    {
        GeometryType.POINT,
        GeometryType.MULTI_POINT,
        GeometryType.LINE_STRING,
        GeometryType.MULTI_LINE_STRING,
    }
)


class GeometryKey(Enum):
    """Symbolic member keys of a geometry mapping.

    A mapping keyed by these members is equivalent to one keyed by their
    string values ("type", "coordinates", "geometries").
    """

    TYPE = "type"
    COORDINATES = "coordinates"
    GEOMETRIES = "geometries"


@dataclass(frozen=True, slots=True)
class ZeroAreaGeometry:
    """A point or line geometry.

    Attributes:
        kind: One of Point, MultiPoint, LineString, MultiLineString
    """

    kind: GeometryType

    def __post_init__(self) -> None:
        if self.kind not in ZERO_AREA_TYPES:
            raise ValueError(f"{self.kind!r} is not a point or line type")


@dataclass(frozen=True, slots=True)
class Polygon:
    """A polygon: one exterior ring and zero or more holes.

    Holes are expected to lie inside the exterior and not to overlap each
    other; this is not checked.

    Attributes:
        exterior: Outer boundary
        holes: Interior boundaries subtracted from the exterior
    """

    kind: ClassVar[GeometryType] = GeometryType.POLYGON

    exterior: Ring
    holes: tuple[Ring, ...] = ()

    @classmethod
    def from_coordinates(cls, coordinates: Any) -> "Polygon":
        """Build a polygon from a GeoJSON array of rings.

        Args:
            coordinates: List or tuple of rings, exterior first

        Returns:
            Polygon instance

        Raises:
            EmptyPolygonError: If there is no exterior ring
            InvalidCoordinatesError: If the payload is not a list/tuple
        """
        if isinstance(coordinates, Polygon):
            return coordinates
        if not isinstance(coordinates, COORDINATE_CONTAINERS):
            raise InvalidCoordinatesError("polygon", coordinates)
        if not coordinates:
            raise EmptyPolygonError()

        exterior, *holes = (Ring.from_coordinates(ring) for ring in coordinates)
        return cls(exterior=exterior, holes=tuple(holes))


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """An ordered collection of independent polygons.

    Attributes:
        polygons: Member polygons (overlap is not checked)
    """

    kind: ClassVar[GeometryType] = GeometryType.MULTI_POLYGON

    polygons: tuple[Polygon, ...] = ()

    def __len__(self) -> int:
        return len(self.polygons)

    @classmethod
    def from_coordinates(cls, coordinates: Any) -> "MultiPolygon":
        """Build a multi-polygon from a GeoJSON array of polygons."""
        if isinstance(coordinates, MultiPolygon):
            return coordinates
        if not isinstance(coordinates, COORDINATE_CONTAINERS):
            raise InvalidCoordinatesError("multi-polygon", coordinates)
        return cls(polygons=tuple(Polygon.from_coordinates(p) for p in coordinates))


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """An ordered collection of heterogeneous geometries, possibly nested.

    Attributes:
        geometries: Member geometries
    """

    kind: ClassVar[GeometryType] = GeometryType.GEOMETRY_COLLECTION

    geometries: tuple["Geometry", ...] = ()

    def __len__(self) -> int:
        return len(self.geometries)


Geometry: TypeAlias = ZeroAreaGeometry | Polygon | MultiPolygon | GeometryCollection
