"""Exception hierarchy for geoarea."""


class GeoAreaError(Exception):
    """Base exception for all geoarea errors."""

    pass


class GeometryError(GeoAreaError):
    """Errors related to geometry input."""

    pass


class MalformedShapeError(GeometryError):
    """Geometry payload does not have the shape its type requires."""

    pass


class EmptyPolygonError(MalformedShapeError):
    """Polygon without an exterior ring."""

    def __init__(self) -> None:
        super().__init__("Polygon must have at least one ring (the exterior)")


class InvalidCoordinatesError(MalformedShapeError):
    """Coordinate payload of the wrong container kind, arity or value type."""

    def __init__(self, what: str, value: object) -> None:
        self.what = what
        self.value = value
        super().__init__(f"Invalid {what}: {value!r}")


class UnsupportedGeometryError(GeometryError):
    """Geometry value that cannot be measured."""

    pass


class UnsupportedGeometryTypeError(UnsupportedGeometryError):
    """Type tag outside the GeoJSON geometry kinds."""

    def __init__(self, geometry_type: object) -> None:
        self.geometry_type = geometry_type
        super().__init__(f"Unsupported geometry type: {geometry_type!r}")


class MissingPayloadError(UnsupportedGeometryError):
    """Geometry without a type tag or without the payload its tag requires."""

    def __init__(self, geometry_type: object, key: str) -> None:
        self.geometry_type = geometry_type
        self.key = key
        if geometry_type is None:
            message = f"Geometry has no '{key}' member"
        else:
            message = f"Geometry of type '{geometry_type}' has no '{key}' member"
        super().__init__(message)
