"""Unit tests for the area engine."""

import math

import pytest

from geoarea.config import WGS84_RADIUS
from geoarea.core.area import (
    collection_area,
    geometry_area,
    multi_polygon_area,
    polygon_area,
    ring_area,
)
from geoarea.domain import GeometryKey, Polygon, Ring
from geoarea.exceptions import (
    EmptyPolygonError,
    InvalidCoordinatesError,
    MissingPayloadError,
    UnsupportedGeometryError,
    UnsupportedGeometryTypeError,
)

POLYGON_AREA = 625074.0429380704
MULTI_POLYGON_AREA = 3212633.6018961975
COLLECTION_AREA = 3837707.644834268

TOLERANCE = 1e-9


class TestRingArea:
    """Tests for ring_area."""

    def test_clockwise_ring_is_positive(self, clockwise_ring):
        """Test clockwise ring area."""
        assert ring_area(clockwise_ring) == 755022.0928112642

    def test_counter_clockwise_ring_is_negative(self, clockwise_ring):
        """Test counter-clockwise ring area."""
        area = ring_area(list(reversed(clockwise_ring)))
        assert area == -755022.0928111264

    def test_reversal_negates_area(self):
        """Test reversing a ring flips the sign only."""
        ring = [
            [139.7643756866455, 35.65645937572578],
            [139.78179931640625, 35.633720988098574],
            [139.75862503051758, 35.623256366178964],
            [139.7643756866455, 35.65645937572578],
        ]
        forward = ring_area(ring)
        backward = ring_area(ring[::-1])

        assert forward == 3571505.5755534363
        assert backward == pytest.approx(-forward, rel=TOLERANCE)

    @pytest.mark.parametrize(
        "ring",
        [
            [],
            [[139.764, 35.656]],
            [[139.764, 35.656], [139.781, 35.633]],
        ],
    )
    def test_degenerate_ring_is_zero(self, ring):
        """Test rings with fewer than three points have no area."""
        assert ring_area(ring) == 0.0

    def test_accepts_domain_ring(self, clockwise_ring):
        """Test a Ring value gives the same area as raw coordinates."""
        assert ring_area(Ring.from_coordinates(clockwise_ring)) == ring_area(clockwise_ring)

    def test_elevation_is_ignored(self, clockwise_ring):
        """Test third coordinate components do not change the area."""
        with_elevation = [[lon, lat, 40.0] for lon, lat in clockwise_ring]
        assert ring_area(with_elevation) == ring_area(clockwise_ring)

    def test_unclosed_ring_matches_closed_ring(self, clockwise_ring):
        """Test the closing point may be omitted."""
        assert ring_area(clockwise_ring[:-1]) == pytest.approx(
            ring_area(clockwise_ring), rel=TOLERANCE
        )

    def test_tuples_are_accepted(self, clockwise_ring):
        """Test tuple rings and positions."""
        as_tuples = tuple(tuple(p) for p in clockwise_ring)
        assert ring_area(as_tuples) == ring_area(clockwise_ring)

    def test_radius_scales_quadratically(self, clockwise_ring):
        """Test area scales with the square of the radius."""
        half = ring_area(clockwise_ring, radius=WGS84_RADIUS / 2)
        assert half == pytest.approx(ring_area(clockwise_ring) / 4, rel=TOLERANCE)

    def test_invalid_position_raises(self):
        """Test positions need two components."""
        with pytest.raises(InvalidCoordinatesError):
            ring_area([[1.0, 2.0], [3.0], [4.0, 5.0]])


class TestPolygonArea:
    """Tests for polygon_area."""

    def test_polygon_with_holes(self, polygon):
        """Test holes are subtracted from the exterior."""
        assert polygon_area(polygon) == POLYGON_AREA

    def test_single_ring(self, polygon):
        """Test a polygon with only an exterior ring."""
        assert polygon_area(polygon[:1]) == 755022.0928111264

    def test_winding_does_not_matter(self, polygon):
        """Test ring orientation does not change the polygon area."""
        flipped = [ring[::-1] for ring in polygon]
        assert polygon_area(flipped) == pytest.approx(polygon_area(polygon), rel=TOLERANCE)

    def test_unit_square_near_equator(self, unit_square):
        """Test a 1 degree square approximates the planar estimate."""
        side = math.pi / 180 * WGS84_RADIUS
        assert polygon_area([unit_square]) == pytest.approx(side * side, rel=0.02)

    def test_hole_reduces_area(self, unit_square):
        """Test adding a hole strictly reduces area."""
        hole = [[0.25, 0.25], [0.25, 0.75], [0.75, 0.75], [0.75, 0.25], [0.25, 0.25]]
        assert polygon_area([unit_square, hole]) < polygon_area([unit_square])

    def test_oversized_hole_gives_negative_area(self, unit_square):
        """Test malformed polygons are reported, not clamped."""
        hole = [[-1.0, -1.0], [-1.0, 2.0], [2.0, 2.0], [2.0, -1.0], [-1.0, -1.0]]
        assert polygon_area([unit_square, hole]) < 0.0

    def test_accepts_domain_polygon(self, polygon):
        """Test a Polygon value gives the same area as raw coordinates."""
        assert polygon_area(Polygon.from_coordinates(polygon)) == polygon_area(polygon)

    def test_empty_polygon_raises(self):
        """Test a polygon needs an exterior ring."""
        with pytest.raises(EmptyPolygonError):
            polygon_area([])


class TestMultiPolygonArea:
    """Tests for multi_polygon_area."""

    def test_multi_polygon(self, multi_polygon):
        """Test the area of a MultiPolygon."""
        assert multi_polygon_area(multi_polygon) == MULTI_POLYGON_AREA

    def test_sum_of_polygons(self, multi_polygon):
        """Test the result is the sum of member polygon areas."""
        expected = sum(polygon_area(p) for p in multi_polygon)
        assert multi_polygon_area(multi_polygon) == pytest.approx(expected, rel=TOLERANCE)

    def test_empty(self):
        """Test an empty MultiPolygon has no area."""
        assert multi_polygon_area([]) == 0.0


class TestCollectionArea:
    """Tests for collection_area."""

    def test_empty(self):
        """Test an empty collection has no area."""
        assert collection_area([]) == 0.0

    def test_sums_members(self, polygon, multi_polygon):
        """Test member areas are summed."""
        geometries = [
            {"type": "Polygon", "coordinates": polygon},
            {"type": "MultiPolygon", "coordinates": multi_polygon},
        ]
        assert collection_area(geometries) == COLLECTION_AREA


class TestGeometryArea:
    """Tests for geometry_area dispatch."""

    @pytest.mark.parametrize(
        ("geometry_type", "coordinates"),
        [
            ("Point", [139.764, 35.656]),
            ("LineString", [[139.764, 35.656], [139.781, 35.633]]),
            ("MultiPoint", [[139.764, 35.656]]),
            ("MultiLineString", [[[139.764, 35.656], [139.781, 35.633]]]),
            ("Point", "not even coordinates"),
            ("MultiLineString", None),
        ],
    )
    def test_points_and_lines_have_no_area(self, geometry_type, coordinates):
        """Test area-less kinds return 0.0 whatever the payload."""
        assert geometry_area({"type": geometry_type, "coordinates": coordinates}) == 0.0

    def test_polygon(self, polygon):
        """Test Polygon dispatch."""
        area = geometry_area({"type": "Polygon", "coordinates": polygon})
        assert area == POLYGON_AREA

    def test_multi_polygon(self, polygon, multi_polygon):
        """Test MultiPolygon dispatch."""
        single = geometry_area({"type": "MultiPolygon", "coordinates": [polygon]})
        double = geometry_area({"type": "MultiPolygon", "coordinates": multi_polygon})

        assert single == POLYGON_AREA
        assert double == MULTI_POLYGON_AREA

    def test_symbolic_keys(self, polygon):
        """Test GeometryKey members are accepted as keys."""
        area = geometry_area(
            {GeometryKey.TYPE: "Polygon", GeometryKey.COORDINATES: polygon}
        )
        assert area == POLYGON_AREA

    def test_precise_polygon(self):
        """Test a polygon with full precision coordinates."""
        area = geometry_area(
            {
                "type": "Polygon",
                "coordinates": [
                    [
                        [139.7755122184753, 35.721064511354726],
                        [139.76765871047974, 35.71514121326722],
                        [139.76913928985596, 35.70895612333854],
                        [139.77330207824707, 35.71014091012367],
                        [139.7796106338501, 35.71869524495784],
                        [139.7755122184753, 35.721064511354726],
                    ]
                ],
            }
        )
        assert area == pytest.approx(755640.4952324519, rel=TOLERANCE)

    def test_unsupported_type_raises(self):
        """Test unknown type tags are reported."""
        with pytest.raises(UnsupportedGeometryTypeError) as exc_info:
            geometry_area({"type": "Circle", "coordinates": [0.0, 0.0]})
        assert exc_info.value.geometry_type == "Circle"

    def test_feature_is_not_a_geometry(self, polygon):
        """Test Feature objects are rejected rather than measured as zero."""
        feature = {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": polygon},
        }
        with pytest.raises(UnsupportedGeometryError):
            geometry_area(feature)

    def test_missing_coordinates_raises(self):
        """Test missing payloads are reported."""
        with pytest.raises(MissingPayloadError) as exc_info:
            geometry_area({"type": "Polygon"})
        assert exc_info.value.key == "coordinates"

    def test_missing_type_raises(self):
        """Test geometries without a type are reported."""
        with pytest.raises(MissingPayloadError):
            geometry_area({"coordinates": [0.0, 0.0]})

    def test_empty_polygon_raises(self):
        """Test a Polygon with no rings is a malformed shape."""
        with pytest.raises(EmptyPolygonError):
            geometry_area({"type": "Polygon", "coordinates": []})
