"""Coordinate types for ring representation.

This module defines the fundamental coordinate types:
- Position: A longitude/latitude pair in degrees
- Ring: A cyclic sequence of positions bounding an area
"""

import numbers
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from geoarea.exceptions import InvalidCoordinatesError

COORDINATE_CONTAINERS = (list, tuple)


def _is_coordinate(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Position:
    """A point on the globe in degrees.

    Immutable and hashable. Positions carry no identity beyond their
    coordinate values.

    Attributes:
        longitude: Longitude in degrees
        latitude: Latitude in degrees
    """

    longitude: float
    latitude: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to a simple (longitude, latitude) tuple."""
        return (self.longitude, self.latitude)

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[float]) -> "Position":
        """Build a position from a GeoJSON position array.

        Only the first two components are read; elevation and any further
        components are ignored.

        Args:
            coordinates: Sequence of at least two numbers

        Returns:
            Position instance

        Raises:
            InvalidCoordinatesError: If coordinates is not a list/tuple of
                at least two components, or either of the first two is not a
                real number (booleans are rejected)
        """
        if not isinstance(coordinates, COORDINATE_CONTAINERS) or len(coordinates) < 2:
            raise InvalidCoordinatesError("position", coordinates)
        if not all(_is_coordinate(value) for value in coordinates[:2]):
            raise InvalidCoordinatesError("position", coordinates)
        return cls(longitude=coordinates[0], latitude=coordinates[1])


@dataclass(frozen=True, slots=True)
class Ring:
    """A linear ring: positions read cyclically, anchored at index 0.

    GeoJSON rings are closed (first position repeated last) but unclosed
    rings are accepted as they are. A ring with fewer than three positions
    is degenerate and encloses no area.

    Attributes:
        positions: Positions forming the boundary
    """

    positions: tuple[Position, ...] = ()

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __getitem__(self, index: int) -> Position:
        return self.positions[index]

    @property
    def is_degenerate(self) -> bool:
        """Whether the ring has too few positions to enclose area."""
        return len(self.positions) < 3

    @classmethod
    def from_coordinates(cls, coordinates: Any) -> "Ring":
        """Build a ring from a GeoJSON array of positions.

        Args:
            coordinates: List or tuple of position arrays

        Returns:
            Ring instance

        Raises:
            InvalidCoordinatesError: If the payload is not a list/tuple, or
                one of its positions is invalid
        """
        if isinstance(coordinates, Ring):
            return coordinates
        if not isinstance(coordinates, COORDINATE_CONTAINERS):
            raise InvalidCoordinatesError("ring", coordinates)
        return cls(positions=tuple(Position.from_coordinates(c) for c in coordinates))
