"""Shared geometry fixtures (Akihabara and Tokyo Imperial Palace area)."""

import pytest

CLOCKWISE_RING = [
    [139.77551, 35.72106],
    [139.77961, 35.7187],
    [139.7733, 35.71014],
    [139.76914, 35.70896],
    [139.76766, 35.71514],
    [139.77551, 35.72106],
]

POLYGON = [
    [
        [139.77551, 35.72106],
        [139.76766, 35.71514],
        [139.76914, 35.70896],
        [139.7733, 35.71014],
        [139.77961, 35.7187],
        [139.77551, 35.72106],
    ],
    [
        [139.7709, 35.7142],
        [139.77219, 35.71256],
        [139.77262, 35.71016],
        [139.76948, 35.70946],
        [139.76884, 35.71385],
        [139.7709, 35.7142],
    ],
    [
        [139.77508, 35.71716],
        [139.77476, 35.71671],
        [139.77499, 35.71659],
        [139.77531, 35.71706],
        [139.77508, 35.71716],
    ],
]

MULTI_POLYGON = [
    [
        [
            [139.77551, 35.72106],
            [139.76766, 35.71514],
            [139.76914, 35.70896],
            [139.7733, 35.71014],
            [139.77961, 35.7187],
            [139.77551, 35.72106],
        ]
    ],
    [
        [
            [139.74747, 35.69474],
            [139.74326, 35.68121],
            [139.75897, 35.6748],
            [139.76369, 35.68825],
            [139.74747, 35.69474],
        ]
    ],
]


@pytest.fixture
def clockwise_ring() -> list[list[float]]:
    """Clockwise ring around Akihabara."""
    return [list(p) for p in CLOCKWISE_RING]


@pytest.fixture
def polygon() -> list[list[list[float]]]:
    """Exterior ring with two holes."""
    return [[list(p) for p in ring] for ring in POLYGON]


@pytest.fixture
def multi_polygon() -> list[list[list[list[float]]]]:
    """Two single-ring polygons."""
    return [[[list(p) for p in ring] for ring in poly] for poly in MULTI_POLYGON]


@pytest.fixture
def unit_square() -> list[list[float]]:
    """Counter-clockwise 1 degree square on the equator."""
    return [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]
