"""Shared geometries for the validity tests."""

import pytest

from geovalidity.core.models import LineString, Polygon

SQUARE = [(0., 0.), (4., 0.), (4., 4.), (0., 4.), (0., 0.)]

# Exterior and interior ring of a polygon whose hole pokes out of the exterior ring
UNCONSTRAINED_EXTERIOR = [(0.5, 0.5), (3., 0.5), (3., 2.5), (0.5, 2.5), (0.5, 0.5)]
UNCONSTRAINED_HOLE = [(1., 1.), (1., 2.), (2.5, 2.), (3.5, 1.), (1., 1.)]


def square(x0: float, y0: float, size: float = 1.) -> Polygon:
    return Polygon(LineString([
        (x0, y0), (x0 + size, y0), (x0 + size, y0 + size), (x0, y0 + size), (x0, y0),
    ]))


@pytest.fixture
def square_exterior() -> LineString:
    return LineString(SQUARE)


@pytest.fixture
def unconstrained_hole_polygon() -> Polygon:
    return Polygon(LineString(UNCONSTRAINED_EXTERIOR), (LineString(UNCONSTRAINED_HOLE),))


@pytest.fixture
def holes_sharing_a_segment() -> Polygon:
    return Polygon(
        LineString(SQUARE),
        (
            LineString([(1., 2.), (2., 1.), (3., 2.), (2., 3.), (1., 2.)]),
            LineString([(3., 2.), (2., 1.), (3.5, 1.), (3.75, 2.), (3.5, 3.), (3., 2.)]),
        ),
    )


@pytest.fixture
def make_square():
    return square
