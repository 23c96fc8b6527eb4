"""Tests for geovalidity.core.models."""

import dataclasses
import math

import pytest

from geovalidity.core.models import (
    Coord, GeometryCollection, Line, LineString, MultiLineString, MultiPoint, Point, Polygon, Triangle,
)


class TestCoercion:
    def test_tuples_become_coords(self):
        ls = LineString([(0, 0), (1, 2)])
        assert ls.coords == (Coord(0., 0.), Coord(1., 2.))

    def test_extra_dimensions_are_dropped(self):
        ls = LineString([(0, 0, 5), (1, 2, 6)])
        assert ls.coords == (Coord(0., 0.), Coord(1., 2.))

    def test_line_and_triangle_accept_tuples(self):
        assert Line((0, 0), (1, 1)).end == Coord(1., 1.)
        assert Triangle((0, 0), (1, 0), (0, 1)).vertices() == (Coord(0., 0.), Coord(1., 0.), Coord(0., 1.))

    def test_multi_geometries_accept_plain_values(self):
        assert MultiPoint([(1, 2)]).points == (Point(1., 2.),)
        assert MultiLineString([[(0, 0), (1, 1)]]).line_strings == (LineString([(0, 0), (1, 1)]),)
        assert GeometryCollection([Point(0, 0)]).geometries == (Point(0, 0),)

    def test_point_coord(self):
        assert Point(3., 4.).coord == Coord(3., 4.)

    def test_nan_is_accepted(self):
        p = Point(0., math.nan)
        assert math.isnan(p.y)


class TestPolygonRings:
    def test_unclosed_rings_are_closed(self):
        p = Polygon([(0, 0), (1, 1), (0, 1)], ([(0.1, 0.5), (0.2, 0.8), (0.1, 0.8)],))
        assert p.exterior.is_closed()
        assert p.exterior.coords[-1] == Coord(0., 0.)
        assert all(ring.is_closed() for ring in p.interiors)

    def test_closed_rings_are_left_alone(self, square_exterior):
        assert Polygon(square_exterior).exterior == square_exterior

    def test_empty_ring_stays_empty(self):
        assert len(Polygon(LineString([])).exterior) == 0

    def test_rings_lists_exterior_first(self, holes_sharing_a_segment):
        rings = holes_sharing_a_segment.rings()
        assert rings[0] == holes_sharing_a_segment.exterior
        assert rings[1:] == holes_sharing_a_segment.interiors


class TestValueSemantics:
    def test_frozen(self):
        p = Point(0., 0.)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 1.

    def test_equal_and_hashable(self, make_square):
        assert make_square(0, 0) == make_square(0, 0)
        assert len({make_square(0, 0), make_square(0, 0), make_square(2, 2)}) == 2

    def test_nan_coord_never_equals_itself(self):
        coord = Coord(math.nan, 0.)
        assert coord != coord
        assert Line(coord, coord).start != Line(coord, coord).end
        assert Coord(0., 1.) == Coord(0., 1.)
