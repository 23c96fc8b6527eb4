"""Tests for validators.ring: minimum point count and ring simplicity."""

import math

import pytest

from geovalidity.core.models import LineString, Polygon
from geovalidity.validators.ring import has_self_intersection, is_usable, too_few_points
from geovalidity.validity import is_valid

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
BOWTIE = [(0, 0), (4, 0), (0, 2), (4, 2), (0, 0)]
SPIKE = [(0, 0), (4, 0), (4, 4), (2, 4), (2, 6), (2, 4), (0, 4), (0, 0)]
# Visits (1, 1) twice, the two loops touch there
PINCHED = [(0, 0), (2, 0), (1, 1), (2, 2), (0, 2), (1, 1), (0, 0)]
TRIANGLE = [(0, 0), (1, 0), (0, 1), (0, 0)]
WITH_DUPLICATES = [(0, 0), (4, 0), (4, 0), (4, 4), (0, 4), (0, 4), (0, 0)]
# Goes back over its own first segment
BACKTRACK = [(0, 0), (2, 0), (1, 0), (1, 1), (0, 0)]


class TestTooFewPoints:
    def test_square_ring(self):
        assert not too_few_points(LineString(SQUARE), is_ring=True)

    def test_ring_with_two_distinct_vertices(self):
        assert too_few_points(LineString([(0, 0), (1, 0), (1, 0), (0, 0)]), is_ring=True)

    def test_duplicates_are_not_counted(self):
        assert too_few_points(LineString([(0, 0), (0, 0), (0, 0), (0, 0)]), is_ring=True)

    def test_open_line_string(self):
        assert not too_few_points(LineString([(0, 0), (1, 1)]), is_ring=False)
        assert too_few_points(LineString([(0, 0), (0, 0)]), is_ring=False)


class TestSelfIntersection:
    @pytest.mark.parametrize("coords", [SQUARE, TRIANGLE, WITH_DUPLICATES])
    def test_simple_rings(self, coords):
        assert not has_self_intersection(LineString(coords))

    @pytest.mark.parametrize("coords", [BOWTIE, SPIKE, PINCHED, BACKTRACK])
    def test_non_simple_rings(self, coords):
        assert has_self_intersection(LineString(coords))

    def test_first_and_last_segment_of_an_open_line_are_not_adjacent(self):
        assert has_self_intersection(LineString([(0, 0), (2, 0), (2, 2), (0, 2), (1, 0)]))

    def test_degenerate_rings_are_left_to_other_checks(self):
        assert not has_self_intersection(LineString([(0, 0), (1, 1), (0, 0)]))
        assert not has_self_intersection(LineString([(0, 0), (4, 0), (0, 2), (4, math.nan), (0, 0)]))


class TestUsable:
    def test_square(self):
        assert is_usable(LineString(SQUARE))

    def test_non_finite(self):
        assert not is_usable(LineString([(0, 0), (4, 0), (4, math.inf), (0, 4), (0, 0)]))

    def test_too_short(self):
        assert not is_usable(LineString([(0, 0), (1, 1), (0, 0)]))


@pytest.mark.parametrize("coords", [SQUARE, BOWTIE, SPIKE, PINCHED, TRIANGLE, WITH_DUPLICATES, BACKTRACK])
def test_hole_free_polygon_validity_matches_ring_checks(coords):
    ring = LineString(coords)
    expected = not has_self_intersection(ring) and not too_few_points(ring, is_ring=True)
    assert is_valid(Polygon(ring)) == expected
