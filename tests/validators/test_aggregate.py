"""Tests for validators.aggregate."""

from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import (
    AtIndex, EXTERIOR, GeometryCollectionPosition, GeometryPosition, Interior, LineStringPosition,
    MultiLineStringPosition, MultiPolygonPosition, PointPosition, PolygonPosition, WHOLE_ELEMENT,
)
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.validators.aggregate import (
    lift_into_geometry_collection, lift_into_multi_line_string, lift_into_multi_polygon,
)
import pytest


class TestLift:
    def test_into_multi_line_string_keeps_coordinate(self):
        findings = [ProblemAtPosition(Problem.NOT_FINITE, LineStringPosition(AtIndex(3)))]
        assert list(lift_into_multi_line_string(GeometryPosition(2), findings)) == [
            ProblemAtPosition(Problem.NOT_FINITE, MultiLineStringPosition(GeometryPosition(2), AtIndex(3))),
        ]

    def test_into_multi_polygon_keeps_ring_and_coordinate(self):
        findings = [
            ProblemAtPosition(Problem.TOO_FEW_POINTS, PolygonPosition(Interior(1), WHOLE_ELEMENT)),
            ProblemAtPosition(Problem.NOT_FINITE, PolygonPosition(EXTERIOR, AtIndex(0))),
        ]
        assert list(lift_into_multi_polygon(GeometryPosition(4), findings)) == [
            ProblemAtPosition(
                Problem.TOO_FEW_POINTS, MultiPolygonPosition(GeometryPosition(4), Interior(1), WHOLE_ELEMENT),
            ),
            ProblemAtPosition(
                Problem.NOT_FINITE, MultiPolygonPosition(GeometryPosition(4), EXTERIOR, AtIndex(0)),
            ),
        ]

    def test_into_geometry_collection_accepts_any_position(self):
        findings = [
            ProblemAtPosition(Problem.NOT_FINITE, PointPosition()),
            ProblemAtPosition(Problem.SELF_INTERSECTION, PolygonPosition(EXTERIOR, WHOLE_ELEMENT)),
        ]
        lifted = list(lift_into_geometry_collection(GeometryPosition(0), findings))
        assert [f.position for f in lifted] == [
            GeometryCollectionPosition(GeometryPosition(0), PointPosition()),
            GeometryCollectionPosition(GeometryPosition(0), PolygonPosition(EXTERIOR, WHOLE_ELEMENT)),
        ]
        assert [f.problem for f in lifted] == [Problem.NOT_FINITE, Problem.SELF_INTERSECTION]

    def test_empty(self):
        assert list(lift_into_multi_polygon(GeometryPosition(0), [])) == []

    def test_mismatched_position_raises(self):
        findings = [ProblemAtPosition(Problem.NOT_FINITE, PointPosition())]
        lifted = lift_into_multi_line_string(GeometryPosition(0), findings)
        with pytest.raises(NotImplementedError):
            list(lifted)

    def test_polygon_findings_cannot_go_into_multi_line_string(self):
        findings = [ProblemAtPosition(Problem.TOO_FEW_POINTS, PolygonPosition(EXTERIOR, WHOLE_ELEMENT))]
        with pytest.raises(NotImplementedError):
            list(lift_into_multi_line_string(GeometryPosition(0), findings))
