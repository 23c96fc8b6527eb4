"""
Re-label the findings of a child geometry with its index inside the parent.

Each wrapper only accepts the position kind its child validator produces. Any
other kind means a validator and its caller disagree, which is a bug and not
a validity finding, so it raises instead of being reported.
"""
from geovalidity.schemas.positions import (
    GeometryCollectionPosition, GeometryPosition, LineStringPosition, MultiLineStringPosition,
    MultiPolygonPosition, PolygonPosition, ProblemPosition,
)
from geovalidity.schemas.problems import ProblemAtPosition
from typing import Callable, Iterable, Iterator


def lift_into_multi_line_string(index: GeometryPosition, findings: Iterable[ProblemAtPosition]) -> Iterator[ProblemAtPosition]:
    def wrap(position: LineStringPosition) -> MultiLineStringPosition:
        return MultiLineStringPosition(index, position.coordinate)
    return _lift(findings, LineStringPosition, wrap, 'multi-line-string')

def lift_into_multi_polygon(index: GeometryPosition, findings: Iterable[ProblemAtPosition]) -> Iterator[ProblemAtPosition]:
    def wrap(position: PolygonPosition) -> MultiPolygonPosition:
        return MultiPolygonPosition(index, position.ring, position.coordinate)
    return _lift(findings, PolygonPosition, wrap, 'multi-polygon')

def lift_into_geometry_collection(index: GeometryPosition, findings: Iterable[ProblemAtPosition]) -> Iterator[ProblemAtPosition]:
    def wrap(position: ProblemPosition) -> GeometryCollectionPosition:
        return GeometryCollectionPosition(index, position)
    return _lift(findings, ProblemPosition, wrap, 'geometry collection')

def _lift(findings: Iterable[ProblemAtPosition], accepted, wrap: Callable, parent_name: str) -> Iterator[ProblemAtPosition]:
    for finding in findings:
        if not isinstance(finding.position, accepted):
            raise NotImplementedError(
                f'Cannot place a {type(finding.position).__name__} inside a {parent_name}'
            )
        yield ProblemAtPosition(finding.problem, wrap(finding.position))
