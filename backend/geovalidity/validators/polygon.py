"""
Polygon validity, following the OGC Simple Features rules:

- every ring is simple and has at least three distinct vertices,
- interior rings are contained in the exterior ring,
- rings may touch each other at points but never along a line,
- interior rings do not overlap each other.

Findings come out ring by ring (interior rings first, then the exterior),
followed by the relations of each interior ring with the exterior ring and
with the other interior rings. A conflict between two interior rings is
reported on both of them.

The simply-connected interior rule (rings touching so that the polygon is
split into several parts) is not checked.
"""
from geovalidity.core.models import LineString, Polygon
from geovalidity.enums.coord_pos import CoordPos
from geovalidity.enums.dimensions import Dimensions
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import (
    AtIndex, EXTERIOR, Interior, PolygonPosition, RingRole, WHOLE_ELEMENT,
)
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import contains, non_finite_indices, relate, ring_to_shapely, ring_to_shapely_polygon
from geovalidity.validators.ring import has_self_intersection, is_usable, too_few_points
import logging
from typing import Iterator


logger = logging.getLogger(__name__)


def iter_problems(polygon: Polygon) -> Iterator[ProblemAtPosition]:
    for index, interior in enumerate(polygon.interiors):
        yield from _iter_ring_problems(Interior(index), interior)
    yield from _iter_ring_problems(EXTERIOR, polygon.exterior)

    yield from _iter_interior_ring_relation_problems(polygon)

def _iter_ring_problems(role: RingRole, ring: LineString) -> Iterator[ProblemAtPosition]:
    for index in non_finite_indices(ring):
        yield ProblemAtPosition(Problem.NOT_FINITE, PolygonPosition(role, AtIndex(index)))

    if too_few_points(ring, is_ring=True):
        yield ProblemAtPosition(Problem.TOO_FEW_POINTS, PolygonPosition(role, WHOLE_ELEMENT))

    if has_self_intersection(ring):
        yield ProblemAtPosition(Problem.SELF_INTERSECTION, PolygonPosition(role, WHOLE_ELEMENT))

def _iter_interior_ring_relation_problems(polygon: Polygon) -> Iterator[ProblemAtPosition]:
    if not polygon.interiors:
        return
    if not is_usable(polygon.exterior):
        logger.debug('Exterior ring is degenerate, skipping interior ring relations')
        return

    exterior = ring_to_shapely_polygon(polygon.exterior)
    # Degenerate interior rings were already reported and take no part in the relations
    holes = [
        ring_to_shapely_polygon(ring) if is_usable(ring) else None
        for ring in polygon.interiors
    ]

    for j, ring in enumerate(polygon.interiors):
        if holes[j] is None:
            continue
        position = PolygonPosition(Interior(j), WHOLE_ELEMENT)
        ring_line = ring_to_shapely(ring)

        # Touching the exterior ring on one or more points still counts as contained
        if not contains(exterior, ring_line):
            yield ProblemAtPosition(Problem.INTERIOR_RING_NOT_CONTAINED_IN_EXTERIOR_RING, position)

        # Exterior and interior rings may only touch at points
        matrix = relate(exterior, ring_line)
        if matrix.get(CoordPos.ON_BOUNDARY, CoordPos.INSIDE) == Dimensions.ONE_DIMENSIONAL:
            yield ProblemAtPosition(Problem.INTERSECTING_RINGS_ON_A_LINE, position)

        for i, other in enumerate(holes):
            if i == j or other is None:
                continue
            matrix = relate(holes[j], other)
            if matrix.get(CoordPos.INSIDE, CoordPos.INSIDE) == Dimensions.TWO_DIMENSIONAL:
                yield ProblemAtPosition(Problem.INTERSECTING_RINGS_ON_AN_AREA, position)
            if matrix.get(CoordPos.ON_BOUNDARY, CoordPos.ON_BOUNDARY) == Dimensions.ONE_DIMENSIONAL:
                yield ProblemAtPosition(Problem.INTERSECTING_RINGS_ON_A_LINE, position)
