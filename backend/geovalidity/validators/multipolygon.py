"""
A multi-polygon is valid when all its polygons are valid, their interiors do
not intersect and they touch each other only at points.

Findings are grouped by element: first the element's own polygon findings,
then its conflicts with every other element. Conflicts are symmetric, so both
elements of a conflicting pair get a finding.
"""
from geovalidity.core.models import MultiPolygon, Polygon
from geovalidity.enums.coord_pos import CoordPos
from geovalidity.enums.dimensions import Dimensions
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import EXTERIOR, GeometryPosition, MultiPolygonPosition, WHOLE_ELEMENT
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import coords_array, polygon_to_shapely, relate
from geovalidity.validators import polygon as polygon_validator
from geovalidity.validators.aggregate import lift_into_multi_polygon
from geovalidity.validators.ring import is_usable
import numpy as np
from typing import Iterator


def iter_problems(multi_polygon: MultiPolygon) -> Iterator[ProblemAtPosition]:
    polygons = multi_polygon.polygons
    shapes = [
        polygon_to_shapely(polygon) if _is_usable(polygon) else None
        for polygon in polygons
    ]

    for j, polygon in enumerate(polygons):
        yield from lift_into_multi_polygon(GeometryPosition(j), polygon_validator.iter_problems(polygon))

        position = MultiPolygonPosition(GeometryPosition(j), EXTERIOR, WHOLE_ELEMENT)
        for i, other in enumerate(polygons):
            if i == j:
                continue
            if _are_identical(polygon, other):
                yield ProblemAtPosition(Problem.ELEMENTS_ARE_IDENTICAL, position)
                continue
            if shapes[j] is None or shapes[i] is None:
                continue

            matrix = relate(shapes[j], shapes[i])
            if matrix.get(CoordPos.INSIDE, CoordPos.INSIDE) == Dimensions.TWO_DIMENSIONAL:
                yield ProblemAtPosition(Problem.ELEMENTS_OVERLAPS, position)
            if matrix.get(CoordPos.ON_BOUNDARY, CoordPos.ON_BOUNDARY) == Dimensions.ONE_DIMENSIONAL:
                yield ProblemAtPosition(Problem.ELEMENTS_TOUCH_ON_A_LINE, position)

def _is_usable(polygon: Polygon) -> bool:
    return all(is_usable(ring) for ring in polygon.rings())

def _are_identical(a: Polygon, b: Polygon) -> bool:
    # Same object or not, a NaN coordinate never matches
    if len(a.interiors) != len(b.interiors):
        return False
    return all(
        np.array_equal(coords_array(ring_a), coords_array(ring_b))
        for ring_a, ring_b in zip(a.rings(), b.rings())
    )
