from geovalidity.core.models import Triangle
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import AtIndex, TrianglePosition, WHOLE_ELEMENT
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import check_coord_is_not_finite, check_points_are_collinear
from typing import Iterator


# The three vertices must be distinct and not collinear
def iter_problems(triangle: Triangle) -> Iterator[ProblemAtPosition]:
    for index, vertex in enumerate(triangle.vertices()):
        if check_coord_is_not_finite(vertex):
            yield ProblemAtPosition(Problem.NOT_FINITE, TrianglePosition(AtIndex(index)))

    if triangle.v0 == triangle.v1 or triangle.v0 == triangle.v2:
        yield ProblemAtPosition(Problem.IDENTICAL_COORDS, TrianglePosition(AtIndex(0)))
    if triangle.v1 == triangle.v2:
        yield ProblemAtPosition(Problem.IDENTICAL_COORDS, TrianglePosition(AtIndex(1)))

    if check_points_are_collinear(triangle.v0, triangle.v1, triangle.v2):
        yield ProblemAtPosition(Problem.COLLINEAR_COORDS, TrianglePosition(WHOLE_ELEMENT))
