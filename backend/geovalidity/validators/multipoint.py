from geovalidity.core.models import MultiPoint
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import GeometryPosition, MultiPointPosition
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import check_coord_is_not_finite
from typing import Iterator


def iter_problems(multi_point: MultiPoint) -> Iterator[ProblemAtPosition]:
    for index, point in enumerate(multi_point.points):
        if check_coord_is_not_finite(point.coord):
            yield ProblemAtPosition(Problem.NOT_FINITE, MultiPointPosition(GeometryPosition(index)))
