from geovalidity.core.models import Coord
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import PointPosition
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import check_coord_is_not_finite
from typing import Iterator


def iter_problems(coord: Coord) -> Iterator[ProblemAtPosition]:
    if check_coord_is_not_finite(coord):
        yield ProblemAtPosition(Problem.NOT_FINITE, PointPosition())
