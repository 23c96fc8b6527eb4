from geovalidity.core.models import Line
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import AtIndex, LinePosition
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import check_coord_is_not_finite
from typing import Iterator


def iter_problems(line: Line) -> Iterator[ProblemAtPosition]:
    if check_coord_is_not_finite(line.start):
        yield ProblemAtPosition(Problem.NOT_FINITE, LinePosition(AtIndex(0)))
    if check_coord_is_not_finite(line.end):
        yield ProblemAtPosition(Problem.NOT_FINITE, LinePosition(AtIndex(1)))

    if line.start == line.end:
        yield ProblemAtPosition(Problem.IDENTICAL_COORDS, LinePosition(AtIndex(0)))
