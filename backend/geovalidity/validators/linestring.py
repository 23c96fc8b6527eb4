from geovalidity.core.models import LineString
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import AtIndex, LineStringPosition, WHOLE_ELEMENT
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import non_finite_indices
from geovalidity.validators.ring import too_few_points
from typing import Iterator


# A line string needs at least two distinct points, all of them finite
def iter_problems(line_string: LineString) -> Iterator[ProblemAtPosition]:
    if too_few_points(line_string, is_ring=False):
        yield ProblemAtPosition(Problem.TOO_FEW_POINTS, LineStringPosition(WHOLE_ELEMENT))

    for index in non_finite_indices(line_string):
        yield ProblemAtPosition(Problem.NOT_FINITE, LineStringPosition(AtIndex(index)))
