from geovalidity.core.models import Rect
from geovalidity.enums.problem import Problem
from geovalidity.schemas.positions import AtIndex, RectPosition
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.utils import check_coord_is_not_finite
from typing import Iterator


def iter_problems(rect: Rect) -> Iterator[ProblemAtPosition]:
    for index, corner in enumerate((rect.min, rect.max)):
        if check_coord_is_not_finite(corner):
            yield ProblemAtPosition(Problem.NOT_FINITE, RectPosition(AtIndex(index)))
