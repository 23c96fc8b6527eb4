from geovalidity.core.models import Point
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.validators import coord
from typing import Iterator


# Points have no validity constraint besides finite coordinates
def iter_problems(point: Point) -> Iterator[ProblemAtPosition]:
    return coord.iter_problems(point.coord)
