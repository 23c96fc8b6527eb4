from geovalidity.core.models import MultiLineString
from geovalidity.schemas.positions import GeometryPosition
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.validators import linestring
from geovalidity.validators.aggregate import lift_into_multi_line_string
from typing import Iterator


def iter_problems(multi_line_string: MultiLineString) -> Iterator[ProblemAtPosition]:
    for index, line_string in enumerate(multi_line_string.line_strings):
        yield from lift_into_multi_line_string(GeometryPosition(index), linestring.iter_problems(line_string))
