from geovalidity.core.models import (
    Coord, GeometryCollection, Line, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
    Rect, Triangle,
)
from geovalidity.schemas.positions import GeometryPosition
from geovalidity.schemas.problems import ProblemAtPosition
from geovalidity.validators import (
    coord, line, linestring, multilinestring, multipoint, multipolygon, point, polygon, rect, triangle,
)
from geovalidity.validators.aggregate import lift_into_geometry_collection
from typing import Iterator


def iter_problems(geometry) -> Iterator[ProblemAtPosition]:
    validator = _VALIDATORS.get(type(geometry))
    if validator is None:
        raise NotImplementedError(f'No validator for {type(geometry).__name__}')
    return validator(geometry)

# A collection is valid when all its members are, members can be collections themselves
def _iter_geometry_collection_problems(collection: GeometryCollection) -> Iterator[ProblemAtPosition]:
    for index, geometry in enumerate(collection.geometries):
        yield from lift_into_geometry_collection(GeometryPosition(index), iter_problems(geometry))


_VALIDATORS = {
    Coord: coord.iter_problems,
    Point: point.iter_problems,
    Line: line.iter_problems,
    Rect: rect.iter_problems,
    Triangle: triangle.iter_problems,
    LineString: linestring.iter_problems,
    Polygon: polygon.iter_problems,
    MultiPoint: multipoint.iter_problems,
    MultiLineString: multilinestring.iter_problems,
    MultiPolygon: multipolygon.iter_problems,
    GeometryCollection: _iter_geometry_collection_problems,
}
