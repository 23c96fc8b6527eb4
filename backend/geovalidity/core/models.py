from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Coord:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # Compared by value so that NaN never equals anything, itself included
    def __eq__(self, other) -> bool:
        if not isinstance(other, Coord):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))


def to_coord(value) -> Coord:
    if isinstance(value, Coord):
        return value
    # Extra dimensions (z, m) are ignored
    return Coord(float(value[0]), float(value[1]))


## Single geometries

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def coord(self) -> Coord:
        return Coord(self.x, self.y)


@dataclass(frozen=True)
class Line:
    start: Coord
    end: Coord

    def __post_init__(self):
        object.__setattr__(self, 'start', to_coord(self.start))
        object.__setattr__(self, 'end', to_coord(self.end))


@dataclass(frozen=True)
class Rect:
    min: Coord
    max: Coord

    def __post_init__(self):
        object.__setattr__(self, 'min', to_coord(self.min))
        object.__setattr__(self, 'max', to_coord(self.max))


@dataclass(frozen=True)
class Triangle:
    v0: Coord
    v1: Coord
    v2: Coord

    def __post_init__(self):
        object.__setattr__(self, 'v0', to_coord(self.v0))
        object.__setattr__(self, 'v1', to_coord(self.v1))
        object.__setattr__(self, 'v2', to_coord(self.v2))

    def vertices(self) -> tuple[Coord, Coord, Coord]:
        return self.v0, self.v1, self.v2


@dataclass(frozen=True)
class LineString:
    coords: tuple[Coord, ...]

    def __post_init__(self):
        object.__setattr__(self, 'coords', tuple(to_coord(c) for c in self.coords))

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def is_closed(self) -> bool:
        return len(self.coords) > 0 and self.coords[0] == self.coords[-1]

    def closed(self) -> 'LineString':
        if len(self.coords) == 0 or self.is_closed():
            return self
        return LineString(self.coords + (self.coords[0],))


def to_line_string(value) -> LineString:
    if isinstance(value, LineString):
        return value
    return LineString(tuple(value))


@dataclass(frozen=True)
class Polygon:
    exterior: LineString
    interiors: tuple[LineString, ...] = ()

    def __post_init__(self):
        # Rings are closed on construction, like most geometry libraries do
        object.__setattr__(self, 'exterior', to_line_string(self.exterior).closed())
        object.__setattr__(self, 'interiors', tuple(to_line_string(ring).closed() for ring in self.interiors))

    def rings(self) -> tuple[LineString, ...]:
        return (self.exterior,) + self.interiors


## Multi geometries

@dataclass(frozen=True)
class MultiPoint:
    points: tuple[Point, ...]

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(
            p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))
            for p in self.points
        ))


@dataclass(frozen=True)
class MultiLineString:
    line_strings: tuple[LineString, ...]

    def __post_init__(self):
        object.__setattr__(self, 'line_strings', tuple(to_line_string(ls) for ls in self.line_strings))


@dataclass(frozen=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...]

    def __post_init__(self):
        object.__setattr__(self, 'polygons', tuple(self.polygons))


@dataclass(frozen=True)
class GeometryCollection:
    geometries: tuple['Geometry', ...]

    def __post_init__(self):
        object.__setattr__(self, 'geometries', tuple(self.geometries))


Geometry = Point | Line | Rect | Triangle | LineString | Polygon | MultiPoint | MultiLineString | MultiPolygon | GeometryCollection
