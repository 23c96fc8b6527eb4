"""
Positions locate a validity problem inside a geometry.

Every position knows how to describe itself in plain words, e.g.
``coordinate 2 of interior ring 0 of polygon 1 of multi-polygon``.
"""
from dataclasses import dataclass
from typing import ClassVar


## Coordinate inside a line or a ring

@dataclass(frozen=True)
class AtIndex:
    index: int

    def describe(self) -> str:
        return f'coordinate {self.index} of '


@dataclass(frozen=True)
class WholeElement:

    def describe(self) -> str:
        return ''


WHOLE_ELEMENT = WholeElement()

CoordinatePosition = AtIndex | WholeElement


## Ring inside a polygon

@dataclass(frozen=True)
class Exterior:

    def describe(self) -> str:
        return 'exterior ring'


@dataclass(frozen=True)
class Interior:
    index: int

    def describe(self) -> str:
        return f'interior ring {self.index}'


EXTERIOR = Exterior()

RingRole = Exterior | Interior


@dataclass(frozen=True)
class GeometryPosition:
    index: int


## Problem positions, one per geometry kind

@dataclass(frozen=True)
class PointPosition:
    KIND: ClassVar[str] = 'Point'

    def describe(self) -> str:
        return 'point'


@dataclass(frozen=True)
class LinePosition:
    KIND: ClassVar[str] = 'Line'
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}line'


@dataclass(frozen=True)
class TrianglePosition:
    KIND: ClassVar[str] = 'Triangle'
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}triangle'


@dataclass(frozen=True)
class RectPosition:
    KIND: ClassVar[str] = 'Rect'
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}rect'


@dataclass(frozen=True)
class MultiPointPosition:
    KIND: ClassVar[str] = 'MultiPoint'
    geometry: GeometryPosition

    def describe(self) -> str:
        return f'point {self.geometry.index} of multi-point'


@dataclass(frozen=True)
class LineStringPosition:
    KIND: ClassVar[str] = 'LineString'
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}line string'


@dataclass(frozen=True)
class MultiLineStringPosition:
    KIND: ClassVar[str] = 'MultiLineString'
    geometry: GeometryPosition
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}line string {self.geometry.index} of multi-line-string'


@dataclass(frozen=True)
class PolygonPosition:
    KIND: ClassVar[str] = 'Polygon'
    ring: RingRole
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}{self.ring.describe()} of polygon'


@dataclass(frozen=True)
class MultiPolygonPosition:
    KIND: ClassVar[str] = 'MultiPolygon'
    geometry: GeometryPosition
    ring: RingRole
    coordinate: CoordinatePosition

    def describe(self) -> str:
        return f'{self.coordinate.describe()}{self.ring.describe()} of polygon {self.geometry.index} of multi-polygon'


@dataclass(frozen=True)
class GeometryCollectionPosition:
    KIND: ClassVar[str] = 'GeometryCollection'
    geometry: GeometryPosition
    inner: 'ProblemPosition'

    def describe(self) -> str:
        return f'{self.inner.describe()} of geometry {self.geometry.index} of geometry collection'


ProblemPosition = (
    PointPosition
    | LinePosition
    | TrianglePosition
    | RectPosition
    | MultiPointPosition
    | LineStringPosition
    | MultiLineStringPosition
    | PolygonPosition
    | MultiPolygonPosition
    | GeometryCollectionPosition
)
