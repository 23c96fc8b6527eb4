from geovalidity.core.models import Coord, LineString, Polygon
from geovalidity.core.settings import Settings
from geovalidity.enums.coord_pos import CoordPos
from geovalidity.enums.dimensions import Dimensions
import numpy as np
import shapely


def coords_array(line_string: LineString) -> np.ndarray:
    return np.array([(c.x, c.y) for c in line_string.coords], dtype=float).reshape(-1, 2)

def check_coord_is_not_finite(coord: Coord) -> bool:
    return not np.isfinite((coord.x, coord.y)).all()

def non_finite_indices(line_string: LineString) -> list[int]:
    coords = coords_array(line_string)
    return np.flatnonzero(~np.isfinite(coords).all(axis=1)).tolist()

def check_points_are_collinear(p0: Coord, p1: Coord, p2: Coord, tolerance: float | None = None) -> bool:
    if tolerance is None:
        tolerance = Settings.COLLINEARITY_TOLERANCE
    det = (p1.x - p0.x) * (p2.y - p0.y) - (p1.y - p0.y) * (p2.x - p0.x)
    return abs(det) < tolerance

def remove_repeated_points(coords: np.ndarray) -> np.ndarray:
    if len(coords) < 2:
        return coords
    keep = np.ones(len(coords), dtype=bool)
    keep[1:] = np.any(coords[1:] != coords[:-1], axis=1)
    return coords[keep]

def to_segments(coords: np.ndarray) -> np.ndarray:
    """Array of two-point shapely LineStrings, one per consecutive pair of coordinates."""
    return shapely.linestrings(np.stack([coords[:-1], coords[1:]], axis=1))


## Shapely conversions

def ring_to_shapely(ring: LineString) -> shapely.LineString:
    return shapely.LineString(coords_array(ring))

def ring_to_shapely_polygon(ring: LineString) -> shapely.Polygon:
    return shapely.Polygon(coords_array(ring))

def polygon_to_shapely(polygon: Polygon) -> shapely.Polygon:
    return shapely.Polygon(
        coords_array(polygon.exterior),
        [coords_array(interior) for interior in polygon.interiors],
    )


## Topological predicates

class IntersectionMatrix:
    """DE-9IM matrix as returned by shapely, rows and columns ordered interior, boundary, exterior."""

    def __init__(self, pattern: str):
        if len(pattern) != 9:
            raise NotImplementedError(f'Unexpected DE-9IM pattern: {pattern!r}')
        self.pattern = pattern

    def get(self, part_a: CoordPos, part_b: CoordPos) -> Dimensions:
        return Dimensions.from_de9im(self.pattern[3 * part_a + part_b])

    def __repr__(self) -> str:
        return f'IntersectionMatrix({self.pattern!r})'

def relate(a: shapely.Geometry, b: shapely.Geometry) -> IntersectionMatrix:
    return IntersectionMatrix(shapely.relate(a, b))

def contains(a: shapely.Geometry, b: shapely.Geometry) -> bool:
    return bool(shapely.contains(a, b))
