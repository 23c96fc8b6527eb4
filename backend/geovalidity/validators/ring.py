"""
Ring topology checks.

A ring is simple when no two of its segments intersect, except consecutive
segments meeting at their shared vertex (the closing vertex included).
Self-intersection is an all-pairs scan over the segments, O(n²) in time and
memory, which is fine for rings up to a few thousand vertices. Larger rings
would need a spatial index.
"""
from geovalidity.core.constants import MIN_LINE_STRING_POINTS, MIN_RING_POINTS
from geovalidity.core.models import LineString
from geovalidity.utils import coords_array, remove_repeated_points, to_segments
import logging
import numpy as np
import shapely


logger = logging.getLogger(__name__)


def too_few_points(line_string: LineString, is_ring: bool) -> bool:
    minimum = MIN_RING_POINTS if is_ring else MIN_LINE_STRING_POINTS
    return len(remove_repeated_points(coords_array(line_string))) < minimum

def is_usable(ring: LineString) -> bool:
    """Whether the ring can take part in relate/contains queries."""
    coords = coords_array(ring)
    return bool(np.isfinite(coords).all()) and len(remove_repeated_points(coords)) >= MIN_RING_POINTS

def has_self_intersection(ring: LineString) -> bool:
    coords = remove_repeated_points(coords_array(ring))
    # Short or non-finite rings are reported as TooFewPoints / NotFinite instead
    if len(coords) < MIN_RING_POINTS or not np.isfinite(coords).all():
        return False

    closed = bool(np.array_equal(coords[0], coords[-1]))
    segments = to_segments(coords)
    count = len(segments)
    hits = shapely.intersects(segments[:, np.newaxis], segments[np.newaxis, :])

    for i, j in zip(*np.nonzero(np.triu(hits, k=1))):
        if _are_consecutive(i, j, count, closed) and _meet_at_vertex_only(segments[i], segments[j]):
            continue
        logger.debug('Segments %d and %d of ring intersect', i, j)
        return True
    return False

def _are_consecutive(i: int, j: int, count: int, closed: bool) -> bool:
    return j == i + 1 or (closed and i == 0 and j == count - 1)

def _meet_at_vertex_only(a: shapely.LineString, b: shapely.LineString) -> bool:
    # Consecutive segments always share a vertex, anything larger than a point is an overlap
    return shapely.intersection(a, b).geom_type == 'Point'
