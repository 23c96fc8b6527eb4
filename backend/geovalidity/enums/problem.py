from enum import StrEnum


class Problem(StrEnum):
    # A coordinate is NaN or infinite
    NOT_FINITE = 'NotFinite'
    # A line string or a polygon ring has too few distinct points
    TOO_FEW_POINTS = 'TooFewPoints'
    IDENTICAL_COORDS = 'IdenticalCoords'
    COLLINEAR_COORDS = 'CollinearCoords'
    SELF_INTERSECTION = 'SelfIntersection'
    # Two rings of a polygon share a common line
    INTERSECTING_RINGS_ON_A_LINE = 'IntersectingRingsOnALine'
    # Two interior rings of a polygon share a common area
    INTERSECTING_RINGS_ON_AN_AREA = 'IntersectingRingsOnAnArea'
    INTERIOR_RING_NOT_CONTAINED_IN_EXTERIOR_RING = 'InteriorRingNotContainedInExteriorRing'
    # Polygons of a multi-polygon
    ELEMENTS_OVERLAPS = 'ElementsOverlaps'
    ELEMENTS_TOUCH_ON_A_LINE = 'ElementsTouchOnALine'
    ELEMENTS_ARE_IDENTICAL = 'ElementsAreIdentical'
