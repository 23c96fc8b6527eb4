import enum


class CoordPos(enum.IntEnum):
    INSIDE = 0
    ON_BOUNDARY = 1
    OUTSIDE = 2
