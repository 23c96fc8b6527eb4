# Minimum number of points left after removing consecutive duplicates
MIN_RING_POINTS = 4
MIN_LINE_STRING_POINTS = 2
