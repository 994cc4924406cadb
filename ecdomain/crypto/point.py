"""
Copyright (c) 2026, the ecdomain developers
See LICENSE for details
"""


class Point:
    """
    Point is an affine (x, y) coordinate pair. It carries no curve and makes
    no claim of lying on one; use CurveFp.contains for that. There is no
    point-at-infinity value at this layer.
    """

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Point(x={self.x:#x}, y={self.y:#x})"
