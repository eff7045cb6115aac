"""
Simple linear algebra utilities for 2D points/vectors.

Coordinates are either scaled ints (exact) or floats; every function works
with both. ``epsilon`` is the snap-to-zero threshold of the arithmetic mode
(0 for fixed point, where only a literal zero is degenerate).
"""

from typing import NamedTuple, Union

Num = Union[int, float]


class Point(NamedTuple):
    x: Num
    y: Num


Vector = Point


def subtract(a: Point, b: Point) -> Vector:
    """Vector from a to b, i.e. ``b - a``."""
    return Vector(b.x - a.x, b.y - a.y)


def cross_product(u: Vector, v: Vector) -> Num:
    return u.x * v.y - u.y * v.x


def triangle_area(a: Point, b: Point, c: Point, epsilon: Num = 0) -> Num:
    """Doubled signed area of abc, positive for counter-clockwise.

    Values with ``|area| <= epsilon`` are snapped to exactly 0.
    """
    area = cross_product(subtract(a, b), subtract(a, c))
    if abs(area) <= epsilon:
        return 0
    return area


def inside_triangle(v: Point, a: Point, b: Point, c: Point,
                    epsilon: Num = 0) -> bool:
    """True iff v lies strictly inside triangle abc.

    A point on an edge or coincident with a corner is NOT inside. This lets
    holes be connected to the outer ring via coincident edges of opposite
    directions: the bridge vertices never block ears on either side.
    """
    vab = triangle_area(v, a, b, epsilon)
    if vab == 0:
        return False

    vbc = triangle_area(v, b, c, epsilon)
    if vbc == 0:
        return False

    if (vab > 0) != (vbc > 0):
        return False

    vca = triangle_area(v, c, a, epsilon)
    if vca == 0:
        return False

    return (vbc > 0) == (vca > 0)
