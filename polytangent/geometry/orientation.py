"""
Orientation Predicate
=====================

Signed-area test for three points.

Uses cross product: (p2 - p1) x (p3 - p1)

    > 0: p3 is left of the directed line p1 -> p2
    < 0: p3 is right of it
    = 0: collinear

Computed in Python floats (IEEE double). Near-collinear inputs with very large
coordinates can lose the sign to cancellation.
"""

from polytangent.geometry.shapes import Point2D


def orientation(p1: Point2D, p2: Point2D, p3: Point2D) -> float:
    """
    Signed area (times two) of the triangle p1, p2, p3.

    Args:
        p1: Line start
        p2: Line end
        p3: Point to classify

    Returns:
        Positive if p3 is left of p1 -> p2, negative if right, 0 if collinear
    """
    return (p2.x - p1.x) * (p3.y - p1.y) - (p3.x - p1.x) * (p2.y - p1.y)


def is_above(p1: Point2D, p2: Point2D, p3: Point2D) -> bool:
    """True if p3 is strictly left of p1 -> p2."""
    return orientation(p1, p2, p3) > 0


def is_below(p1: Point2D, p2: Point2D, p3: Point2D) -> bool:
    """True if p3 is strictly right of p1 -> p2."""
    return orientation(p1, p2, p3) < 0
