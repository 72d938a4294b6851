# pathkernel/geometry/primitives.py
"""
Scalar geometry helpers used per vertex by the path tessellator.

These take raw coordinates wherever the caller is iterating over point
arrays, and Vector2 values where a point is already materialized.
"""
from typing import Tuple, TypeVar
from pathkernel.geometry.vector import Vector2

N = TypeVar('N', int, float)


def clamp(value: N, lo: N, hi: N) -> N:
    """Clamp value into [lo, hi]. With lo > hi the lower bound wins."""
    if value < lo:
        return lo
    elif value > hi:
        return hi
    return value


def triangle_signed_area_2x(a: Vector2, b: Vector2, c: Vector2) -> float:
    """
    Twice the signed area of triangle abc.

    The sign gives the winding of the triangle; callers halve the
    magnitude themselves when they need the true area.
    """
    abx = b.x - a.x
    aby = b.y - a.y
    acx = c.x - a.x
    acy = c.y - a.y
    return acx * aby - abx * acy


def points_nearly_equal(x1: float, y1: float, x2: float, y2: float, tol: float) -> bool:
    """True if the squared distance between the points is below tol squared."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy < tol * tol


def cross(dx0: float, dy0: float, dx1: float, dy1: float) -> float:
    """2D cross product of d1 with d0. Winding checks depend on this order."""
    return dx1 * dy0 - dx0 * dy1


def normalize(v: Vector2) -> Tuple[Vector2, float]:
    """Unit vector of v together with the length of v. See Vector2.normalized."""
    return v.normalized()


def point_segment_distance_squared(x: float, y: float,
                                   px: float, py: float,
                                   qx: float, qy: float) -> float:
    """
    Squared distance from point (x, y) to the segment p-q.

    The projection parameter is clamped to the segment, so points beyond
    either end measure to the nearest endpoint. A zero-length segment
    behaves as the single point p.
    """
    pqx = qx - px
    pqy = qy - py
    dx = x - px
    dy = y - py
    d = pqx * pqx + pqy * pqy
    t = pqx * dx + pqy * dy
    if d > 0:
        t /= d
    t = clamp(t, 0.0, 1.0)
    dx = px + t * pqx - x
    dy = py + t * pqy - y
    return dx * dx + dy * dy
