"""
Exact geometry kernel.

All decisions are taken on the integer numerators of RationalPoint values:
differences are brought to a common positive denominator by
cross-multiplication, so only the signs of integer products are ever
compared. No division, no square roots, no floating point.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Union

from .types import RationalPoint


def _delta(p: RationalPoint, q: RationalPoint) -> tuple[int, int]:
    """Vector q - p, scaled by the positive factor p.d * q.d."""
    return (q.x * p.d - p.x * q.d, q.y * p.d - p.y * q.d)


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def orientation(p: RationalPoint, q: RationalPoint, r: RationalPoint) -> int:
    """
    Orientation of r relative to the directed line p -> q.

    Returns:
        +1 if r is to the left (counter-clockwise), -1 if to the right,
        0 if the three points are collinear (or p == q).
    """
    ux, uy = _delta(p, q)
    vx, vy = _delta(p, r)
    return _sign(ux * vy - uy * vx)


def _projection(origin: RationalPoint, direction: tuple[int, int], p: RationalPoint) -> Fraction:
    """Position of p along direction, measured from origin."""
    dx, dy = _delta(origin, p)
    # _delta scales by origin.d * p.d; undo the p-dependent part exactly.
    return Fraction(dx * direction[0] + dy * direction[1], p.d)


def _collinear_overlap(
    a1: RationalPoint, a2: RationalPoint, b1: RationalPoint, b2: RationalPoint
) -> bool:
    """1-D overlap test for segments known to lie on one line."""
    direction = _delta(a1, a2)
    origin = a1
    if direction == (0, 0):
        direction = _delta(b1, b2)
        origin = b1
    if direction == (0, 0):
        # Both segments are single points.
        return a1 == b1

    ta = sorted((_projection(origin, direction, a1), _projection(origin, direction, a2)))
    tb = sorted((_projection(origin, direction, b1), _projection(origin, direction, b2)))
    # Disjoint only if one lies strictly before the other; touching counts.
    return not (ta[1] < tb[0] or tb[1] < ta[0])


def crosses(a1: RationalPoint, a2: RationalPoint, b1: RationalPoint, b2: RationalPoint) -> bool:
    """
    Determine whether segment a1-a2 intersects segment b1-b2.

    Any shared point counts, including an endpoint lying on the other
    segment. Collinear (and zero-length) segments fall back to an overlap
    test along their common line.

    The result is the same under swapping the two segments or the endpoints
    of either segment.

    Args:
        a1, a2: Endpoints of the first segment
        b1, b2: Endpoints of the second segment

    Returns:
        True if the segments share at least one point
    """
    o1 = orientation(a1, a2, b1)
    o2 = orientation(a1, a2, b2)
    if o1 * o2 > 0:
        return False

    o3 = orientation(b1, b2, a1)
    o4 = orientation(b1, b2, a2)
    if o3 * o4 > 0:
        return False

    if o1 == 0 and o2 == 0 and o3 == 0 and o4 == 0:
        return _collinear_overlap(a1, a2, b1, b2)

    return True


def point_on_segment(p: RationalPoint, a: RationalPoint, b: RationalPoint) -> bool:
    """True if p lies on the closed segment a-b."""
    return crosses(a, b, p, p)


def mix(a: RationalPoint, b: RationalPoint, t: Union[int, Fraction]) -> RationalPoint:
    """
    Exact linear interpolation a + t * (b - a).

    Used to interpolate point positions between two puzzle snapshots
    (e.g. while animating a move). t = 0 gives a, t = 1 gives b.
    """
    t = Fraction(t)
    num, den = t.numerator, t.denominator
    d = a.d * b.d * den
    x = a.x * b.d * den + num * (b.x * a.d - a.x * b.d)
    y = a.y * b.d * den + num * (b.y * a.d - a.y * b.d)
    return RationalPoint(x, y, d).reduced()


__all__ = [
    "orientation",
    "crosses",
    "point_on_segment",
    "mix",
]
