"""Tests for the exact geometry kernel."""

import itertools
import random
from fractions import Fraction

import pytest

from untangle import RationalPoint, crosses, mix, orientation, point_on_segment


def P(x, y, d=1):
    return RationalPoint(x, y, d)


# =============================================================================
# Orientation
# =============================================================================


class TestOrientation:
    """Tests for the orientation sign."""

    def test_counter_clockwise(self):
        """Left turn is positive."""
        assert orientation(P(0, 0), P(1, 0), P(0, 1)) == 1

    def test_clockwise(self):
        """Right turn is negative."""
        assert orientation(P(0, 0), P(0, 1), P(1, 0)) == -1

    def test_collinear(self):
        """Collinear points give zero."""
        assert orientation(P(0, 0), P(1, 1), P(5, 5)) == 0

    def test_mixed_denominators(self):
        """Denominators do not change the sign."""
        assert orientation(P(0, 0, 3), P(2, 0, 2), P(1, 1, 7)) == 1
        assert orientation(P(0, 0, 3), P(2, 2, 2), P(7, 7, 7)) == 0

    def test_degenerate_line(self):
        """A zero-length line has no sides."""
        assert orientation(P(1, 1), P(2, 2, 2), P(5, 3)) == 0


# =============================================================================
# Crossing predicate
# =============================================================================


class TestCrosses:
    """Tests for segment intersection."""

    def test_proper_crossing(self):
        """Diagonals of a square cross."""
        assert crosses(P(0, 0), P(2, 2), P(0, 2), P(2, 0))

    def test_parallel_segments(self):
        """Parallel segments do not cross."""
        assert not crosses(P(0, 0), P(2, 0), P(0, 1), P(2, 1))

    def test_separated_segments(self):
        """Segments whose lines cross outside both do not intersect."""
        assert not crosses(P(0, 0), P(1, 1), P(3, 0), P(2, 1))

    def test_t_junction_counts(self):
        """An endpoint lying on the other segment counts."""
        assert crosses(P(0, 0), P(2, 0), P(1, 0), P(1, 5))

    def test_shared_endpoint_counts(self):
        """Segments meeting at an endpoint intersect."""
        assert crosses(P(0, 0), P(1, 1), P(1, 1), P(2, 0))

    def test_collinear_disjoint(self):
        """Collinear segments with a gap do not intersect."""
        assert not crosses(P(0, 0), P(1, 0), P(2, 0), P(3, 0))

    def test_collinear_overlapping(self):
        """Overlapping collinear segments intersect."""
        assert crosses(P(0, 0), P(2, 0), P(1, 0), P(3, 0))

    def test_collinear_touching(self):
        """Collinear segments touching end to end intersect."""
        assert crosses(P(0, 0), P(1, 0), P(1, 0), P(2, 0))

    def test_collinear_contained(self):
        """A collinear segment inside another intersects it."""
        assert crosses(P(0, 0), P(4, 4), P(1, 1), P(2, 2))

    def test_mixed_denominators(self):
        """Crossing decided exactly across different denominators."""
        assert crosses(P(0, 0), P(2, 2), P(0, 4, 2), P(4, 0, 2))
        # (1/5, 1/5) stops short of the segment from (0, 1/2) to (1/2, 0)
        assert not crosses(P(0, 0), P(1, 1, 5), P(0, 1, 2), P(1, 0, 2))
        assert crosses(P(0, 0), P(1, 1, 3), P(0, 1, 2), P(1, 0, 2))

    def test_near_miss_is_exact(self):
        """A miss by a tiny rational margin is still a miss."""
        big = 10**12
        a1, a2 = P(0, 0), P(1, 1)
        # vertical segment at x = 1 + 1e-12, just right of the endpoint (1, 1)
        b1, b2 = P(big + 1, 0, big), P(big + 1, 2 * big, big)
        assert not crosses(a1, a2, b1, b2)

    def test_degenerate_touching(self):
        """Point on the middle of a segment intersects it."""
        p1, p2, p3 = P(0, 0, 1), P(1, 0, 1), P(2, 0, 1)
        assert crosses(p1, p3, p2, p2)

    def test_degenerate_beyond(self):
        """Point on the segment's line but past its end does not."""
        p1, p2, p3 = P(0, 0, 1), P(1, 0, 1), P(2, 0, 1)
        assert not crosses(p1, p2, p3, p3)
        assert not crosses(p3, p3, p1, p2)

    def test_two_points(self):
        """Zero-length segments intersect only when they coincide."""
        assert crosses(P(1, 1), P(1, 1), P(2, 2, 2), P(2, 2, 2))
        assert not crosses(P(1, 1), P(1, 1), P(1, 2), P(1, 2))


class TestCrossesSymmetry:
    """The predicate ignores segment and endpoint order."""

    @staticmethod
    def _variants(a1, a2, b1, b2):
        for (p, q), (r, s) in (((a1, a2), (b1, b2)), ((b1, b2), (a1, a2))):
            for first in ((p, q), (q, p)):
                for second in ((r, s), (s, r)):
                    yield crosses(*first, *second)

    def test_symmetry_on_small_grid(self):
        """All eight orderings agree, including degenerate cases."""
        rng = random.Random(7)
        coords = [P(x, y, d) for x in range(3) for y in range(3) for d in (1, 2)]
        for _ in range(2000):
            a1, a2, b1, b2 = (rng.choice(coords) for _ in range(4))
            results = set(self._variants(a1, a2, b1, b2))
            assert len(results) == 1, (a1, a2, b1, b2)

    def test_symmetry_collinear(self):
        """Orderings agree for every collinear configuration on a line."""
        line = [P(x, 2 * x) for x in range(4)]
        for a1, a2, b1, b2 in itertools.product(line, repeat=4):
            assert len(set(self._variants(a1, a2, b1, b2))) == 1


# =============================================================================
# Point on segment
# =============================================================================


class TestPointOnSegment:
    """Tests for point_on_segment."""

    def test_interior_point(self):
        assert point_on_segment(P(1, 1), P(0, 0), P(2, 2))

    def test_interior_point_scaled(self):
        """Same position with a different denominator."""
        assert point_on_segment(P(3, 3, 3), P(0, 0), P(2, 2))

    def test_endpoint(self):
        assert point_on_segment(P(2, 2), P(0, 0), P(2, 2))

    def test_off_line(self):
        assert not point_on_segment(P(1, 2), P(0, 0), P(2, 2))

    def test_on_line_outside(self):
        assert not point_on_segment(P(3, 3), P(0, 0), P(2, 2))


# =============================================================================
# Interpolation
# =============================================================================


class TestMix:
    """Tests for exact interpolation."""

    def test_endpoints(self):
        """t=0 gives a, t=1 gives b."""
        a, b = P(1, 2, 3), P(5, 7, 4)
        assert mix(a, b, 0) == a
        assert mix(a, b, 1) == b

    def test_midpoint(self):
        """Halfway between two grid points."""
        assert mix(P(0, 0), P(2, 2), Fraction(1, 2)) == P(1, 1)
        assert mix(P(0, 0), P(1, 3), Fraction(1, 2)) == P(1, 3, 2)

    def test_result_is_reduced(self):
        """Interpolated points come back in lowest terms."""
        m = mix(P(0, 0), P(4, 4), Fraction(1, 2))
        assert m.as_tuple() == (2, 2, 1)

    def test_exact_thirds(self):
        """Midpoint of 1/3 and 2/3 is exactly 1/2."""
        m = mix(P(1, 1, 3), P(2, 2, 3), Fraction(1, 2))
        assert m == P(1, 1, 2)


@pytest.mark.parametrize(
    "segment",
    [
        (P(0, 0), P(4, 0)),
        (P(0, 0), P(0, 4)),
        (P(1, 1), P(3, 5)),
    ],
)
def test_segment_crosses_itself(segment):
    """Every segment intersects itself."""
    a, b = segment
    assert crosses(a, b, a, b)
