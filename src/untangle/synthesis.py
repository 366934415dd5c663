"""
Greedy planar graph synthesis.

Builds a crossing-free straight-line graph over a fixed set of points by
repeatedly adding the shortest admissible edge at the lowest-degree vertex.

Algorithm:
1. Keep every vertex in a list sorted by (degree, index).
2. Scan the list in order. For vertex v, collect the vertices after it in
   the list that are below the degree bound and not yet adjacent to v,
   ordered by squared distance to v (ties by index). Vertices before v
   were already offered as first endpoint and the admissibility test is
   symmetric, so they need not be tried again.
3. Accept the first candidate u whose segment v-u touches no third point
   and crosses no accepted edge vertex-disjoint from it. Bump both degrees
   and restart the scan.
4. Stop when a complete scan adds nothing.

Every edge is checked against the true final positions of all points, so
the result is planar by construction and no backtracking is needed.
Vertices may end up isolated when nothing admissible reaches them.

Time Complexity: O(n^2 * (n + m)) per accepted edge in the worst case.
"""

from __future__ import annotations

import bisect
import random
from fractions import Fraction
from typing import Optional, Sequence

from .geometry import crosses, point_on_segment
from .layouts import ScatterLayout
from .params import MAX_DEGREE, coord_limit
from .types import Edge, Graph, RationalPoint
from .validation import validate_point_count


def _squared_distance(p: RationalPoint, q: RationalPoint) -> Fraction:
    dx = Fraction(p.x, p.d) - Fraction(q.x, q.d)
    dy = Fraction(p.y, p.d) - Fraction(q.y, q.d)
    return dx * dx + dy * dy


def _admissible(
    points: Sequence[RationalPoint],
    accepted: Sequence[Edge],
    v: int,
    u: int,
) -> bool:
    """True if v-u avoids every other point and every disjoint accepted edge."""
    pv, pu = points[v], points[u]

    for p, pt in enumerate(points):
        if p != v and p != u and point_on_segment(pt, pu, pv):
            return False

    for e in accepted:
        if e.a in (v, u) or e.b in (v, u):
            continue
        if crosses(pu, pv, points[e.a], points[e.b]):
            return False

    return True


def synthesize(points: Sequence[RationalPoint], max_degree: int = MAX_DEGREE) -> Graph:
    """
    Build a degree-bounded crossing-free graph over the given points.

    Args:
        points: Distinct vertex positions, indexed by vertex
        max_degree: Maximum number of edges at any vertex

    Returns:
        Graph whose straight-line drawing on points has no crossings
    """
    n = len(points)
    degree = [0] * n
    order: list[tuple[int, int]] = [(0, i) for i in range(n)]
    adjacent: list[set[int]] = [set() for _ in range(n)]
    accepted: list[Edge] = []

    def bump(vertex: int) -> None:
        del order[bisect.bisect_left(order, (degree[vertex], vertex))]
        degree[vertex] += 1
        bisect.insort(order, (degree[vertex], vertex))

    while True:
        added: Optional[Edge] = None

        for i in range(n):
            deg_v, v = order[i]
            if deg_v >= max_degree:
                break  # every later vertex is full too

            candidates = [
                (_squared_distance(points[u], points[v]), u)
                for deg_u, u in order[i + 1 :]
                if deg_u < max_degree and u not in adjacent[v]
            ]
            candidates.sort()

            for _, u in candidates:
                if _admissible(points, accepted, v, u):
                    added = Edge(v, u)
                    break

            if added is not None:
                break

        if added is None:
            break

        accepted.append(added)
        adjacent[added.a].add(added.b)
        adjacent[added.b].add(added.a)
        bump(added.a)
        bump(added.b)

    return Graph(n, accepted)


def generate_planar_graph(
    n: int,
    rng: random.Random,
    max_degree: int = MAX_DEGREE,
) -> tuple[list[RationalPoint], Graph]:
    """
    Scatter n points over the puzzle grid and synthesize a planar graph on them.

    Args:
        n: Number of points (at least four)
        rng: Random source for the point placement
        max_degree: Maximum number of edges at any vertex

    Returns:
        (points, graph): the scattered layout and the graph generated over it

    Raises:
        ConfigurationError: If n is below the minimum
    """
    validate_point_count(n)
    w = coord_limit(n)
    points = ScatterLayout(n=n, size=w, rng=rng).run().points
    return points, synthesize(points, max_degree=max_degree)


__all__ = ["synthesize", "generate_planar_graph"]
