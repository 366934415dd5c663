"""
Circular scrambling of a generated graph.

Moves the vertices of a planar graph onto a circle in a random order that
is guaranteed to contain at least one crossing, so a new puzzle never
starts out solved. The scattered positions the graph was generated on are
kept, re-expressed at a precision suitable for the circle layout, as the
known solution.
"""

from __future__ import annotations

import random
import warnings
from dataclasses import dataclass
from typing import Optional, Sequence

from .layouts import make_circle
from .metrics import first_crossing, has_disjoint_edges
from .types import Graph, RationalPoint
from .validation import ScrambleError


class ScrambleWarning(UserWarning):
    """Warning issued when random scrambling gives up and a crossing is forced."""

    pass


@dataclass(frozen=True)
class ScrambleResult:
    """
    Result of scrambling a graph onto the circle.

    Attributes:
        permutation: permutation[v] is the circle slot of original vertex v
        circle: Circle slot positions, indexed by slot
        graph: The graph with every vertex renamed to its circle slot
        solution: Crossing-free position for each slot, indexed by slot
        attempts: Number of permutations drawn before one crossed
    """

    permutation: tuple[int, ...]
    circle: tuple[RationalPoint, ...]
    graph: Graph
    solution: tuple[RationalPoint, ...]
    attempts: int


def solution_point(p: RationalPoint) -> RationalPoint:
    """
    Re-express a scattered grid point at the centre of its grid cell.

    The denominator is made even (doubling all three fields if needed) and
    half a unit is added to both coordinates.
    """
    x, y, d = p.x, p.y, p.d
    if d & 1:
        x, y, d = x * 2, y * 2, d * 2
    return RationalPoint(x + d // 2, y + d // 2, d)


def _forced_permutation(graph: Graph, rng: random.Random) -> list[int]:
    """
    Permutation putting two disjoint edges on alternating consecutive slots.

    With e on slots 0 and 2 and f on slots 1 and 3, the two chords
    interleave around the circle and so cross. The remaining vertices fill
    the other slots in random order.
    """
    edges = graph.edges
    e, f = next(
        (e, f) for i, e in enumerate(edges) for f in edges[i + 1 :] if not e.shares_endpoint(f)
    )
    rest = [v for v in range(graph.n) if v not in (e.a, e.b, f.a, f.b)]
    rng.shuffle(rest)
    order = [e.a, f.a, e.b, f.b] + rest

    perm = [0] * graph.n
    for slot, v in enumerate(order):
        perm[v] = slot
    return perm


def scramble(
    points: Sequence[RationalPoint],
    graph: Graph,
    w: int,
    rng: random.Random,
    max_attempts: Optional[int] = None,
) -> ScrambleResult:
    """
    Find a circle arrangement of graph with at least one crossing.

    Rejection sampling: shuffle the vertex order with rng and accept the
    first permutation whose circle drawing has a crossing pair.

    Args:
        points: Scattered (solution) positions, indexed by original vertex
        graph: Graph generated over points
        w: Side length of the coordinate domain
        rng: Random source for the shuffles
        max_attempts: Stop sampling after this many permutations and force a
            crossing pair instead (None = no limit)

    Returns:
        ScrambleResult with the permutation, circle, relabelled graph and
        per-slot solution

    Raises:
        ScrambleError: If the point count is wrong or no arrangement can cross

    Warns:
        ScrambleWarning: If max_attempts is exhausted and a crossing is forced
    """
    n = graph.n
    if len(points) != n:
        raise ScrambleError(f"Expected {n} points, got {len(points)}")

    if not has_disjoint_edges(graph):
        raise ScrambleError(
            f"Graph with {len(graph)} edge(s) on {n} points has no two disjoint edges; "
            "no circle arrangement of it can cross"
        )

    circle = make_circle(n, w)
    perm = list(range(n))
    attempts = 0

    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        rng.shuffle(perm)
        placed = [circle[perm[v]] for v in range(n)]
        if first_crossing(placed, graph.edges) is not None:
            break
    else:
        warnings.warn(
            f"No crossing arrangement found in {max_attempts} random attempts. "
            "Forcing two disjoint edges to cross instead.",
            ScrambleWarning,
            stacklevel=2,
        )
        perm = _forced_permutation(graph, rng)

    solution: list[Optional[RationalPoint]] = [None] * n
    for v, slot in enumerate(perm):
        solution[slot] = solution_point(points[v])

    return ScrambleResult(
        permutation=tuple(perm),
        circle=tuple(circle),
        graph=graph.relabel(perm),
        solution=tuple(p for p in solution if p is not None),
        attempts=attempts,
    )


__all__ = [
    "ScrambleWarning",
    "ScrambleResult",
    "scramble",
    "solution_point",
]
