"""
Layout crossing metrics.

Whole-layout queries built on the exact crossing predicate:
- Crossing pairs: Every pair of vertex-disjoint edges that intersect
- Edge crossings: Number of such pairs
- Crossing-free: Whether a layout is a planar straight-line drawing

Edges that share an endpoint always meet at that endpoint and are never
counted as crossing.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .geometry import crosses
from .types import Edge, Graph, RationalPoint

EdgePair = Tuple[Edge, Edge]


def crossing_pairs(points: Sequence[RationalPoint], edges: Iterable[Edge]) -> Iterator[EdgePair]:
    """
    Yield every pair of crossing edges in the layout.

    Pairs are produced in canonical edge order, (e, f) with e before f.

    Args:
        points: Position of every vertex, indexed by vertex
        edges: Edges of the graph

    Time Complexity: O(m^2) where m = number of edges
    """
    edge_list = list(edges)
    n_edges = len(edge_list)

    for i in range(n_edges):
        e = edge_list[i]
        for j in range(i + 1, n_edges):
            f = edge_list[j]
            if e.shares_endpoint(f):
                continue
            if crosses(points[e.a], points[e.b], points[f.a], points[f.b]):
                yield (e, f)


def first_crossing(points: Sequence[RationalPoint], edges: Iterable[Edge]) -> Optional[EdgePair]:
    """Return the first crossing pair, or None if the layout is crossing-free."""
    return next(crossing_pairs(points, edges), None)


def edge_crossings(points: Sequence[RationalPoint], edges: Iterable[Edge]) -> int:
    """Count the crossing pairs in the layout."""
    return sum(1 for _ in crossing_pairs(points, edges))


def is_crossing_free(points: Sequence[RationalPoint], edges: Iterable[Edge]) -> bool:
    """True if no two vertex-disjoint edges intersect."""
    return first_crossing(points, edges) is None


def max_degree(graph: Graph) -> int:
    """Largest vertex degree in the graph (0 for an empty graph)."""
    return max(graph.degrees(), default=0)


def has_disjoint_edges(graph: Graph) -> bool:
    """
    True if the graph has two edges with no endpoint in common.

    On points in convex position (such as a circle layout) two disjoint
    edges can always be made to cross, so this decides whether any
    arrangement of the graph on a circle has a crossing at all.
    """
    edges = graph.edges
    for i, e in enumerate(edges):
        for f in edges[i + 1 :]:
            if not e.shares_endpoint(f):
                return True
    return False


__all__ = [
    "EdgePair",
    "crossing_pairs",
    "first_crossing",
    "edge_crossings",
    "is_crossing_free",
    "max_degree",
    "has_disjoint_edges",
]
