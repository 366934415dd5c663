"""
Common types for the untangle puzzle engine.

This module provides the fundamental types shared by every stage of the
engine:
- RationalPoint: Exact planar point (two numerators over one denominator)
- Edge: Unordered pair of point indices, stored as (lower, higher)
- Graph: Immutable edge set shared between puzzle state snapshots
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from enum import IntEnum
from math import gcd
from typing import Iterable, Iterator, Sequence, TypedDict


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout computation has begun
    - end: Layout computation has finished
    """

    start = 0
    end = 1


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    points: int


class RationalPoint:
    """
    Planar point with rational coordinates (x/d, y/d).

    Both coordinates share one positive integer denominator. Two points are
    equal when they describe the same rational position, whatever their
    denominators.

    Attributes:
        x: X numerator
        y: Y numerator
        d: Shared denominator (always > 0)
    """

    __slots__ = ("x", "y", "d")

    def __init__(self, x: int, y: int, d: int = 1) -> None:
        """
        Initialize point.

        Raises:
            ValueError: If a field is not an integer or d is not positive
        """
        for name, value in (("x", x), ("y", y), ("d", d)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Point {name} must be an integer, got {value!r}")
        if d <= 0:
            raise ValueError(f"Point denominator must be positive, got {d}")
        object.__setattr__(self, "x", int(x))
        object.__setattr__(self, "y", int(y))
        object.__setattr__(self, "d", int(d))

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("RationalPoint is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RationalPoint):
            return NotImplemented
        return self.x * other.d == other.x * self.d and self.y * other.d == other.y * self.d

    def __hash__(self) -> int:
        return hash(self.reduced().as_tuple())

    def __repr__(self) -> str:
        return f"RationalPoint({self.x}, {self.y}, {self.d})"

    def as_tuple(self) -> tuple[int, int, int]:
        """Return (x, y, d) numerators and denominator."""
        return (self.x, self.y, self.d)

    def as_float(self) -> tuple[float, float]:
        """Return an approximate (x, y) for drawing. Never used for decisions."""
        return (self.x / self.d, self.y / self.d)

    def reduced(self) -> RationalPoint:
        """Return the same point with the smallest possible denominator."""
        g = gcd(gcd(self.x, self.y), self.d)
        if g <= 1:
            return self
        return RationalPoint(self.x // g, self.y // g, self.d // g)

    def scaled(self, k: int) -> RationalPoint:
        """Return the same point expressed over denominator d * k."""
        if k <= 0:
            raise ValueError(f"Scale factor must be positive, got {k}")
        return RationalPoint(self.x * k, self.y * k, self.d * k)


class Edge:
    """
    Undirected edge between two point indices.

    Always stored with a < b, so Edge(3, 1) and Edge(1, 3) are the same edge.
    Edges order by (a, b), which is also the order used in puzzle
    descriptions.
    """

    __slots__ = ("a", "b")

    def __init__(self, a: int, b: int) -> None:
        """
        Initialize edge.

        Raises:
            ValueError: If a == b (self-loops are not edges)
        """
        if a == b:
            raise ValueError(f"Edge endpoints must differ, got {a}-{b}")
        object.__setattr__(self, "a", min(a, b))
        object.__setattr__(self, "b", max(a, b))

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError("Edge is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __lt__(self, other: Edge) -> bool:
        return (self.a, self.b) < (other.a, other.b)

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def __iter__(self) -> Iterator[int]:
        yield self.a
        yield self.b

    def __repr__(self) -> str:
        return f"Edge({self.a}-{self.b})"

    def shares_endpoint(self, other: Edge) -> bool:
        """True if the two edges have a vertex in common."""
        return self.a in (other.a, other.b) or self.b in (other.a, other.b)

    def other(self, v: int) -> int:
        """Return the endpoint opposite to v."""
        if v == self.a:
            return self.b
        if v == self.b:
            return self.a
        raise ValueError(f"Vertex {v} is not an endpoint of {self!r}")


class Graph:
    """
    Immutable set of edges over the vertices 0..n-1.

    A Graph is built once, at generation or decode time, and is then shared
    by every PuzzleState derived from it. Nothing mutates it after
    construction, so snapshots can read it freely.

    Attributes:
        n: Number of vertices
        edges: Edges sorted by (a, b)
    """

    __slots__ = ("_n", "_edges", "_edge_set", "_adjacency")

    def __init__(self, n: int, edges: Iterable[Edge | tuple[int, int]] = ()) -> None:
        """
        Initialize graph.

        Args:
            n: Number of vertices
            edges: Edge objects or (a, b) tuples

        Raises:
            ValueError: On out-of-range indices, self-loops or duplicate edges
        """
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")

        normalized: list[Edge] = []
        seen: set[Edge] = set()
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for item in edges:
            edge = item if isinstance(item, Edge) else Edge(item[0], item[1])
            if edge.a < 0 or edge.b >= n:
                raise ValueError(f"{edge!r} out of bounds [0, {n})")
            if edge in seen:
                raise ValueError(f"Duplicate edge {edge.a}-{edge.b}")
            seen.add(edge)
            normalized.append(edge)
            adjacency[edge.a].append(edge.b)
            adjacency[edge.b].append(edge.a)

        normalized.sort()
        self._n = n
        self._edges: tuple[Edge, ...] = tuple(normalized)
        self._edge_set = frozenset(seen)
        self._adjacency = tuple(tuple(sorted(nbrs)) for nbrs in adjacency)

    @property
    def n(self) -> int:
        """Number of vertices."""
        return self._n

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edges in canonical (a, b) order."""
        return self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._n == other._n and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._n, self._edges))

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={len(self._edges)})"

    def has_edge(self, a: int, b: int) -> bool:
        """True if a-b is an edge (in either direction)."""
        if a == b:
            return False
        return Edge(a, b) in self._edge_set

    def neighbours(self, v: int) -> tuple[int, ...]:
        """Sorted neighbours of vertex v."""
        return self._adjacency[v]

    def degree(self, v: int) -> int:
        """Number of edges incident to v."""
        return len(self._adjacency[v])

    def degrees(self) -> list[int]:
        """Degree of every vertex, indexed by vertex."""
        return [len(nbrs) for nbrs in self._adjacency]

    def relabel(self, mapping: Sequence[int]) -> Graph:
        """
        Return a new graph with vertex v renamed to mapping[v].

        Args:
            mapping: A permutation of 0..n-1

        Raises:
            ValueError: If mapping is not a permutation of the vertices
        """
        if sorted(mapping) != list(range(self._n)):
            raise ValueError("mapping must be a permutation of the vertex indices")
        return Graph(self._n, (Edge(mapping[e.a], mapping[e.b]) for e in self._edges))


__all__ = [
    "EventType",
    "Event",
    "RationalPoint",
    "Edge",
    "Graph",
]
