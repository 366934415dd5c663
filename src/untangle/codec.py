"""
Text encodings consumed by the game harness.

Three formats are handled here:

- Puzzle description: comma-separated ``a-b`` edge tokens over circle slot
  indices, sorted by (a, b) so the text reveals nothing about the order the
  edges were generated in. Example: ``0-1,0-3,1-2``.
- Move: an optional leading solve marker ``S`` (optionally followed by
  ``;``), then ``P<i>:<x>,<y>/<d>`` point updates separated by ``;``.
  Example: ``P3:120,-4/64;P0:1,1/2``.
- Solution record: a solve move carrying one point update for every
  vertex, in vertex order. Example: ``S;P0:3,5/2;P1:7,1/2;...``.

Every decoder either parses its whole input or raises
DescriptionFormatError; nothing is ever partially applied.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .types import Edge, Graph, RationalPoint
from .validation import DescriptionFormatError, InvalidEdgeError, validate_edge_indices

SOLVE_MARKER = "S"
EDGE_SEPARATOR = ","
MOVE_SEPARATOR = ";"

_EDGE_RE = re.compile(r"(\d+)-(\d+)", re.ASCII)
_POINT_RE = re.compile(r"P(\d+):(-?\d+),(-?\d+)/(\d+)", re.ASCII)


def _number(text: str, where: str) -> int:
    try:
        return int(text)
    except ValueError:
        # int() refuses digit strings past the interpreter's conversion limit.
        raise DescriptionFormatError(f"Number too long in {where}") from None


@dataclass(frozen=True)
class PointUpdate:
    """Move one vertex to a new position."""

    index: int
    point: RationalPoint

    def encode(self) -> str:
        p = self.point
        return f"P{self.index}:{p.x},{p.y}/{p.d}"


@dataclass(frozen=True)
class Move:
    """
    A parsed move.

    Attributes:
        solve: True if the move carries the solve marker
        updates: Point updates, applied together
    """

    solve: bool = False
    updates: tuple[PointUpdate, ...] = ()

    def encode(self) -> str:
        return encode_move(self.updates, solve=self.solve)


# -----------------------------------------------------------------------------
# Puzzle descriptions
# -----------------------------------------------------------------------------


def encode_description(edges: Iterable[Edge]) -> str:
    """
    Encode an edge set as a canonical description string.

    Args:
        edges: Edges (or a Graph) over circle slot indices

    Returns:
        Comma-separated ``a-b`` tokens sorted by (a, b)
    """
    return EDGE_SEPARATOR.join(f"{e.a}-{e.b}" for e in sorted(edges))


def _parse_description(desc: str, n: int) -> list[Edge]:
    edges: list[Edge] = []
    if desc == "":
        return edges

    for token in desc.split(EDGE_SEPARATOR):
        if token == "":
            raise DescriptionFormatError("Expected number in game description")
        m = _EDGE_RE.fullmatch(token)
        if m is None:
            if "-" not in token:
                raise DescriptionFormatError("Expected '-' after number in game description")
            raise DescriptionFormatError(f"Malformed edge {token!r} in game description")
        a, b = (_number(g, "game description") for g in m.groups())
        if a >= n or b >= n:
            raise DescriptionFormatError("Number out of range in game description")
        if a == b:
            raise InvalidEdgeError(f"Self-loop {token!r} in game description")
        edges.append(Edge(a, b))

    validate_edge_indices(edges, n, strict=True)
    return edges


def decode_description(desc: str, n: int) -> Graph:
    """
    Decode a description string into a Graph over n vertices.

    Args:
        desc: Description text, e.g. ``0-1,1-2``
        n: Number of points in the puzzle

    Returns:
        Graph of the described edges

    Raises:
        DescriptionFormatError: On bad separators, non-numeric tokens,
            out-of-range indices, self-loops or duplicate edges
    """
    return Graph(n, _parse_description(desc, n))


def validate_description(desc: str, n: int) -> Optional[str]:
    """
    Check a description string.

    Returns:
        None if the description is valid, otherwise the error message
    """
    try:
        _parse_description(desc, n)
    except DescriptionFormatError as exc:
        return str(exc)
    return None


# -----------------------------------------------------------------------------
# Moves
# -----------------------------------------------------------------------------


def encode_move(updates: Iterable[PointUpdate], solve: bool = False) -> str:
    """
    Encode point updates (and optionally the solve marker) as move text.

    Examples:
        encode_move([PointUpdate(2, RationalPoint(5, 7, 64))]) == "P2:5,7/64"
        encode_move([...], solve=True) == "S;P0:...;P1:..."
    """
    tokens = [u.encode() for u in updates]
    if solve:
        tokens.insert(0, SOLVE_MARKER)
    return MOVE_SEPARATOR.join(tokens)


def parse_move(move: str, n: int) -> Move:
    """
    Parse move text for a puzzle with n points.

    Args:
        move: Move text
        n: Number of points in the puzzle

    Returns:
        Parsed Move

    Raises:
        DescriptionFormatError: If any part of the text fails to parse, an
            index is outside [0, n) or a denominator is not positive
    """
    text = move
    solve = False
    if text.startswith(SOLVE_MARKER):
        solve = True
        text = text[len(SOLVE_MARKER) :]
        if text.startswith(MOVE_SEPARATOR):
            text = text[len(MOVE_SEPARATOR) :]

    # A single trailing separator after the last update is tolerated.
    if text.endswith(MOVE_SEPARATOR) and text != MOVE_SEPARATOR:
        text = text[: -len(MOVE_SEPARATOR)]

    updates: list[PointUpdate] = []
    if text:
        for token in text.split(MOVE_SEPARATOR):
            m = _POINT_RE.fullmatch(token)
            if m is None:
                raise DescriptionFormatError(f"Malformed point update {token!r} in move")
            i, x, y, d = (_number(g, "move") for g in m.groups())
            if i >= n:
                raise DescriptionFormatError(f"Point index {i} out of range [0, {n}) in move")
            if d <= 0:
                raise DescriptionFormatError(f"Point denominator must be positive, got {d}")
            updates.append(PointUpdate(i, RationalPoint(x, y, d)))

    return Move(solve=solve, updates=tuple(updates))


# -----------------------------------------------------------------------------
# Solution records
# -----------------------------------------------------------------------------


def encode_solution(points: Sequence[RationalPoint]) -> str:
    """
    Encode the known crossing-free position of every vertex.

    Args:
        points: Solution position for each vertex, indexed by vertex

    Returns:
        Solve move text ``S;P0:x,y/d;P1:...``
    """
    return encode_move((PointUpdate(i, p) for i, p in enumerate(points)), solve=True)


def decode_solution(aux: str, n: int) -> list[RationalPoint]:
    """
    Decode a solution record into per-vertex points.

    Raises:
        DescriptionFormatError: If the record is not a solve move giving
            exactly one position for each of the n vertices
    """
    move = parse_move(aux, n)
    if not move.solve:
        raise DescriptionFormatError("Solution record must start with the solve marker")
    indices = [u.index for u in move.updates]
    if sorted(indices) != list(range(n)):
        raise DescriptionFormatError(
            f"Solution record must give exactly one position for each of {n} points"
        )
    points: list[RationalPoint] = [RationalPoint(0, 0)] * n
    for u in move.updates:
        points[u.index] = u.point
    return points


__all__ = [
    "SOLVE_MARKER",
    "PointUpdate",
    "Move",
    "encode_description",
    "decode_description",
    "validate_description",
    "encode_move",
    "parse_move",
    "encode_solution",
    "decode_solution",
]
