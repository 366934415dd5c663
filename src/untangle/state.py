"""
Puzzle state and completion checking.

A PuzzleState is an immutable snapshot: applying a move never changes the
state it was applied to, it returns a new one. Snapshots derived from the
same puzzle share a single Graph.

Completion is sticky. Once a state is completed every state derived from
it is completed too, whatever later moves do to the points.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from .codec import Move, decode_description, parse_move
from .layouts import make_circle
from .metrics import is_crossing_free
from .params import PuzzleParams, coord_limit
from .types import Edge, Graph, RationalPoint
from .validation import DescriptionFormatError, ValidationError


def check_completion(points: Sequence[RationalPoint], graph: Graph) -> bool:
    """
    True if no two vertex-disjoint edges of graph cross at these positions.

    Every pair of edges is tested with the exact crossing predicate.
    """
    return is_crossing_free(points, graph.edges)


@dataclass(frozen=True)
class PuzzleState:
    """
    One snapshot of a puzzle in play.

    Attributes:
        params: Puzzle parameters
        w: Width of the coordinate domain
        h: Height of the coordinate domain
        points: Current position of every vertex
        graph: Edge set, shared with every other snapshot of this puzzle
        completed: True once the arrangement has been crossing-free
        cheated: True if a solve move was ever applied
        just_solved: True only on the state produced by a solve move or by
            the move that first completed the puzzle
    """

    params: PuzzleParams
    w: int
    h: int
    points: tuple[RationalPoint, ...]
    graph: Graph
    completed: bool = False
    cheated: bool = False
    just_solved: bool = False

    def __post_init__(self) -> None:
        if len(self.points) != self.graph.n:
            raise ValidationError(
                f"State has {len(self.points)} points but its graph has {self.graph.n} vertices"
            )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_description(cls, params: PuzzleParams, desc: str) -> PuzzleState:
        """
        Build the initial state of a puzzle from its description.

        Points start on the circle, vertex i in slot i. The flags all start
        false, even in the unlikely case that the description happens to be
        uncrossed on the circle.

        Raises:
            ConfigurationError: If params are invalid
            DescriptionFormatError: If desc is malformed
        """
        params.validate()
        n = params.n
        w = coord_limit(n)
        graph = decode_description(desc, n)
        return cls(
            params=params,
            w=w,
            h=w,
            points=tuple(make_circle(n, w)),
            graph=graph,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def n(self) -> int:
        """Number of points."""
        return self.params.n

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edges in canonical order."""
        return self.graph.edges

    def is_crossing_free(self) -> bool:
        """Evaluate the current arrangement, ignoring the sticky flag."""
        return check_completion(self.points, self.graph)

    # -------------------------------------------------------------------------
    # Moves
    # -------------------------------------------------------------------------

    def apply(self, move: Union[Move, str]) -> PuzzleState:
        """
        Apply a move and return the resulting state.

        All point updates are applied together. A solve marker sets the
        cheated and just_solved flags. Completion is re-evaluated unless
        this state is already completed; the move that first completes the
        puzzle also sets just_solved, which the next move clears.

        Args:
            move: Parsed Move or move text

        Returns:
            New PuzzleState; self is left unchanged

        Raises:
            DescriptionFormatError: If move text is malformed or refers to
                a vertex outside this puzzle
        """
        if isinstance(move, str):
            move = parse_move(move, self.n)

        points = list(self.points)
        for update in move.updates:
            if not 0 <= update.index < len(points):
                raise DescriptionFormatError(
                    f"Point index {update.index} out of range [0, {len(points)}) in move"
                )
            points[update.index] = update.point

        cheated = self.cheated or move.solve
        completed = self.completed or check_completion(points, self.graph)

        return replace(
            self,
            points=tuple(points),
            completed=completed,
            cheated=cheated,
            just_solved=move.solve or (completed and not self.completed),
        )


def execute_move(state: PuzzleState, move: str) -> PuzzleState:
    """
    Apply move text to state.

    Raises:
        DescriptionFormatError: If the move is malformed. state is untouched.
    """
    return state.apply(move)


def try_execute_move(state: PuzzleState, move: str) -> Optional[PuzzleState]:
    """Apply move text to state, returning None if the move is rejected."""
    try:
        return state.apply(move)
    except DescriptionFormatError:
        return None


__all__ = [
    "PuzzleState",
    "check_completion",
    "execute_move",
    "try_execute_move",
]
