"""
Game facade: the surface the puzzle harness talks to.

Typical flow:

    params = PuzzleParams(n=10)
    puzzle = generate(params, random.Random(seed))
    state = new_game(params, puzzle.description)
    state = state.apply("P3:130,40/64")
    state = solve(state, puzzle.aux)
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .codec import decode_solution, encode_description, encode_solution
from .params import PuzzleParams, coord_limit
from .scrambler import scramble
from .state import PuzzleState
from .synthesis import generate_planar_graph
from .validation import UnknownSolutionError

# Random shuffles tried before the scrambler forces a crossing pair.
SCRAMBLE_ATTEMPTS = 10000


@dataclass(frozen=True)
class Puzzle:
    """
    A freshly generated puzzle.

    Attributes:
        params: Parameters it was generated with
        description: Public edge list (reveals nothing about the solution)
        aux: Solution record, a solve move reaching a crossing-free layout
    """

    params: PuzzleParams
    description: str
    aux: str


def new_game_desc(params: PuzzleParams, rng: random.Random) -> tuple[str, str]:
    """
    Generate a puzzle description and its solution record.

    Args:
        params: Puzzle parameters
        rng: Random source; a fixed seed gives a fixed puzzle

    Returns:
        (description, aux)

    Raises:
        ConfigurationError: If params are invalid (checked before any work)
    """
    params.validate()
    points, graph = generate_planar_graph(params.n, rng)
    result = scramble(points, graph, coord_limit(params.n), rng, max_attempts=SCRAMBLE_ATTEMPTS)
    return encode_description(result.graph), encode_solution(result.solution)


def generate(params: PuzzleParams, rng: Optional[random.Random] = None) -> Puzzle:
    """Generate a Puzzle. Uses a fresh unseeded random source if rng is None."""
    desc, aux = new_game_desc(params, rng if rng is not None else random.Random())
    return Puzzle(params=params, description=desc, aux=aux)


def new_game(params: PuzzleParams, desc: str) -> PuzzleState:
    """
    Create the initial state of a puzzle from its description.

    Raises:
        ConfigurationError: If params are invalid
        DescriptionFormatError: If desc is malformed
    """
    return PuzzleState.from_description(params, desc)


def solve_game(aux: Optional[str]) -> str:
    """
    Return the move text that jumps to the known solution.

    Raises:
        UnknownSolutionError: If no solution record is available
    """
    if not aux:
        raise UnknownSolutionError("Solution not known for this puzzle")
    return aux


def solve(state: PuzzleState, aux: Optional[str]) -> PuzzleState:
    """
    Apply the known solution to state.

    The record is checked to hold one position per vertex before it is
    applied.

    Raises:
        UnknownSolutionError: If no solution record is available
        DescriptionFormatError: If the record is malformed
    """
    move = solve_game(aux)
    decode_solution(move, state.n)
    return state.apply(move)


def canvas_size(params: PuzzleParams, tilesize: int) -> tuple[int, int]:
    """Pixel size of the playing area at the given tile size."""
    w = coord_limit(params.n)
    return w * tilesize, w * tilesize


__all__ = [
    "SCRAMBLE_ATTEMPTS",
    "Puzzle",
    "new_game_desc",
    "generate",
    "new_game",
    "solve_game",
    "solve",
    "canvas_size",
]
