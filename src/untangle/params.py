"""
Puzzle parameters and engine constants.

The only player-facing parameter is the number of points. Everything else
(grid extent, circle denominator, degree bound) is derived from it or fixed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .validation import MIN_POINTS, ConfigurationError, validate_point_count

# Solutions sit on a square grid big enough that n points fill about
# 1/POINT_DENSITY of it.
POINT_DENSITY = 3
MAX_DEGREE = 4
# Fixed denominator for circle layouts, small enough to keep numerators modest.
CIRCLE_DENOMINATOR = 64
DEFAULT_POINTS = 10

_PRESET_SIZES = (6, 10, 15, 20, 25)


def coord_limit(n: int) -> int:
    """
    Side length of the square coordinate domain for n points.

    Returns ceil(sqrt(n * POINT_DENSITY)), computed in exact integers.
    """
    area = n * POINT_DENSITY
    if area <= 0:
        return 0
    return math.isqrt(area - 1) + 1


@dataclass(frozen=True)
class PuzzleParams:
    """
    Parameters of one puzzle.

    Attributes:
        n: Number of points (at least four)
    """

    n: int = DEFAULT_POINTS

    def validate(self) -> PuzzleParams:
        """
        Check the parameters before any generation work.

        Returns:
            self (for chaining)

        Raises:
            ConfigurationError: If n is below the minimum
        """
        validate_point_count(self.n)
        return self

    @property
    def extent(self) -> int:
        """Width (and height) of the coordinate domain."""
        return coord_limit(self.n)

    def encode(self) -> str:
        """Encode as the compact text form, e.g. '10'."""
        return str(self.n)

    @classmethod
    def decode(cls, text: str) -> PuzzleParams:
        """
        Decode the compact text form produced by encode().

        Raises:
            ConfigurationError: If the text is not a decimal integer
        """
        text = text.strip()
        if not (text.isascii() and text.isdigit()):
            raise ConfigurationError(f"Number of points must be a decimal integer, got {text!r}")
        return cls(n=int(text))

    @property
    def name(self) -> str:
        return f"{self.n} points"


PRESETS: tuple[PuzzleParams, ...] = tuple(PuzzleParams(n) for n in _PRESET_SIZES)


def fetch_preset(i: int) -> Optional[tuple[str, PuzzleParams]]:
    """
    Return the (name, params) of preset i, or None past the last preset.
    """
    if i < 0 or i >= len(PRESETS):
        return None
    params = PRESETS[i]
    return params.name, params


__all__ = [
    "MIN_POINTS",
    "POINT_DENSITY",
    "MAX_DEGREE",
    "CIRCLE_DENOMINATOR",
    "DEFAULT_POINTS",
    "PRESETS",
    "PuzzleParams",
    "coord_limit",
    "fetch_preset",
]
