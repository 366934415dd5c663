"""
Scattered layout.

Places points on distinct cells of an integer grid. This is the layout the
graph is generated over, and therefore the puzzle's known solution.
"""

from __future__ import annotations

from typing import Any

from ..types import RationalPoint
from ..validation import ValidationError
from .base import BaseLayout


class ScatterLayout(BaseLayout):
    """
    Scatter layout - positions points on distinct random grid cells.

    All size * size cells of the grid are shuffled with the layout's random
    source and the first n are taken, so no two points coincide. Points
    have denominator 1.

    Example:
        layout = ScatterLayout(n=10, size=6, random_seed=42)
        layout.run()
    """

    def _compute(self, **kwargs: Any) -> list[RationalPoint]:
        """Compute scattered grid positions."""
        n = self._n
        w = self._size
        if n == 0:
            return []
        if n > w * w:
            raise ValidationError(f"Cannot place {n} distinct points on a {w}x{w} grid")

        cells = list(range(w * w))
        self._rng.shuffle(cells)
        return [RationalPoint(cell % w, cell // w, 1) for cell in cells[:n]]


__all__ = ["ScatterLayout"]
