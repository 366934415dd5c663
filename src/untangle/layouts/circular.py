"""
Circular layout.

Places all points evenly distributed on a circle. This is the layout every
puzzle starts from.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np

from ..params import CIRCLE_DENOMINATOR
from ..types import Event, RationalPoint
from ..validation import ValidationError
from .base import BaseLayout


class CircularLayout(BaseLayout):
    """
    Circular layout - positions points on a circle.

    Slot i sits at angle 2*pi*i/n, measured clockwise from the top of the
    circle. Coordinates are rounded to the nearest multiple of 1/denominator,
    so the computed layout is exact. The rounding itself starts from numpy
    sin and cos, so a coordinate lying within floating-point error of a half
    unit may round differently on another platform.

    The circle is centred in the domain with radius 3/7 of the side,
    leaving a margin around it.

    Example:
        layout = CircularLayout(n=10, size=6)
        layout.run()
    """

    def __init__(
        self,
        *,
        n: int = 0,
        size: int = 1,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # Circular-specific parameters
        denominator: int = CIRCLE_DENOMINATOR,
    ) -> None:
        """
        Initialize Circular layout.

        Args:
            n: Number of points
            size: Side length of the square coordinate domain
            on_start: Callback for start event
            on_end: Callback for end event
            denominator: Shared denominator of every circle point (default 64).
        """
        super().__init__(
            n=n,
            size=size,
            on_start=on_start,
            on_end=on_end,
        )
        self._denominator = CIRCLE_DENOMINATOR
        self.denominator = denominator

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def denominator(self) -> int:
        """Get the shared point denominator."""
        return self._denominator

    @denominator.setter
    def denominator(self, value: int) -> None:
        """Set the shared point denominator."""
        if value <= 0:
            raise ValidationError(f"Denominator must be positive, got {value}")
        self._denominator = int(value)

    @property
    def center(self) -> int:
        """Circle centre numerator (same for x and y)."""
        return self._denominator * self._size // 2

    @property
    def radius(self) -> int:
        """Circle radius numerator."""
        return self._denominator * self._size * 3 // 7

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _compute(self, **kwargs: Any) -> list[RationalPoint]:
        """Compute circular layout positions."""
        n = self._n
        if n == 0:
            return []

        d = self._denominator
        c = self.center
        r = self.radius

        angles = np.arange(n) * (2 * np.pi / n)
        xs = np.floor(c + r * np.sin(angles) + 0.5).astype(np.int64)
        ys = np.floor(c - r * np.cos(angles) + 0.5).astype(np.int64)

        return [RationalPoint(int(x), int(y), d) for x, y in zip(xs, ys)]


def make_circle(n: int, w: int, denominator: int = CIRCLE_DENOMINATOR) -> list[RationalPoint]:
    """Convenience wrapper: the n circle slots for a w x w domain."""
    return CircularLayout(n=n, size=w, denominator=denominator).run().points


__all__ = ["CircularLayout", "make_circle"]
