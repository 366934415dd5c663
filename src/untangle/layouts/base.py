"""
Base class for point layouts.

A layout places n puzzle points inside the square coordinate domain
[0, size) x [0, size). Layouts are single-pass: run() fires the start
event, computes the points and fires the end event.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from ..types import Event, EventType, RationalPoint
from ..validation import ValidationError


class BaseLayout(ABC):
    """
    Abstract base class for point layouts.

    Provides shared infrastructure:
    - Event system (start/end events)
    - Randomness management (injected source or seed)
    - Point count and domain size via properties

    Example:
        layout = SomeLayout(n=10, size=6, random_seed=42)
        layout.run()

        for i, p in enumerate(layout.points):
            print(f"Point {i}: {p.x}/{p.d}, {p.y}/{p.d}")
    """

    def __init__(
        self,
        *,
        n: int = 0,
        size: int = 1,
        rng: Optional[random.Random] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            n: Number of points to place
            size: Side length of the square coordinate domain
            rng: Random source. Takes precedence over random_seed.
            random_seed: Seed for a private random source
            on_start: Callback for start event
            on_end: Callback for end event
        """
        self._points: list[RationalPoint] = []
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}
        self._n = 0
        self._size = 1

        self.n = n
        self.size = size
        self._rng = rng if rng is not None else random.Random(random_seed)

        if on_start:
            self._events[EventType.start] = on_start
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def points(self) -> list[RationalPoint]:
        """Get the computed points (empty until run())."""
        return self._points

    @property
    def n(self) -> int:
        """Get the number of points."""
        return self._n

    @n.setter
    def n(self, value: int) -> None:
        """
        Set the number of points.

        Raises:
            ValidationError: If value is negative.
        """
        if value < 0:
            raise ValidationError(f"Point count must be non-negative, got {value}")
        self._n = int(value)

    @property
    def size(self) -> int:
        """Get the side length of the coordinate domain."""
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        """
        Set the side length of the coordinate domain.

        Raises:
            ValidationError: If value is not positive.
        """
        if value <= 0:
            raise ValidationError(f"Domain size must be positive, got {value}")
        self._size = int(value)

    @property
    def rng(self) -> random.Random:
        """Get the random source used by this layout."""
        return self._rng

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout.

        Fires start event, computes points, fires end event.

        Returns:
            self (for chaining)
        """
        self.trigger({"type": EventType.start, "points": self._n})
        self._points = self._compute(**kwargs)
        self.trigger({"type": EventType.end, "points": len(self._points)})
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> list[RationalPoint]:
        """
        Compute point positions.

        Subclasses must implement this to perform the actual layout computation.
        """
        pass


__all__ = ["BaseLayout"]
