"""
Point layouts.

This module provides the two layouts a puzzle uses:
- ScatterLayout: Distinct random grid cells (the generated solution)
- CircularLayout: Points evenly spaced on a circle (the starting position)
"""

from .base import BaseLayout
from .circular import CircularLayout, make_circle
from .scatter import ScatterLayout

__all__ = [
    "BaseLayout",
    "CircularLayout",
    "ScatterLayout",
    "make_circle",
]
