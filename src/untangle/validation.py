"""
Input validation utilities for the untangle engine.

Provides centralized validation for puzzle parameters, edge lists and
points, and the exception hierarchy every stage of the engine raises.
All errors are local and recoverable: they are reported to the caller and
never leave a puzzle state half-updated.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

MIN_POINTS = 4


class ValidationError(ValueError):
    """Base exception for engine validation errors."""

    pass


class ConfigurationError(ValidationError):
    """Raised when puzzle parameters are invalid (e.g. too few points)."""

    pass


class DescriptionFormatError(ValidationError):
    """Raised when a description, solution record or move string is malformed."""

    pass


class InvalidEdgeError(DescriptionFormatError):
    """Raised when an edge references invalid vertices."""

    pass


class UnknownSolutionError(ValidationError):
    """Raised when a solve is requested but no solution record is known."""

    pass


class ScrambleError(ValidationError):
    """Raised when no crossing arrangement of a graph can be found on the circle."""

    pass


def validate_point_count(n: Any) -> int:
    """
    Validate the number of points in a puzzle.

    Args:
        n: Requested point count

    Returns:
        Validated point count

    Raises:
        ConfigurationError: If n is not an integer or is below the minimum
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ConfigurationError(f"Number of points must be an integer, got {n!r}")
    if n < MIN_POINTS:
        raise ConfigurationError("Number of points must be at least four")
    return n


def validate_edge_indices(
    edges: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all edge endpoints are within bounds, distinct and unique.

    Args:
        edges: Sequence of Edge objects or (a, b) pairs
        node_count: Number of vertices in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidEdgeError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []
    seen: set[tuple[int, int]] = set()

    for i, edge in enumerate(edges):
        a, b = _get_endpoints(edge)

        bad = False
        for name, val in (("first", a), ("second", b)):
            if val is None:
                issues.append((i, f"Edge {i}: {name} endpoint is not an integer"))
                bad = True
            elif val < 0 or val >= node_count:
                issues.append(
                    (i, f"Edge {i}: {name} endpoint {val} out of bounds [0, {node_count})")
                )
                bad = True
        if bad or a is None or b is None:
            continue

        if a == b:
            issues.append((i, f"Edge {i}: self-loop at vertex {a}"))
            continue

        key = (min(a, b), max(a, b))
        if key in seen:
            issues.append((i, f"Edge {i}: duplicate edge {key[0]}-{key[1]}"))
        seen.add(key)

    if strict and issues:
        msg = "Invalid edges:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidEdgeError(msg)

    return issues


def validate_point(point: Any) -> Any:
    """
    Validate a rational point's denominator.

    Args:
        point: RationalPoint (or any object with x, y and d attributes)

    Returns:
        The same point

    Raises:
        ValidationError: If d is missing or not positive
    """
    d = getattr(point, "d", None)
    if not isinstance(d, int) or d <= 0:
        raise ValidationError(f"Point denominator must be a positive integer, got {d!r}")
    return point


def _get_endpoints(obj: Any) -> tuple[Optional[int], Optional[int]]:
    """Extract endpoints from an Edge or an (a, b) pair."""
    if hasattr(obj, "a") and hasattr(obj, "b"):
        a, b = obj.a, obj.b
    else:
        try:
            a, b = obj
        except (TypeError, ValueError):
            return None, None
    return _as_index(a), _as_index(b)


def _as_index(val: Any) -> Optional[int]:
    if isinstance(val, bool) or not isinstance(val, int):
        return None
    return val


__all__ = [
    "MIN_POINTS",
    "ValidationError",
    "ConfigurationError",
    "DescriptionFormatError",
    "InvalidEdgeError",
    "UnknownSolutionError",
    "ScrambleError",
    "validate_point_count",
    "validate_edge_indices",
    "validate_point",
]
