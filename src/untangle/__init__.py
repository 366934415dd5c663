"""
untangle: Generation and verification engine for planar untangling puzzles.

A puzzle is a set of points joined by straight edges. The engine generates
a graph that is known to have a crossing-free drawing, starts the player
from a circular arrangement that is guaranteed to cross, and decides
exactly, after every move, whether the current arrangement is
crossing-free.

Available modules:
- geometry: Exact rational segment-crossing predicate
- synthesis: Greedy degree-bounded planar graph generation
- scrambler: Circular arrangement with a guaranteed crossing
- state: Immutable puzzle snapshots and the completion check
- codec: Description, move and solution text formats
- game: Facade used by the puzzle harness
"""

__version__ = "0.1.0"

# Text formats
from .codec import (
    Move,
    PointUpdate,
    decode_description,
    decode_solution,
    encode_description,
    encode_move,
    encode_solution,
    parse_move,
    validate_description,
)

# Game facade
from .game import (
    Puzzle,
    canvas_size,
    generate,
    new_game,
    new_game_desc,
    solve,
    solve_game,
)

# Geometry kernel
from .geometry import crosses, mix, orientation, point_on_segment

# Layouts
from .layouts import BaseLayout, CircularLayout, ScatterLayout, make_circle

# Crossing metrics
from .metrics import (
    crossing_pairs,
    edge_crossings,
    first_crossing,
    is_crossing_free,
    max_degree,
)

# Parameters
from .params import (
    MAX_DEGREE,
    PRESETS,
    PuzzleParams,
    coord_limit,
    fetch_preset,
)

# Generation
from .scrambler import ScrambleResult, ScrambleWarning, scramble
from .state import PuzzleState, check_completion, execute_move, try_execute_move
from .synthesis import generate_planar_graph, synthesize
from .types import Edge, Event, EventType, Graph, RationalPoint

# Validation utilities
from .validation import (
    ConfigurationError,
    DescriptionFormatError,
    InvalidEdgeError,
    ScrambleError,
    UnknownSolutionError,
    ValidationError,
    validate_edge_indices,
    validate_point_count,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "RationalPoint",
    "Edge",
    "Graph",
    "EventType",
    "Event",
    # Geometry
    "orientation",
    "crosses",
    "point_on_segment",
    "mix",
    # Metrics
    "crossing_pairs",
    "first_crossing",
    "edge_crossings",
    "is_crossing_free",
    "max_degree",
    # Layouts
    "BaseLayout",
    "ScatterLayout",
    "CircularLayout",
    "make_circle",
    # Parameters
    "MAX_DEGREE",
    "PRESETS",
    "PuzzleParams",
    "coord_limit",
    "fetch_preset",
    # Generation
    "synthesize",
    "generate_planar_graph",
    "scramble",
    "ScrambleResult",
    "ScrambleWarning",
    # State
    "PuzzleState",
    "check_completion",
    "execute_move",
    "try_execute_move",
    # Codec
    "Move",
    "PointUpdate",
    "encode_description",
    "decode_description",
    "validate_description",
    "encode_move",
    "parse_move",
    "encode_solution",
    "decode_solution",
    # Game
    "Puzzle",
    "new_game_desc",
    "generate",
    "new_game",
    "solve_game",
    "solve",
    "canvas_size",
    # Validation
    "ValidationError",
    "ConfigurationError",
    "DescriptionFormatError",
    "InvalidEdgeError",
    "UnknownSolutionError",
    "ScrambleError",
    "validate_point_count",
    "validate_edge_indices",
]
