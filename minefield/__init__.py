"""
minefield

The core of a Minesweeper-style grid-reveal puzzle:
- Mine placement that keeps a safe neighbourhood around the first click
- Per-cell adjacency mine counts
- Breadth-first flood-fill reveal of connected zero cells
- Win detection over the coverage grid
"""

from .config import PRESETS, GameConfig, get_preset
from .engine import GameSession, play_cli
from .errors import (
    ConfigurationError,
    InvalidPositionError,
    MinefieldError,
    PlacementError,
)
from .generation import (
    MINE,
    GeneratedGrid,
    annotate_adjacency,
    build_grid,
    close_safe_positions,
    generate_grid,
    place_mines,
)
from .positions import (
    ALL_DIRECTIONS,
    CARDINAL_DIRECTIONS,
    Direction,
    Position,
    neighbors_of,
    sample_unique_position,
)
from .reveal import is_cleared, reveal

__version__ = "1.0.0"

__all__ = [
    # Session and configuration
    "GameSession",
    "GameConfig",
    "PRESETS",
    "get_preset",
    # CLI
    "play_cli",
    # Errors
    "MinefieldError",
    "ConfigurationError",
    "InvalidPositionError",
    "PlacementError",
    # Core algorithms
    "MINE",
    "GeneratedGrid",
    "place_mines",
    "annotate_adjacency",
    "build_grid",
    "close_safe_positions",
    "generate_grid",
    "reveal",
    "is_cleared",
    # Positions
    "Position",
    "Direction",
    "ALL_DIRECTIONS",
    "CARDINAL_DIRECTIONS",
    "neighbors_of",
    "sample_unique_position",
]
