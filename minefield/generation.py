"""Mine placement, adjacency counting and first-click grid generation."""

import logging
import random
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Set, Tuple

from .errors import ConfigurationError
from .positions import (
    ALL_DIRECTIONS,
    Direction,
    Position,
    get_neighborhoods,
    in_bounds,
    neighbors_of,
    sample_unique_position,
    shuffle_directions,
    validate_position,
)

logger = logging.getLogger(__name__)

MINE = -1

Grid = List[List[int]]
Coverage = List[List[bool]]


@dataclass
class GeneratedGrid:
    """Result of generating a game on the first click."""

    grid: Grid
    coverage: Coverage
    mine_positions: List[Position]
    # Origin first, then the close safe positions in the order they were picked.
    safe_positions: List[Position]


def create_field(width: int, height: int, fill: object = 0) -> List[List[Any]]:
    """Allocate a ``height`` x ``width`` list of rows filled with ``fill``."""
    return [[fill for _ in range(width)] for _ in range(height)]


def place_mines(
    width: int,
    height: int,
    mines_count: int,
    protected_positions: Iterable[Tuple[int, int]],
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> List[Position]:
    """
    Pick ``mines_count`` distinct mine positions away from the protected cells.

    The protected positions start out as occupied so that no mine lands on
    them; they are not part of the result.

    Args:
        width: Grid width (number of columns).
        height: Grid height (number of rows).
        mines_count: Number of mines to place, must be >= 0.
        protected_positions: Cells that must stay mine-free.
        rng: Random source; a fresh OS-seeded one when omitted.
        max_attempts: Per-mine retry cap handed to sample_unique_position.

    Returns:
        Exactly ``mines_count`` unique positions, in the order they were drawn.

    Raises:
        ConfigurationError: If the mines do not fit beside the protected cells.
    """
    protected: Set[Tuple[int, int]] = {
        (p[0], p[1])
        for p in protected_positions
        if in_bounds(p[0], p[1], width, height)
    }
    if mines_count < 0:
        raise ConfigurationError("mines_count must be non-negative.")
    if mines_count + len(protected) > width * height:
        raise ConfigurationError(
            f"Cannot place {mines_count} mines beside {len(protected)} safe "
            f"cells on a {width}x{height} grid."
        )

    rng = rng or random.Random()
    occupied = set(protected)
    mines: List[Position] = []
    for _ in range(mines_count):
        position = sample_unique_position(
            width, height, occupied, rng, max_attempts=max_attempts
        )
        occupied.add(position)
        mines.append(position)
    return mines


def annotate_adjacency(
    mine_positions: Iterable[Tuple[int, int]], grid: Grid, width: int, height: int
) -> None:
    """Add one to every non-mine neighbour of every mine, in place."""
    neighborhoods = get_neighborhoods(width, height)
    for mx, my in mine_positions:
        for nx, ny in neighborhoods[Position(mx, my)]:
            if grid[ny][nx] != MINE:
                grid[ny][nx] += 1


def build_grid(
    width: int, height: int, mine_positions: Iterable[Tuple[int, int]]
) -> Grid:
    """
    Build a finished grid from an explicit mine layout.

    Raises:
        InvalidPositionError: If a mine lies outside the grid.
    """
    mines = [validate_position(p, width, height) for p in mine_positions]
    grid: Grid = create_field(width, height)
    for x, y in mines:
        grid[y][x] = MINE
    annotate_adjacency(mines, grid, width, height)
    return grid


def close_safe_positions(
    origin: Tuple[int, int],
    width: int,
    height: int,
    count: int = 8,
    directions: Sequence[Direction] = ALL_DIRECTIONS,
    rng: Optional[random.Random] = None,
) -> List[Position]:
    """
    Pick up to ``count`` cells next to ``origin`` that will be kept mine-free.

    Directions are tried in a random order; each contributes the single
    neighbour one step away, if that neighbour is on the grid. The origin
    itself is always the first element, so a 1x1 grid returns just the origin.
    """
    positions = [Position(origin[0], origin[1])]
    remaining = shuffle_directions(directions, rng)
    while remaining and len(positions) < count + 1:
        direction = remaining.pop()
        nearby = neighbors_of(origin, width, height, (direction,))
        if nearby:
            positions.append(nearby[0])
    return positions


def generate_grid(
    width: int,
    height: int,
    mines_count: int,
    first_click: Tuple[int, int],
    rng: Optional[random.Random] = None,
) -> GeneratedGrid:
    """
    Generate a game around the first click.

    Args:
        width: Grid width (number of columns), must be > 0.
        height: Grid height (number of rows), must be > 0.
        mines_count: Number of mines to place.
        first_click: The (x, y) the player opened first.
        rng: Random source; a fresh OS-seeded one when omitted.

    Returns:
        The grid, an all-covered coverage grid, the mines and the safe set.

    Raises:
        ConfigurationError: If the dimensions are invalid or the mines do not
            fit outside the safe set.
        InvalidPositionError: If ``first_click`` is off the grid.
    """
    if width <= 0 or height <= 0:
        raise ConfigurationError("Width and height must be positive.")
    origin = validate_position(first_click, width, height)

    rng = rng or random.Random()
    safe_positions = close_safe_positions(origin, width, height, rng=rng)
    mine_positions = place_mines(width, height, mines_count, safe_positions, rng)
    logger.debug(
        "Generated %dx%d grid: %d mines, safe set %s",
        width,
        height,
        len(mine_positions),
        safe_positions,
    )

    return GeneratedGrid(
        grid=build_grid(width, height, mine_positions),
        coverage=create_field(width, height, False),
        mine_positions=mine_positions,
        safe_positions=safe_positions,
    )
