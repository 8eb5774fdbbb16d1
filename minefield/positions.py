"""Coordinates, compass directions and neighbour lookup for the minefield grid."""

import random
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidPositionError, PlacementError


class Position(NamedTuple):
    """A cell coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int


class Direction(Enum):
    """The eight compass steps. ``y`` grows downwards, so north is ``dy == -1``."""

    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)
    NE = (1, -1)
    NW = (-1, -1)
    SE = (1, 1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def step(self, position: Tuple[int, int]) -> Position:
        """Return the position one step away in this direction (unbounded)."""
        return Position(position[0] + self.dx, position[1] + self.dy)


ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)
CARDINAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.N,
    Direction.S,
    Direction.E,
    Direction.W,
)

# Module-level cache: (width, height) -> {(x,y): (Position, ...), ...}
_NEIGHBORHOODS_CACHE: Dict[
    Tuple[int, int],
    Dict[Position, Tuple[Position, ...]]
] = {}


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def validate_position(position: Tuple[int, int], width: int, height: int) -> Position:
    """
    Check that a coordinate pair lies on the grid.

    Args:
        position: Candidate (x, y) pair.
        width: Grid width (number of columns).
        height: Grid height (number of rows).

    Returns:
        The same coordinates as a Position.

    Raises:
        InvalidPositionError: If either coordinate is not an int or falls
            outside [0, width-1] x [0, height-1].
    """
    x, y = position
    if (
        not isinstance(x, int)
        or not isinstance(y, int)
        or isinstance(x, bool)
        or isinstance(y, bool)
        or not in_bounds(x, y, width, height)
    ):
        raise InvalidPositionError(x, y, width, height)
    return Position(x, y)


def neighbors_of(
    position: Tuple[int, int],
    width: int,
    height: int,
    directions: Iterable[Direction] = ALL_DIRECTIONS,
) -> List[Position]:
    """
    Return the in-bounds neighbours of ``position`` along ``directions``.

    Steps that would leave [0, width-1] x [0, height-1] are dropped. The
    result follows the order of ``directions``.
    """
    out: List[Position] = []
    for direction in directions:
        nx, ny = position[0] + direction.dx, position[1] + direction.dy
        if in_bounds(nx, ny, width, height):
            out.append(Position(nx, ny))
    return out


def get_neighborhoods(
    width: int, height: int
) -> Dict[Position, Tuple[Position, ...]]:
    """
    Precompute and cache 8-connected neighbor coordinates for every cell in a grid.

    Args:
        width: Grid width (number of columns). Must be positive.
        height: Grid height (number of rows). Must be positive.

    Returns:
        Mapping from each cell (x, y) to a tuple of its in-bounds neighbours.

    Raises:
        ValueError: If width or height is non-positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive.")

    key = (width, height)
    cached = _NEIGHBORHOODS_CACHE.get(key)
    if cached is not None:
        return cached

    neighborhoods: Dict[Position, Tuple[Position, ...]] = {}
    for y in range(height):
        for x in range(width):
            neighborhoods[Position(x, y)] = tuple(
                neighbors_of((x, y), width, height)
            )

    _NEIGHBORHOODS_CACHE[key] = neighborhoods
    return neighborhoods


def random_position(
    max_x: int, max_y: int, rng: Optional[random.Random] = None
) -> Position:
    """Draw x from [0, max_x] and y from [0, max_y], both ends inclusive."""
    rng = rng or random.Random()
    return Position(rng.randint(0, max_x), rng.randint(0, max_y))


def sample_unique_position(
    width: int,
    height: int,
    excluded: Iterable[Tuple[int, int]],
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> Position:
    """
    Draw a uniformly random grid position that is not in ``excluded``.

    Args:
        width: Grid width (number of columns).
        height: Grid height (number of rows).
        excluded: Positions the result must differ from.
        rng: Random source; a fresh OS-seeded one when omitted.
        max_attempts: Number of draws before giving up. Defaults to
            100 * width * height.

    Returns:
        A position inside the grid and outside ``excluded``.

    Raises:
        PlacementError: If ``excluded`` covers the whole grid or no free
            position turned up within ``max_attempts`` draws.
    """
    taken = {(p[0], p[1]) for p in excluded if in_bounds(p[0], p[1], width, height)}
    if len(taken) >= width * height:
        raise PlacementError(
            f"No free cell left on the {width}x{height} grid."
        )

    rng = rng or random.Random()
    if max_attempts is None:
        max_attempts = 100 * width * height

    for _ in range(max_attempts):
        position = random_position(width - 1, height - 1, rng)
        if position not in taken:
            return position

    raise PlacementError(
        f"Gave up after {max_attempts} draws looking for a free cell "
        f"({len(taken)} of {width * height} taken)."
    )


def shuffle_directions(
    directions: Sequence[Direction], rng: Optional[random.Random] = None
) -> List[Direction]:
    """Return a Fisher-Yates shuffled copy of ``directions``."""
    rng = rng or random.Random()
    shuffled = list(directions)
    i = len(shuffled)
    while i > 1:
        j = rng.randrange(i)
        i -= 1
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
