"""Flood-fill reveal and win detection over the coverage grid."""

from collections import deque
from typing import AbstractSet, Deque, List, Optional, Sequence, Set, Tuple

from .generation import Coverage, Grid
from .positions import ALL_DIRECTIONS, Direction, Position, neighbors_of, validate_position


def reveal(
    start: Tuple[int, int],
    grid: Grid,
    coverage: Coverage,
    width: int,
    height: int,
    directions: Sequence[Direction] = ALL_DIRECTIONS,
    flagged: Optional[AbstractSet[Tuple[int, int]]] = None,
) -> List[Position]:
    """
    Reveal ``start`` and flood outwards through zero cells (breadth-first).

    A revealed cell with a non-zero value (a mine or a count) is a frontier
    cell: it is uncovered but nothing spreads from it. Flagged cells are never
    entered by the flood.

    Args:
        start: The (x, y) to open.
        grid: Cell values (-1 for a mine, otherwise the adjacency count).
        coverage: Revealed flags, updated in place.
        width: Grid width (number of columns).
        height: Grid height (number of rows).
        directions: Steps the flood may take from a zero cell.
        flagged: Cells the flood must leave covered.

    Returns:
        The positions newly revealed by this call, each exactly once. Empty if
        ``start`` was already revealed.

    Raises:
        InvalidPositionError: If ``start`` is off the grid.
    """
    origin = validate_position(start, width, height)
    flagged = flagged or frozenset()

    frontier: Deque[Position] = deque([origin])
    queued: Set[Position] = {origin}
    revealed_cells: List[Position] = []

    while frontier:
        current = frontier.popleft()
        cx, cy = current
        if coverage[cy][cx]:
            continue

        coverage[cy][cx] = True
        revealed_cells.append(current)

        if grid[cy][cx] != 0:
            continue

        for nbr in neighbors_of(current, width, height, directions):
            if nbr in queued or nbr in flagged or coverage[nbr.y][nbr.x]:
                continue
            queued.add(nbr)
            frontier.append(nbr)

    return revealed_cells


def count_revealed(coverage: Coverage) -> int:
    return sum(sum(1 for cell in row if cell) for row in coverage)


def is_cleared(coverage: Coverage, mines_count: int) -> bool:
    """True when every cell except the ``mines_count`` mines is revealed."""
    total = sum(len(row) for row in coverage)
    return count_revealed(coverage) == total - mines_count
