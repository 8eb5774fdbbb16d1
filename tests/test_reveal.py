import pytest

from minefield.errors import InvalidPositionError
from minefield.generation import MINE, build_grid, create_field
from minefield.positions import CARDINAL_DIRECTIONS
from minefield.reveal import count_revealed, is_cleared, reveal


def covered(width, height):
    return create_field(width, height, False)


def test_reveal_corner_mines_floods_to_the_border():
    grid = build_grid(5, 5, [(0, 0), (4, 4)])
    coverage = covered(5, 5)

    revealed = reveal((2, 2), grid, coverage, 5, 5)

    assert len(revealed) == 23
    assert len(set(revealed)) == 23
    assert not coverage[0][0]
    assert not coverage[4][4]
    assert all(coverage[y][x] for x, y in revealed)
    assert is_cleared(coverage, 2)


def test_reveal_stops_at_frontier():
    # A wall of mines down column 3 splits the board in two.
    grid = build_grid(7, 3, [(3, 0), (3, 1), (3, 2)])
    coverage = covered(7, 3)

    revealed = reveal((0, 1), grid, coverage, 7, 3)

    zero_cells = {(x, y) for x in (0, 1) for y in range(3)}
    border = {(2, y) for y in range(3)}
    assert set(revealed) == zero_cells | border
    assert all(grid[y][x] > 0 for x, y in border)
    assert not any(coverage[y][x] for x in range(3, 7) for y in range(3))


def test_reveal_numbered_cell_only_opens_itself():
    grid = build_grid(5, 5, [(0, 0), (4, 4)])
    coverage = covered(5, 5)
    assert reveal((1, 1), grid, coverage, 5, 5) == [(1, 1)]
    assert count_revealed(coverage) == 1


def test_reveal_mine_opens_only_the_mine():
    grid = build_grid(3, 3, [(0, 0)])
    coverage = covered(3, 3)
    revealed = reveal((0, 0), grid, coverage, 3, 3)
    assert revealed == [(0, 0)]
    assert grid[0][0] == MINE


def test_reveal_is_idempotent():
    grid = build_grid(5, 5, [(0, 0), (4, 4)])
    coverage = covered(5, 5)
    first = reveal((2, 2), grid, coverage, 5, 5)
    snapshot = [row[:] for row in coverage]

    assert first
    assert reveal((2, 2), grid, coverage, 5, 5) == []
    assert coverage == snapshot


def test_reveal_skips_already_revealed_neighbours():
    grid = build_grid(5, 5, [(0, 0), (4, 4)])
    coverage = covered(5, 5)
    reveal((1, 1), grid, coverage, 5, 5)
    revealed = reveal((2, 2), grid, coverage, 5, 5)
    assert (1, 1) not in revealed
    assert len(revealed) == 22


def test_reveal_does_not_enter_flagged_cells():
    grid = build_grid(5, 5, [(0, 0), (4, 4)])
    coverage = covered(5, 5)
    revealed = reveal((2, 2), grid, coverage, 5, 5, flagged={(2, 0)})
    assert (2, 0) not in revealed
    assert not coverage[0][2]
    assert len(revealed) == 22


def test_reveal_with_cardinal_directions():
    grid = [
        [0, 1, 1],
        [1, 0, 1],
        [1, 1, 0],
    ]
    coverage = covered(3, 3)
    revealed = reveal((0, 0), grid, coverage, 3, 3, CARDINAL_DIRECTIONS)
    assert set(revealed) == {(0, 0), (1, 0), (0, 1)}

    coverage = covered(3, 3)
    assert len(reveal((0, 0), grid, coverage, 3, 3)) == 9


def test_reveal_rejects_off_grid_start():
    grid = build_grid(3, 3, [])
    with pytest.raises(InvalidPositionError):
        reveal((3, 1), grid, covered(3, 3), 3, 3)


def test_reveal_whole_empty_board():
    grid = build_grid(4, 3, [])
    coverage = covered(4, 3)
    assert len(reveal((3, 2), grid, coverage, 4, 3)) == 12
    assert is_cleared(coverage, 0)


def _coverage_with(revealed_count, width=10, height=10):
    coverage = covered(width, height)
    for i in range(revealed_count):
        coverage[i // width][i % width] = True
    return coverage


@pytest.mark.parametrize("revealed_count, expected", [(90, True), (89, False), (50, False), (0, False)])
def test_is_cleared_ten_by_ten(revealed_count, expected):
    assert is_cleared(_coverage_with(revealed_count), 10) is expected


def test_is_cleared_single_cell():
    assert is_cleared([[True]], 0)
    assert not is_cleared([[False]], 0)
