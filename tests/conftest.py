"""Shared fixtures for the minefield tests."""

import random

import matplotlib

matplotlib.use("Agg")

import pytest

from minefield import GameConfig


def brute_force_counts(grid):
    """Recompute every non-mine cell's adjacency count from scratch."""
    height, width = len(grid), len(grid[0])
    expected = [[0] * width for _ in range(height)]
    for y in range(height):
        for x in range(width):
            if grid[y][x] == -1:
                expected[y][x] = -1
                continue
            expected[y][x] = sum(
                1
                for dy in (-1, 0, 1)
                for dx in (-1, 0, 1)
                if (dx or dy)
                and 0 <= x + dx < width
                and 0 <= y + dy < height
                and grid[y + dy][x + dx] == -1
            )
    return expected


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def classic_config():
    return GameConfig(width=10, height=10, mines_count=10, seed=42)


@pytest.fixture
def corner_mines_config():
    """5x5 board used with mines injected at (0, 0) and (4, 4)."""
    return GameConfig(width=5, height=5, mines_count=2)
