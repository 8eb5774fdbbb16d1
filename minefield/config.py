"""Game configuration and the standard difficulty presets."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .errors import ConfigurationError
from .positions import ALL_DIRECTIONS, Direction


def max_safe_zone_size(width: int, height: int) -> int:
    """Largest safe set a first click can produce (the clipped 3x3 window)."""
    return min(width, 3) * min(height, 3)


@dataclass(frozen=True)
class GameConfig:
    """
    Board dimensions, mine count and reveal behaviour for one game.

    Attributes:
        width: Board width (number of columns), must be > 0.
        height: Board height (number of rows), must be > 0.
        mines_count: Total number of mines, between 0 and width * height.
            Generated boards need more room; see check_generatable().
        directions: Steps the flood fill may take from a zero cell.
        seed: Seed for the random source; None uses OS entropy.
    """

    width: int = 10
    height: int = 10
    mines_count: int = 10
    directions: Tuple[Direction, ...] = ALL_DIRECTIONS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError("Width and height must be positive.")
        if self.mines_count < 0:
            raise ConfigurationError("mines_count must be non-negative.")
        if self.mines_count > self.total_cells:
            raise ConfigurationError(
                f"A {self.width}x{self.height} board has only {self.total_cells} "
                f"cells; got {self.mines_count} mines."
            )
        if not self.directions:
            raise ConfigurationError("At least one reveal direction is required.")
        # Accept lists from callers while keeping the dataclass hashable.
        object.__setattr__(self, "directions", tuple(self.directions))

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def max_generated_mines(self) -> int:
        """Most mines a generated board holds beside the largest safe zone."""
        return self.total_cells - max_safe_zone_size(self.width, self.height)

    def check_generatable(self) -> None:
        """
        Check that a board can be generated around any first click.

        Injected mine layouts never build a safe zone and skip this check.

        Raises:
            ConfigurationError: If the mines do not fit beside the safe zone.
        """
        if self.mines_count > self.max_generated_mines:
            raise ConfigurationError(
                f"A {self.width}x{self.height} board holds at most "
                f"{self.max_generated_mines} mines with a safe first click; "
                f"got {self.mines_count}."
            )


PRESETS: Dict[str, Tuple[int, int, int]] = {
    "classic": (10, 10, 10),
    "beginner": (9, 9, 10),
    "intermediate": (16, 16, 40),
    "expert": (30, 16, 99),
}


def get_preset(name: str, *, seed: Optional[int] = None) -> GameConfig:
    """
    Build the GameConfig for a named difficulty.

    Raises:
        ConfigurationError: If ``name`` is not one of PRESETS.
    """
    try:
        width, height, mines = PRESETS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown preset {name!r}; choose one of {sorted(PRESETS)}."
        ) from None
    return GameConfig(width=width, height=height, mines_count=mines, seed=seed)
