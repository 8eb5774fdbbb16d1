"""Game session tying generation, flood-fill reveal and win detection together."""

import dataclasses
import logging
import random
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .config import GameConfig
from .generation import MINE, Coverage, Grid, build_grid, create_field, generate_grid
from .positions import Position, validate_position
from .reveal import count_revealed, is_cleared
from .reveal import reveal as flood_fill

logger = logging.getLogger(__name__)

RevealedCell = Tuple[int, int, int]


class GameSession:
    """One game of minefield: owns the grid, the coverage grid and the flags."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a game session. The grid is generated on the first reveal.

        Args:
            config: Board settings; the 10x10 / 10 mines classic board if omitted.
            rng: Random source. Defaults to one seeded from ``config.seed``.
        """
        self.config: GameConfig = config or GameConfig()
        self.rng: random.Random = rng or random.Random(self.config.seed)
        self._reset_state()

    def _reset_state(self) -> None:
        self._grid: Optional[Grid] = None
        self._coverage: Optional[Coverage] = None
        self._mine_positions: FrozenSet[Position] = frozenset()
        self.safe_positions: List[Position] = []
        self.flagged: Set[Position] = set()
        self.game_over: bool = False
        self.won: bool = False

    @classmethod
    def from_mines(
        cls,
        config: GameConfig,
        mine_positions: Iterable[Tuple[int, int]],
    ) -> "GameSession":
        """
        Create a session on a fixed mine layout instead of a generated one.

        The config's mine count is replaced by the number of given mines. The
        first reveal then behaves like any later one: only the clicked cell
        is opened.
        """
        mines = {validate_position(p, config.width, config.height) for p in mine_positions}
        config = dataclasses.replace(config, mines_count=len(mines))
        session = cls(config)
        session._grid = build_grid(config.width, config.height, mines)
        session._coverage = create_field(config.width, config.height, False)
        session._mine_positions = frozenset(mines)
        return session

    def new_game(self, config: Optional[GameConfig] = None) -> None:
        """Discard the current board; the next reveal generates a new one."""
        if config is not None:
            self.config = config
            if config.seed is not None:
                self.rng = random.Random(config.seed)
        self._reset_state()

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mines_count(self) -> int:
        return self.config.mines_count

    @property
    def started(self) -> bool:
        return self._grid is not None

    @property
    def grid(self) -> Optional[Tuple[Tuple[int, ...], ...]]:
        if self._grid is None:
            return None
        return tuple(tuple(row) for row in self._grid)

    @property
    def coverage(self) -> Optional[Tuple[Tuple[bool, ...], ...]]:
        if self._coverage is None:
            return None
        return tuple(tuple(row) for row in self._coverage)

    @property
    def mine_positions(self) -> FrozenSet[Position]:
        return self._mine_positions

    @property
    def mines_remaining(self) -> int:
        return self.mines_count - len(self.flagged)

    @property
    def revealed_count(self) -> int:
        return count_revealed(self._coverage) if self._coverage is not None else 0

    def value_at(self, x: int, y: int) -> Optional[int]:
        """Cell value (-1 mine, else adjacency count), or None before the first reveal."""
        validate_position((x, y), self.width, self.height)
        if self._grid is None:
            return None
        return self._grid[y][x]

    def is_revealed(self, x: int, y: int) -> bool:
        validate_position((x, y), self.width, self.height)
        return self._coverage is not None and self._coverage[y][x]

    # -------------------------------------------------------------------------
    # Player actions
    # -------------------------------------------------------------------------

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Flag or unflag a covered cell.

        Returns:
            Whether the cell is flagged afterwards. Revealed cells and finished
            games are left unchanged.

        Raises:
            InvalidPositionError: If (x, y) is off the board.
        """
        position = validate_position((x, y), self.width, self.height)
        if self.game_over or self.is_revealed(x, y):
            return position in self.flagged

        if position in self.flagged:
            self.flagged.discard(position)
            return False
        self.flagged.add(position)
        return True

    def reveal(self, x: int, y: int) -> Tuple[int, Dict[str, object]]:
        """
        Reveal a cell and return a status code plus payload.

        Args:
            x: X-coordinate of the cell to reveal.
            y: Y-coordinate of the cell to reveal.

        Returns:
            Tuple of (status, payload) where status is:
                - -1: Mine hit (loss)
                - 0: Non-terminal reveal (or no-op)
                - 1: Win (all safe cells revealed)

            Payload always contains "revealed_cells": List[(x, y, value)].
            The first reveal adds "safe_positions"; a loss adds "all_mines".

        Raises:
            InvalidPositionError: If coordinates are out of bounds.
            ConfigurationError: On the first reveal, if the mines do not fit
                beside the safe zone.
        """
        click = validate_position((x, y), self.width, self.height)

        if self.game_over or click in self.flagged:
            return 0, {"revealed_cells": []}

        payload: Dict[str, object] = {}
        if self._grid is None:
            self.config.check_generatable()
            generated = generate_grid(
                self.width, self.height, self.mines_count, click, self.rng
            )
            self._grid = generated.grid
            self._coverage = generated.coverage
            self._mine_positions = frozenset(generated.mine_positions)
            self.safe_positions = generated.safe_positions
            payload["safe_positions"] = list(generated.safe_positions)
            starts = [p for p in generated.safe_positions if p not in self.flagged]
            logger.info(
                "New %dx%d game with %d mines, first click at %s",
                self.width,
                self.height,
                self.mines_count,
                click,
            )
        else:
            if self._coverage[y][x]:
                return 0, {"revealed_cells": []}
            starts = [click]

        grid, coverage = self._grid, self._coverage
        revealed: List[Position] = []
        for start in starts:
            revealed.extend(
                flood_fill(
                    start,
                    grid,
                    coverage,
                    self.width,
                    self.height,
                    self.config.directions,
                    flagged=self.flagged,
                )
            )
        revealed_cells: List[RevealedCell] = [(p.x, p.y, grid[p.y][p.x]) for p in revealed]
        payload["revealed_cells"] = revealed_cells

        if grid[y][x] == MINE:
            self.game_over = True
            self.won = False
            payload["all_mines"] = self._mine_positions
            logger.info("Mine hit at %s; game lost", click)
            return -1, payload

        if is_cleared(coverage, self.mines_count):
            self.game_over = True
            self.won = True
            logger.info("All safe cells revealed; game won")
            return 1, payload

        return 0, payload

    # -------------------------------------------------------------------------
    # Display methods
    # -------------------------------------------------------------------------

    _ANSI_RESET = "\033[0m"
    _ANSI_COORD = "\033[96m"
    _ANSI_MINE = "\033[91m"

    def _c(self, s: str, color: bool) -> str:
        return f"{self._ANSI_COORD}{s}{self._ANSI_RESET}" if color else s

    def _m(self, s: str, color: bool) -> str:
        return f"{self._ANSI_MINE}{s}{self._ANSI_RESET}" if color else s

    def format_board(self, reveal_all: bool = False, color: bool = True) -> str:
        """
        Render the board as a multi-line string for terminal display.

        Args:
            reveal_all: If True, show mines and all underlying values.
            color: If False, leave out the ANSI colour codes.

        Returns:
            A formatted multi-line string with coordinate labels and the board grid.
            Covered cells are '.', flags 'F', mines 'M'.
        """
        w, h = self.width, self.height

        def cell_str(x: int, y: int) -> str:
            shown = self._grid is not None and (reveal_all or self._coverage[y][x])
            if not shown:
                return "F" if (x, y) in self.flagged else "."
            v = self._grid[y][x]
            if v == MINE:
                return self._m("M", color)
            return str(v)

        header_cells = " ".join(f"{x:2d}" for x in range(w))
        out = [self._c("   ", color) + self._c(header_cells, color)]
        out.append(self._c("   " + "-" * (3 * w - 1), color))

        for y in range(h):
            row_cells = " ".join(f" {cell_str(x, y)}" for x in range(w))
            out.append(self._c(f"{y:2d} ", color) + self._c("|", color) + row_cells)

        return "\n".join(out)


def play_cli(session: GameSession) -> None:
    """
    Run a simple terminal UI for playing minefield.

    Args:
        session: The GameSession to play.
    """
    print(
        "minefield (enter: x y to reveal, f x y to flag). "
        "Coordinates are 0-based. Type 'q' to quit.\n"
    )
    print(session.format_board(reveal_all=False))

    while True:
        s = input(f"\nMove ({session.mines_remaining} mines left): ").strip()
        if s.lower() in {"q", "quit", "exit"}:
            print("Quit.")
            return

        parts = s.replace(",", " ").split()
        flag = bool(parts) and parts[0].lower() == "f"
        if flag:
            parts = parts[1:]
        if len(parts) != 2:
            print("Invalid input. Example: 3 5  or  f 3 5")
            continue

        try:
            x = int(parts[0])
            y = int(parts[1])
        except ValueError:
            print("Invalid input. Coordinates must be integers.")
            continue

        if not (0 <= x < session.width and 0 <= y < session.height):
            print(f"Invalid input. The board is {session.width}x{session.height}.")
            continue

        if flag:
            flagged = session.toggle_flag(x, y)
            print(f"\n({x}, {y}) {'flagged' if flagged else 'unflagged'}.\n")
            print(session.format_board(reveal_all=False))
            continue

        status, _ = session.reveal(x, y)

        print(f"\nYou decided to reveal ({x}, {y}).\n")
        print(session.format_board(reveal_all=False))

        if status == -1:
            print("\nYou hit a mine. You lost.")
            print("\nFull board:")
            print(session.format_board(reveal_all=True))
            return

        if status == 1:
            print("\nYou revealed all safe cells. You won!")
            print("\nFull board:")
            print(session.format_board(reveal_all=True))
            return
