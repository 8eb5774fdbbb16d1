"""Command line entry point: ``python -m minefield``."""

import argparse
import logging
from typing import List, Optional

from .config import PRESETS, GameConfig, get_preset
from .engine import GameSession, play_cli
from .errors import ConfigurationError
from .positions import ALL_DIRECTIONS, CARDINAL_DIRECTIONS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minefield", description="Play minefield in the terminal.")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="classic")
    parser.add_argument("--width", type=int, default=None, help="Overrides the preset width")
    parser.add_argument("--height", type=int, default=None, help="Overrides the preset height")
    parser.add_argument("--mines", type=int, default=None, help="Overrides the preset mine count")
    parser.add_argument("--seed", type=int, default=-1, help="RNG seed; <0 uses OS entropy (random every run)")
    parser.add_argument("--four-way", action="store_true", help="Flood fill along N/S/E/W only")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Merge the preset with any explicit overrides."""
    base = get_preset(args.preset)
    return GameConfig(
        width=args.width if args.width is not None else base.width,
        height=args.height if args.height is not None else base.height,
        mines_count=args.mines if args.mines is not None else base.mines_count,
        directions=CARDINAL_DIRECTIONS if args.four_way else ALL_DIRECTIONS,
        seed=None if args.seed < 0 else args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        config.check_generatable()
    except ConfigurationError as exc:
        parser.error(str(exc))

    try:
        play_cli(GameSession(config))
    except (KeyboardInterrupt, EOFError):
        print("\nQuit.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
