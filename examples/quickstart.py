"""
Quickstart example for minefield.

This script demonstrates basic usage of the game core.
"""

from minefield import (
    GameConfig,
    GameSession,
    get_preset,
)
from minefield.analysis import run_generation_many_tests


def main():
    print("=" * 60)
    print("minefield - Quickstart Example")
    print("=" * 60)

    # Example 1: First click on a classic board
    print("\n1. First click on a classic game (10x10, 10 mines)...")
    print("-" * 60)

    session = GameSession(GameConfig(width=10, height=10, mines_count=10, seed=7))
    status, payload = session.reveal(4, 4)

    print(f"Status: {status}")
    print(f"Safe positions: {payload['safe_positions']}")
    print(f"Cells revealed: {len(payload['revealed_cells'])}")
    print(session.format_board(reveal_all=False, color=False))

    # Example 2: Show the full board
    print("\n2. Underlying board:")
    print("-" * 60)
    print(session.format_board(reveal_all=True, color=False))

    # Example 3: Opening statistics per preset
    print("\n3. First-click opening size by preset (200 boards each)...")
    print("-" * 60)

    for name in ("beginner", "intermediate", "expert"):
        config = get_preset(name, seed=0)
        results = run_generation_many_tests(config, runs=200)
        print(
            f"{name:15s} ({config.width}x{config.height}, {config.mines_count:2d} mines): "
            f"{results['avg_opening_size']:6.1f} cells, "
            f"{results['opening_fraction'] * 100:5.1f}% of safe cells"
        )

    print("\n" + "=" * 60)
    print("Done! Run `python -m minefield` to play in the terminal.")
    print("=" * 60)


if __name__ == "__main__":
    main()
