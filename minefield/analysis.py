"""Statistics and plots over many generated boards."""

import random
from collections import defaultdict
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .config import PRESETS, GameConfig, get_preset
from .engine import GameSession
from .generation import generate_grid


def _default_click(config: GameConfig) -> Tuple[int, int]:
    return config.width // 2, config.height // 2


def run_generation_single_test(
    config: GameConfig,
    first_click: Optional[Tuple[int, int]] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Dict[str, object]:
    """
    Play only the first click of a fresh game and measure the opening.

    Args:
        config: Board settings.
        first_click: Where to click; the board centre if omitted.
        rng: Random source shared across runs; seeded from config otherwise.

    Returns:
        Dict with "status", "opening_size", "zero_cells_count",
        "safe_positions_count" and "won_on_first_click".
    """
    session = GameSession(config, rng=rng)
    x, y = first_click if first_click is not None else _default_click(config)
    status, payload = session.reveal(x, y)

    revealed = payload["revealed_cells"]
    if not isinstance(revealed, list):
        raise TypeError("Expected payload['revealed_cells'] as a list.")

    return {
        "status": status,
        "opening_size": len(revealed),
        "zero_cells_count": sum(1 for _, _, v in revealed if v == 0),
        "safe_positions_count": len(session.safe_positions),
        "won_on_first_click": status == 1,
    }


def run_generation_many_tests(
    config: GameConfig,
    runs: int,
    first_click: Optional[Tuple[int, int]] = None,
) -> Dict[str, float]:
    """
    Average the first-click metrics over many independent boards.

    Returns:
        "avg_opening_size", "avg_zero_cells_count", "avg_safe_positions_count",
        "first_click_win_rate" and "opening_fraction" (mean opening size over
        the number of safe cells on the board).
    """
    if runs <= 0:
        raise ValueError("runs must be positive.")

    rng = random.Random(config.seed)
    sums: Dict[str, float] = defaultdict(float)
    wins = 0
    for _ in range(runs):
        result = run_generation_single_test(config, first_click, rng=rng)
        sums["avg_opening_size"] += float(result["opening_size"])
        sums["avg_zero_cells_count"] += float(result["zero_cells_count"])
        sums["avg_safe_positions_count"] += float(result["safe_positions_count"])
        if result["won_on_first_click"]:
            wins += 1

    out: Dict[str, float] = {k: total / runs for k, total in sums.items()}
    out["first_click_win_rate"] = wins / runs
    out["opening_fraction"] = out["avg_opening_size"] / (
        config.total_cells - config.mines_count
    )
    return out


def mine_frequency_map(
    config: GameConfig,
    runs: int,
    first_click: Optional[Tuple[int, int]] = None,
) -> np.ndarray:
    """
    Fraction of ``runs`` generated boards that put a mine on each cell.

    Returns:
        Float array of shape (height, width); the safe zone around the first
        click stays at 0.
    """
    if runs <= 0:
        raise ValueError("runs must be positive.")

    rng = random.Random(config.seed)
    click = first_click if first_click is not None else _default_click(config)
    counts = np.zeros((config.height, config.width), dtype=float)
    for _ in range(runs):
        generated = generate_grid(
            config.width, config.height, config.mines_count, click, rng
        )
        for mx, my in generated.mine_positions:
            counts[my, mx] += 1
    return counts / runs


def plot_mine_frequency(freq: np.ndarray, ax=None, title: str = "Mine frequency per cell"):
    """Draw a mine frequency map as a heatmap and return its Figure."""
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure
    im = ax.imshow(freq, cmap="viridis", vmin=0.0, interpolation="nearest")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title)
    fig.colorbar(im, ax=ax)
    return fig


def run_preset_analysis(
    runs: int,
    *,
    show: bool = True,
    seed: Optional[int] = None,
) -> Dict[str, Dict[str, float]]:
    """
    Run first-click statistics for every preset and plot the summaries.

    Args:
        runs: Number of independent boards per preset.
        show: If True, call plt.show() after drawing.
        seed: Seed applied to every preset for reproducible runs.

    Returns:
        Mapping from preset name to the dict returned by run_generation_many_tests().
    """
    results: Dict[str, Dict[str, float]] = {}
    for name in PRESETS:
        results[name] = run_generation_many_tests(get_preset(name, seed=seed), runs)

    names = list(results.keys())
    x = np.arange(len(names))

    # 1) Opening size on the first click
    plt.figure()  # type: ignore[misc]
    plt.bar(x, [results[n]["avg_opening_size"] for n in names])  # type: ignore[misc]
    plt.xticks(x, names)  # type: ignore[misc]
    plt.ylabel("Average cells revealed")  # type: ignore[misc]
    plt.title("First-click opening size by preset")  # type: ignore[misc]
    plt.tight_layout()

    # 2) Share of the safe cells opened and instant wins
    bar_w = 0.35
    plt.figure()  # type: ignore[misc]
    plt.bar(  # type: ignore[misc]
        x - bar_w / 2,
        [results[n]["opening_fraction"] for n in names],
        width=bar_w,
        label="opening_fraction",
    )
    plt.bar(  # type: ignore[misc]
        x + bar_w / 2,
        [results[n]["first_click_win_rate"] for n in names],
        width=bar_w,
        label="first_click_win_rate",
    )
    plt.xticks(x, names)  # type: ignore[misc]
    plt.ylim(0.0, 1.0)  # type: ignore[misc]
    plt.title("Opening fraction and first-click wins by preset")  # type: ignore[misc]
    plt.legend()  # type: ignore[misc]
    plt.tight_layout()

    if show:
        plt.show()  # type: ignore[misc]

    return results
