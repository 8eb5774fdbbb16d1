import numpy as np
import pytest
from matplotlib.figure import Figure

from minefield.analysis import (
    mine_frequency_map,
    plot_mine_frequency,
    run_generation_many_tests,
    run_generation_single_test,
    run_preset_analysis,
)
from minefield.config import PRESETS, GameConfig


def test_single_test_on_single_cell():
    result = run_generation_single_test(GameConfig(width=1, height=1, mines_count=0))
    assert result == {
        "status": 1,
        "opening_size": 1,
        "zero_cells_count": 1,
        "safe_positions_count": 1,
        "won_on_first_click": True,
    }


def test_many_tests_averages(classic_config):
    results = run_generation_many_tests(classic_config, runs=20)
    assert results["avg_safe_positions_count"] == 9.0
    assert 9.0 <= results["avg_opening_size"] <= 90.0
    assert 0.0 < results["opening_fraction"] <= 1.0
    assert 0.0 <= results["first_click_win_rate"] <= 1.0


def test_many_tests_corner_click():
    config = GameConfig(width=6, height=6, mines_count=5, seed=2)
    results = run_generation_many_tests(config, runs=10, first_click=(0, 0))
    assert results["avg_safe_positions_count"] == 4.0


def test_runs_must_be_positive(classic_config):
    with pytest.raises(ValueError):
        run_generation_many_tests(classic_config, runs=0)
    with pytest.raises(ValueError):
        mine_frequency_map(classic_config, runs=0)


def test_mine_frequency_map(classic_config):
    freq = mine_frequency_map(classic_config, runs=50, first_click=(5, 5))
    assert freq.shape == (10, 10)
    assert freq.sum() == pytest.approx(10.0)
    assert np.all(freq[4:7, 4:7] == 0.0)
    assert freq.max() <= 1.0


def test_plot_mine_frequency_returns_figure(classic_config):
    fig = plot_mine_frequency(mine_frequency_map(classic_config, runs=5))
    assert isinstance(fig, Figure)
    assert fig.axes[0].get_title() == "Mine frequency per cell"


def test_run_preset_analysis():
    results = run_preset_analysis(runs=2, show=False, seed=0)
    assert set(results) == set(PRESETS)
    assert all("avg_opening_size" in metrics for metrics in results.values())
