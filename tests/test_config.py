import pytest

from minefield.config import PRESETS, GameConfig, get_preset, max_safe_zone_size
from minefield.errors import ConfigurationError
from minefield.positions import ALL_DIRECTIONS, CARDINAL_DIRECTIONS


def test_defaults_are_the_classic_board():
    config = GameConfig()
    assert (config.width, config.height, config.mines_count) == (10, 10, 10)
    assert config.directions == ALL_DIRECTIONS
    assert config.seed is None
    assert config.total_cells == 100


@pytest.mark.parametrize(
    "width, height, expected",
    [(1, 1, 1), (2, 1, 2), (2, 2, 4), (3, 7, 9), (30, 16, 9)],
)
def test_max_safe_zone_size(width, height, expected):
    assert max_safe_zone_size(width, height) == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(width=0, height=5, mines_count=0),
        dict(width=5, height=-1, mines_count=0),
        dict(width=5, height=5, mines_count=-1),
        dict(width=5, height=5, mines_count=26),
        dict(width=1, height=1, mines_count=2),
        dict(width=5, height=5, mines_count=1, directions=()),
    ],
)
def test_invalid_configs(kwargs):
    with pytest.raises(ConfigurationError):
        GameConfig(**kwargs)


def test_boundary_configs_are_accepted():
    GameConfig(width=5, height=5, mines_count=16).check_generatable()
    GameConfig(width=1, height=1, mines_count=0).check_generatable()
    assert GameConfig(width=5, height=5, mines_count=25).mines_count == 25


@pytest.mark.parametrize(
    "width, height, mines, max_mines",
    [(5, 5, 17, 16), (1, 1, 1, 0), (3, 3, 1, 0), (2, 4, 5, 2)],
)
def test_dense_configs_cannot_be_generated(width, height, mines, max_mines):
    config = GameConfig(width=width, height=height, mines_count=mines)
    assert config.max_generated_mines == max_mines
    with pytest.raises(ConfigurationError, match=f"at most {max_mines} mines"):
        config.check_generatable()


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(width=3, height=3, mines_count=10)
    with pytest.raises(ValueError):
        GameConfig(width=3, height=3, mines_count=1).check_generatable()


def test_directions_are_stored_as_tuple():
    config = GameConfig(directions=list(CARDINAL_DIRECTIONS))
    assert config.directions == CARDINAL_DIRECTIONS
    assert hash(config) == hash(GameConfig(directions=CARDINAL_DIRECTIONS))


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_are_valid(name):
    config = get_preset(name)
    assert (config.width, config.height, config.mines_count) == PRESETS[name]


def test_get_preset_is_case_insensitive_and_takes_seed():
    config = get_preset("Expert", seed=3)
    assert (config.width, config.height, config.mines_count, config.seed) == (30, 16, 99, 3)


def test_unknown_preset():
    with pytest.raises(ConfigurationError, match="Unknown preset"):
        get_preset("nightmare")
