import pytest

from tetris_engine.config import EngineConfig


def test_defaults_match_standard_board():
    config = EngineConfig()
    assert (config.width, config.height) == (10, 20)
    assert (config.spawn_x, config.spawn_y) == (3, 0)
    assert config.initial_gravity_ms == 600
    assert config.gravity_floor_ms == 120


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -1},
        {"tick_ms": 0},
        {"gravity_floor_ms": 700},
        {"gravity_step_ms": -5},
        {"swipe_threshold": -1},
    ],
)
def test_invalid_values_fail_fast(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


@pytest.mark.parametrize("kwargs", [{"width": 3}, {"spawn_x": -1}, {"spawn_x": 7}, {"width": 6, "spawn_x": 3}])
def test_spawn_column_must_fit_widest_piece(kwargs):
    with pytest.raises(ValueError, match="spawn_x"):
        EngineConfig(**kwargs)


def test_spawn_column_at_right_edge_is_allowed():
    config = EngineConfig(width=6, spawn_x=2)
    assert config.spawn_x + 4 == config.width
