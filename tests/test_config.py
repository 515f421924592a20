import math

import pytest

from pong.config import Config, ConfigError


def test_defaults():
    cfg = Config()
    assert (cfg.width, cfg.height) == (1920, 1080)
    assert cfg.paddle_height == 100
    assert cfg.ball_size == 10
    assert cfg.max_bounce_angle_degrees == pytest.approx(75)
    assert cfg.paddle_max_y == 980
    assert cfg.tick_seconds == pytest.approx(1 / 60)


@pytest.mark.parametrize("changes", [
    {"width": 0},
    {"height": -5},
    {"paddle_height": 0},
    {"paddle_width": -1},
    {"ball_size": 0},
    {"paddle_height": 1080},
    {"ball_size": 1080},
    {"paddle_margin": -1},
    {"paddle_margin": 950},
    {"paddle_speed": -1},
    {"initial_speed_x": 0},
    {"max_bounce_angle": 0},
    {"max_bounce_angle": math.pi / 2},
    {"serve_angle": math.pi / 2},
    {"tick_rate": 0},
])
def test_rejects_bad_geometry(changes):
    with pytest.raises(ConfigError):
        Config(**changes)


def test_with_overrides_validates():
    cfg = Config()
    assert cfg.with_overrides(seed=7).seed == 7
    with pytest.raises(ConfigError):
        cfg.with_overrides(paddle_height=2000)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_for_tick_rate_keeps_defaults_at_tuned_rate():
    assert Config.for_tick_rate(60) == Config()


def test_for_tick_rate_rescales_per_tick_speeds():
    cfg = Config.for_tick_rate(120, seed=3)
    assert cfg.tick_rate == 120
    assert cfg.seed == 3
    assert cfg.paddle_speed == pytest.approx(3.0)
    assert cfg.initial_speed_x == pytest.approx(2.0)
    assert cfg.initial_speed_y == pytest.approx(0.75)


@pytest.mark.parametrize("rate", [0, -30])
def test_for_tick_rate_rejects_non_positive(rate):
    with pytest.raises(ConfigError):
        Config.for_tick_rate(rate)
