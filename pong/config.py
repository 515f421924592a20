import math
from dataclasses import dataclass, replace
from typing import Optional


class ConfigError(ValueError):
    """Raised when the arena geometry or speeds can't support play."""


# Per-tick speeds below are tuned for this rate
TUNED_TICK_RATE = 60


@dataclass(frozen=True)
class Config:
    # Arena
    width: int = 1920
    height: int = 1080

    # Paddles (speed in pixels per tick)
    paddle_width: int = 12
    paddle_height: int = 100
    paddle_speed: float = 6
    paddle_margin: int = 20

    # Ball (speeds in pixels per tick)
    ball_size: int = 10
    initial_speed_x: float = 4.0
    initial_speed_y: float = 1.5
    max_bounce_angle: float = math.radians(75)
    serve_angle: float = math.pi / 8
    nudge: float = 0.1

    # None draws the seed from the OS
    seed: Optional[int] = None
    tick_rate: int = TUNED_TICK_RATE

    edge_triggered_pause: bool = True
    clamp_bounce_offset: bool = True

    def __post_init__(self):
        self.validate()

    @property
    def max_bounce_angle_degrees(self) -> float:
        return math.degrees(self.max_bounce_angle)

    @property
    def paddle_max_y(self) -> float:
        return self.height - self.paddle_height

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.tick_rate

    def with_overrides(self, **changes) -> "Config":
        return replace(self, **changes)

    @classmethod
    def for_tick_rate(cls, tick_rate: int, **changes) -> "Config":
        """Config running at `tick_rate` with per-tick speeds rescaled so play
        speed in pixels per second matches the tuned rate."""
        if tick_rate <= 0:
            raise ConfigError(f"tick rate must be positive, got {tick_rate}")
        base = cls(**changes)
        scale = TUNED_TICK_RATE / tick_rate
        return replace(
            base,
            tick_rate=tick_rate,
            paddle_speed=base.paddle_speed * scale,
            initial_speed_x=base.initial_speed_x * scale,
            initial_speed_y=base.initial_speed_y * scale,
        )

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"arena must have positive size, got {self.width}x{self.height}")
        if self.paddle_width <= 0 or self.paddle_height <= 0:
            raise ConfigError("paddle dimensions must be positive")
        if self.ball_size <= 0:
            raise ConfigError("ball size must be positive")
        if self.paddle_height >= self.height:
            raise ConfigError(
                f"paddle height {self.paddle_height} does not fit arena height {self.height}"
            )
        if self.ball_size >= self.height or self.ball_size >= self.width:
            raise ConfigError(f"ball size {self.ball_size} does not fit the arena")
        if self.paddle_margin < 0:
            raise ConfigError("paddle margin can't be negative")
        if 2 * (self.paddle_margin + self.paddle_width) >= self.width:
            raise ConfigError("paddles overlap horizontally")
        if self.paddle_speed < 0 or self.initial_speed_y < 0 or self.nudge < 0:
            raise ConfigError("speeds and nudge can't be negative")
        if self.initial_speed_x <= 0:
            raise ConfigError("initial horizontal speed must be positive")
        if not 0 < self.max_bounce_angle < math.pi / 2:
            raise ConfigError(
                f"max bounce angle must lie in (0, 90) degrees, got {self.max_bounce_angle_degrees:.1f}"
            )
        if not 0 <= self.serve_angle < math.pi / 2:
            raise ConfigError("serve angle must lie in [0, 90) degrees")
        if self.tick_rate <= 0:
            raise ConfigError("tick rate must be positive")
