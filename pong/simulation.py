import logging
from typing import Optional

from .ball import Ball
from .config import Config
from .controls import InputState, PauseLatch
from .kinematics import bounce_angle, deflect, normalized_offset
from .paddle import Paddle
from .rounds import LEFT, RIGHT, RoundController

logger = logging.getLogger(__name__)


class Simulation:
    """
    World state for one match plus the per-tick update.

    The driver calls `step` once per tick with the keys held during that tick
    and reads `left_paddle`, `right_paddle`, `ball`, `score` and `paused`
    afterwards to draw the frame.
    """
    def __init__(self, config: Optional[Config] = None, rng=None):
        self.config = config if config is not None else Config()
        cfg = self.config

        # Entities
        start_y = (cfg.height - cfg.paddle_height) / 2
        self.left_paddle = Paddle(cfg.paddle_margin, start_y,
                                  cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed)
        self.right_paddle = Paddle(cfg.width - cfg.paddle_margin - cfg.paddle_width, start_y,
                                   cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed)
        self.ball = Ball(0, 0, cfg.ball_size)

        self.rounds = RoundController(cfg, self.ball, rng)
        self.paused = False
        self.tick = 0
        self._pause_latch = PauseLatch()

        self.rounds.reset(serve_toward_right=True)

    @property
    def score(self):
        return self.rounds.score

    # ---------- Step ----------
    def step(self, inputs: InputState):
        self._handle_pause(inputs.pause)
        if self.paused:
            return

        cfg = self.config
        self.tick += 1

        self.left_paddle.move(inputs.left_direction)
        self.right_paddle.move(inputs.right_direction)
        self.left_paddle.clamp(cfg.paddle_max_y)
        self.right_paddle.clamp(cfg.paddle_max_y)

        self.ball.integrate()
        self.ball.bounce_off_walls(cfg.height)

        if self._hits_left_paddle():
            self._paddle_bounce(self.left_paddle, direction=+1)
            self.ball.x = self.left_paddle.x + self.left_paddle.width + cfg.nudge

        if self._hits_right_paddle():
            self._paddle_bounce(self.right_paddle, direction=-1)
            self.ball.x = self.right_paddle.x - cfg.ball_size - cfg.nudge

        if self.ball.x < -cfg.ball_size:
            self.rounds.award(RIGHT)
        if self.ball.x > cfg.width + cfg.ball_size:
            self.rounds.award(LEFT)

    # ---------- Helpers ----------
    def _handle_pause(self, pause_held: bool):
        if self.config.edge_triggered_pause:
            toggle = self._pause_latch.pressed(pause_held)
        else:
            # Level-triggered: flips on every tick the key is down
            toggle = pause_held
        if toggle:
            self.paused = not self.paused
            logger.debug("paused" if self.paused else "resumed")

    def _hits_left_paddle(self):
        p = self.left_paddle
        return (p.x <= self.ball.x <= p.x + p.width
                and p.overlaps_vertically(self.ball.y, self.ball.bottom()))

    def _hits_right_paddle(self):
        p = self.right_paddle
        return (p.x <= self.ball.right() <= p.x + p.width
                and p.overlaps_vertically(self.ball.y, self.ball.bottom()))

    def _paddle_bounce(self, paddle, direction):
        cfg = self.config
        rel = normalized_offset(self.ball.center_y(), paddle.center_y(),
                                paddle.height / 2.0, cfg.clamp_bounce_offset)
        angle = bounce_angle(rel, cfg.max_bounce_angle)
        self.ball.vx, self.ball.vy = deflect(self.ball.speed(), angle, direction)

    def snapshot(self):
        return {
            "left_paddle": {"x": self.left_paddle.x, "y": self.left_paddle.y},
            "right_paddle": {"x": self.right_paddle.x, "y": self.right_paddle.y},
            "ball": {"x": self.ball.x, "y": self.ball.y, "vx": self.ball.vx, "vy": self.ball.vy},
            "score": {"left": self.score.left, "right": self.score.right},
            "paused": self.paused,
            "tick": self.tick,
        }
