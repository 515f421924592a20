import logging
import math
import random

from .kinematics import serve_angle

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


class ScoreBoard:
    def __init__(self):
        self.left = 0
        self.right = 0

    def add_point(self, side):
        if side == LEFT:
            self.left += 1
        elif side == RIGHT:
            self.right += 1
        else:
            raise ValueError(f"unknown side {side!r}")

    def as_tuple(self):
        return self.left, self.right

    def __repr__(self):
        return f"ScoreBoard(left={self.left}, right={self.right})"


class RoundController:
    """
    Owns the score and the serve. The random generator is passed in (or built
    from config.seed) so that serves can be replayed.
    """
    def __init__(self, config, ball, rng=None):
        self.config = config
        self.ball = ball
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.score = ScoreBoard()

    def reset(self, serve_toward_right: bool):
        cfg = self.config
        self.ball.place(cfg.width / 2 - cfg.ball_size / 2,
                        cfg.height / 2 - cfg.ball_size / 2)

        angle = serve_angle(self.rng, cfg.serve_angle)
        vx = cfg.initial_speed_x if serve_toward_right else -cfg.initial_speed_x
        vy = cfg.initial_speed_y * math.sin(angle)
        self.ball.launch(vx, vy)
        logger.debug("serve %s vx=%.2f vy=%.3f", "right" if serve_toward_right else "left", vx, vy)

    def award(self, side):
        self.score.add_point(side)
        logger.info("point %s, score %d-%d", side, self.score.left, self.score.right)
        # The conceding side receives the serve
        self.reset(serve_toward_right=(side == LEFT))
