import argparse
import logging

import pygame

from .config import Config, ConfigError
from .controls import InputState
from .renderer import Renderer
from .simulation import Simulation
from .timestep import FixedTimestep

logger = logging.getLogger("pong")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--seed", type=int, default=None, help="seed for the serve angles")
    parser.add_argument("--fps", type=int, default=60,
                        help="simulation ticks per second (speeds are rescaled to match)")
    parser.add_argument("--level-pause", action="store_true",
                        help="toggle pause on every frame Space is held")
    parser.add_argument("--unclamped-bounce", action="store_true",
                        help="allow bounce angles past the maximum at paddle corners")
    parser.add_argument("--log-level", type=str.upper, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args) -> Config:
    # Speeds are rescaled so --fps only changes smoothness, not play speed
    return Config.for_tick_rate(
        args.fps,
        seed=args.seed,
        edge_triggered_pause=not args.level_pause,
        clamp_bounce_offset=not args.unclamped_bounce,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = build_config(args)
    except ConfigError as e:
        logger.error("invalid configuration: %s", e)
        return 2

    # Initialize pygame/Start application
    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Pong - Pygame")
    clock = pygame.time.Clock()

    sim = Simulation(config)
    renderer = Renderer(config)
    timestep = FixedTimestep.from_config(config)
    logger.info("match started (seed=%s, %d ticks/s)", config.seed, config.tick_rate)

    running = True
    while running:
        dt = clock.tick(config.tick_rate) / 1000.0  # seconds since last frame

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        inputs = InputState.from_keys(pygame.key.get_pressed())
        for _ in range(timestep.advance(dt)):
            sim.step(inputs)

        renderer.render(screen, sim)
        pygame.display.flip()

    logger.info("final score %d-%d", sim.score.left, sim.score.right)
    pygame.quit()
    return 0
