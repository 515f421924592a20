import os

# Headless pygame for the renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pong.config import Config
from pong.simulation import Simulation


@pytest.fixture
def config():
    return Config(seed=1234)


@pytest.fixture
def sim(config):
    return Simulation(config)


@pytest.fixture
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
