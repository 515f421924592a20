from .config import Config, ConfigError
from .controls import InputState
from .simulation import Simulation

__all__ = ["Config", "ConfigError", "InputState", "Simulation"]
