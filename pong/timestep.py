import logging

logger = logging.getLogger(__name__)


class FixedTimestep:
    """
    Accumulates wall-clock time and hands out whole simulation ticks.

    The per-tick speeds in Config are tuned for its tick rate, so the driver
    runs as many ticks as the elapsed time covers instead of one per frame.
    """
    def __init__(self, tick_seconds: float, max_ticks_per_frame: int = 5):
        if tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive")
        if max_ticks_per_frame < 1:
            raise ValueError("max_ticks_per_frame must be at least 1")
        self.tick_seconds = tick_seconds
        self.max_ticks_per_frame = max_ticks_per_frame
        self.accumulator = 0.0

    @classmethod
    def from_config(cls, config, max_ticks_per_frame: int = 5) -> "FixedTimestep":
        return cls(config.tick_seconds, max_ticks_per_frame)

    def advance(self, elapsed: float) -> int:
        self.accumulator += max(0.0, elapsed)
        ticks = int(self.accumulator / self.tick_seconds)
        self.accumulator -= ticks * self.tick_seconds

        if ticks > self.max_ticks_per_frame:
            logger.debug("dropping %d ticks after a slow frame", ticks - self.max_ticks_per_frame)
            ticks = self.max_ticks_per_frame
        return ticks
