from dataclasses import dataclass

import pygame

# Key bindings: W/S for the left paddle, arrows for the right, Space pauses
LEFT_UP_KEY = pygame.K_w
LEFT_DOWN_KEY = pygame.K_s
RIGHT_UP_KEY = pygame.K_UP
RIGHT_DOWN_KEY = pygame.K_DOWN
PAUSE_KEY = pygame.K_SPACE


@dataclass(frozen=True)
class InputState:
    """Control signals held during one tick."""

    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False
    pause: bool = False

    @property
    def left_direction(self) -> int:
        return int(self.left_down) - int(self.left_up)

    @property
    def right_direction(self) -> int:
        return int(self.right_down) - int(self.right_up)

    @classmethod
    def from_keys(cls, pressed) -> "InputState":
        # `pressed` is what pygame.key.get_pressed() returns (indexable by key)
        return cls(
            left_up=bool(pressed[LEFT_UP_KEY]),
            left_down=bool(pressed[LEFT_DOWN_KEY]),
            right_up=bool(pressed[RIGHT_UP_KEY]),
            right_down=bool(pressed[RIGHT_DOWN_KEY]),
            pause=bool(pressed[PAUSE_KEY]),
        )


class PauseLatch:
    """Turns a held pause key into a single press event."""

    def __init__(self):
        self.previous = False

    def pressed(self, current: bool) -> bool:
        edge = current and not self.previous
        self.previous = current
        return edge
