import pygame

from .kinematics import clamp


class Paddle:
    def __init__(self, x, y, width, height, speed):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        # Pixels per tick
        self.speed = speed

    def move(self, direction: int):
        # direction: -1 up, +1 down, 0 when both or neither key is held
        self.y += direction * self.speed

    def clamp(self, max_y: float):
        self.y = clamp(self.y, 0, max_y)

    def center_y(self):
        return self.y + self.height / 2.0

    def overlaps_vertically(self, top, bottom):
        return bottom >= self.y and top <= self.y + self.height

    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
