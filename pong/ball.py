import pygame

from .kinematics import magnitude


class Ball:
    def __init__(self, x, y, size):
        self.x = float(x)
        self.y = float(y)
        self.size = size
        # Pixels per tick
        self.vx = 0.0
        self.vy = 0.0

    def place(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def launch(self, vx, vy):
        self.vx = vx
        self.vy = vy

    def integrate(self):
        self.x += self.vx
        self.y += self.vy

    def bounce_off_walls(self, arena_height: int):
        """Reflect off the top/bottom edges."""
        if self.y <= 0:
            self.y = 0.0
            self.vy = -self.vy
        if self.y + self.size >= arena_height:
            self.y = float(arena_height - self.size)
            self.vy = -self.vy

    def speed(self):
        return magnitude(self.vx, self.vy)

    def center_y(self):
        return self.y + self.size / 2.0

    def bottom(self):
        return self.y + self.size

    def right(self):
        return self.x + self.size

    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), int(self.size), int(self.size))
