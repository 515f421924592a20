import pygame

BG_COLOR = (10, 10, 30)
CENTER_LINE_COLOR = (80, 80, 120)
PADDLE_COLOR = (200, 200, 200)
BALL_COLOR = (240, 120, 80)
TEXT_COLOR = (255, 255, 255)
OVERLAY_DARK = (0, 0, 0, 140)

DASH_SPACING = 20
DASH_LENGTH = 12

INSTRUCTIONS = "W/S | Up/Down to move. Space toggles pause. Esc quits."


class Renderer:
    """Draws a Simulation onto a pygame surface. Read-only on the simulation."""

    def __init__(self, config):
        self.config = config
        self.font = pygame.font.SysFont("Arial", 30)
        self.small_font = pygame.font.SysFont("Arial", 18)
        self.big_font = pygame.font.SysFont("Arial", 54)

        # Pre-filled surfaces so paddles and ball are a single blit each
        self.paddle_img = pygame.Surface((config.paddle_width, config.paddle_height))
        self.paddle_img.fill(PADDLE_COLOR)
        self.ball_img = pygame.Surface((config.ball_size, config.ball_size))
        self.ball_img.fill(BALL_COLOR)

    def render(self, screen, sim):
        width, height = self.config.width, self.config.height
        screen.fill(BG_COLOR)

        for y in range(0, height, DASH_SPACING):
            pygame.draw.rect(screen, CENTER_LINE_COLOR, (width // 2 - 1, y, 2, DASH_LENGTH))

        screen.blit(self.paddle_img, sim.left_paddle.rect())
        screen.blit(self.paddle_img, sim.right_paddle.rect())
        screen.blit(self.ball_img, sim.ball.rect())

        # HUD
        score_text = self.font.render(f"{sim.score.left}    {sim.score.right}", True, TEXT_COLOR)
        screen.blit(score_text, score_text.get_rect(midtop=(width // 2, height // 2 + 10)))
        hint = self.small_font.render(INSTRUCTIONS, True, TEXT_COLOR)
        screen.blit(hint, (10, height - 24))

        if sim.paused:
            overlay = pygame.Surface((width, height), pygame.SRCALPHA)
            overlay.fill(OVERLAY_DARK)
            screen.blit(overlay, (0, 0))
            title = self.big_font.render("PAUSED", True, TEXT_COLOR)
            screen.blit(title, title.get_rect(center=(width // 2, height // 2 - 40)))
