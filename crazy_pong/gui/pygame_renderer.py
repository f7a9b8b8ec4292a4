"""
PyGame renderer for Crazy Pong game
"""

import pygame

from crazy_pong.core.entities import PaddleSide, RenderSnapshot
from crazy_pong.utils.config import GameConfig, game_config


class PygameRenderer:
    """PyGame-based renderer for Crazy Pong"""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        config: GameConfig | None = None,
    ):
        """Initialize the PyGame renderer"""
        self.config = config or game_config
        self.width = width or self.config.REF_WIDTH
        self.height = height or self.config.REF_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption("Crazy Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = self.config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = self.config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = self.config.TEXT_COLOR
        self.button_color: tuple[int, int, int] = (0, 160, 80)

        self.font_large = pygame.font.Font(None, 74)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 32)

        self.restart_button_rect = pygame.Rect(0, 0, 0, 0)
        self.game_over_visible = False
        self.active = True

    def get_container_size(self) -> tuple[float, float]:
        """Current arena size, the whole window"""
        return (float(self.width), float(self.height))

    def resize(self, width: int, height: int) -> None:
        """Follow a window resize"""
        self.width = max(1, width)
        self.height = max(1, height)
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_ball(self, snapshot: RenderSnapshot) -> None:
        """Draw the game ball from its bounding box"""
        left, top, width, height, radius = snapshot.ball
        center = (int(left + width / 2), int(top + height / 2))
        pygame.draw.circle(self.screen, self.ball_color, center, max(1, int(radius)))

    def draw_paddles(self, snapshot: RenderSnapshot) -> None:
        """Draw both paddles"""
        for side in (PaddleSide.LEFT, PaddleSide.RIGHT):
            x, y, width, height = snapshot.paddles[side]
            rect = pygame.Rect(int(x), int(y), max(1, int(width)), int(height))
            pygame.draw.rect(self.screen, self.paddle_color, rect)

    def draw_hud(self, snapshot: RenderSnapshot) -> None:
        """Draw the current speed and bounce count"""
        speed_surface = self.font_small.render(f"Speed: {snapshot.speed}", True, self.text_color)
        self.screen.blit(speed_surface, (self.width // 2 - speed_surface.get_width() - 20, 10))

        bounce_surface = self.font_small.render(
            f"Bounces: {snapshot.bounce_count}", True, self.text_color
        )
        self.screen.blit(bounce_surface, (self.width // 2 + 20, 10))

    def render_frame(self, snapshot: RenderSnapshot) -> None:
        """Render one frame of a running game"""
        self.game_over_visible = False
        self.clear_screen()
        self.draw_paddles(snapshot)
        self.draw_ball(snapshot)
        self.draw_hud(snapshot)

    def show_game_over(self, snapshot: RenderSnapshot) -> None:
        """Draw the final frame without the ball, then the overlay"""
        self.game_over_visible = True
        self.clear_screen()
        self.draw_paddles(snapshot)
        self.draw_hud(snapshot)
        self.draw_game_over(snapshot)

    def draw_game_over(self, snapshot: RenderSnapshot) -> None:
        """Draw game over overlay with a restart button"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        title_surface = self.font_large.render("GAME OVER", True, self.text_color)
        title_rect = title_surface.get_rect()
        title_rect.center = (self.width // 2, self.height // 2 - 70)
        self.screen.blit(title_surface, title_rect)

        summary = f"Bounces: {snapshot.bounce_count}   Speed: {snapshot.speed}"
        summary_surface = self.font_small.render(summary, True, self.text_color)
        summary_rect = summary_surface.get_rect()
        summary_rect.center = (self.width // 2, self.height // 2 - 10)
        self.screen.blit(summary_surface, summary_rect)

        button_surface = self.font_medium.render("Start", True, self.text_color)
        self.restart_button_rect = button_surface.get_rect().inflate(40, 20)
        self.restart_button_rect.center = (self.width // 2, self.height // 2 + 60)
        pygame.draw.rect(self.screen, self.button_color, self.restart_button_rect, border_radius=8)
        self.screen.blit(button_surface, button_surface.get_rect(center=self.restart_button_rect.center))

    def is_restart_click(self, position: tuple[int, int]) -> bool:
        """Checks if a click landed on the restart button"""
        return self.game_over_visible and self.restart_button_rect.collidepoint(position)

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        fps = fps or self.config.FPS
        self.clock.tick(fps)

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        pygame.quit()
