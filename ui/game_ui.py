"""Game UI: overlay screens, playing field and HUD."""

import pygame
from typing import Dict, List

from game.constants import (
    BALLOON_WIDTH, BALLOON_HEIGHT, CLAW_HEAD_WIDTH, CLAW_HEAD_HEIGHT
)
from game.game_engine import GameState
from .colors import (
    WHITE, BACKGROUND, OVERLAY_BG, OVERLAY_TEXT, CLAW_COLOR, ARROW_COLOR,
    HUD_TEXT, BANNER_BG, BANNER_TEXT, BALLOON_RGB
)

FONT_NAME = 'couriernew,courier,monospace'
ORIENTATION_HINT = "Rotate to landscape for the best experience"


class GameUI:
    """Draws a read-only snapshot of the game every frame."""

    def __init__(self, surface: pygame.Surface):
        """
        Initialize the game UI.

        Args:
            surface: Main pygame surface to draw on
        """
        self.surface = surface
        self.fonts = {
            'hud': pygame.font.SysFont(FONT_NAME, 16, bold=True),
            'overlay': pygame.font.SysFont(FONT_NAME, 28, bold=True),
            'banner': pygame.font.SysFont(FONT_NAME, 18, bold=True),
        }
        self.show_orientation_hint = False

    def set_surface(self, surface: pygame.Surface):
        """Draw to a new surface after the window is resized."""
        self.surface = surface

    def render(self, game_state: Dict):
        """
        Draw the current frame.

        Args:
            game_state: Snapshot from GameEngine.get_game_state()
        """
        if game_state['state'] == GameState.PLAYING:
            self.draw_game(game_state)
        else:
            self.draw_overlay(game_state['overlay_lines'])

        if self.show_orientation_hint:
            self.draw_orientation_banner()

    def draw_overlay(self, lines: List[str]):
        """Draw a full-screen text overlay (start, game over, won)."""
        width, height = self.surface.get_size()
        self.surface.fill(OVERLAY_BG)

        font = self.fonts['overlay']
        for i, line in enumerate(lines):
            if not line:
                continue
            text = font.render(line, True, OVERLAY_TEXT)
            x = width // 2 - text.get_width() // 2
            # Baseline sits at height/2 + i*40
            y = height // 2 + i * 40 - font.get_ascent()
            self.surface.blit(text, (x, y))

    def draw_game(self, game_state: Dict):
        """Draw the playing field."""
        self.surface.fill(BACKGROUND)

        claw = game_state['claw']
        arrow = game_state['arrow']
        claw_x = int(claw['x'])
        claw_y = int(claw['y'])

        self.draw_claw(claw_x, claw_y)
        if arrow['dropping']:
            self.draw_arrow(claw_x, claw_y, int(arrow['y']))

        for balloon in game_state['balloons']:
            self.draw_balloon(balloon)

        self.draw_hud(game_state['score'], game_state['high_score'])

    def draw_claw(self, x: int, y: int):
        """Draw the claw string and head."""
        pygame.draw.line(self.surface, CLAW_COLOR, (x, 0), (x, y), 4)
        head = pygame.Rect(0, 0, CLAW_HEAD_WIDTH, CLAW_HEAD_HEIGHT)
        head.center = (x, y + 5)
        pygame.draw.ellipse(self.surface, CLAW_COLOR, head)

    def draw_arrow(self, x: int, top: int, tip: int):
        """Draw the arrow shaft from the claw down to its tip."""
        pygame.draw.line(self.surface, ARROW_COLOR, (x, top), (x, tip), 4)
        pygame.draw.polygon(self.surface, ARROW_COLOR, [
            (x - 5, tip),
            (x, tip + 8),
            (x + 5, tip),
        ])

    def draw_balloon(self, balloon: Dict):
        """Draw one balloon as an ellipse."""
        rect = pygame.Rect(0, 0, BALLOON_WIDTH, BALLOON_HEIGHT)
        rect.center = (int(balloon['x']), int(balloon['y']))
        color = BALLOON_RGB.get(balloon['color'], WHITE)
        pygame.draw.ellipse(self.surface, color, rect)

    def draw_hud(self, score: int, high_score: int):
        """Draw score and high score in the top-left corner."""
        font = self.fonts['hud']
        for text, baseline in ((f"Score: {score}", 30), (f"High: {high_score}", 50)):
            label = font.render(text, True, HUD_TEXT)
            self.surface.blit(label, (20, baseline - font.get_ascent()))

    def draw_orientation_banner(self):
        """Ask the player to rotate a portrait screen."""
        width, _ = self.surface.get_size()
        text = self.fonts['banner'].render(ORIENTATION_HINT, True, BANNER_TEXT)
        banner = pygame.Rect(0, 0, width, text.get_height() + 16)
        pygame.draw.rect(self.surface, BANNER_BG, banner)
        text_rect = text.get_rect(center=banner.center)
        self.surface.blit(text, text_rect)
