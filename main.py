#!/usr/bin/env python3
"""
Claw of Code - a one-button arcade game.

A claw sweeps back and forth across the top of the screen. Drop an arrow
from it to pop every balloon below; a single miss ends the game.
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from game.config import GameSettings, ConfigError
from game.constants import GAME_TITLE
from game.game_engine import GameEngine
from game.high_scores import HighScoreTracker
from game.input_dispatcher import InputDispatcher
from game.sound_manager import SoundManager
from ui.game_ui import GameUI

logger = logging.getLogger(__name__)

HIDDEN_EVENTS = (pygame.WINDOWMINIMIZED, pygame.WINDOWHIDDEN)
SHOWN_EVENTS = (pygame.WINDOWRESTORED, pygame.WINDOWSHOWN, pygame.WINDOWMAXIMIZED)
RESIZE_EVENTS = (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED)
VOLUME_STEP = 0.1
VOLUME_KEYS = {
    pygame.K_EQUALS: VOLUME_STEP,
    pygame.K_PLUS: VOLUME_STEP,
    pygame.K_KP_PLUS: VOLUME_STEP,
    pygame.K_MINUS: -VOLUME_STEP,
    pygame.K_KP_MINUS: -VOLUME_STEP,
}


def configure_logging(level: str = 'INFO'):
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def window_size(event: pygame.event.Event):
    """Get the new (width, height) from a resize event."""
    if event.type == pygame.VIDEORESIZE:
        return event.w, event.h
    # WINDOWSIZECHANGED carries the size in x and y
    return event.x, event.y


class ClawOfCode:
    """Main game application class."""

    def __init__(self, settings: GameSettings):
        """
        Initialize the game application.

        Args:
            settings: Runtime settings
        """
        self.settings = settings

        flags = pygame.RESIZABLE
        if settings.fullscreen:
            flags = pygame.FULLSCREEN
        self.screen = pygame.display.set_mode(
            (settings.screen_width, settings.screen_height), flags)
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()

        width, height = self.screen.get_size()

        # Initialize game engine
        self.high_scores = HighScoreTracker()
        self.game_engine = GameEngine(
            viewport_width=width,
            viewport_height=height,
            balloon_count=settings.balloon_count,
            claw_speed=settings.claw_speed,
            high_scores=self.high_scores,
        )

        # Initialize input, sound and UI collaborators
        self.input = InputDispatcher(self.game_engine)
        self.sound_manager = SoundManager(settings.assets_dir, enabled=settings.audio_enabled)
        self.game_ui = GameUI(self.screen)

        # Window state
        self.hidden = False
        self.running = True

        self._check_orientation(width, height)

    def run(self):
        """Main game loop."""
        self.sound_manager.start_ambience()
        try:
            while self.running:
                self.clock.tick(self.settings.fps)

                self._handle_events()

                # Frames are skipped, not caught up, while the window is hidden
                if self.hidden:
                    continue

                events = self.game_engine.update()
                self.sound_manager.play_cues(events['cues'])

                self.game_ui.render(self.game_engine.get_game_state())
                pygame.display.flip()
        finally:
            self._cleanup()

    def _handle_events(self):
        """Handle pygame events."""
        self.input.begin_frame()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_m:
                enabled = self.sound_manager.toggle_sound()
                logger.info("Sound %s", 'enabled' if enabled else 'disabled')

            elif event.type == pygame.KEYDOWN and event.key in VOLUME_KEYS:
                self.sound_manager.set_volume(
                    self.sound_manager.volume + VOLUME_KEYS[event.key])
                logger.info("Volume %d%%", round(self.sound_manager.volume * 100))

            elif event.type in RESIZE_EVENTS:
                self._handle_resize(*window_size(event))

            elif event.type in HIDDEN_EVENTS:
                self._set_hidden(True)

            elif event.type in SHOWN_EVENTS:
                self._set_hidden(False)

            else:
                self.input.handle_event(event)

    def _handle_resize(self, width: int, height: int):
        """Follow the window size with the viewport."""
        if width <= 0 or height <= 0:
            return
        self.screen = pygame.display.get_surface()
        self.game_ui.set_surface(self.screen)
        self.game_engine.set_viewport(width, height)
        self._check_orientation(width, height)
        logger.debug("Viewport resized to %dx%d", width, height)

    def _check_orientation(self, width: int, height: int):
        """Show a hint when the window is taller than it is wide."""
        portrait = height > width
        if portrait and not self.game_ui.show_orientation_hint:
            logger.warning("Portrait window (%dx%d); landscape plays better", width, height)
        self.game_ui.show_orientation_hint = portrait

    def _set_hidden(self, hidden: bool):
        """Pause ticking and ambience while the window is not visible."""
        if hidden == self.hidden:
            return
        self.hidden = hidden
        if hidden:
            self.sound_manager.pause_ambience()
        else:
            self.sound_manager.resume_ambience()

    def _cleanup(self):
        """Clean up resources."""
        logger.info("Exiting. High score this session: %d", self.high_scores.best)
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=GAME_TITLE)
    parser.add_argument("--screen", help="Window size WxH, e.g. 1280x720")
    parser.add_argument("--fullscreen", action="store_true", help="Run fullscreen")
    parser.add_argument("--balloons", type=int, help="Number of balloons per game")
    parser.add_argument("--mute", action="store_true", help="Start with sound off")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> GameSettings:
    """Combine environment settings with command line overrides."""
    settings = GameSettings.from_env(validate=False)

    if args.screen:
        try:
            w, h = map(int, args.screen.lower().split("x"))
        except ValueError:
            raise ConfigError(f"--screen must look like 1280x720, got {args.screen!r}")
        settings.screen_width, settings.screen_height = w, h
    if args.fullscreen:
        settings.fullscreen = True
    if args.balloons is not None:
        settings.balloon_count = args.balloons
    if args.mute:
        settings.audio_enabled = False
    if args.log_level:
        settings.log_level = args.log_level.upper()

    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    pygame.init()
    game = ClawOfCode(settings)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
