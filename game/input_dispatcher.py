"""Translate keyboard, mouse and touch events into game engine actions."""

import logging
from typing import Optional

import pygame

from .game_engine import GameEngine, GameState, TERMINAL_STATES

logger = logging.getLogger(__name__)

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
RESTART_KEYS = (pygame.K_r,)


class InputDispatcher:
    """
    Single entry point for player input.

    Keyboard play uses a two-step restart (R returns to the start screen,
    ENTER starts), while a tap or click restarts and resumes in one go.
    A touch is usually followed by a synthesized mouse click; that click is
    swallowed so one physical tap never counts twice.
    """

    def __init__(self, engine: GameEngine):
        """
        Initialize the dispatcher.

        Args:
            engine: GameEngine whose actions are invoked
        """
        self.engine = engine
        self.touched = False
        self.pointer_handled = False

    def begin_frame(self):
        """Allow a new pointer action; call once before each frame's events."""
        self.pointer_handled = False

    def handle_event(self, event: pygame.event.Event) -> Optional[str]:
        """
        Dispatch one pygame event.

        Args:
            event: The event to handle

        Returns:
            Name of the action performed, or None if nothing happened
        """
        if event.type == pygame.KEYDOWN:
            return self._handle_keydown(event)

        if event.type == pygame.FINGERDOWN:
            self.touched = True
            return self._handle_pointer()

        if event.type == pygame.MOUSEBUTTONDOWN:
            if getattr(event, 'touch', False) or self.touched:
                # Click synthesized from a touch we already handled
                self.touched = False
                return None
            return self._handle_pointer()

        return None

    def _handle_keydown(self, event: pygame.event.Event) -> Optional[str]:
        """Handle key press events."""
        state = self.engine.state

        if event.key in CONFIRM_KEYS:
            if state == GameState.START:
                return self._dispatch('start', self.engine.start_or_restart)
            if state == GameState.PLAYING:
                return self._dispatch('fire', self.engine.fire)

        elif event.key in RESTART_KEYS and state in TERMINAL_STATES:
            return self._dispatch('restart', self.engine.request_restart)

        return None

    def _handle_pointer(self) -> Optional[str]:
        """Handle a tap or click anywhere on the screen."""
        if self.pointer_handled:
            return None
        self.pointer_handled = True

        if self.engine.state == GameState.PLAYING:
            return self._dispatch('fire', self.engine.fire)
        return self._dispatch('restart_and_resume', self.engine.restart_and_resume)

    def _dispatch(self, name: str, action) -> Optional[str]:
        if action():
            logger.debug("Input action: %s", name)
            return name
        return None
