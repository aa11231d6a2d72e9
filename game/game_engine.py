"""Main game engine managing game state and logic."""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .balloon import Balloon, spawn_balloons
from .collision import resolve_hits, score_for
from .constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, CLAW_START_X, CLAW_Y, CLAW_SPEED,
    ARROW_STEP, BALLOON_COUNT, STARTING_SCORE,
    TITLE_TEXT, START_PROMPT, GAME_OVER_TEXT, WON_TEXT, RESTART_PROMPT
)
from .high_scores import HighScoreTracker

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Enumeration of game screens."""
    START = 'start'
    PLAYING = 'playing'
    GAME_OVER = 'game_over'
    WON = 'won'


TERMINAL_STATES = (GameState.GAME_OVER, GameState.WON)


@dataclass
class Claw:
    """The aim point sweeping across the top of the screen."""
    x: float = CLAW_START_X
    y: float = CLAW_Y
    direction: int = 1


@dataclass
class Arrow:
    """The projectile dropped from the claw."""
    dropping: bool = False
    y: float = CLAW_Y


@dataclass
class GameSession:
    """All mutable state of one running game, owned by the engine."""
    state: GameState = GameState.START
    claw: Claw = field(default_factory=Claw)
    arrow: Arrow = field(default_factory=Arrow)
    balloons: List[Balloon] = field(default_factory=list)
    score: int = STARTING_SCORE


class GameEngine:
    """Core game engine managing game logic and state."""

    def __init__(self, viewport_width: float = WINDOW_WIDTH,
                 viewport_height: float = WINDOW_HEIGHT,
                 balloon_count: int = BALLOON_COUNT,
                 claw_speed: float = CLAW_SPEED,
                 high_scores: Optional[HighScoreTracker] = None,
                 rng=None):
        """
        Initialize the game engine.

        Args:
            viewport_width: Width of the play area
            viewport_height: Height of the play area
            balloon_count: Balloons spawned on each reset
            claw_speed: Claw movement per tick
            high_scores: Tracker shared across sessions
            rng: Random source for balloon layouts (defaults to `random`)
        """
        if balloon_count < 0:
            raise ValueError(f"balloon_count must be >= 0, got {balloon_count}")

        self.viewport_width = WINDOW_WIDTH
        self.viewport_height = WINDOW_HEIGHT
        self.set_viewport(viewport_width, viewport_height)

        self.balloon_count = balloon_count
        self.claw_speed = claw_speed
        self.high_scores = high_scores or HighScoreTracker()
        self.rng = rng or random

        self.session = GameSession()
        self.session.balloons = self._spawn()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def high_score(self) -> int:
        return self.high_scores.best

    @property
    def claw(self) -> Claw:
        return self.session.claw

    @property
    def arrow(self) -> Arrow:
        return self.session.arrow

    @property
    def balloons(self) -> List[Balloon]:
        return self.session.balloons

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def set_viewport(self, width: float, height: float):
        """Update the play area size used for spawning and bounds checks."""
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self.viewport_width = width
        self.viewport_height = height

    def reset_game(self):
        """Reset the session to a fresh layout without changing the screen."""
        session = self.session
        session.claw.x = CLAW_START_X
        session.claw.direction = 1
        session.arrow.dropping = False
        session.arrow.y = session.claw.y
        session.score = STARTING_SCORE
        session.balloons = self._spawn()

    def start_or_restart(self) -> bool:
        """
        Start a new game from the start screen or a finished game.

        Returns:
            True if a new game was started
        """
        if self.session.state == GameState.PLAYING:
            return False

        self.reset_game()
        self.session.state = GameState.PLAYING
        logger.info("Game started with %d balloons", len(self.session.balloons))
        return True

    def fire(self) -> bool:
        """
        Drop the arrow from the claw's current position.

        Returns:
            True if the arrow was fired
        """
        session = self.session
        if session.state != GameState.PLAYING or session.arrow.dropping:
            return False

        session.arrow.dropping = True
        session.arrow.y = session.claw.y
        logger.debug("Arrow fired at x=%.1f", session.claw.x)
        return True

    def request_restart(self) -> bool:
        """
        Leave a finished game for the start screen.

        A separate start_or_restart() is needed to begin playing again.

        Returns:
            True if the game went back to the start screen
        """
        if self.session.state not in TERMINAL_STATES:
            return False

        self.reset_game()
        self.session.state = GameState.START
        return True

    def restart_and_resume(self) -> bool:
        """
        Go from any non-playing screen straight into a new game.

        Returns:
            True if a new game was started
        """
        self.request_restart()
        return self.start_or_restart()

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self) -> Dict:
        """
        Advance the game by one tick.

        Returns:
            Dictionary with update events for audio and UI feedback
        """
        events = {
            'balloons_popped': 0,
            'score_change': 0,
            'cues': [],
            'screen_changed': False,
        }

        if self.session.state != GameState.PLAYING:
            return events

        if self.session.arrow.dropping:
            self._update_arrow(events)
        else:
            self._update_claw()

        return events

    def _update_claw(self):
        """Sweep the claw, bouncing off either side of the viewport."""
        claw = self.session.claw
        claw.x += self.claw_speed * claw.direction
        if claw.x <= 0 or claw.x >= self.viewport_width:
            claw.direction *= -1

    def _update_arrow(self, events: Dict):
        """Move the dropping arrow and resolve hits, wins and losses."""
        session = self.session
        arrow = session.arrow
        arrow.y += ARROW_STEP

        session.balloons, popped = resolve_hits(
            session.balloons, session.claw.x, arrow.y)

        if popped:
            points = score_for(popped)
            session.score += points
            events['balloons_popped'] = len(popped)
            events['score_change'] = points
            events['cues'].append('pop')

        missed = not popped and arrow.y > self.viewport_height
        if popped or missed:
            arrow.dropping = False
            arrow.y = session.claw.y

        # Clearing the board wins even if the arrow also left the screen
        if not session.balloons:
            self._finish(GameState.WON, events)
        elif missed:
            self._finish(GameState.GAME_OVER, events)

    def _finish(self, state: GameState, events: Dict):
        """End the current game in a win or a loss."""
        session = self.session
        session.arrow.dropping = False
        session.arrow.y = session.claw.y
        session.state = state
        self.high_scores.record(session.score)

        events['cues'].append('win' if state == GameState.WON else 'loss')
        events['screen_changed'] = True

        if state == GameState.WON:
            logger.info("Game won with score %d", session.score)
        else:
            logger.info("Game over with score %d", session.score)

    # ------------------------------------------------------------------
    # Rendering support
    # ------------------------------------------------------------------

    def get_overlay_lines(self) -> List[str]:
        """Get overlay text for the current screen (empty while playing)."""
        state = self.session.state
        if state == GameState.START:
            return [TITLE_TEXT, "", START_PROMPT]

        summary = f"Score: {self.session.score} | High: {self.high_score}"
        if state == GameState.GAME_OVER:
            return [GAME_OVER_TEXT, summary, RESTART_PROMPT]
        if state == GameState.WON:
            return [WON_TEXT, summary, RESTART_PROMPT]
        return []

    def get_game_state(self) -> Dict:
        """Get current game state for rendering."""
        session = self.session
        return {
            'state': session.state,
            'overlay_lines': self.get_overlay_lines(),
            'claw': {'x': session.claw.x, 'y': session.claw.y},
            'arrow': {'dropping': session.arrow.dropping, 'y': session.arrow.y},
            'balloons': [
                {'x': b.x, 'y': b.y, 'color': b.color} for b in session.balloons
            ],
            'score': session.score,
            'high_score': self.high_score,
            'viewport': (self.viewport_width, self.viewport_height),
        }

    def _spawn(self) -> List[Balloon]:
        return spawn_balloons(self.balloon_count, self.viewport_width,
                              self.viewport_height, self.rng)
