"""Game module containing core game logic."""

from .constants import *
from .balloon import Balloon, spawn_balloons
from .collision import is_hit, resolve_hits
from .game_engine import GameEngine, GameState, GameSession
from .high_scores import HighScoreTracker
