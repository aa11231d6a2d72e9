"""UI module containing visualization and interface components."""

from .colors import *
from .game_ui import GameUI
