"""
Runtime settings for Claw of Code.

Loads settings from a .env file in the working directory, with defaults from
game.constants. Create a .env.local file to override settings without
modifying .env. Real environment variables win over both files.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import WINDOW_WIDTH, WINDOW_HEIGHT, FPS, BALLOON_COUNT, CLAW_SPEED

ENV_PREFIX = 'CLAW_'
DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent.parent / 'assets'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(ValueError):
    """Raised when a setting has an invalid value."""


def load_env_files(directory: Optional[Path] = None):
    """Load .env.local and .env from a directory into os.environ."""
    directory = Path(directory) if directory else Path.cwd()

    # Load .env.local first so its values take precedence over .env;
    # neither file replaces variables that are already set
    load_dotenv(directory / ".env.local")
    load_dotenv(directory / ".env")


def _get(key: str) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + key)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    value = _get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{key} must be an integer, got {value!r}")


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    value = _get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{key} must be a number, got {value!r}")


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    value = _get(key)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes', 'on')


@dataclass
class GameSettings:
    """Settings that may vary between runs."""
    screen_width: int = WINDOW_WIDTH
    screen_height: int = WINDOW_HEIGHT
    fps: int = FPS
    balloon_count: int = BALLOON_COUNT
    claw_speed: float = CLAW_SPEED
    audio_enabled: bool = True
    fullscreen: bool = False
    log_level: str = 'INFO'
    assets_dir: Path = DEFAULT_ASSETS_DIR

    @classmethod
    def from_env(cls, env_dir: Optional[Path] = None,
                 validate: bool = True) -> 'GameSettings':
        """
        Build settings from .env files and CLAW_* environment variables.

        Args:
            env_dir: Directory holding .env and .env.local (defaults to cwd)
            validate: Check ranges now; pass False when more overrides follow
        """
        load_env_files(env_dir)
        assets_dir = _get('ASSETS_DIR')
        settings = cls(
            screen_width=_get_int('SCREEN_WIDTH', WINDOW_WIDTH),
            screen_height=_get_int('SCREEN_HEIGHT', WINDOW_HEIGHT),
            fps=_get_int('FPS', FPS),
            balloon_count=_get_int('BALLOON_COUNT', BALLOON_COUNT),
            claw_speed=_get_float('SPEED', CLAW_SPEED),
            audio_enabled=_get_bool('AUDIO_ENABLED', True),
            fullscreen=_get_bool('FULLSCREEN', False),
            log_level=(_get('LOG_LEVEL') or 'INFO').upper(),
            assets_dir=Path(assets_dir) if assets_dir else DEFAULT_ASSETS_DIR,
        )
        if validate:
            settings.validate()
        return settings

    def validate(self):
        """Raise ConfigError if any setting is out of range."""
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ConfigError(
                f"screen size must be positive, got {self.screen_width}x{self.screen_height}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        if self.balloon_count < 0:
            raise ConfigError(f"balloon_count must be >= 0, got {self.balloon_count}")
        if self.claw_speed <= 0:
            raise ConfigError(f"claw_speed must be positive, got {self.claw_speed}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
