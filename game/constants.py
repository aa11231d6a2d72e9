"""Game constants and configuration settings."""

# Window settings
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
GAME_TITLE = "Claw of Code"

# Claw settings
CLAW_START_X = 20
CLAW_Y = 10  # Claw hangs at a fixed height
CLAW_SPEED = 4.0  # Pixels per tick, constant (no ramping)
CLAW_HEAD_WIDTH = 24
CLAW_HEAD_HEIGHT = 16

# Projectile (arrow) settings
ARROW_STEP = 5  # Pixels per tick while dropping

# Balloon settings
BALLOON_COUNT = 10
BALLOON_WIDTH = 50
BALLOON_HEIGHT = 35
BALLOON_MARGIN_X = 20  # Keep balloons this far from the side edges
BALLOON_TOP_FRACTION = 0.3  # Balloons spawn between 30% ...
BALLOON_BAND_FRACTION = 0.5  # ... and 80% of the viewport height

# Balloon palette (cosmetic only)
BALLOON_COLORS = [
    'hotpink', 'skyblue', 'lightyellow', 'lightgreen',
    'violet', 'peachpuff', 'lightcoral', 'lightcyan',
]

# Starting values
STARTING_SCORE = 0

# Scoring
POINTS_BALLOON_POP = 10

# Overlay text
TITLE_TEXT = "CLAW OF CODE"
START_PROMPT = "Tap anywhere or press ENTER to Start"
GAME_OVER_TEXT = "GAME OVER"
WON_TEXT = "YOU WON!"
RESTART_PROMPT = "Tap or press R to Restart"

# Audio settings
# Per-sound levels, scaled by the master volume
CUE_VOLUMES = {
    'pop': 0.5,
    'loss': 0.6,
    'win': 0.7,
    'ambience': 0.3,
}
SOUND_FILES = {
    'pop': 'pop.mp3',
    'loss': 'sad.mp3',
    'win': 'victory.mp3',
    'ambience': 'arcade.mp3',
}
