"""Color definitions for the game UI."""

# Basic colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
MAGENTA = (255, 0, 255)

# Game-specific colors
BACKGROUND = (18, 18, 18)        # #121212
OVERLAY_BG = BLACK
OVERLAY_TEXT = (245, 197, 66)    # #f5c542
CLAW_COLOR = WHITE
ARROW_COLOR = MAGENTA
HUD_TEXT = WHITE
BANNER_BG = (60, 60, 90)
BANNER_TEXT = (220, 220, 255)

# Balloon palette names mapped to RGB (CSS named colors)
BALLOON_RGB = {
    'hotpink': (255, 105, 180),
    'skyblue': (135, 206, 235),
    'lightyellow': (255, 255, 224),
    'lightgreen': (144, 238, 144),
    'violet': (238, 130, 238),
    'peachpuff': (255, 218, 185),
    'lightcoral': (240, 128, 128),
    'lightcyan': (224, 255, 255),
}
