"""
Configuration file for Alien Waves.

Contains display settings, colors, fonts and HUD parameters. Gameplay
tunables (wave sizes, budgets, target motion) live in the YAML game configs
under modes/ and are validated by models.alienwave.GameConfig.
"""

# Screen and Display Settings
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60  # Target frame rate; target motion is expressed per tick

# Default game config (modes/<id>.yaml)
DEFAULT_CONFIG_ID = "classic"

# Colors (RGBA tuples)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
GREEN = (0, 200, 0, 255)
LIME = (0, 255, 0, 255)
YELLOW = (255, 255, 0, 255)
ORANGE = (255, 165, 0, 255)
GOLD = (255, 215, 0, 255)
NAVY = (11, 29, 68, 255)

# Background color
BACKGROUND_COLOR = (6, 8, 24, 255)  # Deep space

# Target colors per animation state
TARGET_IDLE_COLOR = (120, 220, 120, 255)
TARGET_MOVING_COLOR = (90, 200, 255, 255)
TARGET_DYING_COLOR = (255, 90, 60, 255)

# Sprite sheet geometry: 11 frames in rows [0,1] [2,3,4] [5,6,7] [8,9,10]
SPRITE_FRAME_SIZE = 200
SPRITE_FRAME_COUNT = 11

# Shot feedback
SHOT_RING_DURATION_MS = 200.0
SHOT_RING_MAX_RADIUS = 50
CROSSHAIR_SIZE = 32

# HUD Settings
HUD_MARGIN = 20
HUD_LINE_HEIGHT = 30
TIME_WARNING_MS = 20000.0  # Orange below this
TIME_CRITICAL_MS = 10000.0  # Red below this
TIME_BAR_WIDTH = 200
TIME_BAR_HEIGHT = 10
MOBILE_WIDTH_THRESHOLD = 768  # Narrow screens get smaller fonts

# UI Settings
FONT_SIZE_SMALL = 16
FONT_SIZE_MEDIUM = 24
FONT_SIZE_LARGE = 32
FONT_SIZE_HUGE = 48


# Organized Constants for Code Access
class Colors:
    """Color constants for easy access in code."""
    BLACK = BLACK
    WHITE = WHITE
    RED = RED
    GREEN = GREEN
    LIME = LIME
    YELLOW = YELLOW
    ORANGE = ORANGE
    GOLD = GOLD
    NAVY = NAVY
    BACKGROUND = BACKGROUND_COLOR
    TARGET_IDLE = TARGET_IDLE_COLOR
    TARGET_MOVING = TARGET_MOVING_COLOR
    TARGET_DYING = TARGET_DYING_COLOR


class Fonts:
    """Font size constants for easy access in code."""
    SMALL = FONT_SIZE_SMALL
    MEDIUM = FONT_SIZE_MEDIUM
    LARGE = FONT_SIZE_LARGE
    HUGE = FONT_SIZE_HUGE
