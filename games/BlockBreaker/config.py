"""Configuration for BlockBreaker.

Loads settings from an optional .env file beside this module, with
sensible defaults. Contains playfield dimensions, physics and scoring
constants, timing values and colors.
"""

import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Playfield (all physics happens in these coordinates)
FIELD_WIDTH: int = 480
FIELD_HEIGHT: int = 640

# Window (the field is scaled to fit)
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', FIELD_WIDTH)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', FIELD_HEIGHT)
FPS: int = _get_int('FPS', 60)

# Brick grid
BRICK_COLUMNS: int = 8
BRICK_MARGIN: float = 8.0
BRICK_HEIGHT: float = 22.0
BRICK_OFFSET_TOP: float = 70.0
BRICK_BASE_ROWS: int = 4
BRICK_MAX_ADDITIONAL_ROWS: int = 5
BRICK_MAX_DURABILITY: int = 3

# Paddle
PADDLE_HEIGHT: float = 14.0
PADDLE_MAX_WIDTH_RATIO: float = 0.26
PADDLE_MIN_WIDTH_RATIO: float = 0.16
PADDLE_WIDTH_REDUCTION_PER_LEVEL: float = 12.0
PADDLE_BOTTOM_OFFSET: float = 60.0
PADDLE_BASE_SPEED: float = 8.0          # pixels per tick
PADDLE_MAX_SPEED_BONUS: float = 6.0

# Ball (speeds are pixels per tick)
BALL_RADIUS: float = 8.0
BALL_BASE_SPEED: float = 4.5
BALL_SPEED_PER_LEVEL: float = 0.6
BALL_MAX_LEVEL_SPEED: float = 9.0
BALL_HIT_SPEEDUP: float = 1.03
BALL_HIT_SPEED_CAP_BASE: float = 7.5
BALL_HIT_SPEED_CAP_PER_LEVEL: float = 0.6
BALL_PARK_GAP: float = 4.0
BALL_MIN_LAUNCH_ANGLE_DEG: float = 30.0
BALL_MAX_LAUNCH_ANGLE_DEG: float = 75.0
BALL_MAX_BOUNCE_ANGLE_DEG: float = 75.0
BALL_TRAIL_MAX_POINTS: int = 14
BALL_TRAIL_LIFETIME: float = 0.28       # seconds

# Rules
INITIAL_LIVES: int = max(_get_int('INITIAL_LIVES', 3), 1)
LEVEL_CLEAR_BONUS: int = 150
BRICK_BASE_POINTS: int = 10
BRICK_POINTS_PER_LEVEL: int = 2
BONUS_LIFE_EVERY_LEVELS: int = 3
POWER_UP_THRESHOLD: int = 5             # bricks broken to earn a power-up
POWER_UP_TUTORIAL_DURATION: float = 10.0  # seconds

# Presentation
LAUNCH_COUNTDOWN_SECONDS: int = _get_int('LAUNCH_COUNTDOWN_SECONDS', 3)
HIGH_SCORE_FILE: str = os.getenv('HIGH_SCORE_FILE', '')  # '' = platform default

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (15, 23, 42)
BACKGROUND_GLOW_COLOR: Tuple[int, int, int] = (14, 60, 110)
PADDLE_COLOR: Tuple[int, int, int] = (56, 189, 248)
BALL_COLOR: Tuple[int, int, int] = (248, 250, 252)
BALL_RIM_COLOR: Tuple[int, int, int] = (249, 115, 22)
POWER_UP_GLOW_COLOR: Tuple[int, int, int] = (253, 230, 138)
HUD_COLOR: Tuple[int, int, int] = (226, 232, 240)
MESSAGE_BOX_COLOR: Tuple[int, int, int, int] = (15, 23, 42, 200)

# Messages
TITLE_MESSAGE: str = "Press SPACE to start!"
PAUSED_MESSAGE: str = "Paused... press SPACE to resume"
GAME_OVER_MESSAGE: str = "Game over... press SPACE to try again"
READY_MESSAGE: str = "Level {level} ready! Press SPACE to launch"
BONUS_LIFE_MESSAGE: str = "Level {level} ready! You gained an extra life"
LIFE_LOST_MESSAGE: str = "{lives} lives left! Press SPACE to continue"
POWER_UP_TUTORIAL_TEXT: str = "POWER-UP! The ball smashes through bricks until it hits the ceiling"
