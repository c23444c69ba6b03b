"""
Game models for BlockBreaker.

Pydantic models for the game-state aggregate owned by the simulation
engine, and the frozen snapshots handed to the presentation layer once
per frame.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .primitives import Point2D, Rectangle, Vector2D


class GameStatus(str, Enum):
    """Lifecycle states of a game session.

    Exactly one status holds at any time.

    Attributes:
        IDLE: Title screen, before the first launch
        READY: Ball parked above the paddle, waiting for launch
        RUNNING: Simulation active
        PAUSED: Simulation suspended by the player
        GAME_OVER: No lives left; only a new game leaves this state
    """
    IDLE = "idle"
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Direction(str, Enum):
    """Horizontal input direction."""
    LEFT = "left"
    RIGHT = "right"


class TrailPoint(BaseModel):
    """A timestamped past ball position, rendered as a fading trail.

    Attributes:
        x: Ball center X when recorded
        y: Ball center Y when recorded
        timestamp: Clock reading in seconds when recorded
    """
    x: float
    y: float
    timestamp: float

    model_config = ConfigDict(frozen=True)


class GameStateData(BaseModel):
    """Fields shared by the live game state and its snapshot."""

    status: GameStatus = GameStatus.IDLE
    score: int = 0
    level: int = Field(default=1, ge=1)
    lives: int = Field(default=3, ge=0)
    high_score: int = Field(default=0, ge=0)
    message: str = ""
    bricks_broken_since_power_up: int = Field(default=0, ge=0)
    power_up_tutorial_shown: bool = False
    power_up_tutorial_visible_until: float = 0.0  # 0 = banner hidden

    @field_validator('score')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate score is non-negative.

        Raises:
            ValueError: If value is negative
        """
        if v < 0:
            raise ValueError(f'Score must be non-negative, got {v}')
        return v


class GameState(GameStateData):
    """Mutable game-state aggregate owned by the simulation engine.

    Assignments are validated, so an update that would break an
    invariant (negative score, level 0, ...) raises ``ValidationError``
    instead of silently corrupting the session.
    """

    model_config = ConfigDict(validate_assignment=True)

    def freeze(self) -> 'GameStateSnapshot':
        """Return an immutable copy for the presentation layer."""
        return GameStateSnapshot(**self.model_dump())


class GameStateSnapshot(GameStateData):
    """Read-only copy of the game state."""

    model_config = ConfigDict(frozen=True)


class PaddleSnapshot(BaseModel):
    """Read-only paddle view."""
    rect: Rectangle
    speed: float

    model_config = ConfigDict(frozen=True)


class BallSnapshot(BaseModel):
    """Read-only ball view, including the power-up trail."""
    position: Point2D
    velocity: Vector2D
    speed: float
    radius: float
    power_up_active: bool = False
    trail: Tuple[TrailPoint, ...] = ()

    model_config = ConfigDict(frozen=True)


class BrickSnapshot(BaseModel):
    """Read-only brick view."""
    rect: Rectangle
    status: int
    hue: float

    model_config = ConfigDict(frozen=True)

    @property
    def is_active(self) -> bool:
        """Check if the brick is still standing."""
        return self.status > 0


class GameSnapshot(BaseModel):
    """Everything the presentation layer reads for one frame."""
    paddle: PaddleSnapshot
    ball: BallSnapshot
    bricks: Tuple[BrickSnapshot, ...]
    state: GameStateSnapshot
    field_width: float
    field_height: float
    timestamp: float

    model_config = ConfigDict(frozen=True)


class HighScoreRecord(BaseModel):
    """Persisted high score (a single named scalar)."""
    high_score: int = Field(default=0, ge=0)
