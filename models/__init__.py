"""
Data models for BlockBreaker.

This package provides the Pydantic data models used across the game:
- Primitives: field-space points, velocities and boxes
- Game: Game-state aggregate, per-frame snapshots, persisted high score

Usage:
    >>> from models import GameStatus, GameState
    >>> from models.primitives import Rectangle
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Rectangle,
)

from .game import (
    GameStatus,
    Direction,
    TrailPoint,
    GameState,
    GameStateSnapshot,
    PaddleSnapshot,
    BallSnapshot,
    BrickSnapshot,
    GameSnapshot,
    HighScoreRecord,
)

__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Rectangle",
    # Game
    "GameStatus",
    "Direction",
    "TrailPoint",
    "GameState",
    "GameStateSnapshot",
    "PaddleSnapshot",
    "BallSnapshot",
    "BrickSnapshot",
    "GameSnapshot",
    "HighScoreRecord",
]
