"""BlockBreaker game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .brick import Brick

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Brick',
]
