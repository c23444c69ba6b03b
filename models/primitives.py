"""
Geometry shared by the snapshots: points, velocity vectors and boxes.

Everything is in field space: the 480x640 playfield, origin at the
top-left corner, y growing downward.
"""

import math
from typing import Tuple

from pydantic import BaseModel, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """A position or velocity in field space.

    Examples:
        >>> ball = Point2D(x=240.0, y=572.0)
        >>> launch = Point2D(x=-2.5, y=-3.75)  # up and to the left
        >>> round(launch.length, 3)
        4.507
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @property
    def length(self) -> float:
        """Magnitude, i.e. the speed when this is a velocity."""
        return math.hypot(self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"


Vector2D = Point2D


class Rectangle(BaseModel):
    """Axis-aligned box anchored at its top-left corner.

    Paddles and bricks are exported as rectangles. Zero or negative sizes
    are rejected.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_size(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f'Rectangle needs a positive size, got {v}')
        return v

    @computed_field
    @property
    def right(self) -> float:
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        return self.y + self.height

    @computed_field
    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def contains_point(self, point: Point2D) -> bool:
        """Edges count as inside."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Integer (x, y, w, h), ready for ``pygame.Rect``."""
        return int(self.x), int(self.y), int(self.width), int(self.height)
