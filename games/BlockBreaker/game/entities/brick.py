"""Brick entity.

A brick is a rectangle with an integer durability (``status``). Each
hit removes one point of durability; at zero the brick is destroyed.
"""

from typing import Tuple


class Brick:
    """A destructible brick in the level grid."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        status: int,
        hue: float,
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            status: Hits left before destruction (1-3 when built)
            hue: Rendering hue in degrees
            grid_position: (row, col) position in grid
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.status = status
        self.hue = hue
        self.grid_position = grid_position

    def __repr__(self) -> str:
        return (f"Brick(row={self.grid_position[0]}, col={self.grid_position[1]}, "
                f"status={self.status})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Brick):
            return NotImplemented
        return (self.rect, self.status, self.hue, self.grid_position) == (
            other.rect, other.status, other.hue, other.grid_position)

    @property
    def center_x(self) -> float:
        """Get center X position."""
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        """Get center Y position."""
        return self.y + self.height / 2

    @property
    def is_active(self) -> bool:
        """Check if brick is still standing."""
        return self.status > 0

    @property
    def is_destroyed(self) -> bool:
        """Check if brick is destroyed."""
        return self.status <= 0

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self.x,
            self.y,
            self.x + self.width,
            self.y + self.height,
        )

    def hit(self) -> bool:
        """Apply a hit.

        Returns:
            True if this hit destroyed the brick
        """
        self.status -= 1
        return self.status <= 0
