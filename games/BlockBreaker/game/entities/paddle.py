"""Paddle entity driven by directional keys or a pointer.

Keys move the paddle a fixed distance per tick; a pointer places the
paddle center directly. Either way the paddle never leaves the field.
"""

from dataclasses import dataclass
from typing import Tuple

from ... import config


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into [minimum, maximum]."""
    return min(max(value, minimum), maximum)


@dataclass
class PaddleConfig:
    """Paddle sizing and speed rules."""

    height: float = config.PADDLE_HEIGHT
    max_width_ratio: float = config.PADDLE_MAX_WIDTH_RATIO
    min_width_ratio: float = config.PADDLE_MIN_WIDTH_RATIO
    width_reduction_per_level: float = config.PADDLE_WIDTH_REDUCTION_PER_LEVEL
    bottom_offset: float = config.PADDLE_BOTTOM_OFFSET
    base_speed: float = config.PADDLE_BASE_SPEED
    max_speed_bonus: float = config.PADDLE_MAX_SPEED_BONUS


class Paddle:
    """Horizontal paddle at the bottom of the field.

    ``x`` is the left edge; it always stays within
    ``[0, field_width - width]``.
    """

    def __init__(
        self,
        paddle_config: PaddleConfig,
        field_width: float,
        field_height: float,
        level: int = 1,
    ):
        """Initialize paddle sized for a level.

        Args:
            paddle_config: Paddle configuration
            field_width: Playfield width in pixels
            field_height: Playfield height in pixels
            level: Level the paddle is sized for
        """
        self._config = paddle_config
        self._field_width = field_width
        self._field_height = field_height
        self.width = 0.0
        self.height = paddle_config.height
        self.x = 0.0
        self.y = 0.0
        self.speed = 0.0
        self.reset(level)

    @property
    def center_x(self) -> float:
        """Get paddle center X position."""
        return self.x + self.width / 2

    @property
    def left(self) -> float:
        """Get paddle left edge X."""
        return self.x

    @property
    def right(self) -> float:
        """Get paddle right edge X."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Get paddle top Y."""
        return self.y

    @property
    def bottom(self) -> float:
        """Get paddle bottom Y."""
        return self.y + self.height

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def max_x(self) -> float:
        """Largest legal left-edge position."""
        return self._field_width - self.width

    def reset(self, level: int) -> None:
        """Resize for a level and re-center.

        Width shrinks by a fixed amount per level down to a floor; speed
        grows per level up to a cap.

        Args:
            level: Current level (>= 1)
        """
        cfg = self._config
        max_width = self._field_width * cfg.max_width_ratio
        min_width = self._field_width * cfg.min_width_ratio
        reduction = (level - 1) * cfg.width_reduction_per_level
        self.width = clamp(max_width - reduction, min_width, max_width)
        self.height = cfg.height
        self.x = (self._field_width - self.width) / 2
        self.y = self._field_height - cfg.bottom_offset
        self.speed = cfg.base_speed + min(level - 1, cfg.max_speed_bonus)

    def move(self, left: bool, right: bool) -> None:
        """Move one tick according to held directions.

        Both or neither held means no movement.
        """
        if left and not right:
            self.x -= self.speed
        elif right and not left:
            self.x += self.speed
        self.x = clamp(self.x, 0, self.max_x)

    def move_center_to(self, x: float) -> None:
        """Place the paddle center at a field-space X, ignoring speed.

        Args:
            x: Target X coordinate for the paddle center
        """
        self.x = clamp(x - self.width / 2, 0, self.max_x)
