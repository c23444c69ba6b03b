"""Ball entity with per-tick velocity physics.

The ball moves a fixed vector each tick, bounces off walls, paddle and
bricks, and can carry a power-up that lets it smash through bricks.
While the power-up is active the ball records a short, time-decaying
trail of past positions for rendering.
"""

from dataclasses import dataclass
import math
from typing import List, Tuple

from models import TrailPoint

from ... import config


@dataclass
class BallConfig:
    """Ball configuration (speeds in pixels per tick)."""

    radius: float = config.BALL_RADIUS
    base_speed: float = config.BALL_BASE_SPEED
    speed_per_level: float = config.BALL_SPEED_PER_LEVEL
    max_level_speed: float = config.BALL_MAX_LEVEL_SPEED
    hit_speedup: float = config.BALL_HIT_SPEEDUP
    hit_speed_cap_base: float = config.BALL_HIT_SPEED_CAP_BASE
    hit_speed_cap_per_level: float = config.BALL_HIT_SPEED_CAP_PER_LEVEL
    park_gap: float = config.BALL_PARK_GAP
    max_bounce_angle_deg: float = config.BALL_MAX_BOUNCE_ANGLE_DEG
    trail_max_points: int = config.BALL_TRAIL_MAX_POINTS
    trail_lifetime: float = config.BALL_TRAIL_LIFETIME


class Ball:
    """Ball with velocity-based movement and bouncing physics."""

    def __init__(self, ball_config: BallConfig, x: float = 0.0, y: float = 0.0):
        """Initialize ball at rest.

        Args:
            ball_config: Ball configuration
            x: Center X position
            y: Center Y position
        """
        self._config = ball_config
        self.x = x
        self.y = y
        self.dx = 0.0
        self.dy = 0.0
        self.speed = ball_config.base_speed
        self.power_up_active = False
        self.trail: List[TrailPoint] = []

    @property
    def config(self) -> BallConfig:
        """Get ball configuration."""
        return self._config

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def velocity_magnitude(self) -> float:
        """Get the length of the current velocity vector."""
        return math.hypot(self.dx, self.dy)

    @property
    def is_moving(self) -> bool:
        """Check if ball has a non-zero velocity."""
        return self.dx != 0.0 or self.dy != 0.0

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        r = self._config.radius
        return (self.x - r, self.y - r, self.x + r, self.y + r)

    # -- speed rules ------------------------------------------------------

    def level_speed(self, level: int) -> float:
        """Launch speed for a level: grows per level up to a cap."""
        cfg = self._config
        return min(cfg.base_speed + (level - 1) * cfg.speed_per_level, cfg.max_level_speed)

    def set_speed_for_level(self, level: int) -> None:
        """Set the magnitude used at the next launch."""
        self.speed = self.level_speed(level)

    def increase_speed_after_hit(self, level: int) -> None:
        """Speed up after a brick hit, preserving direction.

        New speed is the current speed times the speedup factor, capped
        by a level-dependent maximum.
        """
        cfg = self._config
        current = max(self.velocity_magnitude, 0.0001)
        target = min(current * cfg.hit_speedup,
                     cfg.hit_speed_cap_base + level * cfg.hit_speed_cap_per_level)
        scale = target / current
        self.dx *= scale
        self.dy *= scale
        self.speed = target

    # -- movement ---------------------------------------------------------

    def launch(self, angle: float, horizontal_direction: int) -> None:
        """Launch ball upward.

        Args:
            angle: Angle from horizontal in radians
            horizontal_direction: -1 for left, +1 for right
        """
        self.dx = math.cos(angle) * self.speed * horizontal_direction
        self.dy = -math.sin(angle) * self.speed

    def update(self) -> None:
        """Advance one tick along the velocity vector."""
        self.x += self.dx
        self.y += self.dy

    def place_at(self, x: float, y: float) -> None:
        """Park ball at a position with zero velocity and no trail."""
        self.x = x
        self.y = y
        self.dx = 0.0
        self.dy = 0.0
        self.clear_trail()

    def bounce_horizontal(self) -> None:
        """Bounce off vertical surface (reverse X velocity)."""
        self.dx = -self.dx

    def bounce_vertical(self) -> None:
        """Bounce off horizontal surface (reverse Y velocity)."""
        self.dy = -self.dy

    def bounce_off_paddle(self, paddle_center_x: float, paddle_width: float) -> None:
        """Bounce off paddle with angle based on hit position.

        Hitting the center sends the ball straight up; the edges send it
        out at up to the maximum bounce angle from vertical. The ball
        always leaves moving upward.

        Args:
            paddle_center_x: Paddle center X position
            paddle_width: Paddle width
        """
        hit_pos = (self.x - paddle_center_x) / (paddle_width / 2)
        bounce_angle = hit_pos * math.radians(self._config.max_bounce_angle_deg)
        speed = max(self.velocity_magnitude, self.speed)
        self.dx = speed * math.sin(bounce_angle)
        self.dy = -abs(speed * math.cos(bounce_angle))

    # -- power-up and trail -----------------------------------------------

    def clear_trail(self) -> None:
        """Drop every trail point."""
        self.trail = []

    def activate_power_up(self) -> None:
        """Enter power-up mode with a fresh trail."""
        self.clear_trail()
        self.power_up_active = True

    def deactivate_power_up(self) -> None:
        """Leave power-up mode; the trail goes with it."""
        if not self.power_up_active:
            return
        self.power_up_active = False
        self.clear_trail()

    def update_trail(self, now: float, record: bool) -> None:
        """Age the trail and optionally record the current position.

        Args:
            now: Current clock reading in seconds
            record: True when the simulation advanced this tick
        """
        lifetime = self._config.trail_lifetime
        self.trail = [p for p in self.trail if now - p.timestamp <= lifetime]

        if not self.power_up_active:
            if self.trail:
                self.clear_trail()
            return

        if record:
            self.trail.append(TrailPoint(x=self.x, y=self.y, timestamp=now))
            overflow = len(self.trail) - self._config.trail_max_points
            if overflow > 0:
                del self.trail[:overflow]
