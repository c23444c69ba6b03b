"""BlockBreaker physics and collision detection."""

from .collision import (
    PenetrationDepths,
    check_wall_collision,
    check_ceiling_collision,
    check_paddle_collision,
    resolve_paddle_collision,
    has_fallen_below,
    check_brick_collision,
    get_penetration_depths,
    get_collision_direction,
    resolve_brick_collision,
)

__all__ = [
    'PenetrationDepths',
    'check_wall_collision',
    'check_ceiling_collision',
    'check_paddle_collision',
    'resolve_paddle_collision',
    'has_fallen_below',
    'check_brick_collision',
    'get_penetration_depths',
    'get_collision_direction',
    'resolve_brick_collision',
]
