"""Collision detection and physics for BlockBreaker.

Handles ball-wall, ball-ceiling, ball-paddle, and ball-brick collisions.
All functions work on the mutable entities in place.
"""

from typing import Literal, NamedTuple, TYPE_CHECKING

from ..entities.paddle import clamp

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick

CollisionSide = Literal["left", "right", "top", "bottom"]


class PenetrationDepths(NamedTuple):
    """Overlap of the ball's bounding box past each brick edge."""
    left: float
    right: float
    top: float
    bottom: float

    @property
    def side(self) -> CollisionSide:
        """Side with the smallest penetration (left/right win ties)."""
        smallest = min(self)
        if smallest == self.left:
            return "left"
        if smallest == self.right:
            return "right"
        if smallest == self.top:
            return "top"
        return "bottom"


def check_wall_collision(ball: 'Ball', field_width: float) -> bool:
    """Bounce ball off the side walls.

    Reflects the horizontal velocity and clamps the ball inside the
    field when it pokes through either side.

    Returns:
        True if the ball hit a side wall
    """
    if ball.x + ball.radius > field_width or ball.x - ball.radius < 0:
        ball.bounce_horizontal()
        ball.x = clamp(ball.x, ball.radius, field_width - ball.radius)
        return True
    return False


def check_ceiling_collision(ball: 'Ball') -> bool:
    """Bounce ball off the ceiling.

    Ceiling contact always ends power-up mode.

    Returns:
        True if the ball hit the ceiling
    """
    if ball.y - ball.radius < 0:
        ball.bounce_vertical()
        ball.y = ball.radius
        ball.deactivate_power_up()
        return True
    return False


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball touches the paddle.

    The ball's vertical span must overlap the paddle's, and the ball
    center must lie within the paddle's horizontal span.
    """
    hits_vertically = (
        ball.y + ball.radius >= paddle.top and
        ball.y - ball.radius <= paddle.bottom
    )
    return hits_vertically and paddle.left <= ball.x <= paddle.right


def resolve_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> None:
    """Bounce off the paddle and lift the ball above its surface."""
    ball.bounce_off_paddle(paddle.center_x, paddle.width)
    ball.y = paddle.top - ball.radius - 1


def has_fallen_below(ball: 'Ball', field_height: float) -> bool:
    """Check if the whole ball has left the bottom of the field."""
    return ball.y - ball.radius > field_height


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball overlaps a standing brick.

    Uses strict overlap on both axes, so touching edges do not count.
    """
    if not brick.is_active:
        return False

    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    brick_left, brick_top, brick_right, brick_bottom = brick.get_bounds()

    overlaps_x = ball_right > brick_left and ball_left < brick_right
    overlaps_y = ball_bottom > brick_top and ball_top < brick_bottom
    return overlaps_x and overlaps_y


def get_penetration_depths(ball: 'Ball', brick: 'Brick') -> PenetrationDepths:
    """Compute how far the ball's bounding box reaches past each brick edge."""
    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    brick_left, brick_top, brick_right, brick_bottom = brick.get_bounds()
    return PenetrationDepths(
        left=ball_right - brick_left,
        right=brick_right - ball_left,
        top=ball_bottom - brick_top,
        bottom=brick_bottom - ball_top,
    )


def get_collision_direction(ball: 'Ball', brick: 'Brick') -> CollisionSide:
    """Determine which brick side the ball hit (smallest penetration)."""
    return get_penetration_depths(ball, brick).side


def resolve_brick_collision(ball: 'Ball', direction: CollisionSide) -> None:
    """Reflect the ball off the hit side of a brick."""
    if direction in ("left", "right"):
        ball.bounce_horizontal()
    else:
        ball.bounce_vertical()
