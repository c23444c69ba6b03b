"""Tests for brick collisions, scoring and the power-up ball."""

import pytest

from games.BlockBreaker.game.entities import Brick
from models import GameStatus


def place_ball(engine, x, y, dx=0.0, dy=-4.0):
    engine.ball.x = x
    engine.ball.y = y
    engine.ball.dx = dx
    engine.ball.dy = dy


def spaced_bricks(count, status=1):
    """One brick per 60 px column, far apart so only one is hit at a time."""
    return [Brick(10 + i * 60, 100, 50, 20, status=status, hue=200, grid_position=(0, i))
            for i in range(count)]


def hit_from_below(engine, brick):
    place_ball(engine, brick.center_x, brick.y + brick.height + 6)
    return engine.check_brick_collisions()


class TestNormalBall:
    """Reflection and scoring without power-up."""

    def test_hit_scores_and_reflects(self, running_engine):
        running_engine.bricks = spaced_bricks(2)
        target = running_engine.bricks[0]

        result = hit_from_below(running_engine, target)

        assert result.bricks_hit == 1
        assert result.bricks_destroyed == 1
        assert target.status == 0
        assert running_engine.state.score == 10
        assert running_engine.ball.dy > 0
        assert not result.level_cleared

    def test_hit_speeds_ball_up(self, running_engine):
        running_engine.bricks = spaced_bricks(2)
        hit_from_below(running_engine, running_engine.bricks[0])
        assert running_engine.ball.velocity_magnitude == pytest.approx(4.0 * 1.03)

    def test_points_scale_with_level(self, running_engine):
        running_engine.state.level = 3
        running_engine.bricks = spaced_bricks(2)
        hit_from_below(running_engine, running_engine.bricks[0])
        assert running_engine.state.score == 14

    def test_multi_hit_brick_survives(self, running_engine):
        running_engine.bricks = spaced_bricks(1, status=2)
        target = running_engine.bricks[0]

        result = hit_from_below(running_engine, target)

        assert result.bricks_hit == 1
        assert result.bricks_destroyed == 0
        assert target.status == 1
        assert running_engine.state.score == 10
        assert running_engine.state.bricks_broken_since_power_up == 0

    def test_stops_after_first_brick(self, running_engine):
        running_engine.bricks = [
            Brick(100, 100, 20, 20, status=1, hue=200),
            Brick(120, 100, 20, 20, status=1, hue=200),
            Brick(300, 100, 20, 20, status=1, hue=200),
        ]
        place_ball(running_engine, 120, 110)

        result = running_engine.check_brick_collisions()

        assert result.bricks_hit == 1
        assert [b.status for b in running_engine.bricks] == [0, 1, 1]

    def test_no_contact(self, running_engine):
        running_engine.bricks = spaced_bricks(2)
        place_ball(running_engine, 240, 400)
        result = running_engine.check_brick_collisions()
        assert result.bricks_hit == 0
        assert running_engine.state.score == 0

    def test_last_brick_clears_level(self, running_engine):
        running_engine.bricks = [Brick(100, 100, 50, 20, status=1, hue=200)]

        result = hit_from_below(running_engine, running_engine.bricks[0])

        assert result.level_cleared
        assert running_engine.state.score == 160
        assert running_engine.state.level == 2
        assert running_engine.state.lives == 3
        assert running_engine.status == GameStatus.READY
        assert len(running_engine.bricks) == 40

    def test_level_not_cleared_while_bricks_stand(self, running_engine):
        running_engine.bricks = spaced_bricks(3)
        hit_from_below(running_engine, running_engine.bricks[0])
        hit_from_below(running_engine, running_engine.bricks[1])
        assert running_engine.state.level == 1
        assert running_engine.status == GameStatus.RUNNING


class TestPowerUpActivation:
    """Earning the power-up."""

    def test_fifth_destroyed_brick_activates(self, running_engine, clock):
        running_engine.bricks = spaced_bricks(7)

        for brick in running_engine.bricks[:4]:
            result = hit_from_below(running_engine, brick)
            assert not result.power_up_activated
        assert running_engine.state.bricks_broken_since_power_up == 4
        assert not running_engine.ball.power_up_active

        result = hit_from_below(running_engine, running_engine.bricks[4])

        assert result.power_up_activated
        assert running_engine.ball.power_up_active
        assert running_engine.state.bricks_broken_since_power_up == 0
        assert running_engine.state.power_up_tutorial_shown
        assert running_engine.state.power_up_tutorial_visible_until == pytest.approx(clock.now + 10)

    def test_activating_hit_does_not_reflect(self, running_engine):
        running_engine.bricks = spaced_bricks(6)
        running_engine.state.bricks_broken_since_power_up = 4

        hit_from_below(running_engine, running_engine.bricks[0])

        assert running_engine.ball.power_up_active
        assert running_engine.ball.dy < 0

    def test_damage_without_destruction_does_not_count(self, running_engine):
        running_engine.bricks = spaced_bricks(3, status=3)
        for brick in running_engine.bricks:
            hit_from_below(running_engine, brick)
        assert running_engine.state.bricks_broken_since_power_up == 0

    def test_tutorial_shown_once(self, running_engine, clock):
        running_engine.activate_power_up()
        first = running_engine.state.power_up_tutorial_visible_until
        running_engine.deactivate_power_up()

        clock.advance(20)
        running_engine.activate_power_up()

        assert running_engine.state.power_up_tutorial_visible_until == first


class TestPowerUpBall:
    """Smashing through bricks."""

    def test_passes_through_without_reflecting(self, running_engine):
        running_engine.activate_power_up()
        running_engine.bricks = [
            Brick(100, 100, 20, 20, status=1, hue=200),
            Brick(120, 100, 20, 20, status=1, hue=200),
            Brick(300, 100, 20, 20, status=1, hue=200),
        ]
        place_ball(running_engine, 120, 110, dx=1.0, dy=-4.0)

        result = running_engine.check_brick_collisions()

        assert result.bricks_hit == 2
        assert result.bricks_destroyed == 2
        assert [b.status for b in running_engine.bricks] == [0, 0, 1]
        assert (running_engine.ball.dx, running_engine.ball.dy) == (1.0, -4.0)
        assert running_engine.state.score == 20

    def test_counter_frozen_while_active(self, running_engine):
        running_engine.activate_power_up()
        running_engine.bricks = spaced_bricks(3)
        for brick in running_engine.bricks[:2]:
            hit_from_below(running_engine, brick)
        assert running_engine.state.bricks_broken_since_power_up == 0

    def test_damages_tough_bricks_one_point(self, running_engine):
        running_engine.activate_power_up()
        running_engine.bricks = spaced_bricks(2, status=2)
        hit_from_below(running_engine, running_engine.bricks[0])
        assert running_engine.bricks[0].status == 1
        assert running_engine.ball.dy < 0

    def test_clearing_level_in_one_sweep(self, running_engine):
        running_engine.activate_power_up()
        running_engine.bricks = [
            Brick(100, 100, 20, 20, status=1, hue=200),
            Brick(120, 100, 20, 20, status=1, hue=200),
        ]
        place_ball(running_engine, 120, 110)

        result = running_engine.check_brick_collisions()

        assert result.level_cleared
        assert running_engine.state.level == 2
        assert running_engine.state.score == 20 + 150
        assert not running_engine.ball.power_up_active

    def test_ceiling_ends_power_up(self, running_engine):
        running_engine.activate_power_up()
        place_ball(running_engine, 240, 9, dy=-4)

        result = running_engine.tick()

        assert result.move.ceiling_hit
        assert not running_engine.ball.power_up_active
        assert running_engine.ball.trail == []
        assert running_engine.ball.dy > 0

    def test_walls_still_bounce_powered_ball(self, running_engine):
        running_engine.activate_power_up()
        place_ball(running_engine, 470, 400, dx=4.0, dy=-1.0)
        result = running_engine.tick()
        assert result.move.wall_hit
        assert running_engine.ball.dx < 0
