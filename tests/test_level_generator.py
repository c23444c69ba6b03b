"""Tests for procedural brick layouts."""

import pytest

from games.BlockBreaker.game.level_generator import (
    BrickLayout,
    build_bricks_for_level,
    durability_for_level,
    hue_for_brick,
    rows_for_level,
    strength_for_row,
)


class TestRowsAndDurability:
    """Difficulty ramp."""

    @pytest.mark.parametrize("level,rows", [(1, 4), (2, 5), (5, 8), (6, 9), (7, 9), (50, 9)])
    def test_rows_grow_then_cap(self, level, rows):
        assert rows_for_level(level) == rows

    @pytest.mark.parametrize("level,durability", [(1, 1), (2, 1), (3, 2), (4, 2), (5, 3), (20, 3)])
    def test_durability_every_two_levels(self, level, durability):
        assert durability_for_level(level) == durability

    def test_row_strength_drops_every_third_row(self):
        assert [strength_for_row(3, row) for row in range(9)] == [3, 3, 3, 2, 2, 2, 1, 1, 1]

    def test_row_strength_never_below_one(self):
        assert strength_for_row(1, 8) == 1


class TestBuildBricks:
    """Grid construction."""

    @pytest.mark.parametrize("level", range(1, 13))
    def test_brick_count_and_status_range(self, level):
        bricks = build_bricks_for_level(level)
        assert len(bricks) == 8 * min(3 + level, 9)
        assert all(b.status in (1, 2, 3) for b in bricks)

    def test_level_one_is_all_single_hit(self):
        bricks = build_bricks_for_level(1)
        assert {b.status for b in bricks} == {1}

    def test_level_five_rows(self):
        bricks = build_bricks_for_level(5)
        by_row = {}
        for brick in bricks:
            by_row.setdefault(brick.grid_position[0], set()).add(brick.status)
        assert by_row == {0: {3}, 1: {3}, 2: {3}, 3: {2}, 4: {2}, 5: {2}, 6: {1}, 7: {1}}

    def test_geometry_fills_field_between_margins(self):
        bricks = build_bricks_for_level(1, field_width=480)
        first_row = [b for b in bricks if b.grid_position[0] == 0]

        assert BrickLayout().brick_width(480) == pytest.approx(51.0)
        assert first_row[0].x == pytest.approx(8.0)
        assert first_row[1].x == pytest.approx(67.0)
        assert first_row[-1].x + first_row[-1].width == pytest.approx(472.0)

    def test_rows_are_spaced_below_offset(self):
        bricks = build_bricks_for_level(2)
        ys = sorted({b.y for b in bricks})
        assert ys[:3] == [70.0, 100.0, 130.0]
        assert all(b.height == 22.0 for b in bricks)

    def test_row_major_order(self):
        bricks = build_bricks_for_level(1)
        positions = [b.grid_position for b in bricks]
        assert positions == sorted(positions)

    def test_hue(self):
        assert hue_for_brick(1, 0) == 204
        assert hue_for_brick(3, 2) == 240
        bricks = build_bricks_for_level(1)
        assert bricks[0].hue == 204

    def test_deterministic_for_same_level(self):
        first = build_bricks_for_level(4)
        second = build_bricks_for_level(4)
        assert first == second
        assert all(a is not b for a, b in zip(first, second))

    def test_custom_layout(self):
        layout = BrickLayout(columns=4, base_rows=2)
        bricks = build_bricks_for_level(1, field_width=200, layout=layout)
        assert len(bricks) == 8
        assert layout.brick_width(200) == pytest.approx((200 - 8 * 5) / 4)
