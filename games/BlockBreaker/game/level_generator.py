"""Level generator for BlockBreaker.

Brick layouts are a pure function of the level number: more rows and
tougher bricks as levels go up. Calling ``build_bricks_for_level`` twice
with the same level yields identical layouts.
"""

from dataclasses import dataclass
from typing import List

from .. import config
from .entities.brick import Brick
from .entities.paddle import clamp


@dataclass(frozen=True)
class BrickLayout:
    """Grid geometry and difficulty ramp."""

    columns: int = config.BRICK_COLUMNS
    margin: float = config.BRICK_MARGIN
    brick_height: float = config.BRICK_HEIGHT
    offset_top: float = config.BRICK_OFFSET_TOP
    base_rows: int = config.BRICK_BASE_ROWS
    max_additional_rows: int = config.BRICK_MAX_ADDITIONAL_ROWS
    max_durability: int = config.BRICK_MAX_DURABILITY

    def brick_width(self, field_width: float) -> float:
        """Width that fills the field between the margins."""
        total_margin = self.margin * (self.columns + 1)
        return (field_width - total_margin) / self.columns


def rows_for_level(level: int, layout: BrickLayout = BrickLayout()) -> int:
    """Number of brick rows: one more per level, capped."""
    return min(layout.base_rows + level - 1, layout.base_rows + layout.max_additional_rows)


def durability_for_level(level: int, layout: BrickLayout = BrickLayout()) -> int:
    """Top-row durability: +1 every two levels, capped."""
    return min(1 + (level - 1) // 2, layout.max_durability)


def strength_for_row(durability: int, row: int, layout: BrickLayout = BrickLayout()) -> int:
    """Durability of a row: every third row down is one weaker, never below 1."""
    return int(clamp(durability - row // 3, 1, layout.max_durability))


def hue_for_brick(level: int, row: int) -> float:
    """Rendering hue in degrees."""
    return 200 + row * 14 + level * 4


def build_bricks_for_level(
    level: int,
    field_width: float = config.FIELD_WIDTH,
    layout: BrickLayout = BrickLayout(),
) -> List[Brick]:
    """Build a fresh brick grid for a level.

    Args:
        level: Level number (>= 1)
        field_width: Playfield width in pixels
        layout: Grid geometry

    Returns:
        New list of bricks in row-major order
    """
    rows = rows_for_level(level, layout)
    durability = durability_for_level(level, layout)
    brick_width = layout.brick_width(field_width)

    bricks = []
    for row in range(rows):
        strength = strength_for_row(durability, row, layout)
        for col in range(layout.columns):
            bricks.append(Brick(
                x=layout.margin + col * (brick_width + layout.margin),
                y=layout.offset_top + row * (layout.brick_height + layout.margin),
                width=brick_width,
                height=layout.brick_height,
                status=strength,
                hue=hue_for_brick(level, row),
                grid_position=(row, col),
            ))

    return bricks
