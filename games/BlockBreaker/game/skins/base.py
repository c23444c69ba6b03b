"""Base class for BlockBreaker game skins.

Skins handle ALL rendering - the engine only manages state. Everything a
skin draws comes from an immutable GameSnapshot, in field coordinates.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

from models import BallSnapshot, BrickSnapshot, GameStateSnapshot, PaddleSnapshot

if TYPE_CHECKING:
    from ..screens import HowToPlayGuide, Screen


class BlockBreakerSkin(ABC):
    """Base class for game skins (visuals + audio).

    Skins handle all rendering and audio. The engine only manages
    state - skins decide how to present it.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render_background(self, surface: pygame.Surface) -> None:
        """Clear the field surface."""
        surface.fill((0, 0, 0))

    @abstractmethod
    def render_paddle(self, paddle: PaddleSnapshot, surface: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            surface: Field surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: BallSnapshot, surface: pygame.Surface, now: float) -> None:
        """Render the ball and, in power-up mode, its trail.

        Args:
            ball: Ball to render
            surface: Field surface to draw on
            now: Clock reading used to age trail points
        """
        pass

    @abstractmethod
    def render_brick(self, brick: BrickSnapshot, surface: pygame.Surface) -> None:
        """Render a brick. Destroyed bricks are not drawn.

        Args:
            brick: Brick to render
            surface: Field surface to draw on
        """
        pass

    def render_hud(self, state: GameStateSnapshot, surface: pygame.Surface) -> None:
        """Render the heads-up display (score, high score, level, lives)."""
        pass

    def render_message(self, message: str, surface: pygame.Surface) -> None:
        """Render the status message box (empty message draws nothing)."""
        pass

    def render_power_up_tutorial(
        self,
        state: GameStateSnapshot,
        surface: pygame.Surface,
        now: float,
    ) -> None:
        """Render the power-up banner while it is visible."""
        pass

    def render_screen(self, screen: 'Screen', surface: pygame.Surface) -> None:
        """Render an overlay card (title, popup or results)."""
        pass

    def render_help(self, guide: 'HowToPlayGuide', surface: pygame.Surface) -> None:
        """Render the how-to-play guide on its current page."""
        pass

    def update(self, dt: float) -> None:
        """Update skin state (animations, timers, etc.).

        Args:
            dt: Delta time in seconds
        """
        pass

    def play_paddle_hit_sound(self) -> None:
        """Play sound when ball hits paddle."""
        pass

    def play_brick_hit_sound(self) -> None:
        """Play sound when brick is damaged but not destroyed."""
        pass

    def play_brick_break_sound(self) -> None:
        """Play sound when brick is destroyed."""
        pass

    def play_wall_hit_sound(self) -> None:
        """Play sound when ball hits a side wall or the ceiling."""
        pass

    def play_power_up_sound(self) -> None:
        """Play sound when the ball powers up."""
        pass

    def play_life_lost_sound(self) -> None:
        """Play sound when ball falls below paddle."""
        pass

    def play_level_complete_sound(self) -> None:
        """Play sound when level is completed."""
        pass

    def play_game_over_sound(self) -> None:
        """Play sound when game is over."""
        pass
