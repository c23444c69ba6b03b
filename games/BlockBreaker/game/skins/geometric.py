"""Geometric skin - flat shapes with a little glow."""

import math
from typing import List, Optional, Tuple

import pygame

from models import BallSnapshot, BrickSnapshot, GameStateSnapshot, PaddleSnapshot

from .base import BlockBreakerSkin
from ..screens import HowToPlayGuide, Screen
from ...config import (
    BACKGROUND_COLOR,
    BACKGROUND_GLOW_COLOR,
    BALL_COLOR,
    BALL_RIM_COLOR,
    BALL_TRAIL_LIFETIME,
    HUD_COLOR,
    MESSAGE_BOX_COLOR,
    PADDLE_COLOR,
    POWER_UP_GLOW_COLOR,
    POWER_UP_TUTORIAL_TEXT,
)

# Banner fades out over its last stretch of visibility (seconds)
TUTORIAL_FADE_TIME = 1.2


def brick_color(hue: float, status: int, lightness_boost: float = 0.0) -> pygame.Color:
    """Brick fill color: tougher bricks are brighter.

    Args:
        hue: Hue in degrees (wrapped to 0-360)
        status: Remaining durability
        lightness_boost: Extra lightness for the top highlight

    Returns:
        pygame.Color
    """
    color = pygame.Color(0, 0, 0)
    lightness = min(60 + status * 6 + lightness_boost, 95)
    color.hsla = (hue % 360, 85, lightness, 100)
    return color


def trail_visibility(timestamp: float, now: float, lifetime: float = BALL_TRAIL_LIFETIME) -> float:
    """1.0 for a fresh trail point, falling to 0.0 at the end of its lifetime."""
    if lifetime <= 0:
        return 0.0
    age = (now - timestamp) / lifetime
    return max(0.0, min(1.0, 1.0 - age))


def tutorial_fade(visible_until: float, now: float) -> float:
    """Opacity of the power-up banner (0.0 once hidden)."""
    if not visible_until or now > visible_until:
        return 0.0
    remaining = visible_until - now
    if remaining < TUTORIAL_FADE_TIME:
        return max(remaining / TUTORIAL_FADE_TIME, 0.0)
    return 1.0


class GeometricSkin(BlockBreakerSkin):
    """Renders the game using simple shapes.

    - Paddle: Rounded sky-blue bar
    - Ball: White disc with an orange rim; gold glow and trail when powered up
    - Bricks: Rounded rectangles colored by hue, brighter while more durable
    - Text: HUD strip, centered message box, power-up banner, overlays
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes with a power-up glow"

    BUTTON_COLOR = (56, 189, 248)
    BUTTON_TEXT_COLOR = (15, 23, 42)
    BANNER_TEXT_COLOR = (254, 243, 199)

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None
        self._elapsed = 0.0

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 26)
            self._small_font = pygame.font.Font(None, 22)
            self._title_font = pygame.font.Font(None, 40)

    def update(self, dt: float) -> None:
        self._elapsed += dt

    # =========================================================================
    # Field
    # =========================================================================

    def render_background(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        width, height = surface.get_size()
        glow = pygame.Surface((width, height), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*BACKGROUND_GLOW_COLOR, 60), (0, 0), int(max(width, height) * 0.8))
        surface.blit(glow, (0, 0))

    def render_paddle(self, paddle: PaddleSnapshot, surface: pygame.Surface) -> None:
        """Render paddle as a rounded bar."""
        rect = paddle.rect
        pygame.draw.rect(
            surface,
            PADDLE_COLOR,
            pygame.Rect(rect.as_tuple()),
            border_radius=8,
        )

    def render_brick(self, brick: BrickSnapshot, surface: pygame.Surface) -> None:
        """Render brick with a lighter top half."""
        if not brick.is_active:
            return

        rect = brick.rect
        body = pygame.Rect(rect.as_tuple())
        pygame.draw.rect(surface, brick_color(brick.hue + 16, brick.status), body, border_radius=6)

        top = pygame.Rect(body.x, body.y, body.width, body.height // 2)
        pygame.draw.rect(
            surface,
            brick_color(brick.hue, brick.status, lightness_boost=12),
            top,
            border_top_left_radius=6,
            border_top_right_radius=6,
        )

    def render_ball(self, ball: BallSnapshot, surface: pygame.Surface, now: float) -> None:
        """Render trail, glow and ball body."""
        if ball.power_up_active:
            self._render_trail(ball, surface, now)
            self._render_glow(ball, surface)

        pos = (int(ball.position.x), int(ball.position.y))
        radius = int(ball.radius)
        pygame.draw.circle(surface, BALL_RIM_COLOR, pos, radius)
        pygame.draw.circle(surface, BALL_COLOR, pos, max(radius - 2, 1))

    def _render_trail(self, ball: BallSnapshot, surface: pygame.Surface, now: float) -> None:
        if not ball.trail:
            return

        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for point in ball.trail:
            visibility = trail_visibility(point.timestamp, now)
            if visibility <= 0:
                continue
            radius = int(ball.radius * (0.85 + visibility * 0.9)) + 6
            alpha = int(255 * 0.32 * visibility)
            pygame.draw.circle(layer, (*BALL_COLOR, alpha), (int(point.x), int(point.y)), radius)
        surface.blit(layer, (0, 0), special_flags=pygame.BLEND_RGBA_ADD)

    def _render_glow(self, ball: BallSnapshot, surface: pygame.Surface) -> None:
        pulse = 0.6 + 0.4 * math.sin(self._elapsed * 1000 / 120)
        pos = (int(ball.position.x), int(ball.position.y))

        aura = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        pygame.draw.circle(aura, (*POWER_UP_GLOW_COLOR, 90), pos, int(ball.radius + 10))
        pygame.draw.circle(aura, (*POWER_UP_GLOW_COLOR, 230), pos, int(ball.radius + 3 + pulse * 2))
        surface.blit(aura, (0, 0))

    # =========================================================================
    # Text
    # =========================================================================

    def _wrap(self, text: str, font: pygame.font.Font, max_width: int) -> List[str]:
        """Greedy word wrap."""
        lines: List[str] = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}".strip()
            if current and font.size(candidate)[0] > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current:
            lines.append(current)
        return lines

    def _blit_centered(
        self,
        surface: pygame.Surface,
        text: str,
        font: pygame.font.Font,
        color: Tuple[int, int, int],
        center: Tuple[int, int],
    ) -> None:
        rendered = font.render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=center))

    def _draw_box(self, surface: pygame.Surface, rect: pygame.Rect, alpha: float = 1.0) -> None:
        box = pygame.Surface(rect.size, pygame.SRCALPHA)
        r, g, b, a = MESSAGE_BOX_COLOR
        pygame.draw.rect(box, (r, g, b, int(a * alpha)), box.get_rect(), border_radius=16)
        surface.blit(box, rect.topleft)

    def render_hud(self, state: GameStateSnapshot, surface: pygame.Surface) -> None:
        """Render HUD: score and high score on the left, level and lives on the right."""
        self._ensure_font()
        if not self._small_font:
            return

        width = surface.get_width()
        score_text = self._small_font.render(
            f"Score {state.score}   Best {state.high_score}", True, HUD_COLOR)
        surface.blit(score_text, (10, 10))

        right_text = self._small_font.render(
            f"Level {state.level}   Lives {state.lives}", True, HUD_COLOR)
        right_rect = right_text.get_rect()
        right_rect.topright = (width - 10, 10)
        surface.blit(right_text, right_rect)

    def render_message(self, message: str, surface: pygame.Surface) -> None:
        """Render the status message in a centered box."""
        if not message:
            return
        self._ensure_font()
        if not self._font:
            return

        width, height = surface.get_size()
        lines = self._wrap(message, self._font, 260)
        line_height = 26
        box = pygame.Rect(0, 0, 320, len(lines) * line_height + 28)
        box.center = (width // 2, height // 2)
        self._draw_box(surface, box)

        for index, line in enumerate(lines):
            y = box.top + 14 + index * line_height + line_height // 2
            self._blit_centered(surface, line, self._font, BALL_COLOR, (width // 2, y))

    def render_power_up_tutorial(
        self,
        state: GameStateSnapshot,
        surface: pygame.Surface,
        now: float,
    ) -> None:
        """Render the power-up banner, fading out near the end."""
        fade = tutorial_fade(state.power_up_tutorial_visible_until, now)
        if fade <= 0:
            return
        self._ensure_font()
        if not self._small_font:
            return

        width, height = surface.get_size()
        lines = self._wrap(POWER_UP_TUTORIAL_TEXT, self._small_font, 340)
        box = pygame.Rect(0, 0, 360, 30 + len(lines) * 20)
        box.midtop = (width // 2, int(height * 0.32))
        self._draw_box(surface, box, alpha=0.8 * fade)

        color = tuple(int(c * fade) for c in self.BANNER_TEXT_COLOR)
        for index, line in enumerate(lines):
            y = box.top + 25 + index * 20
            self._blit_centered(surface, line, self._small_font, color, (width // 2, y))

    # =========================================================================
    # Overlays
    # =========================================================================

    def _render_card(
        self,
        surface: pygame.Surface,
        title: str,
        lines: Tuple[str, ...],
        footer: str,
        button_label: Optional[str] = None,
    ) -> None:
        self._ensure_font()
        if not (self._font and self._small_font and self._title_font):
            return

        width, height = surface.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 120))
        surface.blit(shade, (0, 0))

        wrapped: List[str] = []
        for line in lines:
            wrapped.extend(self._wrap(line, self._font, 340))

        card = pygame.Rect(0, 0, 380, 130 + len(wrapped) * 26)
        card.center = (width // 2, height // 2)
        self._draw_box(surface, card)

        self._blit_centered(surface, title, self._title_font, HUD_COLOR, (card.centerx, card.top + 30))
        for index, line in enumerate(wrapped):
            self._blit_centered(
                surface, line, self._font, HUD_COLOR, (card.centerx, card.top + 66 + index * 26))

        if button_label:
            button = pygame.Rect(0, 0, 180, 34)
            button.midbottom = (card.centerx, card.bottom - 30)
            pygame.draw.rect(surface, self.BUTTON_COLOR, button, border_radius=10)
            self._blit_centered(surface, button_label, self._font, self.BUTTON_TEXT_COLOR, button.center)

        self._blit_centered(surface, footer, self._small_font, HUD_COLOR, (card.centerx, card.bottom - 14))

    def render_screen(self, screen: Screen, surface: pygame.Surface) -> None:
        self._render_card(surface, screen.title, screen.lines, "Enter or click", screen.button_label)

    def render_help(self, guide: HowToPlayGuide, surface: pygame.Surface) -> None:
        page = guide.current_page
        footer = f"< PgUp   {guide.page_indicator}   PgDn >   H: close"
        self._render_card(surface, page.title, page.lines, footer)
