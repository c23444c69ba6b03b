"""BlockBreaker - Classic brick-breaking game.

Features:
- Keyboard and pointer paddle control
- Procedural levels with multi-hit bricks
- Power-up ball that smashes through bricks
- Title, ready, pause and result overlays with a 3-2-1 launch countdown
"""

import random
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from blockbreaker.logging import get_logger
from blockbreaker.score_store import ScoreStore
from blockbreaker.timers import Timer, TimerQueue
from models import Direction, GameStatus

from .config import (
    BACKGROUND_COLOR,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    LAUNCH_COUNTDOWN_SECONDS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .game.engine import EngineConfig, SimulationEngine, TickResult
from .game.screens import (
    HowToPlayGuide,
    ScreenKind,
    ScreenNavigator,
    pause_popup,
    ready_popup,
    result_screen,
    title_screen,
)
from .game.skins import BlockBreakerSkin, GeometricSkin
from .input import InputAction, InputEvent

log = get_logger('game_mode')


def fit_viewport(window_width: int, window_height: int) -> Tuple[float, float, float, float]:
    """Largest field-shaped rectangle centered in the window.

    Returns:
        (x, y, width, height) in window pixels
    """
    scale = min(window_width / FIELD_WIDTH, window_height / FIELD_HEIGHT)
    width = FIELD_WIDTH * scale
    height = FIELD_HEIGHT * scale
    return ((window_width - width) / 2, (window_height - height) / 2, width, height)


class BlockBreakerMode:
    """BlockBreaker presenter.

    Drives a SimulationEngine once per frame, turns input events into
    engine calls, decides which overlay is showing and hands snapshots to
    the skin for drawing.
    """

    # Game metadata
    NAME = "Block Breaker"
    DESCRIPTION = "Classic brick-breaking with a power-up ball."
    VERSION = "1.0.0"

    # Skin registry
    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        skin: str = 'geometric',
        lives: Optional[int] = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        score_store: Optional[ScoreStore] = None,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
        engine: Optional[SimulationEngine] = None,
    ):
        """Initialize BlockBreaker game.

        Args:
            skin: Visual skin to use
            lives: Starting lives (default from config)
            width: Window width
            height: Window height
            score_store: High-score persistence (default: in-memory)
            seed: Seed for launch angles, for reproducible runs
            clock: Time source in seconds
            engine: Prebuilt engine (overrides lives/score_store/seed/clock)
        """
        if engine is None:
            engine_config = EngineConfig() if lives is None else EngineConfig(initial_lives=lives)
            engine = SimulationEngine(
                engine_config,
                score_store=score_store,
                clock=clock,
                rng=random.Random(seed),
            )
        self._engine = engine

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: BlockBreakerSkin = skin_class()

        self._window_width = width
        self._window_height = height
        self._field_surface: Optional[pygame.Surface] = None

        self._timers = TimerQueue()
        self._navigator = ScreenNavigator()
        self._guide = HowToPlayGuide()

        self._previous_status = self._engine.status
        self._result_screen_visible = False
        self._ready_popup_visible = False
        self._pause_popup_visible = False
        self._countdown_active = False
        self._countdown_remaining = 0
        self._countdown_timer: Optional[Timer] = None

        self.show_title_after_reset()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def engine(self) -> SimulationEngine:
        return self._engine

    @property
    def skin(self) -> BlockBreakerSkin:
        return self._skin

    @property
    def state(self) -> GameStatus:
        """Current game status."""
        return self._engine.status

    @property
    def navigator(self) -> ScreenNavigator:
        return self._navigator

    @property
    def guide(self) -> HowToPlayGuide:
        return self._guide

    @property
    def countdown_active(self) -> bool:
        return self._countdown_active

    @property
    def result_screen_visible(self) -> bool:
        return self._result_screen_visible

    @property
    def viewport(self) -> Tuple[float, float, float, float]:
        """Where the field is drawn inside the window."""
        return fit_viewport(self._window_width, self._window_height)

    def get_score(self) -> int:
        return self._engine.state.score

    def set_window_size(self, width: int, height: int) -> None:
        self._window_width = width
        self._window_height = height

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events.

        Args:
            events: List of input events
        """
        for event in events:
            if event.action == InputAction.LEFT:
                self._engine.set_input_direction(Direction.LEFT, event.active)
            elif event.action == InputAction.RIGHT:
                self._engine.set_input_direction(Direction.RIGHT, event.active)
            elif event.action == InputAction.POINTER:
                if event.x is not None:
                    self._engine.move_paddle_center_to(event.x)
            elif event.action == InputAction.HELP:
                self.toggle_help()
            elif self._guide.is_open:
                self._handle_guide_input(event.action)
            elif event.action == InputAction.TOGGLE:
                self.handle_toggle()
            elif event.action == InputAction.CONFIRM:
                self.handle_confirm()

    def _handle_guide_input(self, action: InputAction) -> None:
        if action == InputAction.NEXT_PAGE:
            self._guide.next_page()
        elif action == InputAction.PREV_PAGE:
            self._guide.prev_page()
        elif action in (InputAction.TOGGLE, InputAction.CONFIRM):
            self._guide.close()

    def toggle_help(self) -> None:
        """Open or close the how-to-play guide.

        The guide only opens while the ball is not in play.
        """
        if self._guide.is_open:
            self._guide.close()
            return
        if self._countdown_active or self._engine.status == GameStatus.RUNNING:
            return
        self._guide.open()

    def handle_toggle(self) -> None:
        """Space bar: pause, resume, launch or start depending on status."""
        if self._countdown_active:
            return

        status = self._engine.status
        if status == GameStatus.RUNNING:
            self._engine.pause_game()
            self.sync_view(force=True)
        elif status == GameStatus.PAUSED:
            self.resume_from_pause()
        elif status == GameStatus.READY:
            self.resume_from_ready()
        elif status in (GameStatus.IDLE, GameStatus.GAME_OVER):
            self.start_game_from_title()

    def handle_confirm(self) -> None:
        """Press the button of whichever overlay is showing."""
        kind = self._navigator.kind
        if kind == ScreenKind.TITLE:
            self.start_game_from_title()
        elif kind == ScreenKind.READY:
            self.resume_from_ready()
        elif kind == ScreenKind.PAUSE:
            self.resume_from_pause()
        elif kind == ScreenKind.RESULT:
            self.back_to_title()

    # =========================================================================
    # Frame
    # =========================================================================

    def update(self, dt: float) -> TickResult:
        """Advance timers, simulation and overlays by one frame.

        Args:
            dt: Delta time in seconds
        """
        self._timers.update(dt)
        result = self._engine.tick()
        self._skin.update(dt)
        self._play_sounds(result)
        self.sync_view()
        return result

    def _play_sounds(self, result: TickResult) -> None:
        move = result.move
        if move is not None:
            if move.paddle_hit:
                self._skin.play_paddle_hit_sound()
            if move.wall_hit or move.ceiling_hit:
                self._skin.play_wall_hit_sound()
            if move.game_over:
                self._skin.play_game_over_sound()
            elif move.life_lost:
                self._skin.play_life_lost_sound()

        bricks = result.bricks
        if bricks is not None:
            if bricks.bricks_destroyed:
                self._skin.play_brick_break_sound()
            if bricks.bricks_hit > bricks.bricks_destroyed:
                self._skin.play_brick_hit_sound()
            if bricks.power_up_activated:
                self._skin.play_power_up_sound()
            if bricks.level_cleared:
                self._skin.play_level_complete_sound()

    def sync_view(self, force: bool = False) -> None:
        """Show or hide overlays when the status changes."""
        status = self._engine.status
        if not force and status == self._previous_status:
            return

        if status == GameStatus.GAME_OVER and self._previous_status != GameStatus.GAME_OVER:
            self.present_result_screen()
        elif status == GameStatus.READY:
            self.present_ready_popup()
        elif status == GameStatus.PAUSED:
            self.present_pause_popup()
        elif status in (GameStatus.RUNNING, GameStatus.IDLE):
            self.hide_popups()
        self._previous_status = status

    # =========================================================================
    # Overlays
    # =========================================================================

    def hide_popups(self) -> None:
        """Hide the ready or pause popup if one is showing."""
        if not self._ready_popup_visible and not self._pause_popup_visible:
            return
        self._navigator.hide()
        self._ready_popup_visible = False
        self._pause_popup_visible = False

    def clear_overlay(self, reset_result: bool = False) -> None:
        self._navigator.hide()
        if reset_result:
            self._result_screen_visible = False
        self._ready_popup_visible = False
        self._pause_popup_visible = False

    def present_ready_popup(self) -> None:
        if (
            self._countdown_active
            or self._ready_popup_visible
            or self._engine.status != GameStatus.READY
            or self._result_screen_visible
        ):
            return

        self._ready_popup_visible = True
        self._pause_popup_visible = False
        self._navigator.show(ready_popup(self._engine.state.message))

    def present_pause_popup(self) -> None:
        if (
            self._pause_popup_visible
            or self._engine.status != GameStatus.PAUSED
            or self._result_screen_visible
        ):
            return

        self._pause_popup_visible = True
        self._ready_popup_visible = False
        self._navigator.show(pause_popup(self._engine.state.message))

    def present_result_screen(self) -> None:
        if self._result_screen_visible:
            return

        self.hide_popups()
        self._result_screen_visible = True
        state = self._engine.state
        self._navigator.show(result_screen(state.score, state.high_score))
        log.info("Result screen: score %d, high score %d", state.score, state.high_score)

    def resume_from_ready(self) -> None:
        """Launch the parked ball (ignored during the countdown)."""
        if self._countdown_active:
            return

        self.hide_popups()
        if self._engine.launch_ball():
            self.sync_view(force=True)

    def resume_from_pause(self) -> None:
        if self._engine.status != GameStatus.PAUSED:
            return

        self.hide_popups()
        self._engine.resume_game()
        self.sync_view(force=True)

    def back_to_title(self) -> None:
        """Result screen button."""
        self._result_screen_visible = False
        self.show_title_after_reset()

    def show_title_after_reset(self) -> None:
        """Reset the engine to the title state and show the title card."""
        self.cancel_countdown()
        self._ready_popup_visible = False
        self._pause_popup_visible = False
        self._engine.prepare_title_state()
        self.sync_view(force=True)
        self._navigator.show(title_screen())

    def start_game_from_title(self) -> None:
        """Start a new game and count down to the first launch."""
        self.clear_overlay(reset_result=True)
        self._guide.close()
        self._engine.start_new_game()
        self.start_initial_countdown()

    # =========================================================================
    # Countdown
    # =========================================================================

    def cancel_countdown(self) -> None:
        if self._countdown_timer is not None:
            self._countdown_timer.cancel()
            self._countdown_timer = None
        self._countdown_active = False

    def start_initial_countdown(self, seconds: int = LAUNCH_COUNTDOWN_SECONDS) -> None:
        """Show "3", "2", "1" a second apart, then launch the ball."""
        self.cancel_countdown()
        self._countdown_active = True
        self._countdown_remaining = seconds
        self._countdown_step()

    def _countdown_step(self) -> None:
        if not self._countdown_active:
            return

        if self._countdown_remaining > 0:
            self._engine.set_status(GameStatus.READY, str(self._countdown_remaining))
            self.sync_view(force=True)
            self._countdown_remaining -= 1
            self._countdown_timer = self._timers.schedule(1.0, self._countdown_step)
        else:
            self._countdown_active = False
            self._countdown_timer = None
            self._engine.launch_ball()
            self.sync_view(force=True)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        The field is drawn at its native size and scaled into the window
        viewport.

        Args:
            screen: Pygame surface to draw on
        """
        if self._field_surface is None:
            self._field_surface = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT))
        field = self._field_surface

        snapshot = self._engine.snapshot()
        now = snapshot.timestamp

        self._skin.render_background(field)
        for brick in snapshot.bricks:
            self._skin.render_brick(brick, field)
        self._skin.render_paddle(snapshot.paddle, field)
        self._skin.render_ball(snapshot.ball, field, now)
        self._skin.render_hud(snapshot.state, field)

        if self._navigator.current is None:
            self._skin.render_message(snapshot.state.message, field)
        self._skin.render_power_up_tutorial(snapshot.state, field, now)

        if self._navigator.current is not None:
            self._skin.render_screen(self._navigator.current, field)
        if self._guide.is_open:
            self._skin.render_help(self._guide, field)

        x, y, width, height = self.viewport
        screen.fill(BACKGROUND_COLOR)
        scaled = pygame.transform.smoothscale(field, (max(int(width), 1), max(int(height), 1)))
        screen.blit(scaled, (int(x), int(y)))
