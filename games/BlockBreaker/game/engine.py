"""Simulation engine for BlockBreaker.

The engine owns the whole mutable game aggregate (paddle, ball, bricks,
game state, input flags) and advances it one tick at a time. It knows
nothing about pygame: the presenter feeds it input, calls ``tick()``
once per frame and renders ``snapshot()``.

Every state-transition method is safe to call from any state. Calls
that do not apply return ``False`` (or a result with all flags false)
and leave the status untouched.
"""

from dataclasses import dataclass, field
import math
import random
import time
from typing import Callable, List, Optional, Union

from blockbreaker.logging import get_logger
from blockbreaker.score_store import MemoryScoreStore, ScoreStore
from models import (
    BallSnapshot,
    BrickSnapshot,
    Direction,
    GameSnapshot,
    GameState,
    GameStatus,
    PaddleSnapshot,
    Point2D,
    Rectangle,
    Vector2D,
)

from .. import config
from .entities import Ball, BallConfig, Brick, Paddle, PaddleConfig
from .level_generator import BrickLayout, build_bricks_for_level
from .physics import (
    check_brick_collision,
    check_ceiling_collision,
    check_paddle_collision,
    check_wall_collision,
    get_collision_direction,
    has_fallen_below,
    resolve_brick_collision,
    resolve_paddle_collision,
)

log = get_logger('engine')

Clock = Callable[[], float]


@dataclass
class EngineConfig:
    """Rules and geometry for one engine instance."""

    field_width: float = config.FIELD_WIDTH
    field_height: float = config.FIELD_HEIGHT
    initial_lives: int = config.INITIAL_LIVES
    level_clear_bonus: int = config.LEVEL_CLEAR_BONUS
    brick_base_points: int = config.BRICK_BASE_POINTS
    brick_points_per_level: int = config.BRICK_POINTS_PER_LEVEL
    bonus_life_every_levels: int = config.BONUS_LIFE_EVERY_LEVELS
    power_up_threshold: int = config.POWER_UP_THRESHOLD
    power_up_tutorial_duration: float = config.POWER_UP_TUTORIAL_DURATION
    min_launch_angle_deg: float = config.BALL_MIN_LAUNCH_ANGLE_DEG
    max_launch_angle_deg: float = config.BALL_MAX_LAUNCH_ANGLE_DEG
    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    layout: BrickLayout = field(default_factory=BrickLayout)

    def __post_init__(self):
        if self.initial_lives < 1:
            raise ValueError(f"initial_lives must be at least 1, got {self.initial_lives}")


@dataclass(frozen=True)
class LevelStartOptions:
    """How ``prepare_level`` announces the level.

    Attributes:
        announce: Switch to READY and show a message
        message: Message to show (default: the standard ready message)
    """
    announce: bool = True
    message: Optional[str] = None


@dataclass
class InputState:
    """Directional flags written by the input layer."""
    left: bool = False
    right: bool = False


@dataclass(frozen=True)
class LifeLostResult:
    """Outcome of ``handle_life_lost``."""
    life_lost: bool = False
    game_over: bool = False


@dataclass(frozen=True)
class LevelClearResult:
    """Outcome of ``handle_level_clear``."""
    level_cleared: bool = False
    gained_life: bool = False


@dataclass(frozen=True)
class BallMoveResult:
    """Outcome of one ``move_ball`` step."""
    life_lost: bool = False
    game_over: bool = False
    paddle_hit: bool = False
    wall_hit: bool = False
    ceiling_hit: bool = False


@dataclass(frozen=True)
class BrickCollisionResult:
    """Outcome of one ``check_brick_collisions`` scan."""
    bricks_hit: int = 0
    bricks_destroyed: int = 0
    power_up_activated: bool = False
    level_cleared: bool = False
    gained_life: bool = False


@dataclass(frozen=True)
class TickResult:
    """Everything that happened during one ``tick``."""
    status_before: GameStatus
    status_after: GameStatus
    move: Optional[BallMoveResult] = None
    bricks: Optional[BrickCollisionResult] = None
    tutorial_visible: bool = False

    @property
    def status_changed(self) -> bool:
        return self.status_before != self.status_after


class SimulationEngine:
    """Paddle, ball and brick simulation with levels, lives and scoring.

    Args:
        engine_config: Rules and geometry (default: values from config.py)
        score_store: High-score persistence (default: in-memory)
        clock: Returns the current time in seconds (default: time.monotonic)
        rng: Random source for launch angles (default: unseeded Random)
    """

    def __init__(
        self,
        engine_config: Optional[EngineConfig] = None,
        score_store: Optional[ScoreStore] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ):
        self._config = engine_config or EngineConfig()
        self._score_store = score_store if score_store is not None else MemoryScoreStore()
        self._now = clock or time.monotonic
        self._rng = rng or random.Random()

        cfg = self._config
        self.paddle = Paddle(cfg.paddle, cfg.field_width, cfg.field_height)
        self.ball = Ball(cfg.ball)
        self.bricks: List[Brick] = []
        self.input = InputState()
        self.state = GameState(
            status=GameStatus.IDLE,
            lives=cfg.initial_lives,
            high_score=self._score_store.load(),
            message=config.TITLE_MESSAGE,
        )

        self.prepare_level(LevelStartOptions(announce=False))

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def status(self) -> GameStatus:
        """Current game status."""
        return self.state.status

    @property
    def engine_config(self) -> EngineConfig:
        return self._config

    @property
    def field_width(self) -> float:
        return self._config.field_width

    @property
    def field_height(self) -> float:
        return self._config.field_height

    @property
    def active_bricks(self) -> List[Brick]:
        """Bricks still standing."""
        return [b for b in self.bricks if b.is_active]

    @property
    def is_level_cleared(self) -> bool:
        """True exactly when every brick has status <= 0."""
        return not any(b.is_active for b in self.bricks)

    def now(self) -> float:
        """Read the injected clock."""
        return self._now()

    # =========================================================================
    # State and score
    # =========================================================================

    def set_status(self, new_status: GameStatus, message: Optional[str] = None) -> None:
        """Switch status, optionally replacing the display message."""
        self.state.status = new_status
        if message is not None:
            self.state.message = message

    def update_score(self, diff: int) -> None:
        """Add points (clamped at zero) and raise the high score if beaten."""
        self.state.score = max(self.state.score + diff, 0)
        if self.state.score > self.state.high_score:
            self.state.high_score = self.state.score
            self._score_store.save(self.state.high_score)

    # =========================================================================
    # Level setup
    # =========================================================================

    def reset_paddle(self) -> None:
        """Resize and re-center the paddle for the current level."""
        self.paddle.reset(self.state.level)

    def place_ball_above_paddle(self) -> None:
        """Park the ball on the paddle center with zero velocity."""
        self.ball.place_at(
            self.paddle.center_x,
            self.paddle.top - self.ball.radius - self._config.ball.park_gap,
        )

    def set_ball_speed_for_level(self) -> None:
        """Set the launch speed for the current level."""
        self.ball.set_speed_for_level(self.state.level)

    def build_bricks_for_level(self, level: int) -> List[Brick]:
        """Replace the brick set with a fresh grid for ``level``."""
        self.bricks = build_bricks_for_level(level, self._config.field_width, self._config.layout)
        return self.bricks

    def prepare_level(self, options: Optional[LevelStartOptions] = None) -> None:
        """Set up the current level: paddle, ball, bricks, power-up.

        Args:
            options: Announcement options (default: announce with the
                standard ready message)
        """
        options = options or LevelStartOptions()

        self.reset_paddle()
        self.set_ball_speed_for_level()
        self.build_bricks_for_level(self.state.level)
        self.place_ball_above_paddle()
        self.reset_power_up_progress()

        if options.announce:
            message = options.message
            if message is None:
                message = config.READY_MESSAGE.format(level=self.state.level)
            self.set_status(GameStatus.READY, message)

        log.debug("Prepared level %d (%d bricks)", self.state.level, len(self.bricks))

    # =========================================================================
    # Transitions
    # =========================================================================

    def launch_ball(self) -> bool:
        """Launch the parked ball at a random upward angle.

        Only legal from READY or IDLE.

        Returns:
            True if the ball was launched
        """
        if self.state.status not in (GameStatus.READY, GameStatus.IDLE):
            return False

        cfg = self._config
        self.set_ball_speed_for_level()
        min_angle = math.radians(cfg.min_launch_angle_deg)
        max_angle = math.radians(cfg.max_launch_angle_deg)
        angle = min_angle + self._rng.random() * (max_angle - min_angle)
        direction = -1 if self._rng.random() < 0.5 else 1
        self.ball.launch(angle, direction)
        self.set_status(GameStatus.RUNNING, "")

        log.info("Ball launched at %.1f deg, speed %.2f",
                 math.degrees(angle) * direction, self.ball.speed)
        return True

    def pause_game(self) -> bool:
        """Pause a running game. Returns True if paused."""
        if self.state.status != GameStatus.RUNNING:
            return False
        self.set_status(GameStatus.PAUSED, config.PAUSED_MESSAGE)
        log.debug("Paused")
        return True

    def resume_game(self) -> bool:
        """Resume a paused game. Returns True if resumed."""
        if self.state.status != GameStatus.PAUSED:
            return False
        self.set_status(GameStatus.RUNNING, "")
        log.debug("Resumed")
        return True

    def start_new_game(self) -> None:
        """Reset score, level and lives, and get level 1 ready."""
        self.state.score = 0
        self.state.level = 1
        self.state.lives = self._config.initial_lives
        self.state.message = ""
        self.prepare_level()
        log.info("New game")

    def prepare_title_state(self) -> None:
        """Reset to the title screen (IDLE) with level 1 laid out."""
        self.state.score = 0
        self.state.level = 1
        self.state.lives = self._config.initial_lives
        self.prepare_level(LevelStartOptions(announce=False))
        self.set_status(GameStatus.IDLE, config.TITLE_MESSAGE)

    def handle_life_lost(self) -> LifeLostResult:
        """Take a life after the ball falls out. Only applies while RUNNING."""
        if self.state.status != GameStatus.RUNNING:
            return LifeLostResult()

        self.state.lives = max(self.state.lives - 1, 0)
        self.reset_power_up_progress()

        if self.state.lives > 0:
            self.set_status(
                GameStatus.READY,
                config.LIFE_LOST_MESSAGE.format(lives=self.state.lives),
            )
            self.reset_paddle()
            self.place_ball_above_paddle()
            log.info("Life lost, %d left", self.state.lives)
            return LifeLostResult(life_lost=True)

        self.set_status(GameStatus.GAME_OVER, config.GAME_OVER_MESSAGE)
        self.reset_paddle()
        self.place_ball_above_paddle()
        log.info("Game over with score %d", self.state.score)
        return LifeLostResult(life_lost=True, game_over=True)

    def handle_level_clear(self) -> LevelClearResult:
        """Award the clear bonus and advance a level. Only applies while RUNNING."""
        if self.state.status != GameStatus.RUNNING:
            return LevelClearResult()

        self.update_score(self._config.level_clear_bonus)
        self.state.level += 1
        gained_life = (self.state.level - 1) % self._config.bonus_life_every_levels == 0

        if gained_life:
            self.state.lives += 1

        message = None
        if gained_life:
            message = config.BONUS_LIFE_MESSAGE.format(level=self.state.level)

        self.prepare_level(LevelStartOptions(message=message))
        log.info("Level cleared, now level %d%s",
                 self.state.level, " (+1 life)" if gained_life else "")
        return LevelClearResult(level_cleared=True, gained_life=gained_life)

    # =========================================================================
    # Physics
    # =========================================================================

    def update_ball_speed_after_hit(self) -> None:
        """Speed the ball up after a brick hit."""
        self.ball.increase_speed_after_hit(self.state.level)

    def move_ball(self) -> BallMoveResult:
        """Advance the ball one tick and resolve walls, ceiling and paddle."""
        ball = self.ball
        ball.update()

        wall_hit = check_wall_collision(ball, self._config.field_width)
        ceiling_hit = check_ceiling_collision(ball)

        paddle_hit = check_paddle_collision(ball, self.paddle)
        if paddle_hit:
            resolve_paddle_collision(ball, self.paddle)

        if has_fallen_below(ball, self._config.field_height):
            lost = self.handle_life_lost()
            return BallMoveResult(
                life_lost=lost.life_lost,
                game_over=lost.game_over,
                paddle_hit=paddle_hit,
                wall_hit=wall_hit,
                ceiling_hit=ceiling_hit,
            )

        return BallMoveResult(paddle_hit=paddle_hit, wall_hit=wall_hit, ceiling_hit=ceiling_hit)

    def check_brick_collisions(self) -> BrickCollisionResult:
        """Resolve ball-brick contacts for this tick.

        A normal ball reflects off the first brick it overlaps and stops
        scanning. A powered-up ball passes through, damaging every brick
        it overlaps.
        """
        hits = 0
        destroyed = 0
        power_up_activated = False
        points = self._config.brick_base_points + (self.state.level - 1) * self._config.brick_points_per_level

        for brick in self.bricks:
            if not check_brick_collision(self.ball, brick):
                continue

            direction = get_collision_direction(self.ball, brick)
            hits += 1
            self.update_score(points)

            if brick.hit():
                destroyed += 1
                if not self.ball.power_up_active:
                    self.state.bricks_broken_since_power_up += 1
                    if self.state.bricks_broken_since_power_up >= self._config.power_up_threshold:
                        self.activate_power_up()
                        power_up_activated = True

            if not self.ball.power_up_active:
                resolve_brick_collision(self.ball, direction)
                self.update_ball_speed_after_hit()
                cleared = LevelClearResult()
                if self.is_level_cleared:
                    cleared = self.handle_level_clear()
                return BrickCollisionResult(
                    bricks_hit=hits,
                    bricks_destroyed=destroyed,
                    power_up_activated=power_up_activated,
                    level_cleared=cleared.level_cleared,
                    gained_life=cleared.gained_life,
                )

        cleared = LevelClearResult()
        if hits and self.is_level_cleared:
            cleared = self.handle_level_clear()

        if hits > 1:
            log.debug("Power-up ball hit %d bricks in one tick", hits)

        return BrickCollisionResult(
            bricks_hit=hits,
            bricks_destroyed=destroyed,
            power_up_activated=power_up_activated,
            level_cleared=cleared.level_cleared,
            gained_life=cleared.gained_life,
        )

    def update_ball_trail(self, should_record: bool) -> None:
        """Age the power-up trail and record the ball when it moved."""
        self.ball.update_trail(self._now(), should_record)

    # =========================================================================
    # Input
    # =========================================================================

    def set_input_direction(self, direction: Union[Direction, str], active: bool) -> None:
        """Set a held/released flag for one direction."""
        direction = Direction(direction)
        if direction == Direction.LEFT:
            self.input.left = active
        elif direction == Direction.RIGHT:
            self.input.right = active

    def update_paddle_from_input(self) -> None:
        """Move the paddle one tick according to the held directions."""
        self.paddle.move(self.input.left, self.input.right)

    def move_paddle_center_to(self, x: float) -> None:
        """Place the paddle center at a field-space X (pointer input)."""
        self.paddle.move_center_to(x)

    # =========================================================================
    # Power-up
    # =========================================================================

    def reset_power_up_progress(self) -> None:
        """Zero the broken-brick counter and end any power-up."""
        self.state.bricks_broken_since_power_up = 0
        self.deactivate_power_up()

    def show_power_up_tutorial(self) -> None:
        """Show the power-up banner, once per session."""
        if self.state.power_up_tutorial_shown:
            return
        self.state.power_up_tutorial_shown = True
        self.state.power_up_tutorial_visible_until = self._now() + self._config.power_up_tutorial_duration

    def activate_power_up(self) -> None:
        """Give the ball the power-up and restart the counter."""
        self.ball.activate_power_up()
        self.state.bricks_broken_since_power_up = 0
        self.show_power_up_tutorial()
        log.info("Power-up activated")

    def deactivate_power_up(self) -> None:
        """End power-up mode (no-op when inactive)."""
        if self.ball.power_up_active:
            log.debug("Power-up ended")
        self.ball.deactivate_power_up()

    def update_power_up_tutorial_visibility(self, now: Optional[float] = None) -> bool:
        """Expire the tutorial banner when its window has passed.

        Returns:
            True while the banner should be visible
        """
        if not self.state.power_up_tutorial_visible_until:
            return False

        if now is None:
            now = self._now()

        if now >= self.state.power_up_tutorial_visible_until:
            self.state.power_up_tutorial_visible_until = 0.0
            return False

        return True

    # =========================================================================
    # Frame pipeline
    # =========================================================================

    def tick(self) -> TickResult:
        """Advance the simulation by one frame.

        Order: paddle from input, park ball if READY, then while RUNNING
        move the ball and resolve bricks, then trail bookkeeping and
        tutorial expiry. Paused, ready and idle frames still run but skip
        the physics.
        """
        status_before = self.state.status
        move = None
        bricks = None

        self.update_paddle_from_input()

        if self.state.status == GameStatus.READY:
            self.place_ball_above_paddle()

        if self.state.status == GameStatus.RUNNING:
            move = self.move_ball()
            if self.state.status == GameStatus.RUNNING:
                bricks = self.check_brick_collisions()
            self.update_ball_trail(True)
        else:
            self.update_ball_trail(False)

        tutorial_visible = self.update_power_up_tutorial_visibility()

        return TickResult(
            status_before=status_before,
            status_after=self.state.status,
            move=move,
            bricks=bricks,
            tutorial_visible=tutorial_visible,
        )

    def snapshot(self) -> GameSnapshot:
        """Build the read-only view the presentation layer renders."""
        paddle = self.paddle
        ball = self.ball
        return GameSnapshot(
            paddle=PaddleSnapshot(
                rect=Rectangle(x=paddle.x, y=paddle.y, width=paddle.width, height=paddle.height),
                speed=paddle.speed,
            ),
            ball=BallSnapshot(
                position=Point2D(x=ball.x, y=ball.y),
                velocity=Vector2D(x=ball.dx, y=ball.dy),
                speed=ball.speed,
                radius=ball.radius,
                power_up_active=ball.power_up_active,
                trail=tuple(ball.trail),
            ),
            bricks=tuple(
                BrickSnapshot(
                    rect=Rectangle(x=b.x, y=b.y, width=b.width, height=b.height),
                    status=b.status,
                    hue=b.hue,
                )
                for b in self.bricks
            ),
            state=self.state.freeze(),
            field_width=self._config.field_width,
            field_height=self._config.field_height,
            timestamp=self._now(),
        )
