"""Tests for the BlockBreaker presenter (headless)."""

from unittest.mock import patch

import pygame
import pytest

from blockbreaker.score_store import MemoryScoreStore
from games.BlockBreaker import config
from games.BlockBreaker.game.screens import ScreenKind
from games.BlockBreaker.game_mode import BlockBreakerMode, fit_viewport
from games.BlockBreaker.input import InputAction, InputEvent
from models import GameStatus


def press(mode, action, **kwargs):
    mode.handle_input([InputEvent(action=action, timestamp=0.0, **kwargs)])


def run_countdown(mode):
    for _ in range(config.LAUNCH_COUNTDOWN_SECONDS):
        mode.update(1.0)


def drop_ball(mode):
    mode.engine.ball.x = 240
    mode.engine.ball.y = 700
    mode.engine.ball.dx = 0.0
    mode.engine.ball.dy = 5.0


@pytest.fixture
def mode(clock):
    return BlockBreakerMode(score_store=MemoryScoreStore(), seed=3, clock=clock)


@pytest.fixture
def playing(mode):
    """Mode with the ball in play."""
    press(mode, InputAction.TOGGLE)
    run_countdown(mode)
    assert mode.state == GameStatus.RUNNING
    return mode


class TestTitle:

    def test_starts_on_title(self, mode):
        assert mode.state == GameStatus.IDLE
        assert mode.navigator.kind == ScreenKind.TITLE

    def test_space_starts_countdown(self, mode):
        press(mode, InputAction.TOGGLE)

        assert mode.countdown_active
        assert mode.navigator.current is None
        assert mode.state == GameStatus.READY
        assert mode.engine.state.message == "3"

    def test_confirm_starts_from_title(self, mode):
        press(mode, InputAction.CONFIRM)
        assert mode.countdown_active

    def test_lives_option(self, clock):
        mode = BlockBreakerMode(lives=5, clock=clock)
        assert mode.engine.state.lives == 5


class TestCountdown:

    def test_counts_down_then_launches(self, mode):
        press(mode, InputAction.TOGGLE)

        mode.update(1.0)
        assert mode.engine.state.message == "2"
        mode.update(1.0)
        assert mode.engine.state.message == "1"
        assert mode.state == GameStatus.READY

        mode.update(1.0)
        assert mode.state == GameStatus.RUNNING
        assert not mode.countdown_active
        assert mode.navigator.current is None

    def test_no_ready_popup_during_countdown(self, mode):
        press(mode, InputAction.TOGGLE)
        mode.update(1.0)
        assert mode.navigator.current is None

    def test_space_ignored_during_countdown(self, mode):
        press(mode, InputAction.TOGGLE)
        press(mode, InputAction.TOGGLE)
        assert mode.state == GameStatus.READY
        assert mode.countdown_active

    def test_back_to_title_cancels_countdown(self, mode):
        press(mode, InputAction.TOGGLE)
        mode.show_title_after_reset()

        for _ in range(5):
            mode.update(1.0)

        assert mode.state == GameStatus.IDLE
        assert mode.navigator.kind == ScreenKind.TITLE


class TestPause:

    def test_space_pauses_and_resumes(self, playing):
        press(playing, InputAction.TOGGLE)
        assert playing.state == GameStatus.PAUSED
        assert playing.navigator.kind == ScreenKind.PAUSE

        press(playing, InputAction.TOGGLE)
        assert playing.state == GameStatus.RUNNING
        assert playing.navigator.current is None

    def test_confirm_resumes(self, playing):
        press(playing, InputAction.TOGGLE)
        press(playing, InputAction.CONFIRM)
        assert playing.state == GameStatus.RUNNING

    def test_confirm_while_running_does_nothing(self, playing):
        press(playing, InputAction.CONFIRM)
        assert playing.state == GameStatus.RUNNING


class TestLivesAndResults:

    def test_life_lost_shows_ready_popup(self, playing):
        drop_ball(playing)
        playing.update(0.016)

        assert playing.state == GameStatus.READY
        assert playing.navigator.kind == ScreenKind.READY
        assert playing.navigator.current.lines == (config.LIFE_LOST_MESSAGE.format(lives=2),)

        press(playing, InputAction.TOGGLE)
        assert playing.state == GameStatus.RUNNING
        assert playing.navigator.current is None

    def test_game_over_shows_result_screen(self, playing):
        playing.engine.update_score(40)
        playing.engine.state.lives = 1
        drop_ball(playing)
        playing.update(0.016)

        assert playing.state == GameStatus.GAME_OVER
        assert playing.result_screen_visible
        assert playing.navigator.kind == ScreenKind.RESULT
        assert playing.navigator.current.lines == ("Score: 40", "High score: 40")

    def test_result_confirm_returns_to_title(self, playing):
        playing.engine.state.lives = 1
        drop_ball(playing)
        playing.update(0.016)

        press(playing, InputAction.CONFIRM)

        assert playing.state == GameStatus.IDLE
        assert not playing.result_screen_visible
        assert playing.navigator.kind == ScreenKind.TITLE
        assert playing.engine.state.lives == 3

    def test_space_after_game_over_starts_new_game(self, playing):
        playing.engine.state.lives = 1
        drop_ball(playing)
        playing.update(0.016)

        press(playing, InputAction.TOGGLE)

        assert playing.countdown_active
        assert playing.navigator.current is None
        assert playing.engine.state.lives == 3


class TestPlayerInput:

    def test_pointer_moves_paddle(self, mode):
        press(mode, InputAction.POINTER, x=100.0)
        assert mode.engine.paddle.center_x == pytest.approx(100)

    def test_direction_flags(self, mode):
        press(mode, InputAction.LEFT, active=True)
        assert mode.engine.input.left
        press(mode, InputAction.LEFT, active=False)
        assert not mode.engine.input.left


class TestHelp:

    def test_help_toggles_on_title(self, mode):
        press(mode, InputAction.HELP)
        assert mode.guide.is_open
        press(mode, InputAction.NEXT_PAGE)
        assert mode.guide.page_index == 1
        press(mode, InputAction.HELP)
        assert not mode.guide.is_open

    def test_help_blocks_game_keys(self, mode):
        press(mode, InputAction.HELP)
        press(mode, InputAction.TOGGLE)
        assert not mode.guide.is_open
        assert mode.state == GameStatus.IDLE

    def test_help_unavailable_while_running(self, playing):
        press(playing, InputAction.HELP)
        assert not playing.guide.is_open

    def test_help_available_while_paused(self, playing):
        press(playing, InputAction.TOGGLE)
        press(playing, InputAction.HELP)
        assert playing.guide.is_open


class TestSounds:

    def test_life_lost_sound(self, playing):
        with patch.object(playing.skin, 'play_life_lost_sound') as sound:
            drop_ball(playing)
            playing.update(0.016)
        sound.assert_called_once_with()

    def test_game_over_sound(self, playing):
        playing.engine.state.lives = 1
        with patch.object(playing.skin, 'play_game_over_sound') as game_over, \
                patch.object(playing.skin, 'play_life_lost_sound') as life_lost:
            drop_ball(playing)
            playing.update(0.016)
        game_over.assert_called_once_with()
        life_lost.assert_not_called()

    def test_wall_sound(self, playing):
        playing.engine.ball.x = 470
        playing.engine.ball.y = 400
        playing.engine.ball.dx = 4.0
        playing.engine.ball.dy = -1.0
        with patch.object(playing.skin, 'play_wall_hit_sound') as sound:
            playing.update(0.016)
        sound.assert_called_once_with()


class TestViewport:

    def test_fit_same_size(self):
        assert fit_viewport(480, 640) == (0, 0, 480, 640)

    def test_fit_letterboxed(self):
        x, y, width, height = fit_viewport(1160, 1280)
        assert (x, y, width, height) == pytest.approx((100, 0, 960, 1280))

    def test_resize(self, mode):
        mode.set_window_size(960, 1280)
        assert mode.viewport == pytest.approx((0, 0, 960, 1280))


class TestRender:

    def test_render_title(self, mode):
        pygame.font.init()
        screen = pygame.Surface((480, 640))
        mode.render(screen)

    def test_render_playing_with_power_up(self, playing):
        pygame.font.init()
        playing.engine.activate_power_up()
        playing.update(0.016)
        screen = pygame.Surface((600, 700))
        playing.render(screen)
