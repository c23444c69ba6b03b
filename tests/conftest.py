"""Pytest fixtures for BlockBreaker tests."""
import os
import random

import pytest

# Headless pygame for skin and presenter tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from blockbreaker.logging import disable_logging
from blockbreaker.score_store import MemoryScoreStore
from games.BlockBreaker.game.engine import EngineConfig, SimulationEngine
from models import GameStatus

disable_logging()


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def score_store():
    return MemoryScoreStore()


@pytest.fixture
def engine(clock, rng, score_store):
    """Fresh engine on the title screen."""
    return SimulationEngine(EngineConfig(), score_store=score_store, clock=clock, rng=rng)


@pytest.fixture
def running_engine(engine):
    """Engine with a new game started and the ball launched."""
    engine.start_new_game()
    assert engine.launch_ball()
    assert engine.status == GameStatus.RUNNING
    return engine
