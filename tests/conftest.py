import random

import pytest

from flappy.config import GameConfig
from flappy.session import Session

from helpers import MidGapRng


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def session(config: GameConfig) -> Session:
    return Session(config, random.Random(1234))


@pytest.fixture
def wide_gap_session() -> Session:
    return Session(GameConfig(gap_size=200), MidGapRng())
