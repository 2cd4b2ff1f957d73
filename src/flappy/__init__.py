"""
Single-player Flappy Bird: a frame-driven simulation core and a pygame client.
"""

from .config import GameConfig, ConfigError
from .data_models import Actor, Obstacle, SessionState, GameOverSummary
from .session import Session

__all__ = [
    "GameConfig", "ConfigError", "Actor", "Obstacle", "SessionState",
    "GameOverSummary", "Session",
]
