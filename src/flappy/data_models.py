"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class SessionState(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Rect(NamedTuple):
    """Axis-aligned box, (left, top) to (right, bottom), y growing downward."""
    left: float
    top: float
    right: float
    bottom: float

    def overlaps(self, other: "Rect") -> bool:
        # Shared edges do not count as contact
        return (self.left < other.right and other.left < self.right
                and self.top < other.bottom and other.top < self.bottom)


@dataclass
class Actor:
    """The bird. Only y, velocity and rotation change during play."""
    x: float
    y: float
    width: float
    height: float
    velocity: float = 0.0
    rotation: float = 0.0
    alive: bool = True
    gravity_enabled: bool = True

    def bounds(self) -> Rect:
        half_w = self.width / 2
        half_h = self.height / 2
        return Rect(self.x - half_w, self.y - half_h, self.x + half_w, self.y + half_h)

    def to_client_state(self):
        """Prepares a minimal state dictionary for the renderer."""
        return {
            "x": self.x,
            "y": round(self.y, 2),
            "v": round(self.velocity, 2),
            "angle": round(self.rotation, 2),
            "alive": self.alive,
        }


@dataclass
class Obstacle:
    """One top+bottom pipe pair sharing a gap. x is the pair's centre."""
    x: float
    gap_center_y: float
    gap_half_height: float
    width: float
    velocity: float
    field_height: float
    scored: bool = False
    alive: bool = True

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def gap_top(self) -> float:
        return self.gap_center_y - self.gap_half_height

    @property
    def gap_bottom(self) -> float:
        return self.gap_center_y + self.gap_half_height

    def top_rect(self) -> Rect:
        return Rect(self.left, 0.0, self.right, self.gap_top)

    def bottom_rect(self) -> Rect:
        return Rect(self.left, self.gap_bottom, self.right, self.field_height)

    def to_client_state(self):
        return {
            "x": round(self.x, 2),
            "gap_y": round(self.gap_center_y, 2),
            "gap_half": self.gap_half_height,
            "scored": self.scored,
        }


@dataclass(frozen=True)
class GameOverSummary:
    """What the renderer shows once a run has ended."""
    score: int
    title: str = "GAME OVER"
    hint: str = "GAME OVER - click or press SPACE to restart"

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"
