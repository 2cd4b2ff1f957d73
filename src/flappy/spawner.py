"""
spawner.py: Periodic creation of pipe pairs off the right edge of the playfield.
"""

import logging
import random
from typing import List, Optional

from .config import GameConfig
from .data_models import Obstacle

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """
    Wall-clock timer that emits one Obstacle per interval.
    The first pipe comes after a shorter startup delay.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()
        self.gap_low, self.gap_high = config.gap_center_range()

        self.suspended = False
        self.time_until_spawn = config.first_spawn_delay
        self.elapsed_since_last_spawn = 0.0

    def reset(self):
        """Re-arms the startup delay and resumes spawning."""
        self.time_until_spawn = self.config.first_spawn_delay
        self.elapsed_since_last_spawn = 0.0
        self.suspended = False

    def suspend(self):
        self.suspended = True

    def resume(self):
        self.suspended = False

    def create_obstacle(self, overdue: float = 0.0) -> Obstacle:
        """
        Generates a new pipe pair just past the right edge.
        overdue is how long ago the spawn came due; the pipe is moved
        that far so spacing between pairs does not depend on frame rate.
        """
        cfg = self.config
        gap_y = self.rng.uniform(self.gap_low, self.gap_high)
        return Obstacle(
            x=cfg.spawn_x + cfg.pipe_velocity * overdue,
            gap_center_y=gap_y,
            gap_half_height=cfg.gap_half_height,
            width=cfg.pipe_width,
            velocity=cfg.pipe_velocity,
            field_height=cfg.height,
        )

    def advance(self, dt: float) -> List[Obstacle]:
        """Runs the timer forward and returns any pipes that came due."""
        if self.suspended or dt <= 0:
            return []

        self.time_until_spawn -= dt
        self.elapsed_since_last_spawn += dt

        spawned = []
        while self.time_until_spawn <= 0:
            overdue = -self.time_until_spawn
            obstacle = self.create_obstacle(overdue)
            spawned.append(obstacle)
            logger.debug("Spawned pipe gap_y=%.1f x=%.1f", obstacle.gap_center_y, obstacle.x)
            self.time_until_spawn += self.config.spawn_interval
            self.elapsed_since_last_spawn = overdue
        return spawned
