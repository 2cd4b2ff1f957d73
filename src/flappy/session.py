"""
session.py: The authoritative single-player simulation and its two-state lifecycle.
"""

import logging
import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .collision import CollisionPass
from .data_models import Actor, Obstacle, SessionState, GameOverSummary
from .physics_core import PhysicsCore
from .spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class Session:
    """
    Owns the bird, the active pipes and the score.
    The renderer reads from it and only ever calls tick() and on_flap_input().
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.physics = PhysicsCore(self.config)
        self.spawner = ObstacleSpawner(self.config, rng)
        self.collisions = CollisionPass(self.physics)

        self.actor = Actor(
            x=self.config.bird_x,
            y=self.config.bird_start_y,
            width=self.config.bird_width,
            height=self.config.bird_height,
        )
        self._obstacles: List[Obstacle] = []
        self.state = SessionState.PLAYING
        self.score = 0
        self.summary: Optional[GameOverSummary] = None
        self.tick_count = 0
        self._pending_flap = False

    # -------- Read accessors --------

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    @property
    def is_game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    @property
    def elapsed_since_last_spawn(self) -> float:
        return self.spawner.elapsed_since_last_spawn

    def snapshot(self):
        """Plain-dict view of everything the renderer draws."""
        return {
            "tick": self.tick_count,
            "state": self.state.value,
            "score": self.score,
            "actor": self.actor.to_client_state(),
            "pipes": [o.to_client_state() for o in self._obstacles],
            "summary": self.summary.score_text if self.summary else None,
        }

    # -------- Input --------

    def on_flap_input(self):
        """Latches a flap; it is consumed at the start of the next tick."""
        self._pending_flap = True

    # -------- Simulation --------

    def tick(self, dt: float):
        """
        Advances the simulation by dt seconds, at most max_frame_delta.

        Order: latched input, bird physics, pipe movement and spawning,
        then the collision and scoring pass. A flap seen while the game is
        over restarts the session and nothing else happens that tick.
        """
        self.tick_count += 1
        flap = self._pending_flap
        self._pending_flap = False

        if self.is_game_over:
            if flap:
                self.restart()
            return

        # 1. Apply flap impulse
        if flap:
            self.actor.velocity = self.physics.flap()
            self.actor.rotation = self.physics.rotation_for(self.actor.velocity)

        if dt <= 0:
            return
        # A stalled frame must not carry pipes past a bird that is already down
        dt = min(dt, self.config.max_frame_delta)

        # 2. Apply gravity and movement
        self.physics.step_actor(self.actor, dt)

        # 3. Move existing pipes, then add any that came due
        self.physics.step_obstacles(self._obstacles, dt)
        self._obstacles.extend(self.spawner.advance(dt))

        # 4. Collisions, scoring, pruning
        result = self.collisions.run(self.actor, self._obstacles)
        if result.points:
            self.score += result.points
            logger.debug("Score %d", self.score)

        if result.collided:
            reason = "boundary" if result.out_of_bounds else "pipe"
            self._game_over(reason)

    def _game_over(self, reason: str):
        """Freezes the scene and publishes the summary."""
        self.state = SessionState.GAME_OVER

        actor = self.actor
        actor.alive = False
        actor.velocity = 0.0
        actor.gravity_enabled = False
        actor.y = max(min(actor.y, self.config.height), 0.0)

        for obstacle in self._obstacles:
            obstacle.velocity = 0.0

        self.spawner.suspend()
        self.summary = GameOverSummary(score=self.score)
        logger.info("Game over (%s) after %d ticks, score %d", reason, self.tick_count, self.score)

    def restart(self):
        """Returns to the state of a freshly started session."""
        for obstacle in self._obstacles:
            obstacle.alive = False
        self._obstacles.clear()
        self.score = 0

        actor = self.actor
        actor.x = self.config.bird_x
        actor.y = self.config.bird_start_y
        actor.velocity = 0.0
        actor.rotation = 0.0
        actor.alive = True
        actor.gravity_enabled = True

        self._pending_flap = False
        self.spawner.reset()
        self.summary = None
        self.state = SessionState.PLAYING
        logger.info("Session restarted")
