"""
collision.py: Per-frame sweep for pipe hits, scoring and off-screen pruning.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .data_models import Actor, Obstacle
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Outcome of one collision pass."""
    hit: Optional[Obstacle] = None
    out_of_bounds: bool = False
    points: int = 0
    pruned: int = 0

    @property
    def collided(self) -> bool:
        return self.hit is not None or self.out_of_bounds


class CollisionPass:
    def __init__(self, physics: PhysicsCore):
        self.physics = physics

    def run(self, actor: Actor, obstacles: List[Obstacle]) -> SweepResult:
        """
        Tests every active pipe against the bird, in creation order.

        Stops at the first hit. Pipes the bird has cleared are marked scored
        exactly once. Pruning happens after the sweep so the list is never
        changed while it is being walked; `obstacles` is updated in place.
        """
        result = SweepResult()

        for obstacle in obstacles:
            if self.physics.hits_obstacle(actor, obstacle):
                result.hit = obstacle
                break
            if not obstacle.scored and self.physics.has_passed(actor, obstacle):
                obstacle.scored = True
                result.points += 1

        survivors = []
        for obstacle in obstacles:
            if self.physics.should_prune(obstacle):
                obstacle.alive = False
                result.pruned += 1
            else:
                survivors.append(obstacle)
        if result.pruned:
            obstacles[:] = survivors
            logger.debug("Pruned %d pipe(s), %d active", result.pruned, len(obstacles))

        if result.hit is None and self.physics.out_of_bounds(actor.y):
            result.out_of_bounds = True

        return result
