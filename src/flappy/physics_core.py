"""
physics_core.py: The deterministic kinematic functions and collision tests.
"""

from typing import Iterable

from .config import GameConfig
from .data_models import Actor, Obstacle


class PhysicsCore:
    """
    Stateless physics shared by the session and the collision pass.
    All rates are per second; dt is the frame's elapsed time in seconds.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, y: float, velocity: float, dt: float,
                                   gravity_enabled: bool = True) -> tuple[float, float]:
        """
        Calculates new velocity and position after dt seconds.
        Velocity is updated first, then used to move.
        """
        if gravity_enabled:
            velocity += self.config.gravity * dt
        y += velocity * dt
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity that replaces the current one after a flap."""
        return self.config.flap_velocity

    def rotation_for(self, velocity: float) -> float:
        cfg = self.config
        return max(cfg.min_rotation, min(velocity / cfg.rotation_scale, cfg.max_rotation))

    def step_actor(self, actor: Actor, dt: float):
        """Integrates the bird for one frame. Mutates the actor."""
        actor.y, actor.velocity = self.apply_gravity_and_movement(
            actor.y, actor.velocity, dt, actor.gravity_enabled)
        actor.rotation = self.rotation_for(actor.velocity)

    def step_obstacles(self, obstacles: Iterable[Obstacle], dt: float):
        for obstacle in obstacles:
            obstacle.x += obstacle.velocity * dt

    def out_of_bounds(self, y: float) -> bool:
        """Checks the bird's centre against the ceiling and floor insets."""
        inset = self.config.boundary_inset
        return y <= inset or y >= self.config.height - inset

    def hits_obstacle(self, actor: Actor, obstacle: Obstacle) -> bool:
        box = actor.bounds()
        return box.overlaps(obstacle.top_rect()) or box.overlaps(obstacle.bottom_rect())

    def has_passed(self, actor: Actor, obstacle: Obstacle) -> bool:
        """True once the pair's trailing (right) edge is behind the bird."""
        return obstacle.right < actor.x

    def should_prune(self, obstacle: Obstacle) -> bool:
        return obstacle.x < -self.config.prune_margin
