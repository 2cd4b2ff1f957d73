import pytest

from flappy.config import GameConfig
from flappy.data_models import Actor, Obstacle, Rect
from flappy.physics_core import PhysicsCore


def make_actor(cfg: GameConfig, y: float = 320.0, velocity: float = 0.0) -> Actor:
    return Actor(x=cfg.bird_x, y=y, width=cfg.bird_width, height=cfg.bird_height, velocity=velocity)


def make_pipe(cfg: GameConfig, x: float, gap_y: float = 320.0) -> Obstacle:
    return Obstacle(
        x=x, gap_center_y=gap_y, gap_half_height=cfg.gap_half_height,
        width=cfg.pipe_width, velocity=cfg.pipe_velocity, field_height=cfg.height,
    )


def test_flap_overrides_falling_velocity(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    actor = make_actor(config, velocity=500.0)
    actor.velocity = physics.flap()
    physics.step_actor(actor, 0.1)
    assert actor.velocity == pytest.approx(-350 + 900 * 0.1)
    assert actor.velocity == pytest.approx(-260)


def test_velocity_is_updated_before_position(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    y, v = physics.apply_gravity_and_movement(100.0, 0.0, 0.5)
    assert v == pytest.approx(450.0)
    assert y == pytest.approx(100.0 + 450.0 * 0.5)


def test_disabled_gravity_keeps_velocity(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    y, v = physics.apply_gravity_and_movement(100.0, -20.0, 1.0, gravity_enabled=False)
    assert v == -20.0
    assert y == 80.0


@pytest.mark.parametrize(
    "velocity, expected",
    [(-350.0, -30.0), (-60.0, -10.0), (0.0, 0.0), (300.0, 50.0), (900.0, 90.0)],
)
def test_rotation_is_scaled_and_clamped(config: GameConfig, velocity: float, expected: float) -> None:
    assert PhysicsCore(config).rotation_for(velocity) == pytest.approx(expected)


@pytest.mark.parametrize("y, expected", [(4.0, True), (5.0, False), (320.0, False), (635.0, False), (636.0, True)])
def test_boundary_inset(config: GameConfig, y: float, expected: bool) -> None:
    assert PhysicsCore(config).out_of_bounds(y) is expected


def test_bird_inside_gap_does_not_hit(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    assert not physics.hits_obstacle(make_actor(config, y=320.0), make_pipe(config, x=100.0))


def test_bird_clipping_top_pipe_hits(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    # Box top at 243.8, top pipe ends at 250
    assert physics.hits_obstacle(make_actor(config, y=260.0), make_pipe(config, x=100.0))


def test_bird_clipping_bottom_pipe_hits(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    assert physics.hits_obstacle(make_actor(config, y=380.0), make_pipe(config, x=100.0))


def test_pipe_not_yet_reached_does_not_hit(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    # Left edge at 202, bird's right edge at 121.6
    assert not physics.hits_obstacle(make_actor(config, y=100.0), make_pipe(config, x=250.0))


def test_touching_rects_do_not_overlap() -> None:
    assert not Rect(0, 0, 10, 10).overlaps(Rect(10, 0, 20, 10))
    assert Rect(0, 0, 10, 10).overlaps(Rect(9.5, 9.5, 20, 20))


def test_pipe_geometry(config: GameConfig) -> None:
    pipe = make_pipe(config, x=200.0, gap_y=300.0)
    assert pipe.top_rect() == Rect(152.0, 0.0, 248.0, 230.0)
    assert pipe.bottom_rect() == Rect(152.0, 370.0, 248.0, 640.0)


def test_has_passed_uses_right_edge(config: GameConfig) -> None:
    physics = PhysicsCore(config)
    actor = make_actor(config)
    assert not physics.has_passed(actor, make_pipe(config, x=52.0))
    assert physics.has_passed(actor, make_pipe(config, x=51.9))


def test_step_obstacles_moves_left(config: GameConfig) -> None:
    pipe = make_pipe(config, x=468.0)
    PhysicsCore(config).step_obstacles([pipe], 0.5)
    assert pipe.x == pytest.approx(368.0)
