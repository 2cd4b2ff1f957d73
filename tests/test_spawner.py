import random

import pytest

from flappy.config import GameConfig
from flappy.spawner import ObstacleSpawner


def test_first_spawn_waits_for_startup_delay(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(0))
    assert spawner.advance(0.39) == []
    spawned = spawner.advance(0.02)
    assert len(spawned) == 1
    # Came due 0.01 s ago, so it has already scrolled 2 px
    assert spawned[0].x == pytest.approx(466.0)


def test_steady_interval_after_first_spawn(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(0))
    assert len(spawner.advance(0.4)) == 1
    assert spawner.advance(1.45) == []
    assert len(spawner.advance(0.1)) == 1


def test_long_frame_spawns_every_due_pipe(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(0))
    spawned = spawner.advance(4.0)
    # Due at 0.4, 1.9 and 3.4
    assert [p.x for p in spawned] == pytest.approx([468 - 200 * 3.6, 468 - 200 * 2.1, 468 - 200 * 0.6])
    assert spawner.elapsed_since_last_spawn == pytest.approx(0.6)


def test_gap_centres_stay_in_range(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(42))
    gaps = [spawner.create_obstacle().gap_center_y for _ in range(2000)]
    assert min(gaps) >= 120
    assert max(gaps) <= 520
    # Uniform draw should cover most of the range
    assert min(gaps) < 140
    assert max(gaps) > 500


def test_new_pipes_share_geometry_and_speed(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(3))
    pipes = spawner.advance(10.0)
    assert len(pipes) > 1
    assert {p.gap_half_height for p in pipes} == {70}
    assert {p.velocity for p in pipes} == {-200.0}
    assert not any(p.scored for p in pipes)


def test_suspended_spawner_is_frozen(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(0))
    spawner.advance(0.3)
    spawner.suspend()
    assert spawner.advance(5.0) == []
    spawner.resume()
    assert spawner.advance(0.09) == []
    assert len(spawner.advance(0.02)) == 1


def test_reset_rearms_startup_delay(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(0))
    spawner.advance(1.0)
    spawner.suspend()
    spawner.reset()
    assert not spawner.suspended
    assert spawner.elapsed_since_last_spawn == 0.0
    assert spawner.advance(0.39) == []
    assert len(spawner.advance(0.02)) == 1


def test_zero_or_negative_dt_is_ignored(config: GameConfig) -> None:
    spawner = ObstacleSpawner(config, random.Random(0))
    assert spawner.advance(0.0) == []
    assert spawner.advance(-1.0) == []
    assert spawner.time_until_spawn == config.first_spawn_delay

