"""
config.py: Validated game configuration built from the defaults in constants.
"""

from dataclasses import dataclass, fields, replace

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_X, BOUNDARY_INSET, BIRD_WIDTH, BIRD_HEIGHT,
    PIPE_WIDTH, PIPE_GAP, PIPE_VELOCITY, PIPE_SPAWN_OFFSET, PIPE_TOP_MARGIN,
    PIPE_BOTTOM_MARGIN, PIPE_PRUNE_MARGIN, PIPE_SPAWN_INTERVAL, FIRST_SPAWN_DELAY,
    MAX_FRAME_DELTA, GRAVITY_ACCEL, FLAP_VELOCITY, ROTATION_SCALE, MIN_ROTATION, MAX_ROTATION
)


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a playable session."""


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of the simulation. Checked once, at construction."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    bird_x: float = BIRD_X
    bird_width: float = BIRD_WIDTH
    bird_height: float = BIRD_HEIGHT
    boundary_inset: float = BOUNDARY_INSET

    pipe_width: float = PIPE_WIDTH
    gap_size: float = PIPE_GAP
    pipe_velocity: float = PIPE_VELOCITY
    spawn_offset: float = PIPE_SPAWN_OFFSET
    top_margin: float = PIPE_TOP_MARGIN
    bottom_margin: float = PIPE_BOTTOM_MARGIN
    prune_margin: float = PIPE_PRUNE_MARGIN

    spawn_interval: float = PIPE_SPAWN_INTERVAL
    first_spawn_delay: float = FIRST_SPAWN_DELAY
    max_frame_delta: float = MAX_FRAME_DELTA

    gravity: float = GRAVITY_ACCEL
    flap_velocity: float = FLAP_VELOCITY
    rotation_scale: float = ROTATION_SCALE
    min_rotation: float = MIN_ROTATION
    max_rotation: float = MAX_ROTATION

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Playfield must be positive, got {self.width}x{self.height}")
        if self.gap_size <= 0 or self.pipe_width <= 0:
            raise ConfigError("Pipe width and gap size must be positive")
        if self.top_margin < 0 or self.bottom_margin < 0:
            raise ConfigError("Pipe margins cannot be negative")
        # Raises if the gap cannot fit between the margins
        self.gap_center_range()
        if self.pipe_velocity >= 0:
            raise ConfigError(f"Pipes must scroll left, got velocity {self.pipe_velocity}")
        if self.spawn_interval <= 0:
            raise ConfigError(f"Spawn interval must be positive, got {self.spawn_interval}")
        if self.first_spawn_delay < 0:
            raise ConfigError(f"First spawn delay cannot be negative, got {self.first_spawn_delay}")
        if self.max_frame_delta <= 0:
            raise ConfigError(f"Max frame delta must be positive, got {self.max_frame_delta}")
        if self.prune_margin < self.pipe_width / 2:
            raise ConfigError(
                f"Prune margin {self.prune_margin} would remove pipes still on screen "
                f"(needs >= {self.pipe_width / 2})")
        if self.rotation_scale <= 0:
            raise ConfigError(f"Rotation scale must be positive, got {self.rotation_scale}")
        if self.min_rotation > self.max_rotation:
            raise ConfigError("min_rotation exceeds max_rotation")
        if not 0 <= self.boundary_inset < self.height / 2:
            raise ConfigError(f"Boundary inset {self.boundary_inset} leaves no playfield")

    @classmethod
    def from_overrides(cls, **overrides) -> "GameConfig":
        """Builds a config, ignoring overrides that are None."""
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return replace(cls(), **{k: v for k, v in overrides.items() if v is not None})

    @property
    def gap_half_height(self) -> float:
        return self.gap_size / 2

    @property
    def spawn_x(self) -> float:
        return self.width + self.spawn_offset

    @property
    def bird_start_y(self) -> float:
        return self.height / 2

    def gap_center_range(self) -> tuple[float, float]:
        """Inclusive (low, high) bounds for a pipe's gap centre."""
        low = self.gap_half_height + self.top_margin
        high = self.height - self.gap_half_height - self.bottom_margin
        if low > high:
            raise ConfigError(
                f"Gap of {self.gap_size} with margins {self.top_margin}/{self.bottom_margin} "
                f"does not fit in a playfield {self.height} high")
        return low, high
