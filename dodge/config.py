"""
Game configuration.

Holds every tunable of the game: playfield size, entity sizes, speeds,
spawn cadence and frame pacing. A few settings can be overridden via
environment variables.
"""

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Optional

from dodge.core.vec2 import Vec2


class ConfigError(ValueError):
    """Raised when a GameConfig fails validation."""


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class GameConfig:
    """Configuration for a game of Dodge."""

    # Playfield (abstract units, drawn 1:1 as pixels)
    width: float = 600.0
    height: float = 1000.0
    title: str = "Dodge the Virus. Press SPACE to start."

    # Balls (viruses)
    ball_radius: float = 10.0
    ball_min_speed: float = 2.0
    ball_max_speed: float = 6.0
    initial_ball_count: int = 6
    spawn_interval: int = 5  # seconds between automatic spawns

    # Reflection planes
    vertical_plane: float = 180.0    # top/bottom walls
    horizontal_plane: float = 360.0  # left/right walls

    # Player
    player_radius: float = 20.0
    player_max_speed: float = 2.0
    player_approach_gain: float = 0.05

    # Frame pacing
    target_fps: int = field(default_factory=lambda: _env_int("DODGE_FPS", default=60))

    # Random source; None means unseeded
    seed: Optional[int] = field(default_factory=lambda: _env_int("DODGE_SEED"))

    log_level: str = field(default_factory=lambda: os.getenv("DODGE_LOG_LEVEL", "WARNING"))

    @property
    def ball_spawn_point(self) -> Vec2:
        """Center of the playfield."""
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def player_spawn_point(self) -> Vec2:
        """Centered horizontally, two thirds of the way down."""
        return Vec2(self.width / 2.0, 2.0 * self.height / 3.0)

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Create config from environment variables."""
        return cls()

    def make_rng(self) -> random.Random:
        """Build the random source used for ball headings and speeds."""
        return random.Random(self.seed)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.width <= 0 or self.height <= 0:
            errors.append("playfield width and height must be positive")
        if self.ball_radius <= 0:
            errors.append("ball_radius must be positive")
        if self.player_radius <= 0:
            errors.append("player_radius must be positive")
        if self.ball_min_speed < 0 or self.ball_max_speed < self.ball_min_speed:
            errors.append("ball speed range must satisfy 0 <= min <= max")
        if self.player_max_speed < 0:
            errors.append("player_max_speed must be non-negative")
        if self.spawn_interval <= 0:
            errors.append("spawn_interval must be positive")
        if self.initial_ball_count < 0:
            errors.append("initial_ball_count must be non-negative")
        if self.target_fps <= 0:
            errors.append("target_fps must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"unknown log level {self.log_level!r}")
        for name, point in (
            ("ball_spawn_point", self.ball_spawn_point),
            ("player_spawn_point", self.player_spawn_point),
        ):
            if not (0 <= point.x <= self.width and 0 <= point.y <= self.height):
                errors.append(f"{name} {point} lies outside the playfield")
        return errors

    def require_valid(self) -> "GameConfig":
        """Raise ConfigError listing every problem, or return self."""
        errors = self.validate()
        if errors:
            raise ConfigError("; ".join(errors))
        return self


# Singleton config instance
_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the global game configuration."""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
