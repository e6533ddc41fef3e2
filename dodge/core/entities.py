"""Core entities - Ball (virus) and Player.

Entities own their position and heading and know how to advance and
draw themselves. Drawing goes through the window collaborator, which
only needs a ``draw_circle(pos, radius, color)`` method.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from .colors import Color, Colors
from .geometry import Direction, heading_to
from .playfield import Playfield
from .vec2 import Vec2

if TYPE_CHECKING:
    from dodge.config import GameConfig
    from dodge.ui.window import Window


# =============================================================================
# Constants
# =============================================================================

BALL_RADIUS = 10.0
PLAYER_RADIUS = 20.0

# Mirror transforms applied as ``plane - angle``
VERTICAL_PLANE = 180.0    # bounce off top/bottom: flips the Y component
HORIZONTAL_PLANE = 360.0  # bounce off left/right: flips the X component


# =============================================================================
# Ball
# =============================================================================

@dataclass
class Ball:
    """A bouncing virus.

    Attributes:
        pos: Center position
        direction: Heading and per-frame speed
        radius: Collision/draw radius
        color: Draw color
    """
    pos: Vec2
    direction: Direction
    radius: float = BALL_RADIUS
    color: Color = Colors.VIRUS

    @classmethod
    def spawn(cls, config: GameConfig, rng: random.Random) -> Ball:
        """Create a ball at the spawn point with a random heading and speed."""
        direction = Direction(
            angle=rng.random() * 360.0,
            speed=rng.uniform(config.ball_min_speed, config.ball_max_speed),
        )
        return cls(
            pos=config.ball_spawn_point,
            direction=direction,
            radius=config.ball_radius,
        )

    def reflect(self, plane: float) -> None:
        """Mirror the heading: new angle = plane - angle."""
        self.direction.point(plane - self.direction.angle)

    def update_position(
        self,
        playfield: Playfield,
        vertical_plane: float = VERTICAL_PLANE,
        horizontal_plane: float = HORIZONTAL_PLANE,
    ) -> int:
        """Advance one frame and bounce off any wall touched.

        The position is not pulled back inside after a bounce, so a ball
        may sit slightly past a wall for one frame.

        Returns:
            Number of reflections applied (0, 1 or 2)
        """
        self.pos = self.pos + self.direction.delta()

        reflections = 0
        if playfield.hits_side_wall(self.pos, self.radius):
            self.reflect(horizontal_plane)
            reflections += 1
        if playfield.hits_end_wall(self.pos, self.radius):
            self.reflect(vertical_plane)
            reflections += 1
        return reflections

    def draw(self, window: Window) -> None:
        window.draw_circle(self.pos, self.radius, self.color)


# =============================================================================
# Player
# =============================================================================

@dataclass
class Player:
    """The pointer-driven player circle.

    The heading is recomputed every frame from the pointer offset; the
    player keeps no velocity history.
    """
    pos: Vec2
    direction: Direction = field(default_factory=Direction)
    radius: float = PLAYER_RADIUS
    color: Color = Colors.PLAYER
    max_speed: float = 2.0
    approach_gain: float = 0.05

    @classmethod
    def spawn(cls, config: GameConfig) -> Player:
        """Create a fresh, stationary player at the player spawn point."""
        return cls(
            pos=config.player_spawn_point,
            radius=config.player_radius,
            max_speed=config.player_max_speed,
            approach_gain=config.player_approach_gain,
        )

    def compute_aim(self, pointer: Vec2) -> tuple[float, float]:
        """Heading and distance from the player center to the pointer.

        Returns:
            (angle in degrees, distance)
        """
        offset = pointer - self.pos
        return heading_to(offset.x, offset.y), offset.length()

    def approach_speed(self, dist: float) -> float:
        """Speed toward a target ``dist`` away, proportional and capped."""
        if dist < self.radius:
            return 0.0
        return min((dist - self.radius) * self.approach_gain, self.max_speed)

    def update_position(self, pointer: Vec2, playfield: Playfield) -> None:
        """Move toward the pointer, staying fully inside the playfield."""
        angle, dist = self.compute_aim(pointer)
        self.direction.point(angle)
        self.direction.speed = self.approach_speed(dist)

        self.pos = playfield.clamp(self.pos + self.direction.delta(), self.radius)

    def overlaps(self, ball: Ball) -> bool:
        """Circle-circle overlap test."""
        reach = self.radius + ball.radius
        return (ball.pos - self.pos).length_squared() < reach * reach

    def has_collided(self, balls: Iterable[Ball]) -> bool:
        """True if any ball overlaps the player."""
        return any(self.overlaps(ball) for ball in balls)

    def draw(self, window: Window) -> None:
        window.draw_circle(self.pos, self.radius, self.color)
