"""Angle helpers and the Direction heading type.

Angles are in degrees and measured clockwise from the +Y axis, which
points down the screen:

    0   = down  (+Y)
    90  = right (+X)
    180 = up    (-Y)
    270 = left  (-X)

so ``direction_to_delta`` uses ``sin`` for x and ``cos`` for y.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vec2 import Vec2


FULL_TURN = 360.0


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = angle % FULL_TURN
    # -1e-18 % 360 rounds up to 360.0
    if wrapped >= FULL_TURN:
        wrapped -= FULL_TURN
    return wrapped


def heading_to(dx: float, dy: float) -> float:
    """Heading in degrees that points along the offset (dx, dy).

    Quadrant-aware arctangent matching the Direction convention. Each
    branch takes the arctangent of the ratio between the two absolute
    offsets; atan2 on absolute values gives the same result without a
    division, so a zero offset on either axis is safe.
    """
    if dx >= 0.0:
        if dy >= 0.0:
            return to_degrees(math.atan2(abs(dx), abs(dy)))
        return 90.0 + to_degrees(math.atan2(abs(dy), abs(dx)))
    if dy < 0.0:
        return 180.0 + to_degrees(math.atan2(abs(dx), abs(dy)))
    return 270.0 + to_degrees(math.atan2(abs(dy), abs(dx)))


@dataclass
class Direction:
    """Heading of an entity: angle in degrees plus scalar speed per frame.

    The angle is normalized into [0, 360) on construction and whenever
    it is changed through ``point``.
    """
    angle: float = 0.0
    speed: float = 0.0

    def __post_init__(self) -> None:
        self.angle = normalize_angle(self.angle)
        if self.speed < 0:
            raise ValueError(f"speed must be non-negative, got {self.speed}")

    def point(self, angle: float) -> None:
        """Turn to a new heading."""
        self.angle = normalize_angle(angle)

    def delta(self) -> Vec2:
        """Displacement for one frame of travel."""
        return direction_to_delta(self)


def direction_to_delta(direction: Direction) -> Vec2:
    """Per-frame displacement for a heading.

    Angle 0 gives (0, speed), i.e. straight down the screen.
    """
    radians = to_radians(direction.angle)
    return Vec2(
        math.sin(radians) * direction.speed,
        math.cos(radians) * direction.speed,
    )
