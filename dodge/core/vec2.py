"""2D Vector implementation for the playfield.

All positions in the game use Vec2. Units are abstract playfield units,
which the pygame window maps 1:1 onto pixels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system (screen coordinates):
        Origin (0, 0) = Top-left corner of the playfield
        +X = Right
        +Y = Down
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def length(self) -> float:
        """Magnitude of vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        """Squared magnitude (avoids sqrt)."""
        return self.x * self.x + self.y * self.y

    # =========================================================================
    # Utility
    # =========================================================================

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def as_int_tuple(self) -> tuple[int, int]:
        """Rounded pixel coordinates for drawing."""
        return (round(self.x), round(self.y))

    def __repr__(self) -> str:
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, values: tuple[float, float]) -> Vec2:
        """Create vector from an (x, y) pair, e.g. a mouse position."""
        x, y = values
        return cls(float(x), float(y))
