"""Playfield geometry and boundary tests.

The playfield is a fixed rectangle with its origin at the top-left
corner. Entities are circles, so every boundary test takes a radius.
"""

from __future__ import annotations

from dataclasses import dataclass

from .vec2 import Vec2


# =============================================================================
# Playfield Dimensions
# =============================================================================

PLAYFIELD_WIDTH = 600.0
PLAYFIELD_HEIGHT = 1000.0


@dataclass(frozen=True)
class Playfield:
    """Fixed-size rectangular arena.

    Attributes:
        width: Extent along +X
        height: Extent along +Y (down the screen)
    """
    width: float = PLAYFIELD_WIDTH
    height: float = PLAYFIELD_HEIGHT

    def hits_side_wall(self, pos: Vec2, radius: float) -> bool:
        """Circle touches or crosses the left or right wall."""
        return pos.x - radius <= 0 or pos.x + radius >= self.width

    def hits_end_wall(self, pos: Vec2, radius: float) -> bool:
        """Circle touches or crosses the top or bottom wall."""
        return pos.y - radius <= 0 or pos.y + radius >= self.height

    def clamp(self, pos: Vec2, radius: float) -> Vec2:
        """Clamp a circle's center so the circle stays inside the playfield."""
        x = max(radius, min(self.width - radius, pos.x))
        y = max(radius, min(self.height - radius, pos.y))
        return Vec2(x, y)

    def describe_position(self, pos: Vec2) -> str:
        """Human-readable description of a playfield position."""
        lateral = "left" if pos.x < self.width / 3 else "right" if pos.x > 2 * self.width / 3 else "center"
        depth = "top" if pos.y < self.height / 3 else "bottom" if pos.y > 2 * self.height / 3 else "middle"
        return f"{depth} {lateral}"
