"""Core layer - geometry, entities and supporting types."""

from .vec2 import Vec2
from .geometry import (
    Direction,
    direction_to_delta,
    heading_to,
    normalize_angle,
    to_degrees,
    to_radians,
)
from .playfield import PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH, Playfield
from .colors import Color, Colors
from .entities import Ball, Player, HORIZONTAL_PLANE, VERTICAL_PLANE
from .swarm import Swarm
from .clock import SessionClock
from .events import Event, EventType, EventBus

__all__ = [
    "Vec2",
    "Direction",
    "direction_to_delta",
    "heading_to",
    "normalize_angle",
    "to_degrees",
    "to_radians",
    "PLAYFIELD_WIDTH",
    "PLAYFIELD_HEIGHT",
    "Playfield",
    "Color",
    "Colors",
    "Ball",
    "Player",
    "HORIZONTAL_PLANE",
    "VERTICAL_PLANE",
    "Swarm",
    "SessionClock",
    "Event",
    "EventType",
    "EventBus",
]
