"""Game state enumeration and per-frame input snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dodge.core.vec2 import Vec2


class GameState(str, Enum):
    """Phase of the game. Exactly one is active at a time."""
    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"


# Legal transitions; anything else is a programming error
TRANSITIONS: dict[GameState, frozenset[GameState]] = {
    GameState.PAUSED: frozenset({GameState.RUNNING}),
    GameState.RUNNING: frozenset({GameState.GAME_OVER}),
    GameState.GAME_OVER: frozenset({GameState.RUNNING}),
}


@dataclass(frozen=True)
class FrameInput:
    """Everything the state machine reads from the player in one frame.

    Attributes:
        pointer: Mouse position in playfield coordinates
        start_pressed: Start key went down this frame
        spawn_pressed: Primary mouse button went down this frame
    """
    pointer: Vec2 = field(default_factory=Vec2.zero)
    start_pressed: bool = False
    spawn_pressed: bool = False
