"""Game layer - session state machine."""

from dodge.game.state import FrameInput, GameState
from dodge.game.session import GAME_OVER_MESSAGE, START_MESSAGE, GameSession

__all__ = [
    "FrameInput",
    "GameState",
    "GameSession",
    "GAME_OVER_MESSAGE",
    "START_MESSAGE",
]
