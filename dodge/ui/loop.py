"""Frame loop driver.

Each iteration: poll input, advance the session by one tick, render.
"""

from __future__ import annotations

import logging
from typing import Optional

from dodge.game.session import GameSession
from dodge.game.state import FrameInput
from dodge.ui.renderer import SceneRenderer
from dodge.ui.window import PRIMARY_BUTTON, START_KEY, Window

logger = logging.getLogger(__name__)


def read_input(window: Window) -> FrameInput:
    """Snapshot this frame's input from the window."""
    return FrameInput(
        pointer=window.mouse_position(),
        start_pressed=window.is_key_pressed(START_KEY),
        spawn_pressed=window.is_mouse_button_pressed(PRIMARY_BUTTON),
    )


def run(
    window: Window,
    session: GameSession,
    renderer: Optional[SceneRenderer] = None,
    max_frames: Optional[int] = None,
) -> int:
    """Run until the window asks to close (or ``max_frames`` is reached).

    The window is closed on the way out, including when an error
    propagates.

    Returns:
        Number of frames run
    """
    renderer = renderer or SceneRenderer(session.config)
    frames = 0

    try:
        while not window.should_close():
            if max_frames is not None and frames >= max_frames:
                break
            session.tick(read_input(window))
            renderer.render(window, session)
            frames += 1
    finally:
        window.close()

    logger.info(f"Loop finished after {frames} frames ({session!r})")
    return frames
