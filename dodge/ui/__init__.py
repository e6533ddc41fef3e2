"""UI layer - window collaborator, rendering and the frame loop."""

from dodge.ui.window import PRIMARY_BUTTON, START_KEY, PygameWindow, Window
from dodge.ui.renderer import SceneRenderer
from dodge.ui.loop import read_input, run

__all__ = [
    "PRIMARY_BUTTON",
    "START_KEY",
    "PygameWindow",
    "Window",
    "SceneRenderer",
    "read_input",
    "run",
]
