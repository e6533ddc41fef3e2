"""Scene rendering.

Draw order: background, spawn-area marker, viruses, player, then the
status and score text on top.
"""

from __future__ import annotations

from dodge.config import GameConfig
from dodge.core.colors import Colors
from dodge.game.session import GameSession
from dodge.ui.window import Window


TEXT_SIZE = 20
TEXT_MARGIN = 10
SCORE_OFFSET = 130  # score text starts this far from the right edge
SPAWN_MARKER_PADDING = 10.0


class SceneRenderer:
    """Draws a GameSession through a Window."""

    def __init__(self, config: GameConfig):
        self.config = config

    def render(self, window: Window, session: GameSession) -> None:
        """Render one complete frame."""
        window.begin_frame()
        window.clear(Colors.BACKGROUND)

        self._render_spawn_area(window)
        session.swarm.draw_all(window)
        session.player.draw(window)
        self._render_hud(window, session)

        window.end_frame()

    def _render_spawn_area(self, window: Window) -> None:
        """Mark where new viruses appear."""
        window.draw_circle(
            self.config.ball_spawn_point,
            self.config.ball_radius + SPAWN_MARKER_PADDING,
            Colors.SPAWN_AREA,
        )

    def _render_hud(self, window: Window, session: GameSession) -> None:
        window.draw_text(session.message, TEXT_MARGIN, TEXT_MARGIN, TEXT_SIZE, Colors.TEXT)
        window.draw_text(
            session.score_text,
            int(self.config.width) - SCORE_OFFSET,
            TEXT_MARGIN,
            TEXT_SIZE,
            Colors.TEXT,
        )
