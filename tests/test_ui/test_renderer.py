"""Tests for SceneRenderer."""

from dodge.core.colors import Colors
from dodge.game.session import START_MESSAGE
from dodge.game.state import FrameInput
from dodge.ui.renderer import SceneRenderer


class TestSceneRenderer:
    """Tests for frame composition."""

    def test_frame_is_bracketed(self, session, config, fake_window):
        SceneRenderer(config).render(fake_window, session)
        assert fake_window.calls[0] == ("begin",)
        assert fake_window.calls[1] == ("clear", Colors.BACKGROUND)
        assert fake_window.calls[-1] == ("end",)

    def test_draw_order(self, session, config, fake_window):
        """Spawn marker, then balls, then player."""
        SceneRenderer(config).render(fake_window, session)
        circles = fake_window.calls_of("circle")

        assert len(circles) == 1 + 6 + 1
        marker, *balls, player = circles
        assert marker == ("circle", config.ball_spawn_point, 20.0, Colors.SPAWN_AREA)
        assert all(c[3] == Colors.VIRUS for c in balls)
        assert player == ("circle", session.player.pos, 20.0, Colors.PLAYER)

    def test_status_and_score_text(self, session, config, fake_window):
        SceneRenderer(config).render(fake_window, session)
        texts = fake_window.calls_of("text")
        assert texts == [
            ("text", START_MESSAGE, 10, 10, 20, Colors.TEXT),
            ("text", "Score: 0", 470, 10, 20, Colors.TEXT),
        ]

    def test_running_has_empty_status(self, session, config, fake_window):
        session.tick(FrameInput(pointer=session.player.pos, start_pressed=True))
        SceneRenderer(config).render(fake_window, session)
        status = fake_window.calls_of("text")[0]
        assert status[1] == ""

    def test_grows_with_swarm(self, session, config, fake_window):
        session.swarm.spawn()
        SceneRenderer(config).render(fake_window, session)
        assert len(fake_window.calls_of("circle")) == 1 + 7 + 1
