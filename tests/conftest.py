"""Shared pytest fixtures for Dodge tests."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from dodge.config import GameConfig, reset_config
from dodge.core.clock import SessionClock
from dodge.core.events import EventBus
from dodge.core.playfield import Playfield
from dodge.core.vec2 import Vec2
from dodge.game.session import GameSession
from dodge.game.state import FrameInput


# =============================================================================
# Fakes
# =============================================================================


class FakeTime:
    """Settable time source, counts how often it is read."""

    def __init__(self, now: float = 1000.0):
        self.now = now
        self.reads = 0

    def __call__(self) -> float:
        self.reads += 1
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeWindow:
    """In-memory Window that records draw calls.

    Args:
        frames: Number of frames before should_close() returns True
        pointer: Mouse position reported every frame
        start_frames: Frame indices on which SPACE is pressed
        click_frames: Frame indices on which the left button is pressed
    """

    def __init__(self, frames=3, pointer=Vec2(300, 100), start_frames=(), click_frames=()):
        self.frames = frames
        self.pointer = pointer
        self.start_frames = set(start_frames)
        self.click_frames = set(click_frames)
        self.frame = -1
        self.calls = []
        self.closed = False

    def should_close(self):
        self.frame += 1
        return self.frame >= self.frames

    def mouse_position(self):
        return self.pointer

    def is_key_pressed(self, key):
        return key == "space" and self.frame in self.start_frames

    def is_mouse_button_pressed(self, button):
        return button == 1 and self.frame in self.click_frames

    def begin_frame(self):
        self.calls.append(("begin",))

    def end_frame(self):
        self.calls.append(("end",))

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_circle(self, pos, radius, color):
        self.calls.append(("circle", pos, radius, color))

    def draw_text(self, text, x, y, size, color):
        self.calls.append(("text", text, x, y, size, color))

    def close(self):
        self.closed = True

    def calls_of(self, kind):
        return [c for c in self.calls if c[0] == kind]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DODGE_* variables from the outer shell out of the tests."""
    for name in ("DODGE_SEED", "DODGE_FPS", "DODGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> GameConfig:
    """Default configuration with a fixed seed."""
    return GameConfig(seed=1234)


@pytest.fixture
def playfield(config) -> Playfield:
    return Playfield(config.width, config.height)


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def session(config, fake_time, event_bus) -> GameSession:
    """A paused session driven by the fake clock."""
    return GameSession(config, clock=SessionClock(source=fake_time), event_bus=event_bus)


@pytest.fixture
def running_session(session) -> GameSession:
    """A session that has just been started."""
    session.tick(FrameInput(pointer=session.player.pos, start_pressed=True))
    return session


@pytest.fixture
def make_window():
    """Factory for scripted fake windows."""
    return FakeWindow


@pytest.fixture
def fake_window() -> FakeWindow:
    return FakeWindow()
