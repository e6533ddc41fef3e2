"""Window collaborator.

The game only talks to the screen and input devices through the
``Window`` protocol. ``PygameWindow`` is the real implementation; tests
use an in-memory fake.
"""

from __future__ import annotations

import logging
from typing import Protocol

import pygame

from dodge.core.colors import Color
from dodge.core.vec2 import Vec2

logger = logging.getLogger(__name__)


START_KEY = "space"
PRIMARY_BUTTON = 1  # left mouse button


class Window(Protocol):
    """What the frame loop and renderer need from a graphics library."""

    def should_close(self) -> bool: ...

    def mouse_position(self) -> Vec2: ...

    def is_key_pressed(self, key: str) -> bool: ...

    def is_mouse_button_pressed(self, button: int) -> bool: ...

    def begin_frame(self) -> None: ...

    def end_frame(self) -> None: ...

    def clear(self, color: Color) -> None: ...

    def draw_circle(self, pos: Vec2, radius: float, color: Color) -> None: ...

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None: ...

    def close(self) -> None: ...


class PygameWindow:
    """Window backed by pygame.

    Key and button presses are edge-triggered: the event queue is drained
    once per frame in ``should_close`` and only presses that arrived since
    the previous frame are reported.
    """

    def __init__(self, width: float, height: float, title: str, fps: int = 60):
        pygame.init()
        pygame.display.set_caption(title)

        self.screen = pygame.display.set_mode((int(width), int(height)))
        self.clock = pygame.time.Clock()
        self.fps = fps

        self._fonts: dict[int, pygame.font.Font] = {}
        self._keys_down: set[int] = set()
        self._buttons_down: set[int] = set()
        self._close_requested = False
        logger.info(f"Opened {int(width)}x{int(height)} window at {fps} fps")

    def should_close(self) -> bool:
        """Pump the event queue and report whether the window was closed."""
        self._keys_down.clear()
        self._buttons_down.clear()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._close_requested = True
                self._keys_down.add(event.key)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._buttons_down.add(event.button)

        return self._close_requested

    def mouse_position(self) -> Vec2:
        return Vec2.from_tuple(pygame.mouse.get_pos())

    def is_key_pressed(self, key: str) -> bool:
        return pygame.key.key_code(key) in self._keys_down

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._buttons_down

    def begin_frame(self) -> None:
        # pygame draws straight onto the display surface
        pass

    def end_frame(self) -> None:
        pygame.display.flip()
        self.clock.tick(self.fps)

    def clear(self, color: Color) -> None:
        self.screen.fill(color)

    def draw_circle(self, pos: Vec2, radius: float, color: Color) -> None:
        pygame.draw.circle(self.screen, color, pos.as_int_tuple(), round(radius))

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> None:
        if not text:
            return
        surf = self._font(size).render(text, True, color)
        self.screen.blit(surf, (x, y))

    def close(self) -> None:
        pygame.quit()
        logger.info("Window closed")

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont('Monaco', size)
        return self._fonts[size]
