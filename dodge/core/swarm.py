"""The swarm of viruses.

The swarm only ever grows during a session: balls are appended by the
spawn cadence or by a manual spawn, and the whole collection is replaced
on restart.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterator, List

from .entities import Ball
from .playfield import Playfield

if TYPE_CHECKING:
    from dodge.config import GameConfig
    from dodge.ui.window import Window


class Swarm:
    """Ordered collection of balls, in spawn order.

    Usage:
        swarm = Swarm(config, rng)
        swarm.reset(config.initial_ball_count)
        swarm.update_all(playfield)
        swarm.draw_all(window)
    """

    def __init__(self, config: GameConfig, rng: random.Random) -> None:
        self._config = config
        self._rng = rng
        self._balls: List[Ball] = []

    def spawn(self) -> Ball:
        """Append a freshly spawned ball and return it."""
        ball = Ball.spawn(self._config, self._rng)
        self._balls.append(ball)
        return ball

    def reset(self, count: int) -> None:
        """Replace the whole swarm with ``count`` fresh balls."""
        if count < 0:
            raise ValueError(f"ball count must be non-negative, got {count}")
        self._balls = [Ball.spawn(self._config, self._rng) for _ in range(count)]

    def update_all(self, playfield: Playfield) -> int:
        """Advance every ball one frame.

        Returns:
            Total number of wall reflections this frame
        """
        return sum(
            ball.update_position(
                playfield,
                vertical_plane=self._config.vertical_plane,
                horizontal_plane=self._config.horizontal_plane,
            )
            for ball in self._balls
        )

    def draw_all(self, window: Window) -> None:
        for ball in self._balls:
            ball.draw(window)

    @property
    def balls(self) -> List[Ball]:
        return self._balls

    def __iter__(self) -> Iterator[Ball]:
        return iter(self._balls)

    def __len__(self) -> int:
        return len(self._balls)

    def __bool__(self) -> bool:
        """Swarm is always truthy (even when empty)."""
        return True
