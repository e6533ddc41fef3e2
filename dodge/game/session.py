"""Game session - the paused / running / game-over state machine.

One GameSession owns everything that changes during play: the swarm,
the player, the score counters and the status message. The frame loop
feeds it one FrameInput per frame through ``tick``.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from dodge.config import GameConfig
from dodge.core.clock import SessionClock
from dodge.core.entities import Ball, Player
from dodge.core.events import EventBus, EventType
from dodge.core.playfield import Playfield
from dodge.core.swarm import Swarm
from dodge.game.state import TRANSITIONS, FrameInput, GameState

logger = logging.getLogger(__name__)


START_MESSAGE = "Dodge the Virus. Press SPACE to start"
GAME_OVER_MESSAGE = "GAME OVER. Press SPACE to play again."


class GameSession:
    """State machine and entity owner for one game window.

    Args:
        config: Game configuration
        clock: Session clock (inject a fake time source in tests)
        rng: Random source for ball spawns; built from the config if omitted
        event_bus: Bus that receives session events
    """

    def __init__(
        self,
        config: GameConfig,
        clock: Optional[SessionClock] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config
        self.clock = clock or SessionClock()
        self.rng = rng or config.make_rng()
        self.event_bus = event_bus or EventBus()
        self.playfield = Playfield(config.width, config.height)

        self.state = GameState.PAUSED
        self.message = START_MESSAGE

        self.swarm = Swarm(config, self.rng)
        self.swarm.reset(config.initial_ball_count)
        self.player = Player.spawn(config)

        self.score = 0
        self.extra_points = 0
        self.seconds_at_last_spawn = 0

    # =========================================================================
    # Frame Update
    # =========================================================================

    def tick(self, frame_input: FrameInput) -> GameState:
        """Advance the game by one frame.

        The clock is read exactly once per tick.

        Returns:
            The state after this tick
        """
        now = self.clock.now_seconds()
        self.clock.tick()

        if self.state == GameState.PAUSED:
            if frame_input.start_pressed:
                self.start(now)
        elif self.state == GameState.GAME_OVER:
            self.message = GAME_OVER_MESSAGE
            if frame_input.start_pressed:
                self.restart(now)
        else:
            self._tick_running(frame_input, now)

        return self.state

    def _tick_running(self, frame_input: FrameInput, now: int) -> None:
        if self.player.has_collided(self.swarm):
            self._game_over(now)
            return

        seconds = self.clock.elapsed(now)
        self.score = seconds + self.extra_points

        if self._spawn_due(seconds):
            self.seconds_at_last_spawn = seconds
            self.spawn_ball(now, reason="cadence")

        if frame_input.spawn_pressed:
            self.spawn_ball(now, reason="manual")

        self.swarm.update_all(self.playfield)
        self.player.update_position(frame_input.pointer, self.playfield)

    def _spawn_due(self, seconds: int) -> bool:
        """A new multiple of the spawn interval was reached."""
        interval = self.config.spawn_interval
        return (
            seconds > 0
            and seconds % interval == 0
            and seconds != self.seconds_at_last_spawn
        )

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self, now: Optional[int] = None) -> None:
        """Paused -> Running."""
        self._require_state(GameState.PAUSED, GameState.RUNNING)
        now = self._resolve_now(now)
        self._enter_state(GameState.RUNNING, now)
        start_time = self.clock.start(now)
        self.score = 0
        self.message = ""
        self.event_bus.emit_simple(
            EventType.SESSION_START,
            tick=self.clock.frame_count,
            time=0,
            description="session started",
            start_time=start_time,
            balls=len(self.swarm),
        )

    def restart(self, now: Optional[int] = None) -> None:
        """GameOver -> Running with a full reset."""
        self._require_state(GameState.GAME_OVER, GameState.RUNNING)
        now = self._resolve_now(now)
        final_score = self.score
        self._enter_state(GameState.RUNNING, now)

        self.swarm.reset(self.config.initial_ball_count)
        self.player = Player.spawn(self.config)
        self.score = 0
        self.extra_points = 0
        self.seconds_at_last_spawn = 0
        self.message = ""
        start_time = self.clock.start(now)

        self.event_bus.emit_simple(
            EventType.RESTART,
            tick=self.clock.frame_count,
            time=0,
            description=f"new session after scoring {final_score}",
            start_time=start_time,
            previous_score=final_score,
        )

    def _game_over(self, now: int) -> None:
        """Running -> GameOver. Entities freeze where they are."""
        seconds = self.clock.elapsed(now)
        where = self.playfield.describe_position(self.player.pos)
        self.event_bus.emit_simple(
            EventType.COLLISION,
            tick=self.clock.frame_count,
            time=seconds,
            description=f"player hit at {self.player.pos} ({where})",
            position=self.player.pos.as_tuple(),
        )
        self._enter_state(GameState.GAME_OVER, now)
        self.message = GAME_OVER_MESSAGE
        self.event_bus.emit_simple(
            EventType.GAME_OVER,
            tick=self.clock.frame_count,
            time=seconds,
            description=f"final score {self.score}",
            score=self.score,
            balls=len(self.swarm),
        )

    def _require_state(self, expected: GameState, new_state: GameState) -> None:
        if self.state != expected or new_state not in TRANSITIONS[self.state]:
            raise ValueError(
                f"cannot go from {self.state.value} to {new_state.value}"
            )

    def _enter_state(self, new_state: GameState, now: int) -> None:
        self._require_state(self.state, new_state)
        old_state = self.state
        self.state = new_state
        logger.debug(f"State {old_state.value} -> {new_state.value} at frame {self.clock.frame_count}")
        self.event_bus.emit_simple(
            EventType.STATE_CHANGE,
            tick=self.clock.frame_count,
            time=self.clock.elapsed(now),
            description=f"{old_state.value} -> {new_state.value}",
            old=old_state.value,
            new=new_state.value,
        )

    # =========================================================================
    # Spawning
    # =========================================================================

    def spawn_ball(self, now: Optional[int] = None, reason: str = "manual") -> Ball:
        """Add one ball to the swarm."""
        ball = self.swarm.spawn()
        seconds = self.clock.elapsed(self._resolve_now(now))
        self.event_bus.emit_simple(
            EventType.BALL_SPAWNED,
            tick=self.clock.frame_count,
            time=seconds,
            description=f"{reason} spawn, swarm size {len(self.swarm)}",
            reason=reason,
            count=len(self.swarm),
            angle=round(ball.direction.angle, 2),
            speed=round(ball.direction.speed, 2),
        )
        return ball

    def _resolve_now(self, now: Optional[int]) -> int:
        return self.clock.now_seconds() if now is None else now

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def frame(self) -> int:
        """Frames ticked so far."""
        return self.clock.frame_count

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"

    def __repr__(self) -> str:
        return (
            f"GameSession(state={self.state.value}, score={self.score}, "
            f"balls={len(self.swarm)})"
        )
