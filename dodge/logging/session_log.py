"""In-memory session log for accumulating game events."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from dodge.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)


@dataclass
class LogEntry:
    """Single entry in the session log."""

    timestamp: datetime
    frame: int
    session_second: int
    event_type: str  # EventType value
    description: str


@dataclass
class SessionResult:
    """Outcome of one finished session."""

    score: int
    balls: int
    ended_at_second: int


@dataclass
class SessionLog:
    """Records game events and mirrors them to the standard logger.

    Spawns are logged at DEBUG, everything else at INFO. Finished
    sessions are kept so a summary can be printed on exit.
    """

    entries: list[LogEntry] = field(default_factory=list)
    results: list[SessionResult] = field(default_factory=list)

    def attach(self, event_bus: EventBus) -> None:
        """Start recording every event emitted on the bus."""
        event_bus.subscribe_all(self.record)

    def record(self, event: Event) -> None:
        entry = LogEntry(
            timestamp=datetime.now(),
            frame=event.tick,
            session_second=event.time,
            event_type=event.type.value,
            description=event.description,
        )
        self.entries.append(entry)

        if event.type == EventType.GAME_OVER:
            self.results.append(SessionResult(
                score=event.data.get("score", 0),
                balls=event.data.get("balls", 0),
                ended_at_second=event.time,
            ))

        if event.type == EventType.BALL_SPAWNED:
            logger.debug(str(event))
        else:
            logger.info(str(event))

    @property
    def sessions_played(self) -> int:
        return len(self.results)

    @property
    def best_score(self) -> Optional[int]:
        if not self.results:
            return None
        return max(r.score for r in self.results)

    def summary(self) -> str:
        """One-line summary of finished sessions."""
        if not self.results:
            return "No sessions finished"
        scores = ", ".join(str(r.score) for r in self.results)
        return (
            f"{self.sessions_played} session(s) played, "
            f"best score {self.best_score} (scores: {scores})"
        )
