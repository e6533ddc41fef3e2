"""Event system for game state changes.

Events are emitted by the game session and can be subscribed to by the
session log or by tests.
"""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class EventType(str, Enum):
    """Types of events that can occur during a game."""

    SESSION_START = "session_start"
    BALL_SPAWNED = "ball_spawned"
    COLLISION = "collision"
    GAME_OVER = "game_over"
    RESTART = "restart"
    STATE_CHANGE = "state_change"


@dataclass
class Event:
    """An event that occurred during a game.

    Attributes:
        type: The type of event
        tick: Frame the event occurred on
        time: Session second the event occurred at
        data: Additional event-specific data
        description: Human-readable description
    """
    type: EventType
    tick: int
    time: int
    data: dict[str, Any] = field(default_factory=dict)
    description: str = ""

    def __str__(self) -> str:
        """Readable event string for logging."""
        parts = [f"[{self.time}s]", f"{self.type.value}"]

        if self.description:
            parts.append(f"- {self.description}")

        return " ".join(parts)


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """Pub/sub event bus for game events.

    Only the most recent ``max_history`` events are kept; pass 0 when a
    subscriber already keeps its own record.

    Usage:
        bus = EventBus()

        bus.subscribe(EventType.GAME_OVER, my_handler)
        bus.subscribe_all(my_logger)

        bus.emit(Event(type=EventType.GAME_OVER, tick=0, time=0))
    """

    def __init__(self, max_history: int = 1000) -> None:
        self._handlers: dict[EventType, list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []
        self._history: deque[Event] = deque(maxlen=max_history)

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to a specific event type."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe to all events."""
        self._global_handlers.append(handler)

    def emit(self, event: Event) -> None:
        """Emit an event to all subscribers."""
        self._history.append(event)

        for handler in self._handlers[event.type]:
            handler(event)

        for handler in self._global_handlers:
            handler(event)

    def emit_simple(
        self,
        event_type: EventType,
        tick: int,
        time: int,
        description: str = "",
        **data: Any,
    ) -> Event:
        """Convenience method to emit an event with less boilerplate."""
        event = Event(
            type=event_type,
            tick=tick,
            time=time,
            description=description,
            data=data,
        )
        self.emit(event)
        return event

    @property
    def history(self) -> list[Event]:
        """Recent events, oldest first."""
        return list(self._history)

    def get_events_by_type(self, event_type: EventType) -> list[Event]:
        """Get all events of a specific type from history."""
        return [e for e in self._history if e.type == event_type]

    def __len__(self) -> int:
        return len(self._history)

    def __bool__(self) -> bool:
        """EventBus is always truthy (even with empty history)."""
        return True
