"""Session clock.

Wraps an injectable time source and reports whole seconds, which is the
resolution scoring and spawn cadence work at.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional


TimeSource = Callable[[], float]


@dataclass
class SessionClock:
    """Tracks elapsed time of the current session.

    Attributes:
        source: Returns the current time in (fractional) seconds
        start_time: Whole-second timestamp the session started at
        frame_count: Number of frames ticked since the clock was created
    """
    source: TimeSource = time.monotonic
    start_time: Optional[int] = None
    frame_count: int = 0

    def now_seconds(self) -> int:
        """Current time from the source, in whole seconds."""
        return int(math.floor(self.source()))

    def start(self, now: Optional[int] = None) -> int:
        """Start (or restart) the session at ``now``.

        Returns:
            The recorded start time
        """
        self.start_time = self.now_seconds() if now is None else now
        return self.start_time

    def elapsed(self, now: int) -> int:
        """Whole seconds since the session started, 0 if not started."""
        if self.start_time is None:
            return 0
        return now - self.start_time

    def tick(self) -> int:
        """Count a frame.

        Returns:
            The new frame count
        """
        self.frame_count += 1
        return self.frame_count

    def __repr__(self) -> str:
        return f"SessionClock(start={self.start_time}, frame={self.frame_count})"
