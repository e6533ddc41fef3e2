"""Session logging and output."""

from dodge.logging.session_log import LogEntry, SessionLog, SessionResult

__all__ = ["LogEntry", "SessionLog", "SessionResult"]
