"""League event logging."""

from swish.logging.event_log import EventLog, LogEntry

__all__ = ["EventLog", "LogEntry"]
