"""The activity feed shown by the network dashboard."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterator


class EventType(Enum):
    DEBUG = "debug"
    INFO = "info"
    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"


class ProgressColor(Enum):
    YELLOW = "yellow"
    GREEN = "green"
    RED = "red"
    PURPLE = "purple"


def remote_rpc_host(url: str) -> str:
    """Return ``url`` without its query string."""
    return url.split("?", 1)[0]


def format_event_time(timestamp: datetime) -> str:
    """Format a timestamp as hours, minutes, seconds and milliseconds."""
    return f"{timestamp:%H:%M:%S}.{timestamp.microsecond // 1000:03d}"


@dataclass
class ActivityLog:
    """Events, newest first, and the message shown in the status bar."""

    events: deque[tuple[EventType, datetime, str]] = field(default_factory=deque)
    status_bar_message: str | None = None

    def __iter__(self) -> Iterator[tuple[EventType, datetime, str]]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)

    def record(
        self, event_type: EventType, message: str, timestamp: datetime | None = None
    ) -> None:
        """Add an event at the front; the timestamp defaults to the local time now."""
        when = datetime.now() if timestamp is None else timestamp
        self.events.appendleft((event_type, when, message))

    def apply_progress_update(self, color: ProgressColor, status: str, message: str) -> None:
        """Show a pending step in the status bar, or log a finished one."""
        if color is ProgressColor.YELLOW:
            self.status_bar_message = f"{status}: {message}"
            return
        self.status_bar_message = None
        event_type = EventType.FAILURE if color is ProgressColor.RED else EventType.INFO
        self.record(event_type, message)