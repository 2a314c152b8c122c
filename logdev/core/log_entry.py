"""
Log entry data structure

One resolved message, built once per emit call and rendered by each sink's
formatter.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import re

from logdev.core.log_color import LogColor
from logdev.core.log_level import LogLevel
from logdev.core.process_info import ProcessInfo

_NON_FILE_SAFE = re.compile(r"[^a-zA-Z0-9]")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(timestamp: datetime) -> str:
    """Render timestamp as ISO-8601 UTC with millisecond precision."""
    text = timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def file_safe_timestamp(timestamp: datetime) -> str:
    """ISO-8601 timestamp with every non-alphanumeric character removed."""
    return _NON_FILE_SAFE.sub("", iso_timestamp(timestamp))


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains the fully resolved message body and the time facts shared by
    the console and file renderings.
    """

    level: LogLevel
    message: str
    color: str = LogColor.BRIGHT_WHITE
    logger_name: str = ""
    timestamp: datetime = field(default_factory=utc_now)
    uptime: float = field(default_factory=lambda: ProcessInfo.current().uptime())

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def iso_timestamp(self) -> str:
        return iso_timestamp(self.timestamp)

    @property
    def uptime_text(self) -> str:
        """Process uptime in seconds with 7 decimal places."""
        return f"{self.uptime:.7f}"

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.iso_timestamp}][{self.level.tag}] {self.message}"
