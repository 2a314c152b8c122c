"""
Plain text formatter

Used for file output and for console output without colors.
"""

from logdev.core.log_entry import LogEntry
from logdev.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries without color markup.

    Long form:  [timestamp][uptime][prefix...][LEVEL] message
    Short form: [timestamp][prefix...][LEVEL] message
    """

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a plain line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted line ending in a newline
        """
        if self.cut_log_prefix:
            return "[%s]%s[%s] %s\n" % (
                entry.iso_timestamp,
                self._prefix(),
                entry.level.tag,
                entry.message,
            )

        return "[%s][%s]%s[%s] %s\n" % (
            entry.iso_timestamp,
            entry.uptime_text,
            self._prefix(),
            entry.level.tag,
            entry.message,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(cut_log_prefix={self.cut_log_prefix})"
