"""
Colored console formatter

Wraps the time segments and level tag in color markup and paints the whole
message body in the entry's color.
"""

from logdev.core.log_color import LogColor
from logdev.core.log_entry import LogEntry
from logdev.formatters.base_formatter import BaseFormatter
from logdev.formatters.prefix_builder import color_section, default_color_section


class ColorFormatter(BaseFormatter):
    """Format log entries with ANSI color markup."""

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a colored line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted line ending in a reset code and a newline
        """
        head = default_color_section(entry.iso_timestamp)
        if not self.cut_log_prefix:
            head += default_color_section(entry.uptime_text)

        return "%s%s%s %s%s%s\n" % (
            head,
            self._prefix(),
            color_section(entry.color, entry.level.tag),
            entry.color,
            entry.message,
            LogColor.RESET,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"ColorFormatter(cut_log_prefix={self.cut_log_prefix})"
