"""
Base formatter interface

A formatter renders a LogEntry into one newline-terminated log line.
"""

from abc import ABC, abstractmethod
from typing import Callable

from logdev.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log line formatters.

    Formatters are bound to one logger: they pull that logger's metadata
    prefix through a callable on every format so a cached prefix is reused.
    """

    def __init__(self, prefix: Callable[[], str], cut_log_prefix: bool = True):
        """
        Initialize formatter.

        Args:
            prefix: Returns the logger's metadata prefix
            cut_log_prefix: Omit the uptime segment (short form)
        """
        self._prefix = prefix
        self.cut_log_prefix = cut_log_prefix

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a line.

        Args:
            entry: The log entry to format

        Returns:
            Formatted line, including the trailing newline
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
