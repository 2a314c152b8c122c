"""
Log level enumeration

Levels are totally ordered by verbosity. A logger configured at a level
emits every message whose level ranks at or below it.
"""

from enum import Enum
from typing import List

from logdev.core.exceptions import InvalidLogLevelError


class LogLevel(str, Enum):
    """
    Log level enumeration.

    Declaration order is the verbosity rank: NONE suppresses everything,
    TRACE allows everything.
    """

    NONE = "none"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    def __str__(self) -> str:
        """String representation of log level."""
        return self.value

    @property
    def rank(self) -> int:
        """Position of this level in the verbosity order."""
        return LEVEL_ORDER.index(self)

    @property
    def tag(self) -> str:
        """Uppercased name used in the bracketed level segment."""
        return self.value.upper()

    def allows(self, candidate: "LogLevel") -> bool:
        """
        Check whether a logger configured at this level emits candidate.

        Args:
            candidate: Level of the message about to be emitted

        Returns:
            True if candidate ranks at or below this level
        """
        return self.rank >= candidate.rank

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level value (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            InvalidLogLevelError: If level_str is not a known level
        """
        normalized = level_str.lower()
        for level in cls:
            if level.value == normalized:
                return level
        raise InvalidLogLevelError(
            f"Invalid log level: {normalized}. "
            f"Valid log levels are: {', '.join(level.value for level in cls)}"
        )


LEVEL_ORDER: List[LogLevel] = list(LogLevel)
