"""
Logger configuration management

Defaults for the registry's well-known loggers and the log file location.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from logdev.core.exceptions import InvalidNameError
from logdev.core.log_level import LogLevel
from logdev.core.logger_constants import INVALID_LOGGER_NAME, NAME_PATTERN
from logdev.environment import Environment


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Injected into a LoggerRegistry; every logger created against that
    registry reads its settings from here.
    """

    # Registry maintenance
    persist_local_logs: bool = False

    # Default logger settings
    logger_name: str = "singleton-logger"
    log_level: Union[LogLevel, str] = LogLevel.INFO
    log_to_file_system: bool = True
    log_to_console: bool = True
    cut_log_prefix: bool = True
    log_with_color: bool = True

    # File settings
    log_directory: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.logger_name, str) or not NAME_PATTERN.fullmatch(self.logger_name):
            raise InvalidNameError(INVALID_LOGGER_NAME)

        if not isinstance(self.log_level, LogLevel):
            self.log_level = LogLevel.from_string(str(self.log_level))

        # Convert log_directory to Path if it's a string
        if isinstance(self.log_directory, str):
            self.log_directory = Path(self.log_directory)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            log_level=LogLevel.TRACE,
            log_to_file_system=False,
            cut_log_prefix=False,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            persist_local_logs=True,
            log_level=LogLevel.WARNING,
            log_with_color=False,
        )

    @classmethod
    def from_environment(cls, environment: Optional[Environment] = None) -> "LoggerConfig":
        """
        Create configuration from environment variables.

        Args:
            environment: Variable reader (default: reads os.environ)

        Returns:
            Configuration with every unset variable at its default
        """
        env = environment or Environment()
        defaults = cls()

        log_directory = env.get_or_default("DEFAULT_LOG_FILE_DIRECTORY", "")

        return cls(
            persist_local_logs=env.get_or_default("PERSIST_LOCAL_LOGS", defaults.persist_local_logs),
            logger_name=env.get_or_default("DEFAULT_LOGGER_NAME", defaults.logger_name),
            log_level=env.get_or_default("DEFAULT_LOG_LEVEL", defaults.log_level),
            log_to_file_system=env.get_or_default(
                "DEFAULT_LOGGER_LOG_TO_FILE_SYSTEM", defaults.log_to_file_system
            ),
            log_to_console=env.get_or_default("DEFAULT_LOGGER_LOG_TO_CONSOLE", defaults.log_to_console),
            cut_log_prefix=env.get_or_default("DEFAULT_LOGGER_CUT_PREFIX", defaults.cut_log_prefix),
            log_with_color=env.get_or_default("DEFAULT_LOGGER_LOG_WITH_COLOR", defaults.log_with_color),
            log_directory=log_directory or None,
        )
