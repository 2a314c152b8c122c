"""
Main Logger class - named, leveled console and file logger

Each Logger is registered under a unique name in a LoggerRegistry, gates
messages by level, writes to the console and appends to its own log file.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from logdev.core.exceptions import (
    EmptyValueError,
    InvalidNameError,
    InvalidTypeError,
    MissingValueError,
)
from logdev.core.log_color import LogColor
from logdev.core.log_level import LogLevel
from logdev.core.logger_constants import (
    INVALID_CONSTRUCTOR_FLAG,
    INVALID_CONSTRUCTOR_FLAG_TYPE,
    INVALID_CONSTRUCTOR_LOG_LEVEL,
    INVALID_CONSTRUCTOR_LOG_LEVEL_TYPE,
    INVALID_CONSTRUCTOR_NAME,
    INVALID_CONSTRUCTOR_NAME_EMPTY,
    INVALID_CONSTRUCTOR_NAME_TYPE,
    INVALID_LOG_MESSAGE,
    INVALID_LOG_MESSAGE_TYPE,
    INVALID_LOGGER_NAME,
    INVALID_SETTER_BOOLEAN_VALUE,
    INVALID_SETTER_LOG_LEVEL_TYPE,
    INVALID_SETTER_STRING_VALUE,
    NAME_PATTERN,
    SETTER_VALUE_CANNOT_BE_EMPTY,
    SETTER_VALUE_CANNOT_BE_NONE,
)
from logdev.core.process_info import ProcessInfo
from logdev.formatters.color_formatter import ColorFormatter
from logdev.formatters.message_builder import build_entry
from logdev.formatters.prefix_builder import build_prefix
from logdev.formatters.text_formatter import TextFormatter
from logdev.writers.console_writer import ConsoleWriter
from logdev.writers.file_writer import FileWriter, SinkState

if TYPE_CHECKING:
    from logdev.core.logger_registry import LoggerRegistry

Message = Union[str, Callable[[], str]]


def _validate_name(name: Any, missing: str, wrong_type: str, empty: str) -> str:
    if name is None:
        raise MissingValueError(missing)
    if not isinstance(name, str):
        raise InvalidTypeError(wrong_type)
    if len(name) == 0:
        raise EmptyValueError(empty)
    if not NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(INVALID_LOGGER_NAME)
    return name


def _validate_log_level(log_level: Any, missing: str, wrong_type: str) -> LogLevel:
    if log_level is None:
        raise MissingValueError(missing)
    if not isinstance(log_level, str):
        raise InvalidTypeError(wrong_type)
    return LogLevel.from_string(log_level)


def _validate_flag(value: Any, missing: str, wrong_type: str) -> bool:
    if value is None:
        raise MissingValueError(missing)
    if not isinstance(value, bool):
        raise InvalidTypeError(wrong_type)
    return value


def _resolve_message(message: Message) -> str:
    """Resolve a literal or supplier message into a non-empty string."""
    if message is None:
        raise MissingValueError(INVALID_LOG_MESSAGE)
    if callable(message):
        message = message()
    if not isinstance(message, str):
        raise InvalidTypeError(INVALID_LOG_MESSAGE_TYPE)
    if len(message) == 0:
        raise EmptyValueError(INVALID_LOG_MESSAGE)
    return message


class Logger:
    """
    Named logger with console and file output.

    Example:
        registry = LoggerRegistry(LoggerConfig(log_directory="logs"))
        logger = Logger("worker", LogLevel.DEBUG, registry=registry)
        logger.information("Started %d jobs", 4)
        logger.trace("Checkpoint")  # emits the caller's stack

    Thread Safety:
        Emit calls and property changes on one logger are serialized by a
        re-entrant lock, so a sink failure can report through the same
        logger while it is writing.
    """

    def __init__(
        self,
        name: str,
        log_level: Union[LogLevel, str] = LogLevel.INFO,
        log_to_file_system: bool = True,
        log_to_console: bool = True,
        cut_log_prefix: bool = True,
        log_with_color: bool = True,
        *,
        registry: Optional[LoggerRegistry] = None,
        console: Optional[ConsoleWriter] = None,
    ):
        """
        Create and register a logger.

        Args:
            name: Unique name, 1-100 of [A-Za-z0-9_-]
            log_level: Most verbose level emitted (case-insensitive string accepted)
            log_to_file_system: Append lines to a per-logger log file
            log_to_console: Write lines to stdout/stderr; forced off when
                            either stream is not a terminal
            cut_log_prefix: Use the short prefix and omit uptime (fixed for life)
            log_with_color: Color console lines
            registry: Registry to join (default: LoggerRegistry.default())
            console: Console writer (default: writes to sys.stdout/sys.stderr)

        Raises:
            LoggerValidationError: If any argument is invalid or the name is taken
        """
        if registry is None:
            from logdev.core.logger_registry import LoggerRegistry
            registry = LoggerRegistry.default()

        _validate_name(
            name,
            INVALID_CONSTRUCTOR_NAME,
            INVALID_CONSTRUCTOR_NAME_TYPE,
            INVALID_CONSTRUCTOR_NAME_EMPTY,
        )
        registry.ensure_available(name)

        log_level = _validate_log_level(
            log_level, INVALID_CONSTRUCTOR_LOG_LEVEL, INVALID_CONSTRUCTOR_LOG_LEVEL_TYPE
        )

        flags = {}
        for flag, value in (
            ("log_to_file_system", log_to_file_system),
            ("log_to_console", log_to_console),
            ("cut_log_prefix", cut_log_prefix),
            ("log_with_color", log_with_color),
        ):
            flags[flag] = _validate_flag(
                value,
                INVALID_CONSTRUCTOR_FLAG.format(flag=flag),
                INVALID_CONSTRUCTOR_FLAG_TYPE.format(flag=flag),
            )

        self._lock = threading.RLock()
        self._registry = registry
        self._name = name
        self._log_level = log_level
        self._log_to_file_system = flags["log_to_file_system"]
        self._cut_log_prefix = flags["cut_log_prefix"]
        self._log_with_color = flags["log_with_color"]

        self._console = console or ConsoleWriter()
        self._log_to_console = flags["log_to_console"] and ConsoleWriter.is_interactive(
            self._console.stdout, self._console.stderr
        )

        # Cached on first use; a later rename does not rebuild them
        self._cached_non_color_prefix: Optional[str] = None
        self._cached_color_prefix: Optional[str] = None

        self._text_formatter = TextFormatter(self._get_non_color_log_prefix, self._cut_log_prefix)
        self._color_formatter = ColorFormatter(self._get_color_log_prefix, self._cut_log_prefix)
        self._file_writer = FileWriter(
            name=lambda: self._name,
            directory=lambda: self._registry.log_directory,
            on_disabled=self._on_file_writer_disabled,
        )

        registry.register(self)

    # Prefixes

    def _get_non_color_log_prefix(self) -> str:
        if self._cached_non_color_prefix is None:
            self._cached_non_color_prefix = build_prefix(
                ProcessInfo.current(), self._name, self._cut_log_prefix, colored=False
            )
        return self._cached_non_color_prefix

    def _get_color_log_prefix(self) -> str:
        if self._cached_color_prefix is None:
            self._cached_color_prefix = build_prefix(
                ProcessInfo.current(), self._name, self._cut_log_prefix, colored=True
            )
        return self._cached_color_prefix

    # File sink

    def _on_file_writer_disabled(self, message: str, *args: Any) -> None:
        self._log_to_file_system = False
        self.warning(message, *args)

    def _open_file_stream(self) -> bool:
        with self._lock:
            return self._file_writer.open()

    def _close_file_stream(self) -> None:
        with self._lock:
            self._file_writer.close()

    def _disable_file_system(self) -> None:
        """Turn file output off without reporting (the caller reports)."""
        with self._lock:
            self._log_to_file_system = False
            self._file_writer.disable()

    @property
    def file_sink_state(self) -> SinkState:
        return self._file_writer.state

    # Emission

    def _log(self, log_level: LogLevel, color: str, message: Message, args: tuple) -> None:
        message = _resolve_message(message)

        if not self._log_level.allows(log_level):
            return

        with self._lock:
            if not self._log_to_console and not self._log_to_file_system:
                return

            entry = build_entry(log_level, color, message, args, logger_name=self._name)

            if self._log_to_console:
                formatter = self._color_formatter if self._log_with_color else self._text_formatter
                self._console.write(formatter.format(entry), log_level)

            if self._log_to_file_system:
                self._file_writer.write(self._text_formatter.format(entry))

    def log(self, message: Message, *args: Any) -> None:
        """Log an informational message (white)."""
        self._log(LogLevel.INFO, LogColor.BRIGHT_WHITE, message, args)

    def warning(self, message: Message, *args: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, LogColor.BRIGHT_YELLOW, message, args)

    def trace(self, message: Message, *args: Any) -> None:
        """
        Log the caller's stack trace labelled with message.

        The formatted message becomes the first line of the trace; the
        literal text alone is never emitted at this level.
        """
        self._log(LogLevel.TRACE, LogColor.BRIGHT_MAGENTA, message, args)

    def debug(self, message: Message, *args: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, LogColor.BRIGHT_MAGENTA, message, args)

    def information(self, message: Message, *args: Any) -> None:
        """Log an informational message (blue)."""
        self._log(LogLevel.INFO, LogColor.BRIGHT_BLUE, message, args)

    def error(self, message: Message, *args: Any) -> None:
        """Log an error message to stderr and the log file."""
        self._log(LogLevel.ERROR, LogColor.BRIGHT_RED, message, args)

    # Properties

    @property
    def registry(self) -> LoggerRegistry:
        return self._registry

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        _validate_name(
            value,
            SETTER_VALUE_CANNOT_BE_NONE,
            INVALID_SETTER_STRING_VALUE,
            SETTER_VALUE_CANNOT_BE_EMPTY,
        )
        with self._lock:
            self._registry.rename(self, value)
            self._name = value

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, value: Union[LogLevel, str]) -> None:
        self._log_level = _validate_log_level(
            value, SETTER_VALUE_CANNOT_BE_NONE, INVALID_SETTER_LOG_LEVEL_TYPE
        )

    @property
    def log_to_file_system(self) -> bool:
        return self._log_to_file_system

    @log_to_file_system.setter
    def log_to_file_system(self, value: bool) -> None:
        _validate_flag(value, SETTER_VALUE_CANNOT_BE_NONE, INVALID_SETTER_BOOLEAN_VALUE)

        with self._lock:
            if self._log_to_file_system == value:
                return

            self._log_to_file_system = value

            if value:
                self._file_writer.open()
            else:
                self._file_writer.close()

    @property
    def log_to_console(self) -> bool:
        return self._log_to_console

    @log_to_console.setter
    def log_to_console(self, value: bool) -> None:
        self._log_to_console = _validate_flag(
            value, SETTER_VALUE_CANNOT_BE_NONE, INVALID_SETTER_BOOLEAN_VALUE
        )

    @property
    def cut_log_prefix(self) -> bool:
        return self._cut_log_prefix

    @property
    def log_with_color(self) -> bool:
        return self._log_with_color

    @log_with_color.setter
    def log_with_color(self, value: bool) -> None:
        self._log_with_color = _validate_flag(
            value, SETTER_VALUE_CANNOT_BE_NONE, INVALID_SETTER_BOOLEAN_VALUE
        )

    @property
    def file_name(self) -> Optional[str]:
        return self._file_writer.file_name

    @property
    def fully_qualified_log_file_name(self) -> Optional[Path]:
        return self._file_writer.fully_qualified_log_file_name

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self._name!r}, log_level={self._log_level.value!r})"
