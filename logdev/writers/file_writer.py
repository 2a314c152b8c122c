"""
File writer

Owns the per-logger log file: derives the file name, creates the log
directory, opens the append stream and tears it down. Any I/O failure moves
the writer to DISABLED and is reported through the owning logger instead of
being raised.
"""

from enum import Enum
from pathlib import Path
from typing import IO, Any, Callable, Optional

from logdev.core.log_entry import file_safe_timestamp, utc_now
from logdev.core.logger_constants import (
    FILE_STREAM_ERROR,
    FILE_STREAM_ERROR_NOT_PROVIDED,
    FILE_STREAM_ERROR_REASONS,
    FILE_STREAM_ERROR_UNKNOWN_REASON,
    LOG_DIRECTORY_PERMISSION_DENIED,
    LOG_DIRECTORY_UNKNOWN_ERROR,
    UNABLE_TO_WRITE_FILE_STREAM,
    describe_error,
)
from logdev.core.process_info import ProcessInfo


class SinkState(Enum):
    """File sink lifecycle state."""
    NO_SINK = "no_sink"
    SINK_OPEN = "sink_open"
    DISABLED = "disabled"


class FileWriter:
    """
    Append-mode log file for one logger.

    Thread Safety:
        Not locked itself. The owning Logger serializes every call.
    """

    def __init__(
        self,
        name: Callable[[], str],
        directory: Callable[[], Path],
        on_disabled: Callable[..., Any],
        encoding: str = "utf-8",
        opener: Callable[..., IO[str]] = open,
    ):
        """
        Initialize file writer.

        Args:
            name: Returns the owning logger's current name
            directory: Returns the base log directory
            on_disabled: Called with a printf-style warning and its arguments
                         after a failure disabled the writer
            encoding: File encoding (default: 'utf-8')
            opener: Function opening the stream, called as opener(path, 'a', encoding=...)
        """
        self._name = name
        self._directory = directory
        self._on_disabled = on_disabled
        self.encoding = encoding
        self._opener = opener

        self._state = SinkState.NO_SINK
        self._file: Optional[IO[str]] = None
        self._file_name: Optional[str] = None
        self._fully_qualified_log_file_name: Optional[Path] = None

    @property
    def state(self) -> SinkState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @property
    def fully_qualified_log_file_name(self) -> Optional[Path]:
        return self._fully_qualified_log_file_name

    def _create_file_name(self) -> bool:
        """Derive the file path and make sure its directory exists."""
        info = ProcessInfo.current()

        if self._file_name is None:
            self._file_name = "log_%s_%s_%s_%s.log" % (
                self._name(),
                info.runtime_tag,
                file_safe_timestamp(utc_now()),
                format(info.process_id, "X"),
            )

        directory = self._directory()
        if self._fully_qualified_log_file_name is None:
            self._fully_qualified_log_file_name = directory / self._file_name

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.disable(LOG_DIRECTORY_PERMISSION_DENIED)
            return False
        except Exception as error:
            self.disable(LOG_DIRECTORY_UNKNOWN_ERROR, describe_error(error))
            return False

        return True

    def _create_file_stream(self) -> bool:
        try:
            self._file = self._opener(
                self._fully_qualified_log_file_name, "a", encoding=self.encoding
            )
        except OSError as error:
            self._on_stream_error(error)
            return False

        self._state = SinkState.SINK_OPEN
        return True

    def open(self) -> bool:
        """
        Open the log file if it is not open yet.

        Returns:
            True if a stream is open afterwards
        """
        if self._file is not None:
            return True
        return self._create_file_name() and self._create_file_stream()

    def write(self, line: str) -> None:
        """
        Append one line, opening the file on first use.

        Args:
            line: Formatted line, newline included
        """
        if self._file is None and not self.open():
            return

        try:
            self._file.write(line)
        except Exception as error:
            self.disable(UNABLE_TO_WRITE_FILE_STREAM, describe_error(error))
            return

        try:
            self._file.flush()
        except OSError as error:
            self._on_stream_error(error)

    def _on_stream_error(self, error: Optional[BaseException]) -> None:
        """Classify a stream-level I/O error and disable."""
        if error is None:
            self.disable(FILE_STREAM_ERROR_NOT_PROVIDED)
            return

        reason = FILE_STREAM_ERROR_REASONS.get(
            getattr(error, "errno", None), FILE_STREAM_ERROR_UNKNOWN_REASON
        )
        self.disable(FILE_STREAM_ERROR, reason)

    def _close_stream(self) -> Optional[OSError]:
        """Close the stream and forget the file name."""
        error = None
        if self._file is not None:
            stream, self._file = self._file, None
            try:
                stream.close()
            except OSError as exc:
                error = exc

        self._file_name = None
        self._fully_qualified_log_file_name = None
        return error

    def close(self) -> None:
        """Close the log file; the next open derives a new file name."""
        error = self._close_stream()
        self._state = SinkState.NO_SINK

        if error is not None:
            self._on_stream_error(error)

    def disable(self, message: Optional[str] = None, *args: Any) -> None:
        """
        Tear the stream down after a failure.

        Args:
            message: Warning to report through the owner (None: report nothing)
            *args: Warning interpolation arguments
        """
        # Best effort: the stream is already failing
        self._close_stream()
        self._state = SinkState.DISABLED

        if message is not None:
            self._on_disabled(message, *args)

    def __repr__(self) -> str:
        """String representation."""
        return f"FileWriter(state={self._state.value}, file_name={self._file_name!r})"
