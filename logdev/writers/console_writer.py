"""Console writer: errors to stderr, everything else to stdout"""

import sys
from typing import Optional, TextIO

from logdev.core.log_level import LogLevel


class ConsoleWriter:
    """Write formatted lines to the console."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            stdout: Output stream (default: sys.stdout at write time)
            stderr: Error stream for ERROR lines (default: sys.stderr at write time)
        """
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return sys.stdout if self._stdout is None else self._stdout

    @property
    def stderr(self) -> TextIO:
        return sys.stderr if self._stderr is None else self._stderr

    @staticmethod
    def is_interactive(stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> bool:
        """
        Check whether both console streams are attached to a terminal.

        Streams that cannot report it are assumed interactive.

        Returns:
            False if either stream reports it is not a TTY
        """
        for stream in (
            sys.stdout if stdout is None else stdout,
            sys.stderr if stderr is None else stderr,
        ):
            if stream is None:
                return False
            isatty = getattr(stream, "isatty", None)
            if isatty is None:
                continue
            try:
                if not isatty():
                    return False
            except ValueError:
                # Closed stream
                return False
        return True

    def write(self, line: str, level: LogLevel) -> None:
        """
        Write one line.

        Args:
            line: Formatted line, newline included
            level: Level of the line; ERROR goes to stderr
        """
        stream = self.stderr if level is LogLevel.ERROR else self.stdout
        stream.write(line)
        stream.flush()
