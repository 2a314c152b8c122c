"""
Message body construction

Interpolates printf-style arguments into a message and, for trace entries,
replaces the text with the caller's stack.
"""

import os
import traceback
from typing import Any, List, Sequence

from logdev.core.log_entry import LogEntry
from logdev.core.log_level import LogLevel

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def interpolate(message: str, args: Sequence[Any]) -> str:
    """
    Interpolate printf-style arguments into message.

    Args:
        message: Format string (%s, %d, ...)
        args: Positional arguments; when empty the message is used verbatim

    Returns:
        Formatted text. Placeholders are filled in order and leftover
        arguments are appended, space separated.
    """
    if not args:
        return message

    args = list(args)
    for used in range(len(args), 0, -1):
        try:
            text = message % tuple(args[:used])
        except (TypeError, ValueError, KeyError):
            continue
        return " ".join([text] + [str(arg) for arg in args[used:]])

    # No prefix of the arguments fits the placeholders
    return " ".join([message] + [str(arg) for arg in args])


def _is_internal_frame(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def format_stack_trace(message: str) -> str:
    """
    Build a stack trace labelled with message.

    The first line is message; following lines are the frames leading to the
    emit call, outermost first. Frames inside this package are dropped.

    Args:
        message: Label for the trace

    Returns:
        Multi-line trace text
    """
    frames = [
        frame for frame in traceback.extract_stack()
        if not _is_internal_frame(frame.filename)
    ]

    lines: List[str] = [message]
    for frame_text in traceback.format_list(frames):
        lines.append(frame_text.rstrip("\n"))

    return "\n".join(lines)


def build_entry(
    level: LogLevel,
    color: str,
    message: str,
    args: Sequence[Any],
    logger_name: str = "",
) -> LogEntry:
    """
    Build the entry shared by all sinks of one emit call.

    Args:
        level: Message level
        color: Color of the message body in colored output
        message: Resolved, non-empty format string
        args: Interpolation arguments
        logger_name: Name of the emitting logger

    Returns:
        LogEntry stamped with the current time and uptime
    """
    body = interpolate(message, args)

    if level is LogLevel.TRACE:
        body = format_stack_trace(body)

    return LogEntry(level=level, message=body, color=color, logger_name=logger_name)
