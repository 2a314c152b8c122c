"""Validation patterns and message texts shared by the logger and registry"""

import errno
import re
from typing import Dict

NAME_PATTERN = re.compile(r"[a-zA-Z0-9_\-]{1,100}")

UNKNOWN_ERROR = "<unknown error>"

# Constructor validation
INVALID_CONSTRUCTOR_NAME = "The name parameter is required."
INVALID_CONSTRUCTOR_NAME_TYPE = "The name parameter must be a string."
INVALID_CONSTRUCTOR_NAME_EMPTY = "The name parameter cannot be empty."
INVALID_LOGGER_NAME = (
    "The name parameter must only contain alphanumeric characters, "
    "underscores and dashes, and be at most 100 characters long."
)
DUPLICATE_LOGGER_NAME = "Logger with name '{name}' already exists."
INVALID_CONSTRUCTOR_LOG_LEVEL = "The log_level parameter is required."
INVALID_CONSTRUCTOR_LOG_LEVEL_TYPE = "The log_level parameter must be a string or LogLevel."
INVALID_CONSTRUCTOR_FLAG = "The {flag} parameter is required."
INVALID_CONSTRUCTOR_FLAG_TYPE = "The {flag} parameter must be a boolean."

# Setter validation
SETTER_VALUE_CANNOT_BE_NONE = "The value cannot be None."
SETTER_VALUE_CANNOT_BE_EMPTY = "The value cannot be empty."
INVALID_SETTER_STRING_VALUE = "The value must be a string."
INVALID_SETTER_BOOLEAN_VALUE = "The value must be a boolean."
INVALID_SETTER_LOG_LEVEL_TYPE = "The value must be a string or LogLevel."

# Emit validation
INVALID_LOG_MESSAGE = "The message parameter is required and cannot be empty."
INVALID_LOG_MESSAGE_TYPE = "The message parameter must be a string or a function returning a string."

# File sink warnings
UNABLE_TO_WRITE_FILE_STREAM = 'Unable to write to file stream due to "%s". Disabling file stream.'
LOG_DIRECTORY_PERMISSION_DENIED = (
    "Unable to create log file directory. "
    "Please ensure that the current user has permission to create directories."
)
LOG_DIRECTORY_UNKNOWN_ERROR = "Unable to create log file directory. An unknown error has occurred '%s'."

FILE_STREAM_ERROR = "File system file write stream error callback invoked. %s"
FILE_STREAM_ERROR_NOT_PROVIDED = (
    "File system file write stream error callback invoked, but error not actually provided."
)
FILE_STREAM_ERROR_REASONS: Dict[int, str] = {
    errno.EACCES: "Permission denied.",
    errno.EISDIR: "File is a directory.",
    errno.EMFILE: "Too many open files.",
    errno.ENFILE: "File table overflow.",
    errno.ENOENT: "File not found.",
    errno.ENOSPC: "No space left on device.",
    errno.EPERM: "Operation not permitted.",
    errno.EROFS: "Read-only file system.",
}
FILE_STREAM_ERROR_UNKNOWN_REASON = "Unknown error."

# Registry maintenance
TRY_CLEAR_LOCAL_LOG = "Try clear local log files..."
CLEARING_LOCAL_LOG = "Clearing local log files..."
CLEAR_LOCAL_LOG_OVERRIDE = "Override flag set. Clearing local log files."
CLEAR_LOCAL_LOG_PERSISTED = (
    "Local log files will not be cleared because persist_local_logs is set to true."
)
TRY_CLEAR_ALL_LOGGERS = "Try clear all loggers..."
CLEAR_ALL_LOGGERS_ERROR = "Error clearing all loggers: %s"


def describe_error(error: object) -> str:
    """
    Render an error for a warning message.

    Args:
        error: Exception (or any other value) to render

    Returns:
        str(error), or a placeholder when it cannot be rendered
    """
    if error is None:
        return UNKNOWN_ERROR
    try:
        return str(error)
    except Exception:
        return UNKNOWN_ERROR
