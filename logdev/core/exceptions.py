"""
Validation errors

Raised synchronously to callers for bad constructor, setter or emit
arguments. Sink I/O problems never surface through these.
"""


class LoggerValidationError(ValueError):
    """Base class for argument validation failures."""


class MissingValueError(LoggerValidationError):
    """A required value was None."""


class InvalidTypeError(LoggerValidationError, TypeError):
    """A value had the wrong type."""


class EmptyValueError(LoggerValidationError):
    """A string value was empty."""


class InvalidNameError(LoggerValidationError):
    """A logger name did not match the allowed pattern."""


class DuplicateLoggerError(LoggerValidationError):
    """A logger with the same name is already registered."""


class InvalidLogLevelError(LoggerValidationError):
    """A log level string is not a member of LogLevel."""
