"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

logdev - Process-local leveled logger with colorized console output,
per-process log files and a unique-name logger registry
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logdev.core.logger import Logger
from logdev.core.logger_registry import LoggerRegistry
from logdev.core.log_entry import LogEntry
from logdev.core.log_level import LogLevel
from logdev.core.log_color import LogColor
from logdev.core.logger_config import LoggerConfig
from logdev.core.exceptions import (
    LoggerValidationError,
    MissingValueError,
    InvalidTypeError,
    EmptyValueError,
    InvalidNameError,
    DuplicateLoggerError,
    InvalidLogLevelError,
)

# Import submodules (not all classes by default)
from logdev import environment
from logdev import formatters
from logdev import writers

__all__ = [
    "Logger",
    "LoggerRegistry",
    "LogEntry",
    "LogLevel",
    "LogColor",
    "LoggerConfig",
    "LoggerValidationError",
    "MissingValueError",
    "InvalidTypeError",
    "EmptyValueError",
    "InvalidNameError",
    "DuplicateLoggerError",
    "InvalidLogLevelError",
    "environment",
    "formatters",
    "writers",
]
