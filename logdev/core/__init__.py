"""
Core module for logdev

This module contains the fundamental classes:
- Logger: Named, leveled console and file logger
- LoggerRegistry: Unique-name registry and bulk maintenance
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from logdev.core.logger import Logger
from logdev.core.logger_registry import LoggerRegistry
from logdev.core.log_entry import LogEntry
from logdev.core.log_level import LogLevel
from logdev.core.logger_config import LoggerConfig

__all__ = ["Logger", "LoggerRegistry", "LogEntry", "LogLevel", "LoggerConfig"]
