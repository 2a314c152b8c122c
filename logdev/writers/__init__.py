"""Writers module - Log output sinks"""

from logdev.writers.console_writer import ConsoleWriter
from logdev.writers.file_writer import FileWriter, SinkState

__all__ = ["ConsoleWriter", "FileWriter", "SinkState"]
