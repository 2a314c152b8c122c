"""Shared fixtures"""

import io

import pytest

from logdev import LoggerConfig, LoggerRegistry
from logdev.writers.console_writer import ConsoleWriter


class TtyStream(io.StringIO):
    """In-memory stream that reports itself as a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"


@pytest.fixture
def config(log_dir):
    return LoggerConfig(log_directory=log_dir, log_to_file_system=False, log_to_console=False)


@pytest.fixture
def registry(config):
    return LoggerRegistry(config)


@pytest.fixture
def console():
    return ConsoleWriter(stdout=TtyStream(), stderr=TtyStream())
