"""
Logger registry

Owns the set of live loggers, enforces unique names, provides the two
well-known loggers and the maintenance operations that span all loggers.
"""

from __future__ import annotations

import shutil
import threading
from contextlib import ExitStack
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator, List, Optional

from logdev.core.exceptions import DuplicateLoggerError
from logdev.core.log_level import LogLevel
from logdev.core.logger import Logger
from logdev.core.logger_config import LoggerConfig
from logdev.core.logger_constants import (
    CLEAR_ALL_LOGGERS_ERROR,
    CLEAR_LOCAL_LOG_OVERRIDE,
    CLEAR_LOCAL_LOG_PERSISTED,
    CLEARING_LOCAL_LOG,
    DUPLICATE_LOGGER_NAME,
    LOG_DIRECTORY_PERMISSION_DENIED,
    LOG_DIRECTORY_UNKNOWN_ERROR,
    TRY_CLEAR_ALL_LOGGERS,
    TRY_CLEAR_LOCAL_LOG,
    describe_error,
)


def default_log_directory() -> Path:
    """
    Get the log directory used when none is configured.

    Returns:
        logs/ next to the installed package (the checkout root in development)
    """
    try:
        return Path(__file__).resolve().parents[2] / "logs"
    except Exception:
        return Path("logs").resolve()


class LoggerRegistry:
    """
    Registry of live loggers keyed by name, in creation order.

    Example:
        registry = LoggerRegistry(LoggerConfig(log_directory="/var/log/app"))
        worker = registry.create_logger("worker", log_level=LogLevel.DEBUG)
        registry.singleton.log("Started")
        registry.try_clear_all_loggers()

    Thread Safety:
        The name mapping is guarded by a lock; bulk operations work on a
        snapshot of it. try_clear_local_log holds the lock of every file
        logger from closing its file until reopening it, so emits from other
        threads wait instead of writing into the directory being deleted.
    """

    _default: ClassVar[Optional["LoggerRegistry"]] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, config: Optional[LoggerConfig] = None):
        """
        Initialize registry.

        Args:
            config: Settings for the well-known loggers and the log directory
                    (default: read from the environment)
        """
        self._config = config or LoggerConfig.from_environment()
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.RLock()
        self._singleton: Optional[Logger] = None
        self._noop_singleton: Optional[Logger] = None
        self._log_directory: Optional[Path] = None

    @classmethod
    def default(cls) -> "LoggerRegistry":
        """Get the process-default registry, creating it on first use."""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
        return cls._default

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def log_directory(self) -> Path:
        """Base directory of every log file, resolved once."""
        if self._log_directory is None:
            if self._config.log_directory is None:
                self._log_directory = default_log_directory()
            else:
                self._log_directory = Path(self._config.log_directory)
        return self._log_directory

    # Membership

    def ensure_available(self, name: str) -> None:
        """
        Check that no live logger uses name.

        Raises:
            DuplicateLoggerError: If the name is taken
        """
        with self._lock:
            if name in self._loggers:
                raise DuplicateLoggerError(DUPLICATE_LOGGER_NAME.format(name=name))

    def register(self, logger: Logger) -> None:
        """
        Add a logger under its name.

        Raises:
            DuplicateLoggerError: If the name is taken
        """
        with self._lock:
            self.ensure_available(logger.name)
            self._loggers[logger.name] = logger

    def rename(self, logger: Logger, new_name: str) -> None:
        """
        Move a logger to a new name, keeping its position.

        Raises:
            DuplicateLoggerError: If new_name is taken
        """
        with self._lock:
            self.ensure_available(new_name)
            self._loggers = {
                (new_name if existing is logger else name): existing
                for name, existing in self._loggers.items()
            }

    def create_logger(self, name: str, **kwargs: Any) -> Logger:
        """Create a logger registered in this registry."""
        return Logger(name, registry=self, **kwargs)

    def get(self, name: str) -> Optional[Logger]:
        with self._lock:
            return self._loggers.get(name)

    def loggers(self) -> List[Logger]:
        """Snapshot of live loggers in creation order."""
        with self._lock:
            return list(self._loggers.values())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __iter__(self) -> Iterator[Logger]:
        return iter(self.loggers())

    # Well-known loggers

    @property
    def singleton(self) -> Logger:
        """Default logger built from the configuration."""
        if self._singleton is None:
            with self._lock:
                if self._singleton is None:
                    self._singleton = Logger(
                        self._config.logger_name,
                        self._config.log_level,
                        self._config.log_to_file_system,
                        self._config.log_to_console,
                        self._config.cut_log_prefix,
                        self._config.log_with_color,
                        registry=self,
                    )
        return self._singleton

    @property
    def noop_singleton(self) -> Logger:
        """Logger that emits nothing."""
        if self._noop_singleton is None:
            with self._lock:
                if self._noop_singleton is None:
                    self._noop_singleton = Logger(
                        self._config.logger_name + "_noop",
                        LogLevel.NONE,
                        False,
                        False,
                        False,
                        False,
                        registry=self,
                    )
        return self._noop_singleton

    # Maintenance

    def try_clear_local_log(self, override: bool = False) -> None:
        """
        Delete the log directory and reopen every file-logging logger.

        Never raises: a failure turns file output off for every logger and
        is reported through the singleton.

        Args:
            override: Clear even when persist_local_logs is set
        """
        singleton = self.singleton
        singleton.log(TRY_CLEAR_LOCAL_LOG)

        try:
            if self._config.persist_local_logs:
                if override:
                    singleton.warning(CLEAR_LOCAL_LOG_OVERRIDE)
                else:
                    singleton.warning(CLEAR_LOCAL_LOG_PERSISTED)
                    return

            singleton.log(CLEARING_LOCAL_LOG)

            file_loggers = [logger for logger in self.loggers() if logger.log_to_file_system]

            with ExitStack() as held:
                for logger in file_loggers:
                    held.enter_context(logger._lock)
                    logger._close_file_stream()

                directory = self.log_directory
                if directory.exists():
                    shutil.rmtree(directory)
                directory.mkdir(parents=True, exist_ok=True)

                for logger in file_loggers:
                    if logger.log_to_file_system:
                        logger._open_file_stream()
        except Exception as error:
            for logger in self.loggers():
                if logger.log_to_file_system:
                    logger._disable_file_system()

            if isinstance(error, PermissionError):
                singleton.warning(LOG_DIRECTORY_PERMISSION_DENIED)
            else:
                singleton.warning(LOG_DIRECTORY_UNKNOWN_ERROR, describe_error(error))

    def try_clear_all_loggers(self) -> None:
        """
        Remove every logger except the singleton and the noop singleton.

        Removed loggers have their log file closed and their names become
        available again. Never raises.
        """
        singleton = self.singleton
        singleton.log(TRY_CLEAR_ALL_LOGGERS)

        try:
            kept = {singleton.name}
            if self._noop_singleton is not None:
                kept.add(self._noop_singleton.name)

            with self._lock:
                removed = [logger for name, logger in self._loggers.items() if name not in kept]
                for logger in removed:
                    del self._loggers[logger.name]

            for logger in removed:
                logger._close_file_stream()
        except Exception as error:
            singleton.warning(CLEAR_ALL_LOGGERS_ERROR, describe_error(error))

    def __repr__(self) -> str:
        """String representation."""
        return f"LoggerRegistry(loggers={len(self)}, log_directory={str(self.log_directory)!r})"
