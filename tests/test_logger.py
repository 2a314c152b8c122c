"""Basic tests for logdev"""

import io
import re

import pytest

from logdev import (
    DuplicateLoggerError,
    EmptyValueError,
    InvalidLogLevelError,
    InvalidNameError,
    InvalidTypeError,
    LogColor,
    Logger,
    LoggerConfig,
    LoggerRegistry,
    LoggerValidationError,
    LogLevel,
    MissingValueError,
)
from logdev.core.log_level import LEVEL_ORDER
from logdev.core.process_info import ProcessInfo
from logdev.writers.console_writer import ConsoleWriter

ISO = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z"


def make_logger(registry, console, name="logger", log_level=LogLevel.TRACE, **kwargs):
    kwargs.setdefault("log_to_file_system", False)
    kwargs.setdefault("log_with_color", False)
    return Logger(name, log_level, registry=registry, console=console, **kwargs)


class TestLogLevel:
    """Test log level functionality."""

    def test_order(self):
        assert LEVEL_ORDER == [
            LogLevel.NONE,
            LogLevel.ERROR,
            LogLevel.WARNING,
            LogLevel.INFO,
            LogLevel.DEBUG,
            LogLevel.TRACE,
        ]

    def test_warning_gate(self):
        assert LogLevel.WARNING.allows(LogLevel.ERROR)
        assert LogLevel.WARNING.allows(LogLevel.WARNING)
        assert not LogLevel.WARNING.allows(LogLevel.INFO)
        assert not LogLevel.WARNING.allows(LogLevel.DEBUG)
        assert not LogLevel.WARNING.allows(LogLevel.TRACE)

    def test_extremes(self):
        for level in (LogLevel.ERROR, LogLevel.WARNING, LogLevel.INFO, LogLevel.DEBUG, LogLevel.TRACE):
            assert not LogLevel.NONE.allows(level)
            assert LogLevel.TRACE.allows(level)

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("Trace") is LogLevel.TRACE

    def test_from_string_invalid(self):
        with pytest.raises(InvalidLogLevelError, match="Valid log levels are"):
            LogLevel.from_string("verbose")

    def test_tag(self):
        assert LogLevel.WARNING.tag == "WARNING"


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.persist_local_logs is False
        assert config.logger_name == "singleton-logger"
        assert config.log_level == LogLevel.INFO
        assert config.log_to_file_system is True
        assert config.log_to_console is True
        assert config.cut_log_prefix is True
        assert config.log_with_color is True
        assert config.log_directory is None

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.log_level == LogLevel.TRACE
        assert config.log_to_file_system is False

    def test_level_string_normalized(self):
        assert LoggerConfig(log_level="WARNING").log_level is LogLevel.WARNING

    def test_directory_string_converted(self, tmp_path):
        config = LoggerConfig(log_directory=str(tmp_path))
        assert config.log_directory == tmp_path

    def test_invalid_name(self):
        with pytest.raises(InvalidNameError):
            LoggerConfig(logger_name="not valid")
        with pytest.raises(InvalidNameError):
            LoggerConfig(logger_name="app\n")


class TestConstruction:
    """Test constructor validation."""

    def test_name_required(self, registry):
        with pytest.raises(MissingValueError):
            Logger(None, registry=registry)

    @pytest.mark.parametrize("name", [1, [], 2.5])
    def test_name_type(self, registry, name):
        with pytest.raises(InvalidTypeError):
            Logger(name, registry=registry)

    def test_name_empty(self, registry):
        with pytest.raises(EmptyValueError):
            Logger("", registry=registry)

    def test_name_pattern(self, registry):
        with pytest.raises(InvalidNameError):
            Logger("invalid name", registry=registry)

    def test_name_trailing_newline(self, registry):
        with pytest.raises(InvalidNameError):
            Logger("logger\n", registry=registry)
        assert "logger\n" not in registry

    def test_name_too_long(self, registry):
        with pytest.raises(InvalidNameError):
            Logger("a" * 101, registry=registry)

    def test_name_at_limit(self, registry):
        logger = Logger("a" * 100, log_to_file_system=False, registry=registry)
        assert logger.name == "a" * 100

    def test_name_accepted(self, registry):
        logger = Logger("logger", log_to_file_system=False, registry=registry)
        assert "logger" in registry
        assert registry.get("logger") is logger

    def test_duplicate_name(self, registry):
        Logger("logger", log_to_file_system=False, registry=registry)
        with pytest.raises(DuplicateLoggerError, match="already exists"):
            Logger("logger", registry=registry)

    def test_failed_construction_not_registered(self, registry):
        with pytest.raises(LoggerValidationError):
            Logger("logger", "loud", registry=registry)
        assert "logger" not in registry

    def test_log_level_required(self, registry):
        with pytest.raises(MissingValueError):
            Logger("logger", None, registry=registry)

    @pytest.mark.parametrize("level", [1, []])
    def test_log_level_type(self, registry, level):
        with pytest.raises(InvalidTypeError):
            Logger("logger", level, registry=registry)

    def test_log_level_invalid(self, registry):
        with pytest.raises(InvalidLogLevelError):
            Logger("logger", "invalid log level", registry=registry)

    def test_log_level_case_insensitive(self, registry):
        logger = Logger("logger", "DEBUG", False, registry=registry)
        assert logger.log_level is LogLevel.DEBUG

    @pytest.mark.parametrize("position", range(4))
    def test_flag_required(self, registry, position):
        flags = [False, False, False, False]
        flags[position] = None
        with pytest.raises(MissingValueError):
            Logger("logger", LogLevel.TRACE, *flags, registry=registry)

    @pytest.mark.parametrize("position", range(4))
    @pytest.mark.parametrize("value", [1, [], "true"])
    def test_flag_type(self, registry, position, value):
        flags = [False, False, False, False]
        flags[position] = value
        with pytest.raises(InvalidTypeError):
            Logger("logger", LogLevel.TRACE, *flags, registry=registry)

    def test_validation_errors_are_value_errors(self, registry):
        with pytest.raises(ValueError):
            Logger("", registry=registry)
        with pytest.raises(TypeError):
            Logger(5, registry=registry)

    def test_round_trip(self, registry, console):
        logger = Logger("round-trip", LogLevel.DEBUG, False, True, False, False,
                        registry=registry, console=console)

        assert logger.name == "round-trip"
        assert logger.log_level is LogLevel.DEBUG
        assert logger.log_to_file_system is False
        assert logger.log_to_console is True
        assert logger.cut_log_prefix is False
        assert logger.log_with_color is False
        assert logger.file_name is None

    def test_console_forced_off_without_terminal(self, registry):
        console = ConsoleWriter(stdout=io.StringIO(), stderr=io.StringIO())
        logger = Logger("logger", LogLevel.TRACE, False, True, registry=registry, console=console)

        assert logger.log_to_console is False

    def test_default_registry(self, config, monkeypatch):
        default = LoggerRegistry(config)
        monkeypatch.setattr(LoggerRegistry, "_default", default)

        logger = Logger("uses-default", log_to_file_system=False)

        assert logger.registry is default
        assert LoggerRegistry.default() is default


class TestSetters:
    """Test property validation and side effects."""

    def test_rename(self, registry, console):
        logger = make_logger(registry, console)
        logger.name = "renamed"

        assert logger.name == "renamed"
        assert "logger" not in registry
        assert registry.get("renamed") is logger

    def test_rename_validation(self, registry, console):
        logger = make_logger(registry, console)
        make_logger(registry, console, name="other")

        with pytest.raises(MissingValueError):
            logger.name = None
        with pytest.raises(InvalidTypeError):
            logger.name = 3
        with pytest.raises(EmptyValueError):
            logger.name = ""
        with pytest.raises(InvalidNameError):
            logger.name = "bad name"
        with pytest.raises(InvalidNameError):
            logger.name = "renamed\n"
        with pytest.raises(DuplicateLoggerError):
            logger.name = "other"

        assert logger.name == "logger"

    def test_log_level(self, registry, console):
        logger = make_logger(registry, console)
        logger.log_level = "WARNING"
        assert logger.log_level is LogLevel.WARNING

        with pytest.raises(MissingValueError):
            logger.log_level = None
        with pytest.raises(InvalidTypeError):
            logger.log_level = 3
        with pytest.raises(InvalidLogLevelError):
            logger.log_level = "loud"

    def test_boolean_setters(self, registry, console):
        logger = make_logger(registry, console)

        logger.log_to_console = False
        logger.log_with_color = True
        assert logger.log_to_console is False
        assert logger.log_with_color is True

        for attribute in ("log_to_console", "log_with_color", "log_to_file_system"):
            with pytest.raises(MissingValueError):
                setattr(logger, attribute, None)
            with pytest.raises(InvalidTypeError):
                setattr(logger, attribute, "yes")

    def test_cut_log_prefix_read_only(self, registry, console):
        logger = make_logger(registry, console)
        with pytest.raises(AttributeError):
            logger.cut_log_prefix = False


class TestEmission:
    """Test leveled emit operations."""

    def test_level_gate(self, registry, console):
        logger = make_logger(registry, console, log_level=LogLevel.WARNING)

        logger.trace("trace message")
        logger.debug("debug message")
        logger.information("info message")
        logger.log("log message")
        logger.warning("warning message")
        logger.error("error message")

        out = console.stdout.getvalue()
        err = console.stderr.getvalue()
        assert out.count("\n") == 1
        assert "[WARNING] warning message" in out
        assert err.count("\n") == 1
        assert "[ERROR] error message" in err

    def test_none_level_emits_nothing(self, registry, console):
        logger = make_logger(registry, console, log_level=LogLevel.NONE)
        logger.error("error message")
        assert console.stderr.getvalue() == ""

    def test_plain_short_line(self, registry, console):
        logger = make_logger(registry, console)
        info = ProcessInfo.current()

        logger.information("hello")

        line = console.stdout.getvalue()
        prefix = re.escape(f"[{info.local_ip}][{info.hostname}][logger]")
        assert re.fullmatch(rf"\[{ISO}\]{prefix}\[INFO\] hello\n", line)

    def test_plain_long_line(self, registry, console):
        logger = make_logger(registry, console, cut_log_prefix=False)
        info = ProcessInfo.current()

        logger.log("hello")

        line = console.stdout.getvalue()
        prefix = re.escape(
            f"[{info.hex_process_id}][{info.platform_fmt}][{info.runtime_version}]"
            f"[{info.local_ip}][{info.hostname}][logger]"
        )
        assert re.fullmatch(rf"\[{ISO}\]\[\d+\.\d{{7}}\]{prefix}\[INFO\] hello\n", line)

    def test_colored_line(self, registry, console):
        logger = make_logger(registry, console, log_with_color=True)

        logger.warning("careful")

        line = console.stdout.getvalue()
        assert f"[{LogColor.BRIGHT_YELLOW}WARNING{LogColor.RESET}] " in line
        assert line.endswith(f"{LogColor.BRIGHT_YELLOW}careful{LogColor.RESET}\n")
        assert f"[{LogColor.DEFAULT}logger{LogColor.RESET}]" in line

    def test_information_and_log_colors(self, registry, console):
        logger = make_logger(registry, console, log_with_color=True)

        logger.information("blue")
        logger.log("white")

        out = console.stdout.getvalue()
        assert f"{LogColor.BRIGHT_BLUE}blue{LogColor.RESET}" in out
        assert f"{LogColor.BRIGHT_WHITE}white{LogColor.RESET}" in out

    def test_interpolation(self, registry, console):
        logger = make_logger(registry, console)

        logger.log("Started %d jobs for %s", 4, "alice")

        assert "[INFO] Started 4 jobs for alice\n" in console.stdout.getvalue()

    def test_verbatim_without_args(self, registry, console):
        logger = make_logger(registry, console)

        logger.log("100% done %s")

        assert "[INFO] 100% done %s\n" in console.stdout.getvalue()

    def test_extra_args_appended(self, registry, console):
        logger = make_logger(registry, console)

        logger.log("no placeholders", "extra", 1)

        assert "[INFO] no placeholders extra 1\n" in console.stdout.getvalue()

    def test_leftover_args_after_placeholders(self, registry, console):
        logger = make_logger(registry, console)

        logger.log("user %s", "alice", "extra")

        assert "[INFO] user alice extra\n" in console.stdout.getvalue()

    def test_supplier_message(self, registry, console):
        logger = make_logger(registry, console)

        logger.debug(lambda: "built lazily %s", "now")

        assert "[DEBUG] built lazily now\n" in console.stdout.getvalue()

    @pytest.mark.parametrize("method", ["log", "warning", "trace", "debug", "information", "error"])
    def test_message_validation(self, registry, console, method):
        emit = getattr(make_logger(registry, console), method)

        with pytest.raises(MissingValueError):
            emit(None)
        with pytest.raises(EmptyValueError):
            emit("")
        with pytest.raises(EmptyValueError):
            emit(lambda: "")
        with pytest.raises(InvalidTypeError):
            emit(42)
        with pytest.raises(InvalidTypeError):
            emit(lambda: 42)

    def test_validation_ignores_level_gate(self, registry, console):
        logger = make_logger(registry, console, log_level=LogLevel.NONE)
        with pytest.raises(EmptyValueError):
            logger.debug("")

    def test_trace_emits_stack(self, registry, console):
        logger = make_logger(registry, console)

        logger.trace("checkpoint %d", 7)

        out = console.stdout.getvalue()
        assert "[TRACE] checkpoint 7\n" in out
        assert "test_logger.py" in out
        assert "in test_trace_emits_stack" in out
        assert "logdev/core/logger.py" not in out

    def test_returns_none(self, registry, console):
        logger = make_logger(registry, console)
        assert logger.log("hello") is None

    def test_prefix_cached_across_rename(self, registry, console):
        logger = make_logger(registry, console)

        logger.log("first")
        logger.name = "renamed"
        logger.log("second")

        lines = console.stdout.getvalue().splitlines()
        assert "[logger][INFO] first" in lines[0]
        assert "[logger][INFO] second" in lines[1]

    def test_repr(self, registry, console):
        logger = make_logger(registry, console, log_level=LogLevel.DEBUG)
        assert repr(logger) == "Logger(name='logger', log_level='debug')"
