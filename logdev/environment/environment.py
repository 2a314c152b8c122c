"""
Typed environment variable reader

Values are deserialized according to the type of the supplied default.
"""

from __future__ import annotations

import json
import os
import re
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class Environment:
    """
    Read typed settings from the process environment.

    Example:
        env = Environment()
        persist = env.get_or_default("PERSIST_LOCAL_LOGS", False)
        hosts = env.get_or_default("ALLOWED_HOSTS", ["localhost"])
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize environment reader.

        Args:
            environ: Variable mapping (default: os.environ, read live)
        """
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        """Mapping the values are read from."""
        return os.environ if self._environ is None else self._environ

    def get_or_default(self, key: str, default: Union[T, Callable[[], T]]) -> T:
        """
        Read a variable, falling back to a default.

        Args:
            key: Environment variable name
            default: Fallback value, or a zero-argument callable producing it.
                     Its type selects how a present value is deserialized.

        Returns:
            Deserialized value, or the default when unset or unparseable

        Raises:
            ValueError: If default is None
        """
        if default is None:
            raise ValueError(f"A default value is required for '{key}'.")

        raw = self.environ.get(key)

        if callable(default) and not isinstance(default, (type, re.Pattern)):
            if raw is None:
                return default()
            return raw

        if raw is None:
            return default

        return _deserialize(raw, default)

    @staticmethod
    def is_docker() -> bool:
        """
        Check whether the process runs inside a Docker container.

        Returns:
            True if /.dockerenv exists or the cgroup mentions docker
        """
        if not sys.platform.startswith("linux"):
            return False

        if Path("/.dockerenv").exists():
            return True

        try:
            return "docker" in Path("/proc/self/cgroup").read_text(encoding="utf-8")
        except OSError:
            return False


def _deserialize(raw: str, default: Any) -> Any:
    """Convert raw to the type of default."""
    # bool must be checked before int
    if isinstance(default, bool):
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        return default

    if isinstance(default, Enum):
        enum_type = type(default)
        value = raw.strip().lower()
        for member in enum_type:
            if str(member.value).lower() == value:
                return member
        return default

    if isinstance(default, (int, float)):
        try:
            return type(default)(raw.strip())
        except ValueError:
            return default

    if isinstance(default, list):
        return [item.strip() for item in raw.split(",") if item.strip()]

    if isinstance(default, re.Pattern):
        try:
            return re.compile(raw)
        except re.error:
            return default

    if isinstance(default, dict):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            return default
        return parsed if isinstance(parsed, dict) else default

    if isinstance(default, Path):
        return Path(raw)

    return raw
