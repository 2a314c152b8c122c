"""
Static process and host facts

Captured once per process and reused by every logger prefix and log file
name.
"""

from __future__ import annotations

import os
import platform
import socket
import sys
import threading
import time
from dataclasses import dataclass
from typing import ClassVar, Optional


def get_local_ipv4() -> str:
    """
    Get the IPv4 address of the interface used for outbound traffic.

    A UDP connect selects a route without sending any packet.

    Returns:
        Dotted IPv4 address, or the loopback address when there is no route
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
            probe.connect(("10.255.255.255", 1))
            return probe.getsockname()[0]
    except OSError:
        return "127.0.0.1"


@dataclass(frozen=True)
class ProcessInfo:
    """Immutable identity of the running process."""

    process_id: int
    platform: str
    architecture: str
    runtime_version: str
    local_ip: str
    hostname: str
    start_time: float

    _current: ClassVar[Optional["ProcessInfo"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def capture(cls) -> "ProcessInfo":
        """Read the facts from the running interpreter and host."""
        return cls(
            process_id=os.getpid(),
            platform=sys.platform,
            architecture=platform.machine() or "unknown",
            runtime_version=platform.python_version(),
            local_ip=get_local_ipv4(),
            hostname=socket.gethostname(),
            start_time=time.monotonic(),
        )

    @classmethod
    def current(cls) -> "ProcessInfo":
        """Get the facts captured for this process, capturing on first use."""
        if cls._current is None:
            with cls._lock:
                if cls._current is None:
                    cls._current = cls.capture()
        return cls._current

    @property
    def hex_process_id(self) -> str:
        """Process id in lowercase hex, as shown in log prefixes."""
        return format(self.process_id, "x")

    @property
    def platform_fmt(self) -> str:
        """Platform and architecture joined as platform-arch."""
        return f"{self.platform}-{self.architecture}"

    @property
    def runtime_tag(self) -> str:
        """Runtime version as used in log file names."""
        return f"v{self.runtime_version}"

    def uptime(self) -> float:
        """Seconds elapsed since the facts were captured (first import of logdev)."""
        return time.monotonic() - self.start_time


# Capture at import so uptime counts from the first import of logdev
ProcessInfo.current()
