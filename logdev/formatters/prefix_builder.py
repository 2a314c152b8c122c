"""
Metadata prefix construction

Builds the bracketed process/host/logger segments that precede the level
tag of every log line, in long or short form, plain or colored.
"""

from logdev.core.log_color import LogColor
from logdev.core.process_info import ProcessInfo


def color_section(color: str, content: object) -> str:
    """Wrap content in brackets with color start and reset markup inside."""
    return f"[{color}{content}{LogColor.RESET}]"


def default_color_section(content: object) -> str:
    return color_section(LogColor.DEFAULT, content)


def build_long_prefix(info: ProcessInfo, name: str) -> str:
    """[pid][platform-arch][runtime][ip][hostname][name]"""
    return "[%s][%s][%s][%s][%s][%s]" % (
        info.hex_process_id,
        info.platform_fmt,
        info.runtime_version,
        info.local_ip,
        info.hostname,
        name,
    )


def build_short_prefix(info: ProcessInfo, name: str) -> str:
    """[ip][hostname][name]"""
    return "[%s][%s][%s]" % (info.local_ip, info.hostname, name)


def build_long_color_prefix(info: ProcessInfo, name: str) -> str:
    return "".join(
        default_color_section(segment)
        for segment in (
            info.hex_process_id,
            info.platform_fmt,
            info.runtime_version,
            info.local_ip,
            info.hostname,
            name,
        )
    )


def build_short_color_prefix(info: ProcessInfo, name: str) -> str:
    return "".join(
        default_color_section(segment)
        for segment in (info.local_ip, info.hostname, name)
    )


def build_prefix(info: ProcessInfo, name: str, cut_log_prefix: bool, colored: bool) -> str:
    """
    Select and build one of the four prefix variants.

    Args:
        info: Process facts
        name: Logger name
        cut_log_prefix: Use the short form
        colored: Wrap each segment in color markup

    Returns:
        Prefix string
    """
    if colored:
        if cut_log_prefix:
            return build_short_color_prefix(info, name)
        return build_long_color_prefix(info, name)

    if cut_log_prefix:
        return build_short_prefix(info, name)
    return build_long_prefix(info, name)
