"""
Log formatters module

Builds message bodies, metadata prefixes and the final plain or colored
log lines.
"""

from logdev.formatters.base_formatter import BaseFormatter
from logdev.formatters.text_formatter import TextFormatter
from logdev.formatters.color_formatter import ColorFormatter
from logdev.formatters.message_builder import build_entry, format_stack_trace, interpolate
from logdev.formatters.prefix_builder import build_prefix

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "ColorFormatter",
    "build_entry",
    "build_prefix",
    "format_stack_trace",
    "interpolate",
]
