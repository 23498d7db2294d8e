"""Console backend: printf-style formatting onto stdout/stderr channels."""

from .console import Console
from .factory import ConsoleLogConfig, console_log_factory, make_console_log_factory
from .format import format_message, inspect_value, to_json

__all__ = [
    "Console",
    "ConsoleLogConfig",
    "console_log_factory",
    "format_message",
    "inspect_value",
    "make_console_log_factory",
    "to_json",
]
