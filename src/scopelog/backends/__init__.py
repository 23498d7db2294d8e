"""Alternative backends: stdlib logging bridge, structured renderers, no-op."""

from .noop import noop_log_factory
from .stdlib import make_stdlib_log_factory
from .structured import (
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    make_structured_log_factory,
)

__all__ = [
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "make_stdlib_log_factory",
    "make_structured_log_factory",
    "noop_log_factory",
]
