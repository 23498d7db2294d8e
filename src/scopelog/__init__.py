"""scopelog - Minimal, pluggable logging facade for libraries.

Library code logs through a `Logger`; whoever embeds the library decides
where messages go by supplying a `LogFunctionFactory`. Scopes narrow as work
is delegated, and every narrowing produces a new logger.

Quick Start:
    >>> from scopelog import default_logger
    >>> default_logger.info("Starting worker cluster...")
    INFO: Starting worker cluster... ({})

Scoping:
    >>> log = default_logger.scope({"worker_id": "w1"})
    >>> log.scope(job_id=84).warn("Job is slow", {"elapsed_ms": 5120})

Custom Backend:
    >>> from scopelog import Logger, LogLevel
    >>>
    >>> def factory(scope):
    ...     def log(level, message, meta=None):
    ...         my_structured_logger.log(level, message, **scope, **(meta or {}))
    ...     return log
    >>>
    >>> logger = Logger(factory, {"service": "api"})

Console Formatting:
    >>> from scopelog import ConsoleLogConfig, make_console_log_factory
    >>> factory = make_console_log_factory(ConsoleLogConfig(format="%s %s %j"))

DEBUG messages from the built-in console backend are only printed when the
`SCOPELOG_DEBUG` environment variable is set.
"""

from __future__ import annotations

__version__ = "1.0.0"

# Core
from .core import LogFunction, LogFunctionFactory, Logger, LogLevel, LogMeta, LogScope

# Console backend
from .console import Console, ConsoleLogConfig, console_log_factory, format_message, make_console_log_factory

# Default logger
from .defaults import default_logger

# Alternative backends
from .backends import make_stdlib_log_factory, make_structured_log_factory, noop_log_factory

__all__ = [
    "__version__",
    # Core
    "LogFunction",
    "LogFunctionFactory",
    "LogLevel",
    "LogMeta",
    "LogScope",
    "Logger",
    # Console
    "Console",
    "ConsoleLogConfig",
    "console_log_factory",
    "format_message",
    "make_console_log_factory",
    # Defaults
    "default_logger",
    # Backends
    "make_stdlib_log_factory",
    "make_structured_log_factory",
    "noop_log_factory",
]
