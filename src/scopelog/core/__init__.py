"""Core facade: levels, callable contracts and the scope-chaining Logger."""

from .levels import LogLevel
from .logger import Logger
from .types import LogFunction, LogFunctionFactory, LogMeta, LogScope

__all__ = [
    "LogFunction",
    "LogFunctionFactory",
    "LogLevel",
    "LogMeta",
    "LogScope",
    "Logger",
]
