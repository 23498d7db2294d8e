"""Log levels understood by every backend."""

from __future__ import annotations

from enum import StrEnum


class LogLevel(StrEnum):
    """Severity of a log message, modelled on the winston levels.
    
    StrEnum so a level compares equal to its string value and can be handed
    straight to a backend (`LogLevel.INFO == "info"`). No ordering is defined;
    severity filtering belongs to the log function, not the logger.
    """
    
    ERROR = "error"
    """Something unexpected went wrong. Comparable to `logging.error`."""
    
    WARNING = "warning"
    """Something potentially troublesome. Comparable to `logging.warning`."""
    
    INFO = "info"
    """General information."""
    
    DEBUG = "debug"
    """Verbose output, normally only wanted while debugging."""
