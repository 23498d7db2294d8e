"""Process-wide logger that can be used immediately."""

from __future__ import annotations

from scopelog.console import console_log_factory
from scopelog.core import Logger

default_logger = Logger(console_log_factory, {})
