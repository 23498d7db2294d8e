"""Test helpers for code that logs through scopelog."""

from .capture import CaptureLogFactory, LogRecord

__all__ = ["CaptureLogFactory", "LogRecord"]
