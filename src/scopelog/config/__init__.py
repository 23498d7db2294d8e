"""Configuration management using pydantic-settings."""

from .settings import ScopelogSettings, get_settings

__all__ = ["ScopelogSettings", "get_settings"]
