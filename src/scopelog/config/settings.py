"""Environment-based configuration using pydantic-settings.

The only switch is `SCOPELOG_DEBUG`: when the variable is present (any value,
even empty) the built-in console backend emits DEBUG messages. Custom
backends apply their own filtering and ignore it.

Example:
    >>> from scopelog.config import get_settings
    >>> get_settings().debug_enabled
    False
    
    # SCOPELOG_DEBUG=1 python app.py  -> True
"""

from __future__ import annotations

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScopelogSettings(BaseSettings):
    """Root settings, loaded from `SCOPELOG_`-prefixed environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="SCOPELOG_",
        extra="ignore",
    )
    
    debug: str | None = Field(default=None, description="Presence enables DEBUG console output")
    
    @computed_field
    @property
    def debug_enabled(self) -> bool:
        """True whenever SCOPELOG_DEBUG is set, regardless of its value."""
        return self.debug is not None


def get_settings() -> ScopelogSettings:
    """Read settings from the environment.
    
    Not cached: the console backend calls this per DEBUG message so toggling
    the variable at runtime takes effect immediately.
    """
    return ScopelogSettings()
