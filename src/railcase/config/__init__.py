"""Configuration for railcase diagnostics."""

from .settings import LoggingSettings, RailcaseSettings, clear_settings_cache, get_settings

__all__ = ["LoggingSettings", "RailcaseSettings", "clear_settings_cache", "get_settings"]
