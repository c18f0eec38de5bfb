"""
Configuration module for dictkit.

Uses pydantic-settings for environment variable and YAML file loading.
"""

from dictkit.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
