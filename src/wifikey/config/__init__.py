"""Configuration management for wifikey.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides.
"""

from wifikey.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
