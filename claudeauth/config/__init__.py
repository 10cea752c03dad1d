"""Configuration module for claudeauth."""

from claudeauth.config.schema import Settings, load_settings

__all__ = ["Settings", "load_settings"]
