"""Utility functions for claudeauth."""

from claudeauth.utils.helpers import ensure_dir, get_home_path

__all__ = ["ensure_dir", "get_home_path"]
