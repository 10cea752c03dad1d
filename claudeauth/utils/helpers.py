"""Utility functions for claudeauth."""

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_home_path() -> Path:
    """Get the home directory of the user running the job."""
    return Path.home()
