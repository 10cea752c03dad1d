"""CLI module for claudeauth."""

from claudeauth.cli.commands import app

__all__ = ["app"]
