"""claudeauth - Claude OAuth credential setup for CI jobs."""

__version__ = "0.1.0"
__logo__ = "🔑"
