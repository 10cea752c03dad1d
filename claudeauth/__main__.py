"""Entry point for running claudeauth as a module: python -m claudeauth."""

from claudeauth.cli.commands import app

if __name__ == "__main__":
    app()
