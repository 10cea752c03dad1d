"""CLI commands for claudeauth."""

import asyncio
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from claudeauth import __logo__, __version__

app = typer.Typer(
    name="claudeauth",
    help=f"{__logo__} claudeauth - Claude OAuth credentials for CI jobs",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {message}")


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} claudeauth v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """claudeauth - Claude OAuth credentials for CI jobs."""
    pass


# ============================================================================
# Setup
# ============================================================================


@app.command()
def setup(
    access_token: str = typer.Option("", "--access-token", help="Current access token"),
    refresh_token: str = typer.Option("", "--refresh-token", help="Current refresh token"),
    expires_at: str = typer.Option("", "--expires-at", help="Access token expiry (Unix seconds)"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
):
    """Refresh the credentials if needed and write ~/.claude/.credentials.json."""
    from claudeauth.auth import GitHubActionsSink, RefreshFailed, ensure_fresh_credentials
    from claudeauth.config import load_settings

    try:
        settings = load_settings(
            claude_access_token=access_token,
            claude_refresh_token=refresh_token,
            claude_expires_at=expires_at,
        )
    except ValidationError as e:
        console.print("[red]Error: Invalid or missing OAuth inputs.[/red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else settings.log_level)

    original = settings.credential()
    try:
        current = asyncio.run(
            ensure_fresh_credentials(
                original,
                GitHubActionsSink(),
                token_url=settings.token_url,
                timeout=settings.timeout,
            )
        )
    except RefreshFailed as e:
        console.print(f"[red]OAuth token refresh failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if current is original:
        console.print("[green]✓[/green] Access token is still valid")
    else:
        console.print("[green]✓[/green] Refreshed OAuth tokens (new values exported as step outputs)")
    console.print(f"Expires: {_format_expiry(int(current.expires_at))}")


# ============================================================================
# Status
# ============================================================================


@app.command()
def status(
    path: Path = typer.Option(None, "--path", "-p", help="Credentials file to inspect"),
):
    """Show the expiry of the persisted credentials."""
    from claudeauth.auth import is_token_stale
    from claudeauth.auth.storage import get_credentials_path, load_credentials_file

    credentials_path = path or get_credentials_path()
    try:
        credential = load_credentials_file(credentials_path)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"{__logo__} claudeauth Status\n")
    if credential is None:
        console.print(f"Credentials: {credentials_path} [red]✗[/red]")
        raise typer.Exit(1)

    console.print(f"Credentials: {credentials_path} [green]✓[/green]")
    expires_at = int(credential.expires_at)
    console.print(f"Expires: {_format_expiry(expires_at)}")
    if is_token_stale(expires_at, int(time.time())):
        console.print("Access token: [yellow]expired or expiring soon[/yellow]")
    else:
        console.print("Access token: [green]valid[/green]")


def _format_expiry(expires_at: int) -> str:
    return datetime.fromtimestamp(expires_at, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


if __name__ == "__main__":
    app()
