"""Auth errors."""

from __future__ import annotations


class AuthError(Exception):
    """Base error for claudeauth."""


class RefreshFailed(AuthError):
    """The refresh exchange with the authorization server failed.

    ``status_code`` and ``reason`` are set when the server answered with a
    non-success status. Transport and body failures leave them as ``None``
    and chain the original exception.
    """

    def __init__(self, message: str, status_code: int | None = None, reason: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
