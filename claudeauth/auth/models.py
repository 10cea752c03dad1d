"""Claude OAuth data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Credential:
    """Access/refresh token pair with its absolute expiry.

    ``expires_at`` is Unix seconds kept as a string, the way callers supply it.
    The persisted file stores it as a number.
    """

    access_token: str
    refresh_token: str
    expires_at: str


@dataclass
class RefreshResult:
    """Token endpoint response for a refresh_token grant."""

    access_token: str
    refresh_token: str
    expires_in: int
