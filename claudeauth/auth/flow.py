"""Claude OAuth credential refresh for CI jobs."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from claudeauth.auth.constants import (
    OUTPUT_ACCESS_TOKEN,
    OUTPUT_EXPIRES_AT,
    OUTPUT_REFRESH_TOKEN,
    REFRESH_BUFFER_SEC,
    REQUEST_TIMEOUT_SEC,
    TOKEN_URL,
)
from claudeauth.auth.errors import RefreshFailed
from claudeauth.auth.models import Credential, RefreshResult
from claudeauth.auth.sink import HostSink
from claudeauth.auth.storage import get_credentials_path, save_credentials_file


def _now() -> int:
    return int(time.time())


def _parse_token_payload(payload: Any) -> RefreshResult:
    if not isinstance(payload, dict):
        logger.error("Token refresh response is not a JSON object")
        raise RefreshFailed("Token refresh response is not a JSON object")
    access = payload.get("access_token")
    refresh = payload.get("refresh_token")
    expires_in = payload.get("expires_in")
    if (
        not isinstance(access, str)
        or not isinstance(refresh, str)
        or not access
        or not refresh
        or not isinstance(expires_in, int)
        or isinstance(expires_in, bool)
    ):
        logger.error("Token refresh response missing fields")
        raise RefreshFailed("Token refresh response missing fields")
    return RefreshResult(access_token=access, refresh_token=refresh, expires_in=expires_in)


def is_token_stale(expires_at: int, now: int, buffer_seconds: int = REFRESH_BUFFER_SEC) -> bool:
    """True when the token is expired or expires within ``buffer_seconds``."""
    return expires_at <= now + buffer_seconds


async def refresh_access_token(
    refresh_token: str,
    *,
    token_url: str = TOKEN_URL,
    timeout: float = REQUEST_TIMEOUT_SEC,
    client: httpx.AsyncClient | None = None,
) -> RefreshResult:
    """Exchange a refresh token for a new token pair. Single attempt."""
    if not refresh_token:
        logger.error("No refresh token available")
        raise RefreshFailed("No refresh token available")

    body = {
        "grant_type": "refresh_token",
        "refresh_token": refresh_token,
    }
    headers = {"Content-Type": "application/json"}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                response = await owned.post(token_url, json=body, headers=headers)
        else:
            response = await client.post(token_url, json=body, headers=headers, timeout=timeout)
    except httpx.HTTPError as e:
        logger.error("Token refresh request failed: {}", e)
        raise RefreshFailed(f"OAuth token refresh failed: {e}") from e

    if not response.is_success:
        logger.error("Token refresh failed: {} {}", response.status_code, response.reason_phrase)
        raise RefreshFailed(
            f"Failed to refresh token: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            reason=response.reason_phrase,
        )

    try:
        payload = response.json()
    except ValueError as e:
        logger.error("Token refresh response is not valid JSON")
        raise RefreshFailed("Token refresh response is not valid JSON") from e
    return _parse_token_payload(payload)


def _export(credential: Credential, sink: HostSink) -> None:
    sink.register_secret(credential.access_token)
    sink.register_secret(credential.refresh_token)

    sink.set_output(OUTPUT_ACCESS_TOKEN, credential.access_token)
    sink.set_output(OUTPUT_REFRESH_TOKEN, credential.refresh_token)
    sink.set_output(OUTPUT_EXPIRES_AT, credential.expires_at)


async def ensure_fresh_credentials(
    credential: Credential,
    sink: HostSink,
    *,
    token_url: str = TOKEN_URL,
    timeout: float = REQUEST_TIMEOUT_SEC,
    path: Path | None = None,
    client: httpx.AsyncClient | None = None,
) -> Credential:
    """Refresh the credential if it is stale, export new tokens, then persist.

    Returns the credential that was written. On ``RefreshFailed`` nothing is
    exported and the credentials file is left as it was.
    """
    now = _now()
    expires_at = int(credential.expires_at)

    current = credential
    if is_token_stale(expires_at, now):
        logger.info("Access token is expired or will expire soon, attempting to refresh...")
        result = await refresh_access_token(
            credential.refresh_token,
            token_url=token_url,
            timeout=timeout,
            client=client,
        )
        # Anchored to the time before the request, so the lifetime errs short.
        current = Credential(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            expires_at=str(now + result.expires_in),
        )
        logger.info("Successfully refreshed OAuth tokens")
        _export(current, sink)
    else:
        logger.info("Access token is still valid")

    written = save_credentials_file(current, path or get_credentials_path())
    logger.info("OAuth credentials written to {}", written)
    return current
