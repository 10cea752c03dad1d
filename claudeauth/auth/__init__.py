"""Claude OAuth credential handling."""

from claudeauth.auth.errors import AuthError, RefreshFailed
from claudeauth.auth.flow import ensure_fresh_credentials, is_token_stale, refresh_access_token
from claudeauth.auth.models import Credential, RefreshResult
from claudeauth.auth.sink import GitHubActionsSink, HostSink

__all__ = [
    "AuthError",
    "Credential",
    "GitHubActionsSink",
    "HostSink",
    "RefreshFailed",
    "RefreshResult",
    "ensure_fresh_credentials",
    "is_token_stale",
    "refresh_access_token",
]
