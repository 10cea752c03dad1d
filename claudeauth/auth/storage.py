"""Credential file helpers."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from claudeauth.auth.constants import CREDENTIALS_DIRNAME, CREDENTIALS_FILENAME, SCOPES
from claudeauth.auth.models import Credential
from claudeauth.config.loader import convert_keys, convert_to_camel
from claudeauth.utils.helpers import ensure_dir, get_home_path


def get_credentials_path(home: Path | None = None) -> Path:
    return (home or get_home_path()) / CREDENTIALS_DIRNAME / CREDENTIALS_FILENAME


def build_credentials_document(credential: Credential) -> dict[str, Any]:
    """Build the on-disk document; ``expiresAt`` becomes a number here."""
    return convert_to_camel(
        {
            "claude_ai_oauth": {
                "access_token": credential.access_token,
                "refresh_token": credential.refresh_token,
                "expires_at": int(credential.expires_at),
                "scopes": list(SCOPES),
            }
        }
    )


def save_credentials_file(credential: Credential, path: Path | None = None) -> Path:
    path = path or get_credentials_path()
    content = json.dumps(build_credentials_document(credential), indent=2)
    ensure_dir(path.parent)

    # The target always holds either the previous or the new complete document.
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        try:
            os.chmod(tmp_path, 0o600)
        except OSError:
            # Ignore permission setting failures.
            pass
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    return path


def load_credentials_file(path: Path | None = None) -> Credential | None:
    path = path or get_credentials_path()
    if not path.exists():
        return None
    data = convert_keys(json.loads(path.read_text(encoding="utf-8")))
    try:
        oauth = data["claude_ai_oauth"]
        return Credential(
            access_token=oauth["access_token"],
            refresh_token=oauth["refresh_token"],
            expires_at=str(int(oauth["expires_at"])),
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed credentials file {path}: {e}") from e
