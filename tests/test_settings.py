import pytest
from pydantic import ValidationError

from claudeauth.auth.constants import TOKEN_URL
from claudeauth.auth.models import Credential
from claudeauth.config import load_settings


def _set_inputs(monkeypatch, expires_at: str = "1700000000") -> None:
    monkeypatch.setenv("INPUT_CLAUDE_ACCESS_TOKEN", "a1")
    monkeypatch.setenv("INPUT_CLAUDE_REFRESH_TOKEN", "r1")
    monkeypatch.setenv("INPUT_CLAUDE_EXPIRES_AT", expires_at)


def test_settings_read_action_inputs(monkeypatch) -> None:
    _set_inputs(monkeypatch)

    settings = load_settings()

    assert settings.credential() == Credential("a1", "r1", "1700000000")
    assert settings.token_url == TOKEN_URL
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"


def test_overrides_win_over_environment(monkeypatch) -> None:
    _set_inputs(monkeypatch)
    monkeypatch.setenv("INPUT_LOG_LEVEL", "debug")

    settings = load_settings(claude_access_token="cli-token", claude_refresh_token="")

    assert settings.claude_access_token == "cli-token"
    assert settings.claude_refresh_token == "r1"
    assert settings.log_level == "DEBUG"


def test_missing_inputs_raise() -> None:
    with pytest.raises(ValidationError):
        load_settings()


def test_non_integer_expiry_raises(monkeypatch) -> None:
    _set_inputs(monkeypatch, expires_at="tomorrow")

    with pytest.raises(ValidationError):
        load_settings()
