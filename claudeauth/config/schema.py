"""Settings read from the CI environment using pydantic-settings.

GitHub Actions exposes action inputs as ``INPUT_<NAME>`` environment
variables, so every field here is read with that prefix, e.g.
``INPUT_CLAUDE_ACCESS_TOKEN``.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from claudeauth.auth.constants import REQUEST_TIMEOUT_SEC, TOKEN_URL
from claudeauth.auth.models import Credential


class Settings(BaseSettings):
    """Action inputs."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        case_sensitive=False,
        extra="ignore",
    )

    claude_access_token: str
    claude_refresh_token: str
    claude_expires_at: str

    token_url: str = TOKEN_URL
    timeout: float = REQUEST_TIMEOUT_SEC
    log_level: str = "INFO"

    @field_validator("claude_expires_at")
    @classmethod
    def validate_expires_at(cls, v: str) -> str:
        v = v.strip()
        int(v)  # raises ValueError, reported by pydantic as a validation error
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    def credential(self) -> Credential:
        return Credential(
            access_token=self.claude_access_token,
            refresh_token=self.claude_refresh_token,
            expires_at=self.claude_expires_at,
        )


def load_settings(**overrides: str) -> Settings:
    """Build settings from the environment; non-empty overrides win."""
    values = {k: v for k, v in overrides.items() if v}
    return Settings(**values)
