"""Runtime configuration for robot-tokens.

Settings are read from ``UP_``-prefixed environment variables and an
optional ``.env`` file in the working directory; command-line flags are
passed in as overrides and win over both.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from robot_tokens.exceptions import ConfigurationError
from robot_tokens.version import __version__

DEFAULT_ENDPOINT: str = "https://api.upbound.io"


class Settings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="UP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    account: str | None = Field(
        default=None,
        description="Organization account whose robots are listed.",
    )
    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        min_length=8,
        description="Base URL of the account, organization and robot services.",
    )
    token: SecretStr | None = Field(
        default=None,
        description="Bearer token sent with every request.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Deadline for each request (seconds).",
    )
    user_agent: str = Field(
        default=f"robot-tokens/{__version__}",
        min_length=1,
    )

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("account")
    @classmethod
    def _blank_account_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    def require_account(self) -> str:
        """Return the configured account or raise :class:`ConfigurationError`."""
        if self.account is None:
            raise ConfigurationError(
                "No account configured.",
                hint="Pass --account <organization> or set UP_ACCOUNT.",
            )
        return self.account


def load_settings(**overrides: Any) -> Settings:
    """Build :class:`Settings`, letting non-``None`` *overrides* win.

    Raises
    ------
    ConfigurationError
        If any setting fails validation.
    """
    explicit = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**explicit)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration: {problems}",
            hint="Check the UP_* environment variables and command-line flags.",
        ) from exc
