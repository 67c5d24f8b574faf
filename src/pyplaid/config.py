"""Settings for applications built on pyplaid.

This module provides a Pydantic Settings-based configuration object loaded
from ``PLAID_*`` environment variables and ``.env`` files. The client library
never reads it on its own; ``Builder.from_settings`` and the CLI do.
"""

from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .transport import DEFAULT_TIMEOUT_SECONDS


class PlaidSettings(BaseSettings):
    """Plaid API settings with environment variable integration.

    Environment variables are loaded with the PLAID_ prefix, e.g.
    ``PLAID_CLIENT_ID``, ``PLAID_SECRET`` and ``PLAID_TIMEOUT``. The
    environment is read from ``PLAID_ENV`` or ``PLAID_ENVIRONMENT``.
    """

    client_id: str = Field(default="", description="Plaid client ID")
    secret: str = Field(default="", description="Plaid secret key", repr=False)
    environment: Literal["sandbox", "development", "production"] = Field(
        default="sandbox",
        validation_alias=AliasChoices("plaid_env", "plaid_environment"),
        description="Plaid environment",
    )
    base_url: str | None = Field(
        default=None, description="Override the environment's API host"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP timeout in seconds",
    )
    page_size: int = Field(
        default=100, ge=1, le=500, description="Items requested per page"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLAID_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: object) -> object:
        """Accept any casing, e.g. ``PLAID_ENV=Sandbox``."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def validate_required_credentials(self) -> None:
        """Validate that required credentials are present.

        Raises:
            ConfigurationError: If the client ID or secret is empty
        """
        errors: list[str] = []

        if not self.client_id:
            errors.append("PLAID_CLIENT_ID is required")
        if not self.secret:
            errors.append("PLAID_SECRET is required")

        if errors:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(errors)}"
            )


_settings: PlaidSettings | None = None


def get_settings() -> PlaidSettings:
    """Get the cached settings instance, loading it on first use.

    Returns:
        PlaidSettings: The configuration instance

    Raises:
        pydantic.ValidationError: If an environment variable holds an invalid value
    """
    global _settings

    if _settings is None:
        _settings = PlaidSettings()
    return _settings


def reload_settings() -> PlaidSettings:
    """Reload settings from environment variables.

    Useful for testing or when environment variables change at runtime.
    """
    clear_settings_cache()
    return get_settings()


def clear_settings_cache() -> None:
    global _settings
    _settings = None
