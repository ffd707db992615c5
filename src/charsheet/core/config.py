"""Configuration management for the character sheet editor.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. The rules engine itself has no tunables: point
budgets are fixed constants (see ``charsheet.core.constants``). What can be
configured is where the character is synchronized and how the app logs.

Example:
    >>> from charsheet.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.sync.character_url
    'https://recruiting.verylongdomaintotestwith.ca/api/ukai18/character'

Environment Variables:
    CHARSHEET_SYNC_API_BASE_URL: Base URL of the remote character store
    CHARSHEET_SYNC_USERNAME: Account name the character is stored under
    CHARSHEET_SYNC_TIMEOUT_SECONDS: Request timeout for load/save
    CHARSHEET_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CHARSHEET_JSON_LOGS: Emit JSON log lines instead of console output
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from charsheet.core.exceptions import ConfigurationError


class SyncSettings(BaseSettings):
    """Configuration for the remote character store.

    Attributes:
        api_base_url: Base URL of the character store API.
        username: Account segment of the character URL.
        timeout_seconds: Request timeout for a single load or save.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_SYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://recruiting.verylongdomaintotestwith.ca/api",
        description="Base URL of the remote character store",
    )
    username: str = Field(
        default="ukai18",
        min_length=1,
        description="Account the character is stored under",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Request timeout for load and save",
    )

    @field_validator("api_base_url", mode="after")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Ensure the base URL is an http(s) URL and strip a trailing slash.

        Args:
            value: The configured base URL.

        Returns:
            The normalized base URL.

        Raises:
            ConfigurationError: If the URL does not use http or https.
        """
        if not value.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"api_base_url must be an http(s) URL, got {value!r}",
                config_key="api_base_url",
            )
        return value.rstrip("/")

    @property
    def character_url(self) -> str:
        """URL used both to fetch and to save the character."""
        return f"{self.api_base_url}/{self.username}/character"


class UISettings(BaseSettings):
    """Configuration for the Streamlit UI.

    Attributes:
        page_title: Browser page title.
        layout: Streamlit page layout.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_title: str = Field(
        default="Character Sheet",
        description="Browser page title",
    )
    layout: Literal["centered", "wide"] = Field(
        default="wide",
        description="Streamlit page layout",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode (forces DEBUG logging).
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        sync: Remote character store settings.
        ui: UI settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Character Sheet Editor",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    sync: SyncSettings = Field(default_factory=SyncSettings)
    ui: UISettings = Field(default_factory=UISettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "SyncSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
