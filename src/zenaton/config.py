"""
Configuration for the Zenaton client.

Uses Pydantic Settings for validation and environment loading.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WORKER_URL = "http://localhost"
DEFAULT_WORKER_PORT = 4001
DEFAULT_API_URL = "https://api.zenaton.com/v1"


class ClientConfig(BaseSettings):
    """Master configuration for the Zenaton client.

    Loads from environment variables with ZENATON_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="ZENATON_",
        env_file=".env",
        extra="ignore",
    )

    # Endpoints
    worker_url: str = Field(
        default=DEFAULT_WORKER_URL, description="Local worker agent host"
    )
    worker_port: int = Field(
        default=DEFAULT_WORKER_PORT, description="Local worker agent port"
    )
    api_url: str = Field(default=DEFAULT_API_URL, description="Zenaton API base URL")

    # Credentials (only read by the CLI, which hands them to init())
    app_id: Optional[str] = Field(default=None)
    api_token: Optional[str] = Field(default=None)
    app_env: Optional[str] = Field(default=None)

    http_timeout: float = Field(
        default=30.0, description="Transport timeout in seconds"
    )
    strict_credentials: bool = Field(
        default=False,
        description="Raise instead of warning when credentials are missing",
    )
    log_level: str = Field(default="INFO")

    @field_validator("worker_url", "api_url", "worker_port", mode="before")
    @classmethod
    def _blank_means_default(cls, value, info):
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        return cls(
            worker_url=os.getenv("ZENATON_WORKER_URL", DEFAULT_WORKER_URL),
            worker_port=os.getenv("ZENATON_WORKER_PORT", str(DEFAULT_WORKER_PORT)),
            api_url=os.getenv("ZENATON_API_URL", DEFAULT_API_URL),
            app_id=os.getenv("ZENATON_APP_ID"),
            api_token=os.getenv("ZENATON_API_TOKEN"),
            app_env=os.getenv("ZENATON_APP_ENV"),
            http_timeout=float(os.getenv("ZENATON_HTTP_TIMEOUT", "30.0")),
            strict_credentials=os.getenv("ZENATON_STRICT_CREDENTIALS", "false"),
            log_level=os.getenv("ZENATON_LOG_LEVEL", "INFO"),
        )


_config: Optional[ClientConfig] = None


def get_config() -> ClientConfig:
    """Get or create the global client configuration."""
    global _config
    if _config is None:
        _config = ClientConfig()
    return _config
