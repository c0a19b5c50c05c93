"""Core configuration.

Centralizes environment variables (pydantic-settings) so adapters and the CLI
read timeouts, intervals and paths the same way.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fixed interval between two watch-mode cycles.
WATCH_INTERVAL_SECONDS = 10.0

CONFIG_FILENAMES: tuple[str, ...] = (
    ".graphqlconfig",
    ".graphqlconfig.json",
    ".graphqlconfig.yml",
    ".graphqlconfig.yaml",
)


class AppSettings(BaseSettings):
    """Application settings.

    Every field can be overridden with a `GQL_SYNC_`-prefixed environment
    variable or from a local `.env` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GQL_SYNC_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per introspection request (seconds).",
    )
    user_agent: str = Field(
        default="graphql-schema-sync/0.1",
        min_length=1,
        description="User-Agent sent with introspection requests.",
    )
    watch_interval_seconds: float = Field(
        default=WATCH_INTERVAL_SECONDS,
        gt=0,
        description="Delay between two cycles in watch mode (seconds).",
    )
    config_path: Path | None = Field(
        default=None,
        description="Explicit path to the .graphqlconfig file (skips discovery).",
    )
