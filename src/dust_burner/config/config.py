# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, BURNER__PASSPHRASE.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "dust-burner"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/dust_burner.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class BurnerSettings(BaseSettings):
    """Burn engine configuration (from env BURNER__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = Field(default=False, description="Whether the burn engine runs at all.")
    passphrase: Optional[str] = Field(
        default=None,
        description="Secret of the watched account. Required when enabled.",
    )
    accumulate_dust: bool = Field(
        default=True,
        description="Carry sub-threshold amounts forward until they can be burned together.",
    )
    initialize_dust_from_balance: bool = Field(
        default=True,
        description="Seed the dust balance with the watched wallet's balance at boot.",
    )
    memo_max_length: int = Field(
        default=255,
        ge=1,
        le=1024,
        description="Maximum memo length accepted by the network.",
    )


class NetworkSettings(BaseSettings):
    """Network parameters used for address derivation and signing (from env NETWORK__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    name: str = "mainnet"
    version: int = Field(
        default=63,
        ge=0,
        le=255,
        description="Address version byte (63 = mainnet 'S' addresses, 30 = testnet 'D').",
    )


class NodeSettings(BaseSettings):
    """Node public API configuration (from env NODE__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    api_host: str = Field(
        default="http://127.0.0.1:6003/api",
        description="Node public API base URL.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Maximum number of attempts for failed requests.",
    )
    poll_seconds: float = Field(
        default=2.0,
        ge=0.5,
        le=60.0,
        description="Polling interval in seconds for new blocks.",
    )
    page_size: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Page size when listing the transactions of a block.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, NODE__API_HOST.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    burner: BurnerSettings = Field(default_factory=BurnerSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    node: NodeSettings = Field(default_factory=NodeSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(burner={"enabled": True, "passphrase": "..."}).

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from dust_burner.config import get_settings

        settings = get_settings()
        poll = settings.node.poll_seconds
    """
    return Settings()
