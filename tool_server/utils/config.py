"""Configuration loading utilities."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerInfoConfig(BaseModel):
    """Server identity advertised to clients."""

    name: str | None = None
    version: str | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str | None = None


class ServerConfig(BaseModel):
    """Complete server configuration file."""

    server: ServerInfoConfig = Field(default_factory=ServerInfoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Settings(BaseSettings):
    """Environment-based settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server_name: str = "my-mcp-server"
    server_version: str = "1.0.0"
    log_level: str = "INFO"


def load_config(config_path: str | Path) -> ServerConfig:
    """Load server configuration from YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return ServerConfig.model_validate(data or {})


def get_settings(config_path: str | Path | None = None) -> Settings:
    """Get environment-based settings, overridden by a config file if given."""
    if config_path is None:
        return Settings()

    config = load_config(config_path)
    overrides = {
        "server_name": config.server.name,
        "server_version": config.server.version,
        "log_level": config.logging.level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
