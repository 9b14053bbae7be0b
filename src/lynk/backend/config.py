"""Configuration management module"""
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

DEFAULT_CHANNEL_TTL_SECONDS = 15 * 60  # 15 minutes
MAX_CHANNEL_BYTES = 100 * 1024 * 1024  # 100 MiB
MAX_REQUEST_BYTES = 200 * 1024 * 1024  # headroom for base64 expansion


def get_instance_path() -> Path:
    """Get the current instance path from environment or default"""
    instance_path = os.environ.get("LYNK_INSTANCE_PATH")
    if instance_path:
        return Path(instance_path).expanduser()
    return Path.home() / ".lynk"


def get_config_file() -> Path | None:
    """Get config file path if it exists"""
    config_file = get_instance_path() / "config.toml"
    if config_file.exists():
        return config_file
    return None


class Settings(BaseSettings):
    """System configuration settings

    Sources, highest priority first: constructor arguments, LYNK_*
    environment variables, .env file, {instance_path}/config.toml.
    """

    # Application basic configuration
    app_name: str = "Lynk"
    app_version: str = "0.1.0"
    debug: bool = False

    # Store configuration
    store_backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://127.0.0.1:6379"

    # Channel configuration
    channel_ttl_seconds: int = DEFAULT_CHANNEL_TTL_SECONDS
    max_channel_bytes: int = MAX_CHANNEL_BYTES
    max_request_bytes: int = MAX_REQUEST_BYTES
    password_protection: bool = False

    # CORS configuration
    cors_origins: list[str] = ["*"]

    # Server configuration
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    # Logging configuration
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="LYNK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("channel_ttl_seconds")
    @classmethod
    def validate_channel_ttl(cls, v: int) -> int:
        """Non-positive TTLs fall back to the default"""
        if v <= 0:
            return DEFAULT_CHANNEL_TTL_SECONDS
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML file"""
        config_file = get_config_file()
        if config_file:
            toml_settings = TomlConfigSettingsSource(
                settings_cls, toml_file=config_file
            )
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                toml_settings,
                file_secret_settings,
            )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


def load_settings(instance_path: Path | None = None, **overrides) -> Settings:
    """Load settings, optionally for a specific instance directory

    Args:
        instance_path: Instance directory holding config.toml
        **overrides: Explicit values that win over every other source

    Returns:
        Settings instance
    """
    if instance_path is None:
        return Settings(**overrides)

    # Point get_config_file() at the instance only while the sources are read
    previous = os.environ.get("LYNK_INSTANCE_PATH")
    os.environ["LYNK_INSTANCE_PATH"] = str(instance_path)
    try:
        return Settings(**overrides)
    finally:
        if previous is None:
            del os.environ["LYNK_INSTANCE_PATH"]
        else:
            os.environ["LYNK_INSTANCE_PATH"] = previous
