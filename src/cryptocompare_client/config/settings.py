# src/cryptocompare_client/config/settings.py
"""Client configuration using pydantic-settings.
Includes CryptoCompare API root, key, timeout and logging settings.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_ROOT = "https://min-api.cryptocompare.com/"


# Base configuration class with common settings
class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class CryptoCompareConfig(BaseAppSettings):
    api_root: str = Field(DEFAULT_API_ROOT, validation_alias="CRYPTOCOMPARE_API_ROOT")
    api_key: Optional[str] = Field(None, validation_alias="CRYPTOCOMPARE_API_KEY")
    timeout: float = Field(10.0, validation_alias="CRYPTOCOMPARE_TIMEOUT")
    user_agent: str = Field(
        "cryptocompare-client", validation_alias="CRYPTOCOMPARE_USER_AGENT"
    )


class LoggingConfig(BaseAppSettings):
    level: str = Field("INFO", validation_alias="LOG_LEVEL")


class Settings(BaseAppSettings):
    cryptocompare: CryptoCompareConfig = Field(default_factory=CryptoCompareConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Override model_config to add nested delimiter
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Helper to get a settings instance"""
    return Settings()
