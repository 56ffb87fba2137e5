import logging
from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine configuration using Pydantic BaseSettings.
    Loads values from environment variables and an optional .env file.
    """

    # Application Settings
    PROJECT_NAME: str = "Surplus Food Marketplace Engine"
    VERSION: str = "0.1.0"
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("plain", description="Log format: plain, colored or json")

    # Availability Clock
    STORE_UTC_OFFSET_HOURS: float = Field(
        5.0, description="Fixed UTC offset (hours) used to compute the local minute-of-day for opening hours"
    )

    # Discovery Settings
    DISCOVERY_DEFAULT_LIMIT: int = Field(10, description="Default number of stores returned by discovery")
    DISCOVERY_MAX_LIMIT: int = Field(50, description="Upper bound for caller-provided discovery limits")
    DISCOVERY_DEFAULT_RADIUS_KM: float | None = Field(
        None, description="Optional search radius in km (None = unlimited)"
    )

    # Order Settings
    ORDER_CODE_LENGTH: int = Field(6, description="Length of human-readable order/product codes")
    ORDER_CODE_MAX_ATTEMPTS: int = Field(10, description="Max attempts to generate a non-colliding code")
    MAX_PENDING_ORDERS_PER_BUYER: int = Field(10, description="Open (pending) order limit per buyer")

    # Key-Value Store (sessions, rate limiting)
    KEY_VALUE_BACKEND: str = Field("memory", description="Keyed TTL store backend: memory or redis")
    REDIS_HOST: str = Field("localhost", description="Redis host")
    REDIS_PORT: int = Field(6379, description="Redis port")
    REDIS_DB: int = Field(0, description="Redis database")
    REDIS_PASSWORD: str | None = Field(None, description="Redis password")

    # Conversation Sessions & Rate Limiting
    SESSION_TTL_SECONDS: int = Field(1800, description="Conversation session expiry in seconds")
    RATE_LIMIT_MAX_REQUESTS: int = Field(30, description="Requests allowed per window and user")
    RATE_LIMIT_WINDOW_SECONDS: int = Field(60, description="Rate limit window in seconds")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("plain", "colored", "json"):
            raise ValueError("LOG_FORMAT must be 'plain', 'colored' or 'json'")
        return v

    @field_validator("STORE_UTC_OFFSET_HOURS")
    @classmethod
    def validate_utc_offset(cls, v):
        if not -12 <= v <= 14:
            raise ValueError("STORE_UTC_OFFSET_HOURS must be between -12 and 14")
        return v

    @field_validator("DISCOVERY_DEFAULT_LIMIT", "DISCOVERY_MAX_LIMIT")
    @classmethod
    def validate_discovery_limit(cls, v):
        if v < 1:
            raise ValueError("Discovery limits must be at least 1")
        return v

    @field_validator("ORDER_CODE_LENGTH")
    @classmethod
    def validate_code_length(cls, v):
        if v < 4 or v > 32:
            raise ValueError("ORDER_CODE_LENGTH must be between 4 and 32")
        return v

    @field_validator("ORDER_CODE_MAX_ATTEMPTS", "MAX_PENDING_ORDERS_PER_BUYER")
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @field_validator("KEY_VALUE_BACKEND")
    @classmethod
    def validate_backend(cls, v):
        if v not in ("memory", "redis"):
            raise ValueError("KEY_VALUE_BACKEND must be 'memory' or 'redis'")
        return v

    @computed_field
    @property
    def redis_url(self) -> str:
        """Build the Redis connection URL."""
        if self.REDIS_PASSWORD:
            return f"redis://:{self.REDIS_PASSWORD}@{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the engine runs in a development environment."""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Cached settings instance
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached instance (used by tests that patch the environment)."""
    global _settings_instance
    _settings_instance = None
