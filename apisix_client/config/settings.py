"""
Configuration management for the APISIX client.

This module provides configuration classes for the default cluster and
logging, with environment variable and ``.env`` file support.
"""

from typing import Any, Dict, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class LogLevel(str, Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ClusterConfig(BaseModel):
    """Connection settings for the default APISIX cluster."""

    name: str = Field(
        default="default",
        min_length=1,
        description="Name the default cluster is registered under"
    )
    base_url: str = Field(
        default="http://127.0.0.1:9180/apisix/admin",
        description="APISIX Admin API prefix"
    )
    admin_key: str = Field(
        default="",
        description="Admin API key sent as X-API-KEY"
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        description="Request timeout in seconds"
    )

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Validate the Admin API URL scheme."""
        if not v:
            raise ValueError("Base URL cannot be empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {v}. Expected http:// or https://")
        return v.rstrip('/')


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Client log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format for plain text logging"
    )
    structured: bool = Field(
        default=False,
        description="Emit JSON formatted log lines"
    )


class Settings(BaseSettings):
    """Main client settings with environment variable support."""

    default_cluster: ClusterConfig = Field(
        default_factory=ClusterConfig,
        description="Default cluster configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_prefix": "APISIX_",
        "extra": "ignore"
    }

    def to_cluster_options(self):
        """Build ClusterOptions for the default cluster."""
        from ..models.cluster import ClusterOptions

        return ClusterOptions(**self.default_cluster.model_dump())

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


# Global settings instance, built on first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading it on first call."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment variables and files."""
    global _settings
    _settings = Settings()
    return _settings
