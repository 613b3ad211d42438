"""
Core configuration module.
Organized into separate settings classes for better maintainability.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API configuration settings."""

    app_name: str = "Maintenance Desk"
    app_version: str = "1.0.0"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class CORSSettings(BaseSettings):
    """CORS configuration settings."""

    origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Parse origins from JSON array string or comma-separated list."""
        if isinstance(v, str):
            import json
            try:
                # Try parsing as JSON array first (preferred format)
                return json.loads(v)
            except json.JSONDecodeError:
                # Fallback to comma-separated list
                return [origin.strip() for origin in v.split(",")]
        return v


class RateLimitSettings(BaseSettings):
    """Rate limiting settings (slowapi)."""

    enabled: bool = True
    default_limit: str = "120/minute"

    model_config = SettingsConfigDict(
        env_prefix="RATE_LIMIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = "INFO"
    enable_file_logging: bool = True
    log_dir: str = "logs"
    max_size: int = 10_485_760  # 10MB
    backup_count: int = 5
    enable_console_logging: bool = True

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def log_config(self) -> dict:
        """Get logging configuration."""
        return {
            "level": self.level,
            "enable_file_logging": self.enable_file_logging,
            "log_dir": self.log_dir,
            "max_file_size": self.max_size,
            "backup_count": self.backup_count,
            "enable_console": self.enable_console_logging,
        }


class PaginationSettings(BaseSettings):
    """Pagination configuration settings."""

    default_page_size: int = Field(default=5, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class SeedSettings(BaseSettings):
    """Demo data settings for the in-memory request store."""

    load_demo_requests: bool = Field(
        default=True,
        description="Seed the request store with the demo ticket set at startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="SEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class Settings(BaseSettings):
    """Main application settings."""

    api: APISettings = APISettings()
    cors: CORSSettings = CORSSettings()
    rate_limit: RateLimitSettings = RateLimitSettings()
    logging: LoggingSettings = LoggingSettings()
    pagination: PaginationSettings = PaginationSettings()
    seed: SeedSettings = SeedSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()
