"""Application configuration via Pydantic Settings v2."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "supplydb"
    app_env: Literal["development", "testing", "staging", "production"] = "development"
    debug: bool = False

    # Database
    # Either a full URL or the individual POSTGRES_* parts may be given.
    database_url: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "supplydb"
    postgres_password: str = "supplydb"
    postgres_dbname: str = "supplydb"
    database_ssl: Literal["disable", "prefer", "require"] = "prefer"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Seeder
    seeder_product_sample_size: int = 10
    seeder_batch_size: int = 1000
    seeder_allow_production: bool = False
    password_hash_algorithm: Literal["md5", "bf", "xdes", "des"] = "md5"

    @field_validator("seeder_product_sample_size", "seeder_batch_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject non-positive sizes.

        Args:
            v: Configured size.

        Returns:
            Validated size.

        Raises:
            ValueError: If the size is zero or negative.
        """
        if v < 1:
            raise ValueError(f"Size must be at least 1, got {v}")
        return v

    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        """Build database_url from the POSTGRES_* parts when it is not set."""
        if not self.database_url:
            self.database_url = URL.create(
                "postgresql+asyncpg",
                username=self.postgres_user,
                password=self.postgres_password,
                host=self.postgres_host,
                port=self.postgres_port,
                database=self.postgres_dbname,
            ).render_as_string(hide_password=False)
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.app_env == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
