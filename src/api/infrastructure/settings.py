"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        ACCOUNTS_DB_HOST: Database host (default: localhost)
        ACCOUNTS_DB_PORT: Database port (default: 5432)
        ACCOUNTS_DB_DATABASE: Database name (default: accounts)
        ACCOUNTS_DB_USERNAME: Database user (default: accounts)
        ACCOUNTS_DB_PASSWORD: Database password (required in production)
        ACCOUNTS_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        ACCOUNTS_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="accounts", description="Database name")
    username: str = Field(default="accounts", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections.

    Environment variables:
        ACCOUNTS_APP_NAME: Application name (default: Accounts API)
        ACCOUNTS_DEBUG: Debug mode (default: false)
        ACCOUNTS_API_PREFIX: Prefix for the user routes (default: /api)
        ACCOUNTS_PASSWORD_HASH_ROUNDS: bcrypt work factor (default: 12)
    """

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Accounts API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    api_prefix: str = Field(default="/api", description="Prefix for user routes")

    # Credential hashing
    password_hash_rounds: int = Field(
        default=12,
        description="bcrypt work factor (log2 of the number of rounds)",
        ge=4,
        le=31,
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()
