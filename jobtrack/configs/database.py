"""
Database configuration settings.

Manages job store connection parameters for SQLAlchemy.
Pool parameters only apply to server databases; SQLite ignores them.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from jobtrack.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Job store database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JOBTRACK_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite:///./jobtrack.db",
        description="SQLAlchemy database URL for the job store",
    )

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    pool_pre_ping: bool = Field(default=True, description="Verify connections before use")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def is_sqlite(self) -> bool:
        """
        Whether the configured URL targets SQLite.

        Returns:
            bool: True for sqlite:// URLs (file or in-memory)
        """
        return self.url.startswith("sqlite")

    @property
    def engine_options(self) -> dict:
        """
        Keyword arguments for create_engine derived from these settings.

        Returns:
            dict: Engine options; pool sizing is omitted for SQLite
        """
        options: dict = {
            "echo": self.echo_sql,
            "pool_pre_ping": self.pool_pre_ping,
        }
        if not self.is_sqlite:
            options.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_timeout=self.pool_timeout,
            )
        return options
