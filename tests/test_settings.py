"""
Test suite for configuration settings.

System role: Verification of pydantic-settings configuration
"""

import pytest

from jobtrack.configs import get_settings
from jobtrack.configs.database import DatabaseSettings


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_defaults_should_target_local_sqlite(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JOBTRACK_DB_URL", raising=False)

        settings = DatabaseSettings(_env_file=None)

        assert settings.url == "sqlite:///./jobtrack.db"
        assert settings.is_sqlite

    def test_url_should_load_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOBTRACK_DB_URL", "postgresql://jobs@db/jobs")

        settings = DatabaseSettings(_env_file=None)

        assert settings.url == "postgresql://jobs@db/jobs"
        assert not settings.is_sqlite

    def test_engine_options_should_omit_pool_sizing_for_sqlite(self) -> None:
        settings = DatabaseSettings(_env_file=None, url="sqlite://")

        assert settings.engine_options == {"echo": False, "pool_pre_ping": True}

    def test_engine_options_should_include_pool_sizing_for_server_db(self) -> None:
        settings = DatabaseSettings(
            _env_file=None,
            url="postgresql://jobs@db/jobs",
            pool_size=3,
            max_overflow=4,
            pool_timeout=5,
        )

        assert settings.engine_options == {
            "echo": False,
            "pool_pre_ping": True,
            "pool_size": 3,
            "max_overflow": 4,
            "pool_timeout": 5,
        }


class TestGetSettings:
    """Test suite for get_settings."""

    def test_should_return_cached_instance(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
