"""Unit tests for environment-based settings."""

import pytest
from pydantic import ValidationError

from row_transform.config import Settings, get_settings
from row_transform.infrastructure.transformations import TransformContext


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_timezone == "UTC"
        assert settings.templates_dir == "./config/templates"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.ENVIRONMENT == "dev"

    def test_prefixed_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("RT_DEFAULT_TIMEZONE", " Europe/Paris ")
        monkeypatch.setenv("RT_TEMPLATES_DIR", "/srv/templates")

        settings = Settings(_env_file=None)

        assert settings.default_timezone == "Europe/Paris"
        assert settings.templates_dir == "/srv/templates"

    def test_unprefixed_fields(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ENVIRONMENT", "prod")

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.ENVIRONMENT == "prod"

    def test_blank_timezone_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("RT_DEFAULT_TIMEZONE", "   ")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_context_uses_configured_zone(self, monkeypatch) -> None:
        monkeypatch.setenv("RT_DEFAULT_TIMEZONE", "Asia/Tokyo")
        get_settings.cache_clear()

        assert TransformContext.from_settings().default_zone == "Asia/Tokyo"
