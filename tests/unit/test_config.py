"""
Tests pour Settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import Settings


class TestSettings:
    """Tests pour le chargement de la configuration."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("CATALOG_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_file == Path("logs/catalog.log")
        assert settings.log_rotation_size == "10 MB"
        assert settings.log_retention_count == 5

    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")
        monkeypatch.setenv("CATALOG_LOG_RETENTION_COUNT", "3")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_retention_count == 3

    def test_log_file_home_expansion(self) -> None:
        settings = Settings(_env_file=None, log_file="~/catalog.log")
        assert settings.log_file == Path.home() / "catalog.log"

    def test_retention_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_retention_count=0)
