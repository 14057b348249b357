"""Tests for library settings."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

import layerconf.settings.app as settings_module
from layerconf.settings import (
    LayerconfSettings,
    get_settings,
    load_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("LAYERCONF_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)


class TestLayerconfSettings:
    """Test LayerconfSettings class."""

    def test_defaults(self) -> None:
        """Test code defaults."""
        settings = LayerconfSettings()
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.log_dir is None
        assert settings.allow_script_sources is True
        assert settings.file_encoding == "utf-8"

    def test_from_env_vars(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test values are read from LAYERCONF_ environment variables."""
        monkeypatch.setenv("LAYERCONF_LOG_LEVEL", "debug")
        monkeypatch.setenv("LAYERCONF_LOG_FORMAT", "JSON")
        monkeypatch.setenv("LAYERCONF_LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setenv("LAYERCONF_ALLOW_SCRIPT_SOURCES", "false")
        monkeypatch.setenv("LAYERCONF_FILE_ENCODING", "UTF8")

        settings = LayerconfSettings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.log_dir == (tmp_path / "logs").resolve()
        assert settings.allow_script_sources is False
        assert settings.file_encoding == "utf-8"

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("LAYERCONF_LOG_LEVEL", "INVALID"),
            ("LAYERCONF_LOG_FORMAT", "xml"),
            ("LAYERCONF_FILE_ENCODING", "not-a-codec"),
        ],
    )
    def test_validation(self, name: str, value: str, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid values are rejected."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            LayerconfSettings()

    def test_relative_log_dir_resolved(self) -> None:
        """Test relative paths are resolved to absolute."""
        settings = LayerconfSettings(log_dir="logs")
        assert settings.log_dir is not None
        assert settings.log_dir.is_absolute()


class TestSingleton:
    """Test singleton pattern."""

    def test_get_settings_returns_singleton(self) -> None:
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_reset_settings(self) -> None:
        """Test reset_settings forces a reload."""
        first = get_settings()
        reset_settings()
        assert get_settings() is not first


class TestEnvFiles:
    """Test .env handling."""

    def test_cwd_env_file_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test get_settings neither reads nor exports a .env in the working directory."""
        (tmp_path / ".env").write_text(
            "LAYERCONF_ALLOW_SCRIPT_SOURCES=false\nLAYERCONF_TEST_SECRET=leaked\n"
        )
        monkeypatch.chdir(tmp_path)

        settings = get_settings()

        assert settings.allow_script_sources is True
        assert "LAYERCONF_TEST_SECRET" not in os.environ
        assert "LAYERCONF_ALLOW_SCRIPT_SOURCES" not in os.environ

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        """Test load_settings reads an explicit .env without exporting it."""
        env_file = tmp_path / "layerconf.env"
        env_file.write_text("LAYERCONF_ALLOW_SCRIPT_SOURCES=false\nLAYERCONF_LOG_LEVEL=info\n")

        settings = load_settings(env_file)

        assert settings.allow_script_sources is False
        assert settings.log_level == "INFO"
        assert "LAYERCONF_ALLOW_SCRIPT_SOURCES" not in os.environ

    def test_process_env_wins_over_env_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test process environment variables take precedence over the file."""
        env_file = tmp_path / "layerconf.env"
        env_file.write_text("LAYERCONF_LOG_LEVEL=info\n")
        monkeypatch.setenv("LAYERCONF_LOG_LEVEL", "error")

        assert load_settings(env_file).log_level == "ERROR"

    def test_missing_env_file(self, tmp_path: Path) -> None:
        """Test a missing .env path falls back to defaults."""
        assert load_settings(tmp_path / "absent.env").log_level == "WARNING"
