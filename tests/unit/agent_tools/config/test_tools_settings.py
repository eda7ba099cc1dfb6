"""
Unit tests for ToolsSettings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from agent_tools.config.settings import ToolsSettings, get_settings, reset_settings


class TestToolsSettings:
    """Tests for settings defaults, environment overrides and validation."""

    def test_defaults(self, monkeypatch) -> None:
        """Test default values."""
        for name in ("WORKSPACE_ROOT", "READ_CHUNK_CHARS", "TEXT_ENCODING", "LOG_LEVEL"):
            monkeypatch.delenv(f"AGENT_TOOLS_{name}", raising=False)

        settings = ToolsSettings(_env_file=None)

        assert settings.workspace_root is None
        assert settings.read_chunk_chars == 50_000
        assert settings.text_encoding == "utf-8"
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch, tmp_path: Path) -> None:
        """Test AGENT_TOOLS_ prefixed variables."""
        monkeypatch.setenv("AGENT_TOOLS_WORKSPACE_ROOT", str(tmp_path))
        monkeypatch.setenv("AGENT_TOOLS_READ_CHUNK_CHARS", "1000")
        monkeypatch.setenv("AGENT_TOOLS_LOG_LEVEL", "debug")

        settings = ToolsSettings(_env_file=None)

        assert settings.workspace_root == tmp_path
        assert settings.read_chunk_chars == 1000
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        """Test that an unknown log level is rejected."""
        with pytest.raises(ValidationError):
            ToolsSettings(log_level="LOUD", _env_file=None)

    def test_invalid_encoding(self) -> None:
        """Test that an unknown encoding is rejected."""
        with pytest.raises(ValidationError):
            ToolsSettings(text_encoding="no-such-codec", _env_file=None)

    def test_chunk_size_must_be_positive(self) -> None:
        """Test that read_chunk_chars must be > 0."""
        with pytest.raises(ValidationError):
            ToolsSettings(read_chunk_chars=0, _env_file=None)


class TestResolvePath:
    """Tests for ToolsSettings.resolve_path."""

    def test_relative_to_workspace(self, tmp_path: Path) -> None:
        """Test that relative paths join the workspace root."""
        settings = ToolsSettings(workspace_root=tmp_path, _env_file=None)
        assert settings.resolve_path("a/b.txt") == (tmp_path / "a" / "b.txt").resolve()

    def test_absolute_unchanged(self, tmp_path: Path) -> None:
        """Test that absolute paths ignore the workspace root."""
        settings = ToolsSettings(workspace_root=tmp_path / "ws", _env_file=None)
        target = tmp_path / "elsewhere.txt"
        assert settings.resolve_path(str(target)) == target.resolve()

    def test_relative_to_cwd_without_workspace(self, tmp_path: Path, monkeypatch) -> None:
        """Test that the current directory is used when no root is set."""
        monkeypatch.delenv("AGENT_TOOLS_WORKSPACE_ROOT", raising=False)
        monkeypatch.chdir(tmp_path)
        settings = ToolsSettings(_env_file=None)
        assert settings.resolve_path("x.txt") == (tmp_path / "x.txt").resolve()


class TestSettingsCache:
    """Tests for get_settings/reset_settings."""

    def test_cached_instance(self) -> None:
        """Test that get_settings returns the same instance until reset."""
        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
