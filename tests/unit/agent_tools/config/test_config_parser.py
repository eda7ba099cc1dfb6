"""
Unit tests for ConfigParser.

Tests cover YAML loading, environment variable expansion and error handling.
"""

from pathlib import Path

import pytest

from agent_tools.config.parser import ConfigParser
from agent_tools.exceptions import ConfigError


def write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "tools.yaml"
    path.write_text(content)
    return path


class TestConfigParserLoad:
    """Tests for ConfigParser.load."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ConfigParser(tmp_path / "nope.yaml")

    def test_full_config(self, tmp_path: Path) -> None:
        """Test parsing sandbox and agent sections."""
        path = write_config(
            tmp_path,
            """
sandbox:
  enabled: true
  image: sandbox:latest
  tools:
    allow: [bash, process]
    deny: [browser]
agent:
  model: some-model
  tools:
    deny: [canvas]
""",
        )

        context = ConfigParser(path).load(surface="discord")

        assert context.surface == "discord"
        assert context.sandbox.enabled is True
        assert context.sandbox.tools.allow == ("bash", "process")
        assert context.sandbox.tools.deny == ("browser",)
        assert context.agent_tools.deny == ("canvas",)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file yields an empty context."""
        context = ConfigParser(write_config(tmp_path, "")).load()

        assert context.sandbox is None
        assert context.agent_tools is None

    def test_env_var_expansion(self, tmp_path: Path, monkeypatch) -> None:
        """Test ${VAR} expansion."""
        monkeypatch.setenv("DENIED_TOOL", "nodes")
        path = write_config(tmp_path, 'agent:\n  tools:\n    deny: ["${DENIED_TOOL}"]\n')

        context = ConfigParser(path).load()
        assert context.agent_tools.deny == ("nodes",)

    def test_env_var_default(self, tmp_path: Path, monkeypatch) -> None:
        """Test ${VAR:-default} falls back when unset."""
        monkeypatch.delenv("DENIED_TOOL", raising=False)
        path = write_config(tmp_path, 'agent:\n  tools:\n    deny: ["${DENIED_TOOL:-cron}"]\n')

        context = ConfigParser(path).load()
        assert context.agent_tools.deny == ("cron",)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        """Test that a top-level list raises ConfigError."""
        path = write_config(tmp_path, "- bash\n- read\n")

        with pytest.raises(ConfigError, match="expected dict"):
            ConfigParser(path).load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that malformed YAML raises ConfigError."""
        path = write_config(tmp_path, "sandbox: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            ConfigParser(path).load()
        assert exc_info.value.source == str(path)

    def test_bad_policy_shape(self, tmp_path: Path) -> None:
        """Test that a string allow list raises ConfigError."""
        path = write_config(tmp_path, "sandbox:\n  enabled: true\n  tools:\n    allow: bash\n")

        with pytest.raises(ConfigError):
            ConfigParser(path).load()
