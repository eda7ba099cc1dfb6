"""
Settings for the agent tool set.

Uses Pydantic Settings to load environment variables.
All settings prefixed with AGENT_TOOLS_ for namespace isolation.
"""

import codecs
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolsSettings(BaseSettings):
    """
    Settings for the built-in tools.

    All environment variables are prefixed with AGENT_TOOLS_.
    Example: AGENT_TOOLS_WORKSPACE_ROOT, AGENT_TOOLS_READ_CHUNK_CHARS
    """

    workspace_root: Path | None = Field(
        None,
        description="Base directory for relative tool paths (default: current directory)",
    )
    read_chunk_chars: int = Field(
        50_000,
        description="Maximum characters per text block returned by the read tool",
        gt=0,
    )
    text_encoding: str = Field(
        "utf-8",
        description="Encoding used to decode non-image files",
    )

    # Logging
    log_level: str = Field(
        "INFO",
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="AGENT_TOOLS_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("text_encoding")
    @classmethod
    def validate_text_encoding(cls, v: str) -> str:
        """
        Validate the text encoding is known to Python.

        Args:
            v: Encoding name.

        Returns:
            Encoding name unchanged.

        Raises:
            ValueError: If the encoding is unknown.
        """
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is valid.

        Args:
            v: Log level string.

        Returns:
            Uppercase log level.

        Raises:
            ValueError: If log level is invalid.
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    def resolve_path(self, path: str) -> Path:
        """
        Resolve a tool path against the workspace root.

        Args:
            path: Absolute or workspace-relative path (``~`` expanded).

        Returns:
            Absolute path.
        """
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = (self.workspace_root or Path.cwd()) / candidate
        return candidate.resolve()


_settings: ToolsSettings | None = None


def get_settings() -> ToolsSettings:
    """
    Get tool settings from environment.

    Returns:
        ToolsSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = ToolsSettings()  # type: ignore[call-arg]
    return _settings


def reset_settings() -> None:
    """
    Reset settings for testing.

    Clears the cached settings instance.
    """
    global _settings
    _settings = None
