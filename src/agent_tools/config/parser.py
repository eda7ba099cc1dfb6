"""
Configuration Parser for the agent tool set.

Loads a YAML file holding the sandbox policy and agent tool policy and turns
it into a :class:`BuildContext`. Supports environment variable expansion
using ${VAR} or ${VAR:-default} syntax.

Example file::

    sandbox:
      enabled: true
      tools:
        allow: [bash, process]
        deny: [browser]
    agent:
      tools:
        deny: ["${DENIED_TOOL:-canvas}"]
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from .schema import AppConfig, BuildContext, SandboxPolicy

logger = logging.getLogger(__name__)

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::-(.*?))?\}")


class ConfigParser:
    """
    YAML configuration parser with environment variable expansion.

    Usage:
        parser = ConfigParser("config/tools.yaml")
        context = parser.load(surface="discord")
    """

    def __init__(self, config_path: str | Path) -> None:
        """
        Initialize parser with configuration file path.

        Args:
            config_path: Path to YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}"
            )

    def load(self, surface: str | None = None) -> BuildContext:
        """
        Load and parse configuration file.

        Args:
            surface: Conversational surface to put into the context.

        Returns:
            Parsed build context

        Raises:
            ConfigError: If the YAML is invalid or has the wrong shape
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(str(e), source=str(self.config_path)) from e

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigError(
                f"expected dict, got {type(raw_config).__name__}",
                source=str(self.config_path),
            )

        expanded = self._expand_env_vars(raw_config)
        context = self._parse_config(expanded, surface)

        logger.info(
            f"📖 Loaded tool config from {self.config_path} "
            f"(sandbox={'on' if context.sandbox and context.sandbox.enabled else 'off'}, "
            f"agent_policy={'yes' if context.agent_tools else 'no'})"
        )
        return context

    def _expand_env_vars(self, config: Any) -> Any:
        """
        Recursively expand ${ENV_VAR} and ${ENV_VAR:-default} placeholders.

        Args:
            config: Configuration value (can be dict, list, str, etc.)

        Returns:
            Configuration with environment variables expanded
        """

        def replacer(match: re.Match[str]) -> str:
            default = match.group(2) or ""
            return os.getenv(match.group(1), default)

        def expand_value(value: Any) -> Any:
            if isinstance(value, str):
                return _ENV_PATTERN.sub(replacer, value)
            elif isinstance(value, dict):
                return {k: expand_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [expand_value(v) for v in value]
            else:
                return value

        return expand_value(config)

    def _parse_config(self, raw: dict[str, Any], surface: str | None) -> BuildContext:
        """
        Parse raw dictionary into a BuildContext.

        Args:
            raw: Raw configuration dictionary
            surface: Conversational surface

        Returns:
            Validated build context

        Raises:
            ConfigError: If configuration is invalid
        """
        try:
            sandbox_raw = raw.get("sandbox")
            sandbox = (
                SandboxPolicy.model_validate(sandbox_raw)
                if sandbox_raw is not None
                else None
            )
            config = AppConfig.model_validate(
                {k: v for k, v in raw.items() if k != "sandbox"}
            )
            return BuildContext(surface=surface, sandbox=sandbox, config=config)
        except ValidationError as e:
            raise ConfigError(str(e), source=str(self.config_path)) from e
