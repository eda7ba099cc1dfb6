"""Configuration system for the agent tool set."""

from .parser import ConfigParser
from .schema import AgentConfig, AppConfig, BuildContext, SandboxPolicy, ToolPolicy
from .settings import ToolsSettings, get_settings, reset_settings

__all__ = [
    "ConfigParser",
    "AgentConfig",
    "AppConfig",
    "BuildContext",
    "SandboxPolicy",
    "ToolPolicy",
    "ToolsSettings",
    "get_settings",
    "reset_settings",
]
