"""
Agent Tools - coding tool set builder

This package builds the callable tool set exposed to a coding agent:
- Discriminated-union parameter schemas merged into one display schema
- 3-stage surface/sandbox/agent policy filter
- Read tool with content-based image/text classification
- YAML configuration and environment settings
"""

from .builder import build, create_coding_tools
from .config import BuildContext, ConfigParser, SandboxPolicy, ToolPolicy
from .content import ImageContent, TextContent, ToolResult
from .exceptions import (
    AgentToolsError,
    ConfigError,
    ReadError,
    ReadErrorKind,
    SchemaMergeError,
    ToolArgumentsError,
)
from .tools import ToolDefinition, ToolSpec, ToolsRegistry, create_default_registry

__version__ = "0.1.0"

__all__ = [
    "AgentToolsError",
    "BuildContext",
    "ConfigError",
    "ConfigParser",
    "ImageContent",
    "ReadError",
    "ReadErrorKind",
    "SandboxPolicy",
    "SchemaMergeError",
    "TextContent",
    "ToolArgumentsError",
    "ToolDefinition",
    "ToolPolicy",
    "ToolResult",
    "ToolSpec",
    "ToolsRegistry",
    "build",
    "create_coding_tools",
    "create_default_registry",
]
