"""Tools registry and implementations."""

from .automation import create_cron_tool, create_gateway_tool
from .base import Executor, ToolDefinition, ToolSpec, action_variant, unbound_executor
from .catalog import create_default_registry, default_tool_specs
from .clients import create_browser_tool, create_canvas_tool, create_nodes_tool
from .execution import create_bash_tool, create_process_tool
from .filesystem import create_edit_tool, create_read_tool, create_write_tool
from .messaging import create_discord_tool, create_slack_tool
from .registry import ToolsRegistry

__all__ = [
    "Executor",
    "ToolDefinition",
    "ToolSpec",
    "ToolsRegistry",
    "action_variant",
    "create_bash_tool",
    "create_browser_tool",
    "create_canvas_tool",
    "create_cron_tool",
    "create_default_registry",
    "create_discord_tool",
    "create_edit_tool",
    "create_gateway_tool",
    "create_nodes_tool",
    "create_process_tool",
    "create_read_tool",
    "create_slack_tool",
    "create_write_tool",
    "default_tool_specs",
    "unbound_executor",
]
