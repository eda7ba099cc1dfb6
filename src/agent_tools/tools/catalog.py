"""
Default coding tool catalog.

Assembles the standard tool set in its published order. File tools run
in-process; every other tool executes through an executor supplied by the
hosting application, keyed by tool name.
"""

import logging
from collections.abc import Callable, Mapping

from ..config.settings import ToolsSettings, get_settings
from .automation import create_cron_tool, create_gateway_tool
from .base import Executor, ToolSpec
from .clients import create_browser_tool, create_canvas_tool, create_nodes_tool
from .execution import create_bash_tool, create_process_tool
from .filesystem import create_edit_tool, create_read_tool, create_write_tool
from .messaging import create_discord_tool, create_slack_tool
from .registry import ToolsRegistry

logger = logging.getLogger(__name__)

EXTERNAL_TOOL_FACTORIES: dict[str, Callable[[Executor | None], ToolSpec]] = {
    "bash": create_bash_tool,
    "process": create_process_tool,
    "browser": create_browser_tool,
    "canvas": create_canvas_tool,
    "nodes": create_nodes_tool,
    "cron": create_cron_tool,
    "gateway": create_gateway_tool,
    "discord": create_discord_tool,
    "slack": create_slack_tool,
}


def default_tool_specs(
    executors: Mapping[str, Executor] | None = None,
    settings: ToolsSettings | None = None,
) -> list[ToolSpec]:
    """
    Create the default tool registrations.

    Args:
        executors: Host implementations for external tools, keyed by name.
        settings: Settings for the in-process file tools.

    Returns:
        Tool specs in catalog order.
    """
    executors = executors or {}
    settings = settings or get_settings()

    unknown = sorted(set(executors) - set(EXTERNAL_TOOL_FACTORIES))
    if unknown:
        logger.warning(f"⚠️ Ignoring executors for unknown tools: {unknown}")

    specs = [
        create_read_tool(settings),
        create_write_tool(settings),
        create_edit_tool(settings),
    ]
    for name, factory in EXTERNAL_TOOL_FACTORIES.items():
        specs.append(factory(executors.get(name)))
    return specs


def create_default_registry(
    executors: Mapping[str, Executor] | None = None,
    settings: ToolsSettings | None = None,
) -> ToolsRegistry:
    """
    Create a registry holding the default coding tools.

    Args:
        executors: Host implementations for external tools, keyed by name.
        settings: Settings for the in-process file tools.

    Returns:
        New ToolsRegistry.
    """
    return ToolsRegistry(default_tool_specs(executors, settings))
