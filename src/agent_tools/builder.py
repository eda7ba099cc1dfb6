"""
Tool set builder.

``build()`` is the single entry point used by agent runtimes: it takes the
registry constructed by the hosting application plus a request context and
returns the ordered tools the agent may see and call.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .config.schema import BuildContext
from .config.settings import ToolsSettings
from .policy.engine import filter_tools
from .tools.base import Executor, ToolDefinition
from .tools.catalog import create_default_registry
from .tools.registry import ToolsRegistry

logger = logging.getLogger(__name__)


def build(
    registry: ToolsRegistry,
    context: BuildContext | Mapping[str, Any] | None = None,
) -> list[ToolDefinition]:
    """
    Build the tool list for one request.

    Args:
        registry: Tool registry (schemas already unified).
        context: BuildContext or mapping ``{surface?, sandbox?, config?}``.

    Returns:
        Ordered sub-sequence of the registry's tools.

    Raises:
        ConfigError: If the context has the wrong shape.
    """
    ctx = BuildContext.parse(context)

    for error in registry.schema_errors:
        logger.warning(f"⚠️ Tool '{error.tool_name}' unavailable: {error.reason}")

    return filter_tools(registry.get_all(), ctx)


def create_coding_tools(
    context: BuildContext | Mapping[str, Any] | None = None,
    executors: Mapping[str, Executor] | None = None,
    settings: ToolsSettings | None = None,
) -> list[ToolDefinition]:
    """
    Create the default catalog and build it for one request.

    Args:
        context: BuildContext or mapping ``{surface?, sandbox?, config?}``.
        executors: Host implementations for external tools, keyed by name.
        settings: Settings for the in-process file tools.

    Returns:
        Ordered tool definitions.

    Raises:
        ConfigError: If the context has the wrong shape.
    """
    ctx = BuildContext.parse(context)
    return build(create_default_registry(executors, settings), ctx)
