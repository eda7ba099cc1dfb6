"""
Tools Registry for the agent tool set.

Explicit catalog of tool definitions. Parameter schemas are unified once, at
registration; a tool whose union schema cannot be merged is dropped and its
error recorded, while the rest of the catalog still builds.
"""

import logging
from collections.abc import Iterable

from ..exceptions import SchemaMergeError
from ..schema.unifier import unify_schema
from .base import ToolDefinition, ToolSpec

logger = logging.getLogger(__name__)


class ToolsRegistry:
    """
    Registry of available tools, in registration order.

    Usage:
        registry = ToolsRegistry([create_read_tool(), create_bash_tool()])
        read_tool = registry.get("read")
    """

    def __init__(self, specs: Iterable[ToolSpec] = ()) -> None:
        """
        Initialize registry and register the given tools.

        Args:
            specs: Tool registrations, in catalog order.

        Raises:
            ValueError: If two specs share a name.
        """
        self.tools: dict[str, ToolDefinition] = {}
        self._schema_errors: list[SchemaMergeError] = []
        for spec in specs:
            self.register(spec)
        logger.info(f"🔧 ToolsRegistry initialized with {self.count()} tools")

    def register(self, spec: ToolSpec) -> ToolDefinition | None:
        """
        Register a tool, unifying its parameter schema.

        Args:
            spec: Tool registration.

        Returns:
            The published definition, or None if the schema could not be
            merged (the error is kept in :attr:`schema_errors`).

        Raises:
            ValueError: If tool name already registered
        """
        if spec.name in self.tools:
            raise ValueError(f"Tool '{spec.name}' is already registered")

        try:
            parameters = unify_schema(spec.parameters, spec.name)
        except SchemaMergeError as e:
            logger.warning(f"⚠️ Skipping tool '{spec.name}': {e.message}")
            self._schema_errors.append(e)
            return None

        definition = ToolDefinition(
            name=spec.name,
            parameters=parameters,
            execute=spec.execute,
            description=spec.description,
            surfaces=spec.surfaces,
        )
        self.tools[spec.name] = definition
        return definition

    @property
    def schema_errors(self) -> tuple[SchemaMergeError, ...]:
        """Schema merge errors of tools dropped at registration."""
        return tuple(self._schema_errors)

    def get(self, name: str) -> ToolDefinition | None:
        """
        Get tool by name.

        Args:
            name: Tool name

        Returns:
            Tool definition or None if not found
        """
        return self.tools.get(name)

    def get_all(self) -> list[ToolDefinition]:
        """
        Get all registered tools.

        Returns:
            List of tool definitions in registration order
        """
        return list(self.tools.values())

    def list_names(self) -> list[str]:
        """
        Get list of all registered tool names.

        Returns:
            Sorted list of tool names
        """
        return sorted(self.tools.keys())

    def count(self) -> int:
        """
        Get count of registered tools.

        Returns:
            Number of tools registered
        """
        return len(self.tools)
