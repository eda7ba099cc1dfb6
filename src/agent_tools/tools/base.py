"""
Tool definition types.

A :class:`ToolSpec` is what a tool module registers: its name, raw parameter
schema and execute callback. The registry unifies the schema once and stores
the published :class:`ToolDefinition`.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ..content.models import ToolResult
from ..exceptions import ToolArgumentsError
from ..schema.types import DEFAULT_DISCRIMINATOR, ParameterSchema, PlainSchema
from ..schema.validation import validate_arguments

logger = logging.getLogger(__name__)

Executor = Callable[[str, dict[str, Any]], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolSpec:
    """
    Raw tool registration.

    Attributes:
        name: Unique tool name.
        parameters: Plain or union parameter schema.
        execute: Coroutine ``(invocation_id, args) -> ToolResult``.
        description: Human-readable description shown to the model.
        surfaces: Surfaces the tool is scoped to (None = every surface).
    """

    name: str
    parameters: ParameterSchema
    execute: Executor
    description: str = ""
    surfaces: frozenset[str] | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tool name cannot be empty")
        if self.surfaces is not None:
            object.__setattr__(self, "surfaces", frozenset(self.surfaces))


@dataclass(frozen=True)
class ToolDefinition:
    """
    Published tool, as handed to downstream consumers.

    Attributes:
        name: Unique tool name.
        parameters: Published JSON schema (merged for unions).
        execute: Coroutine ``(invocation_id, args) -> ToolResult``.
        description: Human-readable description.
        surfaces: Surfaces the tool is scoped to (None = every surface).
    """

    name: str
    parameters: dict[str, Any]
    execute: Executor
    description: str = ""
    surfaces: frozenset[str] | None = None

    def is_available_on(self, surface: str | None) -> bool:
        """Return True if the tool may be exposed on ``surface``."""
        return self.surfaces is None or (surface is not None and surface in self.surfaces)

    async def invoke(self, invocation_id: str, args: dict[str, Any]) -> ToolResult:
        """
        Validate arguments against the published schema, then execute.

        Args:
            invocation_id: Caller-assigned id of this call.
            args: Invocation arguments.

        Returns:
            The tool's result, or a failed result of kind ``InvalidArguments``.
        """
        try:
            validate_arguments(self.parameters, args, self.name)
        except ToolArgumentsError as e:
            logger.warning(f"⚠️ [{invocation_id}] {e.message}")
            return ToolResult.failure("InvalidArguments", e.message)

        try:
            return await self.execute(invocation_id, args)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"❌ [{invocation_id}] Tool '{self.name}' raised")
            raise


def unbound_executor(tool_name: str) -> Executor:
    """
    Create the executor used for an external tool with no bound implementation.

    Args:
        tool_name: Tool name.

    Returns:
        Executor that answers every call with a failed ``Unavailable`` result.
    """

    async def execute(invocation_id: str, args: dict[str, Any]) -> ToolResult:
        logger.warning(f"⚠️ [{invocation_id}] No executor bound for tool '{tool_name}'")
        return ToolResult.failure(
            "Unavailable", f"No executor bound for tool '{tool_name}'"
        )

    return execute


def prop(type_: str, description: str, **extra: Any) -> dict[str, Any]:
    """Build a property JSON schema."""
    return {"type": type_, "description": description, **extra}


def action_variant(
    action: str | Iterable[str],
    properties: dict[str, dict[str, Any]] | None = None,
    required: Iterable[str] = (),
) -> PlainSchema:
    """
    Build one variant of an action-discriminated union.

    Args:
        action: Action name (``const``) or several names (``enum``).
        properties: Additional properties of this variant.
        required: Required property names besides the action.

    Returns:
        PlainSchema with the discriminator first.
    """
    if isinstance(action, str):
        discriminator: dict[str, Any] = {"type": "string", "const": action}
    else:
        discriminator = {"type": "string", "enum": list(action)}

    return PlainSchema(
        properties={DEFAULT_DISCRIMINATOR: discriminator, **(properties or {})},
        required=(DEFAULT_DISCRIMINATOR, *required),
    )
