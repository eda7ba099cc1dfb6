"""
Build context schema.

Defines the request context consumed by ``build()``: the conversational
surface, the sandbox policy and the agent tool policy. Raw mappings are
parsed into frozen models (lists become tuples) so one build works on an
immutable snapshot of the caller's input.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigError


class ToolPolicy(BaseModel):
    """
    Allow/deny tool lists.

    Attributes:
        allow: Tool names or fnmatch patterns to keep (None/empty = keep all).
        deny: Tool names or fnmatch patterns to drop after ``allow``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow: tuple[str, ...] | None = None
    deny: tuple[str, ...] | None = None


class SandboxPolicy(BaseModel):
    """
    Sandbox policy as consumed by the tool builder.

    Container fields (docker image, workdir, ...) are kept as opaque extras
    and ignored here.

    Attributes:
        enabled: Whether the sandbox policy applies.
        tools: Sandbox allow/deny lists.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    enabled: bool = False
    tools: ToolPolicy = Field(default_factory=ToolPolicy)


class AgentConfig(BaseModel):
    """Agent section of the application config."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    tools: ToolPolicy | None = None


class AppConfig(BaseModel):
    """Application config; only the agent section is read."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    agent: AgentConfig | None = None


class BuildContext(BaseModel):
    """
    Request context for one ``build()`` call.

    Attributes:
        surface: Conversational surface (discord, slack, whatsapp, ...).
        sandbox: Sandbox policy, if the session runs sandboxed.
        config: Application config carrying the agent tool policy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    surface: str | None = None
    sandbox: SandboxPolicy | None = None
    config: AppConfig | None = None

    @property
    def agent_tools(self) -> ToolPolicy | None:
        """Agent tool policy, if configured."""
        if self.config and self.config.agent:
            return self.config.agent.tools
        return None

    @classmethod
    def parse(cls, raw: "BuildContext | Mapping[str, Any] | None") -> "BuildContext":
        """
        Parse a build context from a mapping.

        Args:
            raw: Existing context, mapping, or None for an empty context.

        Returns:
            Frozen BuildContext.

        Raises:
            ConfigError: If the mapping has the wrong shape.
        """
        if raw is None:
            return cls()
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            raise ConfigError(
                f"expected a mapping, got {type(raw).__name__}", source="context"
            )
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as e:
            raise ConfigError(str(e), source="context") from e
