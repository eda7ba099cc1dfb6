"""
Unit tests for ToolsRegistry, ToolDefinition and the default catalog.
"""

from typing import Any

import pytest

from agent_tools.content.models import ToolResult
from agent_tools.schema.types import PlainSchema, UnionSchema
from agent_tools.tools.base import ToolSpec, action_variant, unbound_executor
from agent_tools.tools.catalog import EXTERNAL_TOOL_FACTORIES, default_tool_specs
from agent_tools.tools.registry import ToolsRegistry


async def _echo(invocation_id: str, args: dict[str, Any]) -> ToolResult:
    return ToolResult.from_text(f"{invocation_id}:{args}")


def make_spec(name: str, **kwargs) -> ToolSpec:
    return ToolSpec(
        name=name,
        parameters=PlainSchema(properties={"x": {"type": "string"}}),
        execute=_echo,
        **kwargs,
    )


class TestToolsRegistry:
    """Tests for ToolsRegistry."""

    def test_empty_registry(self) -> None:
        """Test a registry with no tools."""
        registry = ToolsRegistry()
        assert registry.count() == 0
        assert registry.get_all() == []
        assert registry.schema_errors == ()

    def test_registration_order(self) -> None:
        """Test that get_all keeps registration order and list_names sorts."""
        registry = ToolsRegistry([make_spec("zeta"), make_spec("alpha"), make_spec("mid")])

        assert [t.name for t in registry.get_all()] == ["zeta", "alpha", "mid"]
        assert registry.list_names() == ["alpha", "mid", "zeta"]
        assert registry.count() == 3

    def test_duplicate_name_raises(self) -> None:
        """Test that registering a name twice raises ValueError."""
        with pytest.raises(ValueError, match="already registered"):
            ToolsRegistry([make_spec("dup"), make_spec("dup")])

    def test_get(self) -> None:
        """Test lookup by name."""
        registry = ToolsRegistry([make_spec("one")])
        assert registry.get("one").name == "one"
        assert registry.get("two") is None

    def test_register_returns_published_definition(self) -> None:
        """Test that register() unifies the schema."""
        registry = ToolsRegistry()
        spec = ToolSpec(
            name="multi",
            parameters=UnionSchema(variants=(action_variant("a"), action_variant("b"))),
            execute=_echo,
            surfaces=frozenset({"discord"}),
        )

        definition = registry.register(spec)

        assert definition.parameters["properties"]["action"]["enum"] == ["a", "b"]
        assert definition.surfaces == frozenset({"discord"})

    def test_bad_union_returns_none(self) -> None:
        """Test that a malformed union is dropped and recorded."""
        registry = ToolsRegistry()
        spec = ToolSpec(
            name="broken",
            parameters=UnionSchema(
                variants=(action_variant("a"), PlainSchema(properties={}))
            ),
            execute=_echo,
        )

        assert registry.register(spec) is None
        assert registry.get("broken") is None
        assert [e.tool_name for e in registry.schema_errors] == ["broken"]

    def test_empty_name_rejected(self) -> None:
        """Test that ToolSpec requires a name."""
        with pytest.raises(ValueError):
            make_spec("")


class TestToolDefinitionInvoke:
    """Tests for ToolDefinition.invoke."""

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, registry) -> None:
        """Test that schema-invalid calls fail without executing."""
        browser = registry.get("browser")
        result = await browser.invoke("call-1", {"action": "open"})

        assert result.is_error is True
        assert result.error_kind == "InvalidArguments"

    @pytest.mark.asyncio
    async def test_unbound_external_tool(self, registry) -> None:
        """Test that external tools without an executor report Unavailable."""
        result = await registry.get("bash").invoke("call-1", {"command": "ls"})

        assert result.is_error is True
        assert result.error_kind == "Unavailable"

    @pytest.mark.asyncio
    async def test_executor_exception_propagates(self) -> None:
        """Test that an executor bug is not masked as a tool failure."""

        async def boom(invocation_id: str, args: dict[str, Any]) -> ToolResult:
            raise RuntimeError("boom")

        registry = ToolsRegistry(
            [ToolSpec(name="boom", parameters=PlainSchema(), execute=boom)]
        )
        with pytest.raises(RuntimeError, match="boom"):
            await registry.get("boom").invoke("call-1", {})

    @pytest.mark.asyncio
    async def test_unbound_executor_directly(self) -> None:
        """Test the Unavailable executor message."""
        result = await unbound_executor("cron")("call-1", {})
        assert "cron" in result.text_blocks()[0].text

    def test_is_available_on(self, registry) -> None:
        """Test surface availability checks."""
        discord = registry.get("discord")
        assert discord.is_available_on("discord") is True
        assert discord.is_available_on("slack") is False
        assert discord.is_available_on(None) is False
        assert registry.get("read").is_available_on(None) is True


class TestDefaultCatalog:
    """Tests for the default catalog order and executor binding."""

    def test_catalog_order(self, test_settings) -> None:
        """Test that file tools come first, then external tools."""
        specs = default_tool_specs(settings=test_settings)
        assert [s.name for s in specs] == ["read", "write", "edit", *EXTERNAL_TOOL_FACTORIES]

    def test_default_registry_has_no_schema_errors(self, registry) -> None:
        """Test that every built-in union merges."""
        assert registry.schema_errors == ()
        assert registry.count() == 12

    def test_unknown_executor_ignored(self, test_settings, caplog) -> None:
        """Test that executors for unknown tools are ignored with a warning."""
        with caplog.at_level("WARNING"):
            specs = default_tool_specs({"teleport": _echo}, settings=test_settings)
        assert "teleport" in caplog.text
        assert "teleport" not in [s.name for s in specs]

    def test_executor_bound_by_name(self, test_settings) -> None:
        """Test that a supplied executor replaces the unbound one."""
        specs = default_tool_specs({"cron": _echo}, settings=test_settings)
        cron = next(s for s in specs if s.name == "cron")
        assert cron.execute is _echo
