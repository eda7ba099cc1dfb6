"""
Tool Policy Engine - 3-stage cascading filter.

Stages are applied in order, each narrowing the set of tool names:
    1. Surface (drop tools scoped to other surfaces)
    2. Sandbox (allow/deny, only when the sandbox is enabled)
    3. Agent (allow/deny from the agent tool config, always)

Within a stage a non-empty allow list narrows first, then the deny list
subtracts. A tool removed by one stage is never re-added by a later one.
Names with no matching tool are ignored.
"""

import fnmatch
import logging
from collections.abc import Callable, Sequence

from ..config.schema import BuildContext, ToolPolicy
from ..tools.base import ToolDefinition

logger = logging.getLogger(__name__)

PolicyStage = Callable[
    [Sequence[ToolDefinition], frozenset[str], BuildContext], frozenset[str]
]


def _matches(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def apply_allow_deny(names: frozenset[str], policy: ToolPolicy) -> frozenset[str]:
    """
    Apply one allow/deny pair.

    Args:
        names: Tool names surviving earlier stages.
        policy: Allow/deny lists (names or fnmatch patterns).

    Returns:
        Names kept by ``allow`` (if non-empty) minus names hit by ``deny``.
    """
    result = names
    if policy.allow:
        result = frozenset(n for n in result if _matches(n, policy.allow))
    if policy.deny:
        result = frozenset(n for n in result if not _matches(n, policy.deny))
    return result


def surface_stage(
    tools: Sequence[ToolDefinition],
    names: frozenset[str],
    context: BuildContext,
) -> frozenset[str]:
    """Stage 1: drop tools scoped to surfaces other than the context's."""
    scoped_out = {t.name for t in tools if not t.is_available_on(context.surface)}
    return names - scoped_out


def sandbox_stage(
    tools: Sequence[ToolDefinition],
    names: frozenset[str],
    context: BuildContext,
) -> frozenset[str]:
    """Stage 2: apply the sandbox allow/deny lists when the sandbox is enabled."""
    if context.sandbox is None or not context.sandbox.enabled:
        return names
    return apply_allow_deny(names, context.sandbox.tools)


def agent_stage(
    tools: Sequence[ToolDefinition],
    names: frozenset[str],
    context: BuildContext,
) -> frozenset[str]:
    """Stage 3: apply the agent tool policy, with or without a sandbox."""
    policy = context.agent_tools
    if policy is None:
        return names
    return apply_allow_deny(names, policy)


POLICY_STAGES: tuple[tuple[str, PolicyStage], ...] = (
    ("surface", surface_stage),
    ("sandbox", sandbox_stage),
    ("agent", agent_stage),
)


def filter_tools(
    tools: Sequence[ToolDefinition],
    context: BuildContext,
) -> list[ToolDefinition]:
    """
    Apply all policy stages and return the surviving tools.

    Args:
        tools: Tools in registry order.
        context: Build context.

    Returns:
        Order-preserving sub-sequence of ``tools``.
    """
    names = frozenset(t.name for t in tools)
    initial_count = len(names)

    for stage_name, stage in POLICY_STAGES:
        before = len(names)
        names = stage(tools, names, context)
        if len(names) != before:
            logger.debug(
                f"  📋 Stage '{stage_name}': {before} → {len(names)} tools"
            )

    result = [t for t in tools if t.name in names]
    logger.info(
        f"🔒 Policy filter: {initial_count} → {len(result)} tools "
        f"(surface={context.surface or '-'})"
    )
    return result
