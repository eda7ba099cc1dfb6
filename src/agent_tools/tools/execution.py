"""
Execution tools for the agent tool set.

Declares the ``bash`` and ``process`` tools. Their execution bodies belong to
the hosting application (shell sessions, sandbox containers); this module
only publishes their parameter schemas and binds the host's executor.
"""

from ..schema.types import PlainSchema, UnionSchema
from .base import Executor, ToolSpec, action_variant, prop, unbound_executor

BASH_SCHEMA = PlainSchema(
    properties={
        "command": prop("string", "Bash command to execute"),
        "workdir": prop("string", "Working directory (defaults to the workspace root)"),
        "env": {
            "type": "object",
            "description": "Extra environment variables",
            "additionalProperties": {"type": "string"},
        },
        "yieldMs": prop(
            "integer", "Milliseconds to wait before backgrounding the command", minimum=0
        ),
        "background": prop("boolean", "Run in the background immediately"),
        "timeout": prop("integer", "Timeout in seconds (kills the process on expiry)", minimum=1),
    },
    required=("command",),
)

_SESSION_ID = prop("string", "Background session id returned by bash")

PROCESS_SCHEMA = UnionSchema(
    variants=(
        action_variant("list"),
        action_variant("poll", {"sessionId": _SESSION_ID}, required=("sessionId",)),
        action_variant(
            "log",
            {
                "sessionId": _SESSION_ID,
                "offset": prop("integer", "Line offset into the session output", minimum=0),
                "limit": prop("integer", "Maximum number of lines", minimum=1),
            },
            required=("sessionId",),
        ),
        action_variant(
            "write",
            {
                "sessionId": _SESSION_ID,
                "data": prop("string", "Data to write to stdin"),
                "eof": prop("boolean", "Close stdin after writing"),
            },
            required=("sessionId", "data"),
        ),
        action_variant("kill", {"sessionId": _SESSION_ID}, required=("sessionId",)),
        action_variant("clear", {"sessionId": _SESSION_ID}, required=("sessionId",)),
        action_variant("remove", {"sessionId": _SESSION_ID}, required=("sessionId",)),
    )
)


def create_bash_tool(executor: Executor | None = None) -> ToolSpec:
    """
    Create tool for executing bash commands.

    Args:
        executor: Host implementation (None = unavailable).

    Returns:
        ToolSpec for ``bash``.
    """
    return ToolSpec(
        name="bash",
        description=(
            "Execute a bash command. Long-running commands continue in a "
            "background session managed by the process tool."
        ),
        parameters=BASH_SCHEMA,
        execute=executor or unbound_executor("bash"),
    )


def create_process_tool(executor: Executor | None = None) -> ToolSpec:
    """
    Create tool for managing background bash sessions.

    Args:
        executor: Host implementation (None = unavailable).

    Returns:
        ToolSpec for ``process``.
    """
    return ToolSpec(
        name="process",
        description="Manage background bash sessions: list, poll, log, write, kill, clear, remove.",
        parameters=PROCESS_SCHEMA,
        execute=executor or unbound_executor("process"),
    )
