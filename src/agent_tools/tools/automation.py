"""
Automation tools: cron scheduling and gateway control.

Execution is delegated to the hosting application's scheduler and gateway.
"""

from ..schema.types import UnionSchema
from .base import Executor, ToolSpec, action_variant, prop, unbound_executor

_JOB_ID = prop("string", "Cron job id")

CRON_SCHEMA = UnionSchema(
    variants=(
        action_variant("status"),
        action_variant(
            "list",
            {"includeDisabled": prop("boolean", "Include disabled jobs")},
        ),
        action_variant(
            "add",
            {"job": {"type": "object", "description": "Job definition (schedule, payload, ...)"}},
            required=("job",),
        ),
        action_variant(
            "update",
            {
                "jobId": _JOB_ID,
                "patch": {"type": "object", "description": "Fields to change"},
            },
            required=("jobId", "patch"),
        ),
        action_variant(["remove", "run", "runs"], {"jobId": _JOB_ID}, required=("jobId",)),
        action_variant(
            "wake",
            {
                "text": prop("string", "System event text to enqueue"),
                "mode": {"type": "string", "enum": ["now", "next-heartbeat"]},
            },
            required=("text",),
        ),
    )
)

GATEWAY_SCHEMA = UnionSchema(
    variants=(
        action_variant(
            "restart",
            {
                "delayMs": prop("integer", "Delay before restarting, in milliseconds", minimum=0),
                "reason": prop("string", "Reason recorded with the restart"),
            },
        ),
    )
)


def create_cron_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the cron scheduling tool."""
    return ToolSpec(
        name="cron",
        description="Manage scheduled jobs: status, list, add, update, remove, run, runs, wake.",
        parameters=CRON_SCHEMA,
        execute=executor or unbound_executor("cron"),
    )


def create_gateway_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the gateway control tool."""
    return ToolSpec(
        name="gateway",
        description="Restart the running gateway process in place.",
        parameters=GATEWAY_SCHEMA,
        execute=executor or unbound_executor("gateway"),
    )
