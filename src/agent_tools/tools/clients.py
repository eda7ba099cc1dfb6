"""
Client-control tools: browser, canvas and nodes.

Each tool takes an ``action`` argument selecting one of several parameter
variants. Execution is delegated to the hosting application.
"""

from ..schema.types import UnionSchema
from .base import Executor, ToolSpec, action_variant, prop, unbound_executor

_CONTROL_URL = prop("string", "Browser control server URL (defaults to the configured one)")
_TARGET_ID = prop("string", "Tab id (defaults to the active tab)")
_NODE = prop("string", "Node id or display name")

BROWSER_SCHEMA = UnionSchema(
    variants=(
        action_variant(
            ["status", "start", "stop", "tabs"],
            {"controlUrl": _CONTROL_URL},
        ),
        action_variant(
            "open",
            {
                "controlUrl": _CONTROL_URL,
                "targetUrl": prop("string", "URL to open in a new tab"),
            },
            required=("targetUrl",),
        ),
        action_variant(
            "focus",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": prop("string", "Tab id to focus"),
            },
            required=("targetId",),
        ),
        action_variant("close", {"controlUrl": _CONTROL_URL, "targetId": _TARGET_ID}),
        action_variant(
            "snapshot",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": _TARGET_ID,
                "format": {"type": "string", "enum": ["aria", "ai"]},
                "limit": prop("integer", "Maximum number of nodes", minimum=1),
            },
        ),
        action_variant(
            "screenshot",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": _TARGET_ID,
                "fullPage": prop("boolean", "Capture the full scrollable page"),
                "ref": prop("string", "Element ref from a snapshot"),
                "type": {"type": "string", "enum": ["png", "jpeg"]},
            },
        ),
        action_variant(
            "navigate",
            {
                "controlUrl": _CONTROL_URL,
                "targetUrl": prop("string", "URL to navigate the tab to"),
                "targetId": _TARGET_ID,
            },
            required=("targetUrl",),
        ),
        action_variant(
            "console",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": _TARGET_ID,
                "level": {"type": "string", "enum": ["log", "info", "warn", "error"]},
            },
        ),
        action_variant("pdf", {"controlUrl": _CONTROL_URL, "targetId": _TARGET_ID}),
        action_variant(
            "upload",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": _TARGET_ID,
                "paths": {"type": "array", "items": {"type": "string"}, "minItems": 1},
                "ref": prop("string", "File input element ref"),
            },
            required=("paths",),
        ),
        action_variant(
            "dialog",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": _TARGET_ID,
                "accept": prop("boolean", "Accept (true) or dismiss (false) the dialog"),
                "promptText": prop("string", "Text to enter into a prompt dialog"),
            },
            required=("accept",),
        ),
        action_variant(
            "act",
            {
                "controlUrl": _CONTROL_URL,
                "targetId": _TARGET_ID,
                "request": {
                    "type": "object",
                    "description": "UI action: {kind: click|type|press|hover|drag|select|fill|wait, ...}",
                    "properties": {"kind": {"type": "string"}},
                    "required": ["kind"],
                },
            },
            required=("request",),
        ),
    )
)

CANVAS_SCHEMA = UnionSchema(
    variants=(
        action_variant(
            "present",
            {
                "node": _NODE,
                "target": prop("string", "URL or local path to present"),
                "x": prop("number", "Window x position"),
                "y": prop("number", "Window y position"),
                "width": prop("number", "Window width"),
                "height": prop("number", "Window height"),
            },
        ),
        action_variant("hide", {"node": _NODE}),
        action_variant(
            "navigate",
            {"node": _NODE, "url": prop("string", "URL to load in the canvas")},
            required=("url",),
        ),
        action_variant(
            "eval",
            {"node": _NODE, "javaScript": prop("string", "JavaScript to evaluate")},
            required=("javaScript",),
        ),
        action_variant(
            "snapshot",
            {
                "node": _NODE,
                "format": {"type": "string", "enum": ["png", "jpg"]},
                "maxWidth": prop("integer", "Maximum image width in pixels", minimum=1),
            },
        ),
        action_variant(
            "a2ui_push",
            {"node": _NODE, "jsonl": prop("string", "A2UI messages as JSON lines")},
            required=("jsonl",),
        ),
        action_variant("a2ui_reset", {"node": _NODE}),
    )
)

_REQUEST_ID = prop("string", "Pairing request id")
_DURATION_MS = prop("integer", "Duration in milliseconds", minimum=1)

NODES_SCHEMA = UnionSchema(
    variants=(
        action_variant(["status", "pending"]),
        action_variant("describe", {"node": _NODE}, required=("node",)),
        action_variant("approve", {"requestId": _REQUEST_ID}, required=("requestId",)),
        action_variant("reject", {"requestId": _REQUEST_ID}, required=("requestId",)),
        action_variant(
            "notify",
            {
                "node": _NODE,
                "title": prop("string", "Notification title"),
                "body": prop("string", "Notification body"),
                "sound": prop("string", "Notification sound name"),
            },
            required=("node", "title", "body"),
        ),
        action_variant(
            "camera_snap",
            {
                "node": _NODE,
                "facing": {"type": "string", "enum": ["front", "back", "both"]},
                "maxWidth": prop("integer", "Maximum image width in pixels", minimum=1),
            },
            required=("node",),
        ),
        action_variant(
            "camera_clip",
            {"node": _NODE, "durationMs": _DURATION_MS},
            required=("node",),
        ),
        action_variant(
            "screen_record",
            {
                "node": _NODE,
                "durationMs": _DURATION_MS,
                "fps": prop("integer", "Frames per second", minimum=1),
            },
            required=("node",),
        ),
    )
)


def create_browser_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the browser control tool."""
    return ToolSpec(
        name="browser",
        description=(
            "Control the browser: status/start/stop, tabs, open/focus/close, "
            "snapshot, screenshot, navigate, console, pdf, upload, dialog, act."
        ),
        parameters=BROWSER_SCHEMA,
        execute=executor or unbound_executor("browser"),
    )


def create_canvas_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the canvas tool for node-hosted canvases."""
    return ToolSpec(
        name="canvas",
        description="Control node canvases: present, hide, navigate, eval, snapshot, A2UI push/reset.",
        parameters=CANVAS_SCHEMA,
        execute=executor or unbound_executor("canvas"),
    )


def create_nodes_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the paired-nodes tool."""
    return ToolSpec(
        name="nodes",
        description=(
            "Discover and control paired nodes: status, describe, pairing "
            "approval, notifications, camera and screen capture."
        ),
        parameters=NODES_SCHEMA,
        execute=executor or unbound_executor("nodes"),
    )
