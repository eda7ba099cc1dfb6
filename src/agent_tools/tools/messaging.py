"""
Messaging tools: discord and slack.

Both are scoped to their own surface, so an agent only sees the discord tool
when the conversation arrives through discord (likewise slack). Execution is
delegated to the hosting application's channel clients.
"""

from ..schema.types import UnionSchema
from .base import Executor, ToolSpec, action_variant, prop, unbound_executor

DISCORD_SURFACE = "discord"
SLACK_SURFACE = "slack"

_CHANNEL_ID = prop("string", "Channel id")
_MESSAGE_ID = prop("string", "Message id")
_TO = prop("string", "Recipient: channel:<id> or user:<id>")
_LIMIT = prop("integer", "Maximum number of items", minimum=1, maximum=100)

DISCORD_SCHEMA = UnionSchema(
    variants=(
        action_variant(
            "react",
            {
                "channelId": _CHANNEL_ID,
                "messageId": _MESSAGE_ID,
                "emoji": prop("string", "Unicode emoji or custom emoji name"),
            },
            required=("channelId", "messageId", "emoji"),
        ),
        action_variant(
            "reactions",
            {"channelId": _CHANNEL_ID, "messageId": _MESSAGE_ID, "limit": _LIMIT},
            required=("channelId", "messageId"),
        ),
        action_variant(
            "sticker",
            {
                "to": _TO,
                "stickerIds": {"type": "array", "items": {"type": "string"}, "minItems": 1, "maxItems": 3},
                "content": prop("string", "Optional message text"),
            },
            required=("to", "stickerIds"),
        ),
        action_variant(
            "poll",
            {
                "to": _TO,
                "question": prop("string", "Poll question"),
                "answers": {"type": "array", "items": {"type": "string"}, "minItems": 2, "maxItems": 10},
                "allowMultiselect": prop("boolean", "Allow selecting several answers"),
                "durationHours": prop("integer", "Poll duration in hours", minimum=1),
            },
            required=("to", "question", "answers"),
        ),
        action_variant(
            "sendMessage",
            {
                "to": _TO,
                "content": prop("string", "Message text"),
                "mediaUrl": prop("string", "Attachment URL or local path"),
                "replyTo": prop("string", "Message id to reply to"),
            },
            required=("to", "content"),
        ),
        action_variant(
            "readMessages",
            {
                "channelId": _CHANNEL_ID,
                "limit": _LIMIT,
                "before": prop("string", "Read messages before this message id"),
                "after": prop("string", "Read messages after this message id"),
            },
            required=("channelId",),
        ),
        action_variant(
            "editMessage",
            {
                "channelId": _CHANNEL_ID,
                "messageId": _MESSAGE_ID,
                "content": prop("string", "Replacement message text"),
            },
            required=("channelId", "messageId", "content"),
        ),
        action_variant(
            ["deleteMessage", "pinMessage", "unpinMessage"],
            {"channelId": _CHANNEL_ID, "messageId": _MESSAGE_ID},
            required=("channelId", "messageId"),
        ),
        action_variant("listPins", {"channelId": _CHANNEL_ID}, required=("channelId",)),
        action_variant(
            "threadCreate",
            {
                "channelId": _CHANNEL_ID,
                "name": prop("string", "Thread name"),
                "messageId": prop("string", "Message to start the thread from"),
            },
            required=("channelId", "name"),
        ),
    )
)

SLACK_SCHEMA = UnionSchema(
    variants=(
        action_variant(
            "react",
            {
                "channelId": _CHANNEL_ID,
                "messageId": _MESSAGE_ID,
                "emoji": prop("string", "Emoji name without colons"),
            },
            required=("channelId", "messageId", "emoji"),
        ),
        action_variant(
            "reactions",
            {"channelId": _CHANNEL_ID, "messageId": _MESSAGE_ID, "limit": _LIMIT},
            required=("channelId", "messageId"),
        ),
        action_variant(
            "sendMessage",
            {
                "to": _TO,
                "content": prop("string", "Message text (mrkdwn)"),
                "mediaUrl": prop("string", "Attachment URL or local path"),
                "threadTs": prop("string", "Thread timestamp to reply in"),
            },
            required=("to", "content"),
        ),
        action_variant(
            "editMessage",
            {
                "channelId": _CHANNEL_ID,
                "messageId": _MESSAGE_ID,
                "content": prop("string", "Replacement message text (mrkdwn)"),
            },
            required=("channelId", "messageId", "content"),
        ),
        action_variant(
            ["deleteMessage", "pinMessage", "unpinMessage"],
            {"channelId": _CHANNEL_ID, "messageId": _MESSAGE_ID},
            required=("channelId", "messageId"),
        ),
        action_variant(
            "readMessages",
            {
                "channelId": _CHANNEL_ID,
                "limit": _LIMIT,
                "before": prop("string", "Read messages before this timestamp"),
                "after": prop("string", "Read messages after this timestamp"),
            },
            required=("channelId",),
        ),
        action_variant("listPins", {"channelId": _CHANNEL_ID}, required=("channelId",)),
        action_variant(
            "memberInfo",
            {"userId": prop("string", "Slack user id")},
            required=("userId",),
        ),
        action_variant("emojiList"),
    )
)


def create_discord_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the discord tool, scoped to the discord surface."""
    return ToolSpec(
        name="discord",
        description="Act on Discord: reactions, stickers, polls, messages, pins and threads.",
        parameters=DISCORD_SCHEMA,
        execute=executor or unbound_executor("discord"),
        surfaces=frozenset({DISCORD_SURFACE}),
    )


def create_slack_tool(executor: Executor | None = None) -> ToolSpec:
    """Create the slack tool, scoped to the slack surface."""
    return ToolSpec(
        name="slack",
        description="Act on Slack: reactions, messages, pins, member info and emoji.",
        parameters=SLACK_SCHEMA,
        execute=executor or unbound_executor("slack"),
        surfaces=frozenset({SLACK_SURFACE}),
    )
