"""
Tool result content models.

A tool result is an ordered list of content blocks, each tagged either
``text`` or ``image``. Image bytes are kept raw in memory and base64-encoded
only when serialized for the wire.
"""

import base64
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class TextContent(BaseModel):
    """Text content block."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text payload")


class ImageContent(BaseModel):
    """Image content block carrying raw bytes and the detected MIME type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["image"] = "image"
    data: bytes = Field(..., description="Raw image bytes")
    mime_type: str = Field(..., alias="mimeType", description="Detected MIME type")

    @field_serializer("data", when_used="json")
    def _serialize_data(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")


ContentBlock = Annotated[TextContent | ImageContent, Field(discriminator="type")]


class ToolResult(BaseModel):
    """
    Result of one tool execution.

    Attributes:
        content: Ordered content blocks.
        is_error: Whether the call failed.
        error_kind: Failure kind (e.g. ``NotFound``) when ``is_error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    content: list[ContentBlock] = Field(default_factory=list)
    is_error: bool = False
    error_kind: str | None = None

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        """Build a successful result with a single text block."""
        return cls(content=[TextContent(text=text)])

    @classmethod
    def failure(cls, kind: str, message: str) -> "ToolResult":
        """
        Build a failed result.

        Args:
            kind: Failure kind reported to the invoker.
            message: Human-readable explanation.

        Returns:
            ToolResult with one text block and ``is_error`` set.
        """
        return cls(
            content=[TextContent(text=f"❌ Error: {message}")],
            is_error=True,
            error_kind=kind,
        )

    def text_blocks(self) -> list[TextContent]:
        """Return only the text blocks, in order."""
        return [block for block in self.content if isinstance(block, TextContent)]

    def image_blocks(self) -> list[ImageContent]:
        """Return only the image blocks, in order."""
        return [block for block in self.content if isinstance(block, ImageContent)]

    def to_wire(self) -> dict[str, Any]:
        """
        Serialize to the published wire shape.

        Returns:
            Dict with ``content`` blocks using ``mimeType`` and base64 ``data``.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
