"""
Unit tests for tool result content models.
"""

import base64

import pytest

from agent_tools.content.models import ImageContent, TextContent, ToolResult


class TestToolResult:
    """Tests for ToolResult helpers."""

    def test_from_text(self) -> None:
        """Test a single-block successful result."""
        result = ToolResult.from_text("done")

        assert result.is_error is False
        assert result.error_kind is None
        assert result.content == [TextContent(text="done")]

    def test_failure(self) -> None:
        """Test a failed result carries kind and message."""
        result = ToolResult.failure("NotFound", "File not found: a.txt")

        assert result.is_error is True
        assert result.error_kind == "NotFound"
        assert result.text_blocks()[0].text == "❌ Error: File not found: a.txt"

    def test_block_filters_keep_order(self) -> None:
        """Test text_blocks and image_blocks."""
        image = ImageContent(data=b"\x89PNG", mime_type="image/png")
        result = ToolResult(
            content=[TextContent(text="a"), image, TextContent(text="b")]
        )

        assert [b.text for b in result.text_blocks()] == ["a", "b"]
        assert result.image_blocks() == [image]

    def test_is_frozen(self) -> None:
        """Test that results are immutable."""
        result = ToolResult.from_text("x")
        with pytest.raises(Exception):
            result.is_error = True


class TestWireFormat:
    """Tests for to_wire serialization."""

    def test_image_block_wire_shape(self) -> None:
        """Test that image data is base64 and the MIME key is camelCase."""
        data = b"\x89PNG\r\n\x1a\nrest"
        result = ToolResult(
            content=[
                TextContent(text="Read image file [image/png]"),
                ImageContent(data=data, mime_type="image/png"),
            ]
        )

        wire = result.to_wire()

        assert wire["is_error"] is False
        assert "error_kind" not in wire
        assert wire["content"][0] == {"type": "text", "text": "Read image file [image/png]"}
        assert wire["content"][1] == {
            "type": "image",
            "data": base64.b64encode(data).decode("ascii"),
            "mimeType": "image/png",
        }

    def test_failure_wire_shape(self) -> None:
        """Test that failures include the error kind."""
        wire = ToolResult.failure("IsDirectory", "Not a file: src").to_wire()
        assert wire["is_error"] is True
        assert wire["error_kind"] == "IsDirectory"

    def test_python_dump_keeps_raw_bytes(self) -> None:
        """Test that the in-memory dump is not base64-encoded."""
        image = ImageContent(data=b"\x00\x01", mime_type="image/gif")
        assert image.model_dump()["data"] == b"\x00\x01"

    def test_image_accepts_alias(self) -> None:
        """Test that ImageContent can be built from wire field names."""
        image = ImageContent.model_validate({"data": b"x", "mimeType": "image/webp"})
        assert image.mime_type == "image/webp"
