"""Tool result content models and file content classification."""

from .classifier import chunk_text, classify_bytes, detect_image_mime, read_content
from .models import ContentBlock, ImageContent, TextContent, ToolResult

__all__ = [
    "ContentBlock",
    "ImageContent",
    "TextContent",
    "ToolResult",
    "chunk_text",
    "classify_bytes",
    "detect_image_mime",
    "read_content",
]
