"""
Pytest configuration and fixtures for agent tool tests.
"""

import io
import struct
import zlib
from collections.abc import Generator
from pathlib import Path

import pytest
from PIL import Image

from agent_tools.config.settings import ToolsSettings, reset_settings
from agent_tools.tools.catalog import create_default_registry
from agent_tools.tools.registry import ToolsRegistry


@pytest.fixture(autouse=True)
def clean_settings() -> Generator[None, None, None]:
    """Reset cached settings around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_settings(tmp_path: Path) -> ToolsSettings:
    """Settings rooted at a temporary workspace."""
    return ToolsSettings(workspace_root=tmp_path, read_chunk_chars=50_000)


@pytest.fixture
def registry(test_settings: ToolsSettings) -> ToolsRegistry:
    """Default catalog bound to the temporary workspace."""
    return create_default_registry(settings=test_settings)


def make_image_bytes(image_format: str = "PNG", size: tuple[int, int] = (8, 8)) -> bytes:
    """
    Render a small solid-colour RGB image.

    Args:
        image_format: Pillow format name (PNG, JPEG, GIF, WEBP).
        size: Width and height in pixels.

    Returns:
        Encoded image bytes.
    """
    buffer = io.BytesIO()
    Image.new("RGB", size, (0, 128, 255)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """An 8x8 3-channel PNG."""
    return make_image_bytes("PNG")


@pytest.fixture
def image_bytes():
    """Factory fixture rendering small images in a given format."""
    return make_image_bytes


def make_png_header(width: int, height: int, ihdr: bytes | None = None) -> bytes:
    """
    Build a PNG stream with an IHDR, an empty IDAT and IEND, but no pixels.

    Args:
        width: Declared width.
        height: Declared height.
        ihdr: Raw IHDR body to use instead of a well-formed one.

    Returns:
        PNG bytes starting with the PNG signature.
    """

    def chunk(kind: bytes, body: bytes) -> bytes:
        crc = struct.pack(">I", zlib.crc32(kind + body))
        return struct.pack(">I", len(body)) + kind + body + crc

    if ihdr is None:
        ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", ihdr)
        + chunk(b"IDAT", b"")
        + chunk(b"IEND", b"")
    )


@pytest.fixture
def huge_png_header() -> bytes:
    """A 20000x20000 PNG header, far above Pillow's decompression-bomb limit."""
    return make_png_header(20_000, 20_000)


@pytest.fixture
def damaged_png() -> bytes:
    """A PNG signature followed by an unparseable IHDR."""
    return make_png_header(0, 0, ihdr=b"\xde\xad\xbe\xef garbage")
