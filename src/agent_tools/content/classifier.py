"""
Content classification for the read tool.

Decides from the file's bytes (never its name) whether it is a raster image
or text, and turns it into ordered content blocks:

- Images: ``[text "Read image file [<mime>]", image <bytes>]``
- Text: one or more text blocks whose concatenation is the decoded text
"""

import asyncio
import logging
from pathlib import Path

from ..exceptions import ReadError, ReadErrorKind
from .models import ContentBlock, ImageContent, TextContent

logger = logging.getLogger(__name__)

# Leading signature bytes -> MIME type for the raster formats returned as images
IMAGE_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)

DEFAULT_CHUNK_CHARS = 50_000


def detect_image_mime(data: bytes) -> str | None:
    """
    Detect a supported raster image format from signature bytes.

    Only the leading magic bytes are inspected; image headers are never
    decoded, so oversized or damaged images are still classified as images.

    Args:
        data: Raw file bytes.

    Returns:
        MIME type (e.g. ``image/png``) or None if the bytes are not a
        supported image.
    """
    for signature, mime_type in IMAGE_SIGNATURES:
        if data.startswith(signature):
            return mime_type

    # WEBP: "RIFF" <4-byte size> "WEBP"
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"

    return None


def chunk_text(text: str, chunk_chars: int = DEFAULT_CHUNK_CHARS) -> list[str]:
    """
    Split text into chunks of at most ``chunk_chars`` characters.

    Splits on line boundaries where possible; a single line longer than
    ``chunk_chars`` is split hard. ``"".join(chunks) == text`` always holds
    and at least one chunk is returned.

    Args:
        text: Text to split.
        chunk_chars: Maximum characters per chunk.

    Returns:
        Ordered list of chunks.

    Raises:
        ValueError: If chunk_chars is not positive.
    """
    if chunk_chars <= 0:
        raise ValueError(f"chunk_chars must be positive, got {chunk_chars}")
    if len(text) <= chunk_chars:
        return [text]

    chunks: list[str] = []
    current = ""
    for line in text.splitlines(keepends=True):
        while len(line) > chunk_chars:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:chunk_chars])
            line = line[chunk_chars:]
        if len(current) + len(line) > chunk_chars:
            chunks.append(current)
            current = ""
        current += line
    if current:
        chunks.append(current)
    return chunks


def select_lines(text: str, offset: int | None, limit: int | None) -> str:
    """
    Select a window of lines from text.

    Args:
        text: Full decoded text.
        offset: 1-based first line to include (None = from the start).
        limit: Maximum number of lines (None = to the end).

    Returns:
        The selected lines joined with their original line endings.

    Raises:
        ValueError: If offset points past the last line.
    """
    if offset is None and limit is None:
        return text
    lines = text.splitlines(keepends=True)
    start = max((offset or 1) - 1, 0)
    if start and start >= len(lines):
        raise ValueError(
            f"Offset {offset} is beyond end of file ({len(lines)} lines total)"
        )
    end = None if limit is None else start + limit
    return "".join(lines[start:end])


def classify_bytes(
    data: bytes,
    path: str,
    encoding: str = "utf-8",
    chunk_chars: int = DEFAULT_CHUNK_CHARS,
    offset: int | None = None,
    limit: int | None = None,
) -> list[ContentBlock]:
    """
    Turn raw file bytes into ordered content blocks.

    Args:
        data: Raw file bytes.
        path: Path the bytes came from (used in error messages only).
        encoding: Text encoding used for non-image content.
        chunk_chars: Maximum characters per text block.
        offset: Optional 1-based first line for text content.
        limit: Optional maximum number of lines for text content.

    Returns:
        Content blocks; image blocks always follow their text header.

    Raises:
        ReadError: DecodeError if the bytes are neither an image nor valid text,
            OffsetOutOfRange if ``offset`` is past the last line.
    """
    mime_type = detect_image_mime(data)
    if mime_type:
        logger.debug(f"🖼️ Classified {path} as {mime_type} ({len(data):,} bytes)")
        return [
            TextContent(text=f"Read image file [{mime_type}]"),
            ImageContent(data=data, mime_type=mime_type),
        ]

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise ReadError(
            ReadErrorKind.DECODE_ERROR,
            path,
            f"File is not valid {encoding} text ({e.reason} at byte {e.start})",
        ) from e

    try:
        text = select_lines(text, offset, limit)
    except ValueError as e:
        raise ReadError(ReadErrorKind.OFFSET_OUT_OF_RANGE, path, str(e)) from e
    return [TextContent(text=chunk) for chunk in chunk_text(text, chunk_chars)]


def _read_bytes(file_path: Path) -> bytes:
    if file_path.is_dir():
        raise IsADirectoryError(21, "Is a directory", str(file_path))
    return file_path.read_bytes()


async def read_content(
    path: str | Path,
    encoding: str = "utf-8",
    chunk_chars: int = DEFAULT_CHUNK_CHARS,
    offset: int | None = None,
    limit: int | None = None,
) -> list[ContentBlock]:
    """
    Read a file and classify its content.

    The read is not locked against concurrent writers; a file changed
    mid-read may yield a torn result.

    Args:
        path: File to read (already resolved by the caller).
        encoding: Text encoding for non-image content.
        chunk_chars: Maximum characters per text block.
        offset: Optional 1-based first line for text content.
        limit: Optional maximum number of lines for text content.

    Returns:
        Ordered content blocks.

    Raises:
        ReadError: NotFound, PermissionDenied, IsDirectory, IOError,
            DecodeError or OffsetOutOfRange.
    """
    file_path = Path(path)
    display = str(path)

    try:
        data = await asyncio.to_thread(_read_bytes, file_path)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise ReadError(ReadErrorKind.NOT_FOUND, display, "File not found") from e
    except IsADirectoryError as e:
        raise ReadError(ReadErrorKind.IS_DIRECTORY, display, "Not a file") from e
    except PermissionError as e:
        raise ReadError(
            ReadErrorKind.PERMISSION_DENIED, display, "Permission denied"
        ) from e
    except OSError as e:
        raise ReadError(
            ReadErrorKind.IO_ERROR, display, e.strerror or "I/O error"
        ) from e

    return classify_bytes(
        data,
        display,
        encoding=encoding,
        chunk_chars=chunk_chars,
        offset=offset,
        limit=limit,
    )
