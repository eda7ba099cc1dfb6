"""
Filesystem tools for the agent tool set.

Provides read, write and edit. Paths are resolved against the configured
workspace root. The read tool classifies file content from its bytes and
returns text and image blocks.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

from ..config.settings import ToolsSettings, get_settings
from ..content.classifier import read_content
from ..content.models import ToolResult
from ..exceptions import ReadError, ReadErrorKind
from ..schema.types import PlainSchema
from .base import ToolSpec, prop

logger = logging.getLogger(__name__)

READ_SCHEMA = PlainSchema(
    properties={
        "path": prop("string", "Path to the file to read (relative or absolute)"),
        "offset": prop("integer", "Line number to start reading from (1-indexed)", minimum=1),
        "limit": prop("integer", "Maximum number of lines to read", minimum=1),
    },
    required=("path",),
)

WRITE_SCHEMA = PlainSchema(
    properties={
        "path": prop("string", "Path to the file to write (relative or absolute)"),
        "content": prop("string", "Content to write to the file"),
    },
    required=("path", "content"),
)

EDIT_SCHEMA = PlainSchema(
    properties={
        "path": prop("string", "Path to the file to edit (relative or absolute)"),
        "oldText": prop("string", "Exact text to find and replace (must match exactly once)"),
        "newText": prop("string", "New text to replace the old text with"),
    },
    required=("path", "oldText", "newText"),
)


def _require_str(args: dict[str, Any], key: str) -> str | None:
    value = args.get(key)
    return value if isinstance(value, str) else None


def _optional_line_number(args: dict[str, Any], key: str) -> int | None:
    """
    Read an optional 1-based line argument.

    Digit strings are coerced; anything else that is not a positive integer
    is rejected.

    Raises:
        ValueError: If the value is present but not a positive integer.
    """
    value = args.get(key)
    if value is None:
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"'{key}' must be a positive integer, got {value!r}")
    return value


def _resolve(settings: ToolsSettings, path: str) -> Path:
    try:
        return settings.resolve_path(path)
    except (OSError, RuntimeError) as e:
        # RuntimeError: symlink loop on Python < 3.13
        raise ReadError(ReadErrorKind.IO_ERROR, path, f"Cannot resolve path ({e})") from e


def create_read_tool(settings: ToolsSettings | None = None) -> ToolSpec:
    """
    Create tool for reading file contents.

    Args:
        settings: Tool settings (defaults to environment settings).

    Returns:
        ToolSpec whose execute returns text blocks, or a header text block
        followed by an image block for raster images.
    """
    settings = settings or get_settings()

    async def read(invocation_id: str, args: dict[str, Any]) -> ToolResult:
        path = _require_str(args, "path")
        if not path:
            return ToolResult.failure("InvalidArguments", "'path' must be a non-empty string")

        try:
            offset = _optional_line_number(args, "offset")
            limit = _optional_line_number(args, "limit")
        except ValueError as e:
            return ToolResult.failure("InvalidArguments", str(e))

        try:
            blocks = await read_content(
                _resolve(settings, path),
                encoding=settings.text_encoding,
                chunk_chars=settings.read_chunk_chars,
                offset=offset,
                limit=limit,
            )
        except ReadError as e:
            logger.warning(f"📖 [{invocation_id}] Read failed ({e.kind.value}): {e.message}")
            return ToolResult.failure(e.kind.value, e.message)

        logger.debug(f"📖 [{invocation_id}] Read {path} -> {len(blocks)} blocks")
        return ToolResult(content=blocks)

    return ToolSpec(
        name="read",
        description=(
            "Read the contents of a file. Text files are returned as text; "
            "PNG, JPEG, GIF and WEBP images are returned as image attachments."
        ),
        parameters=READ_SCHEMA,
        execute=read,
    )


def create_write_tool(settings: ToolsSettings | None = None) -> ToolSpec:
    """
    Create tool for writing file contents.

    Args:
        settings: Tool settings (defaults to environment settings).

    Returns:
        ToolSpec that writes content, creating parent directories.
    """
    settings = settings or get_settings()

    async def write(invocation_id: str, args: dict[str, Any]) -> ToolResult:
        path = _require_str(args, "path")
        content = _require_str(args, "content")
        if not path or content is None:
            return ToolResult.failure(
                "InvalidArguments", "'path' and 'content' must be strings"
            )

        try:
            file_path = _resolve(settings, path)
        except ReadError as e:
            return ToolResult.failure(e.kind.value, e.message)

        def _write() -> int:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            data = content.encode(settings.text_encoding)
            file_path.write_bytes(data)
            return len(data)

        try:
            written = await asyncio.to_thread(_write)
        except PermissionError:
            return ToolResult.failure(
                ReadErrorKind.PERMISSION_DENIED.value, f"Permission denied: {path}"
            )
        except IsADirectoryError:
            return ToolResult.failure(
                ReadErrorKind.IS_DIRECTORY.value, f"Not a file: {path}"
            )
        except OSError as e:
            logger.warning(f"✍️ [{invocation_id}] Write failed: {e}")
            return ToolResult.failure(
                ReadErrorKind.IO_ERROR.value, f"{e.strerror or 'I/O error'}: {path}"
            )

        logger.info(f"✍️ [{invocation_id}] Wrote {written:,} bytes to {file_path}")
        return ToolResult.from_text(f"✅ Successfully wrote {written:,} bytes to {path}")

    return ToolSpec(
        name="write",
        description="Write content to a file, creating parent directories. Overwrites existing files.",
        parameters=WRITE_SCHEMA,
        execute=write,
    )


def create_edit_tool(settings: ToolsSettings | None = None) -> ToolSpec:
    """
    Create tool for exact-text replacement edits.

    Args:
        settings: Tool settings (defaults to environment settings).

    Returns:
        ToolSpec that replaces exactly one occurrence of ``oldText``.
    """
    settings = settings or get_settings()

    async def edit(invocation_id: str, args: dict[str, Any]) -> ToolResult:
        path = _require_str(args, "path")
        old_text = _require_str(args, "oldText")
        new_text = _require_str(args, "newText")
        if not path or not old_text or new_text is None:
            return ToolResult.failure(
                "InvalidArguments",
                "'path', 'oldText' (non-empty) and 'newText' must be strings",
            )

        def _edit() -> int:
            file_path = _resolve(settings, path)
            text = _read_text(file_path, path, settings.text_encoding)
            count = text.count(old_text)
            if count != 1:
                return count
            file_path.write_bytes(
                text.replace(old_text, new_text, 1).encode(settings.text_encoding)
            )
            return 1

        try:
            matches = await asyncio.to_thread(_edit)
        except ReadError as e:
            logger.warning(f"✏️ [{invocation_id}] Edit failed ({e.kind.value}): {e.message}")
            return ToolResult.failure(e.kind.value, e.message)
        except PermissionError:
            return ToolResult.failure(
                ReadErrorKind.PERMISSION_DENIED.value, f"Permission denied: {path}"
            )
        except OSError as e:
            logger.warning(f"✏️ [{invocation_id}] Edit failed: {e}")
            return ToolResult.failure(
                ReadErrorKind.IO_ERROR.value, f"{e.strerror or 'I/O error'}: {path}"
            )

        if matches == 0:
            return ToolResult.failure("NoMatch", f"Could not find the exact text in {path}")
        if matches > 1:
            return ToolResult.failure(
                "AmbiguousMatch",
                f"Found {matches} occurrences of the text in {path}; "
                f"add more context to make it unique",
            )

        logger.info(f"✏️ [{invocation_id}] Edited {path}")
        return ToolResult.from_text(f"✅ Successfully replaced text in {path}")

    return ToolSpec(
        name="edit",
        description="Edit a file by replacing exact text. oldText must match exactly one location.",
        parameters=EDIT_SCHEMA,
        execute=edit,
    )


def _read_text(file_path: Path, display: str, encoding: str) -> str:
    try:
        return file_path.read_bytes().decode(encoding)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise ReadError(ReadErrorKind.NOT_FOUND, display, "File not found") from e
    except IsADirectoryError as e:
        raise ReadError(ReadErrorKind.IS_DIRECTORY, display, "Not a file") from e
    except PermissionError as e:
        raise ReadError(ReadErrorKind.PERMISSION_DENIED, display, "Permission denied") from e
    except OSError as e:
        raise ReadError(ReadErrorKind.IO_ERROR, display, e.strerror or "I/O error") from e
    except UnicodeDecodeError as e:
        raise ReadError(
            ReadErrorKind.DECODE_ERROR, display, f"File is not valid {encoding} text"
        ) from e
