"""
Domain exceptions for the agent tool set.

Registration errors are isolated per tool, configuration errors abort a
build, and execution errors are reported per call as failed tool results.
"""

from enum import Enum


class AgentToolsError(Exception):
    """
    Base exception for all agent tool errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        """
        Initialize AgentToolsError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class SchemaMergeError(AgentToolsError):
    """
    Raised when a union parameter schema cannot be merged.

    Isolated per tool: the registry drops the tool and keeps building.
    """

    def __init__(self, reason: str, tool_name: str | None = None) -> None:
        """
        Initialize SchemaMergeError.

        Args:
            reason: Why the merge failed.
            tool_name: Tool whose schema failed, when known.
        """
        self.reason = reason
        self.tool_name = tool_name
        msg = f"Cannot merge union schema: {reason}"
        if tool_name:
            msg = f"Cannot merge union schema for tool '{tool_name}': {reason}"
        super().__init__(msg)


class ConfigError(AgentToolsError):
    """
    Raised when a build context or config file is malformed.

    Terminal for the whole build - this is a caller contract violation.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        """
        Initialize ConfigError.

        Args:
            message: Description of the malformed input.
            source: Optional origin (file path or field) of the bad value.
        """
        self.source = source
        full_message = f"Invalid configuration: {message}"
        if source:
            full_message = f"Invalid configuration in '{source}': {message}"
        super().__init__(full_message)


class ReadErrorKind(str, Enum):
    """Failure kinds reported by the read tool."""

    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    IS_DIRECTORY = "IsDirectory"
    DECODE_ERROR = "DecodeError"
    # Any other OS-level failure (name too long, symlink loop, EIO, ...)
    IO_ERROR = "IOError"
    OFFSET_OUT_OF_RANGE = "OffsetOutOfRange"


class ReadError(AgentToolsError):
    """
    Raised when a file cannot be read or classified.

    Attributes:
        kind: Which failure occurred.
        path: Path that was being read.
    """

    def __init__(self, kind: ReadErrorKind, path: str, reason: str) -> None:
        """
        Initialize ReadError.

        Args:
            kind: Failure kind.
            path: Path that was being read.
            reason: Human-readable reason.
        """
        self.kind = kind
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ToolArgumentsError(AgentToolsError):
    """Raised when invocation arguments do not match a tool's schema."""

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Invalid arguments for tool '{tool_name}': {reason}")
