"""Argument validation against published parameter schemas."""

from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from ..exceptions import ToolArgumentsError


def validate_arguments(
    parameters: dict[str, Any],
    args: Any,
    tool_name: str = "tool",
) -> None:
    """
    Validate invocation arguments against a published schema.

    For merged union schemas the ``anyOf`` branch enforces each variant's own
    required fields and discriminator value, so a call is only accepted when
    it matches at least one concrete variant.

    Args:
        parameters: Published JSON schema of the tool.
        args: Invocation arguments.
        tool_name: Tool name for error messages.

    Raises:
        ToolArgumentsError: If the arguments do not validate.
    """
    validator = Draft202012Validator(parameters)
    error = best_match(validator.iter_errors(args))
    if error is not None:
        location = "/".join(str(part) for part in error.absolute_path)
        reason = f"{location}: {error.message}" if location else error.message
        raise ToolArgumentsError(tool_name, reason)
