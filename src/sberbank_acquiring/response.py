"""Parsing and error normalization of gateway responses.

The gateway reports errors in several shapes depending on the endpoint:

    {"errorCode": 5, "errorMessage": "..."}
    {"ErrorCode": 5, "ErrorMessage": "..."}
    {"error": {"code": 5, "message": "..."}}
    {"error": {"code": 5, "description": "..."}}

Each shape is an extraction rule below. Rules are tried in order and
the first one that yields a value wins.
"""

from __future__ import annotations

import json
from typing import Any

from .constants import ACTION_SUCCESS, UNKNOWN_ERROR_MESSAGE
from .errors import ActionError, ResponseParsingError

# Key paths holding the error code, by priority
ERROR_CODE_RULES: tuple[tuple[str, ...], ...] = (
    ("errorCode",),
    ("ErrorCode",),
    ("error", "code"),
)

# Key paths holding the error message, by priority
ERROR_MESSAGE_RULES: tuple[tuple[str, ...], ...] = (
    ("errorMessage",),
    ("ErrorMessage",),
    ("error", "message"),
    ("error", "description"),
)

# Bookkeeping keys never returned to the caller
STRIPPED_KEYS = ("errorCode", "ErrorCode", "errorMessage", "ErrorMessage", "error", "success")


def parse_response(body: str) -> dict[str, Any]:
    """Decode a response body into a dict.

    Args:
        body: Raw response body.

    Returns:
        Decoded JSON object.

    Raises:
        ResponseParsingError: If the body is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParsingError(e.msg, position=e.pos, response=body) from e

    if not isinstance(data, dict):
        raise ResponseParsingError(
            f"Expected a JSON object, got {type(data).__name__}.", response=body
        )

    return data


def extract(data: dict[str, Any], rules: tuple[tuple[str, ...], ...]) -> Any:
    """Return the value of the first rule whose key path is present and not null."""
    for path in rules:
        value: Any = data
        for key in path:
            if not isinstance(value, dict):
                value = None
                break
            value = value.get(key)
        if value is not None:
            return value
    return None


def _error_code(data: dict[str, Any], body: str | None) -> int:
    code = extract(data, ERROR_CODE_RULES)
    if code is None:
        return ACTION_SUCCESS
    # A code that is not an integer is malformed, never read as success
    try:
        return int(code)
    except (TypeError, ValueError) as e:
        raise ResponseParsingError(f"Invalid error code: {code!r}.", response=body) from e


def normalize_response(data: dict[str, Any], body: str | None = None) -> dict[str, Any]:
    """Strip error fields from a decoded response and raise on action errors.

    Args:
        data: Decoded response. Not modified.
        body: Raw response body, attached to parsing errors.

    Returns:
        The response without error bookkeeping fields.

    Raises:
        ActionError: If the gateway reported a non-zero error code.
        ResponseParsingError: If the error code is not an integer.
    """
    code = _error_code(data, body)
    message = extract(data, ERROR_MESSAGE_RULES)
    if message is None:
        message = UNKNOWN_ERROR_MESSAGE

    cleaned = {key: value for key, value in data.items() if key not in STRIPPED_KEYS}

    if code != ACTION_SUCCESS:
        raise ActionError(str(message), code)

    return cleaned


def handle_response(body: str) -> dict[str, Any]:
    """Parse and normalize a raw response body."""
    return normalize_response(parse_response(body), body)
