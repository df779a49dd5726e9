"""Wire encoding of gateway requests.

REST endpoints (paths under the default prefix) take form-urlencoded
parameters plus credentials and honour the configured HTTP method.
Every other endpoint (wallet payments) takes a JSON object over POST.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from .constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON
from .errors import InvalidArgumentError
from .http.transport import HTTPMethod

if TYPE_CHECKING:
    from .config import ClientConfig


@dataclass(frozen=True)
class EncodedRequest:
    """A request ready to be handed to a transport."""

    uri: str
    path: str
    method: HTTPMethod
    headers: dict[str, str]
    body: str
    rest: bool


# ============================================================================
# Path Resolution
# ============================================================================


def resolve_path(action: str, prefix_default: str) -> str:
    """Prepend the default prefix to bare action names.

    Args:
        action: Action path ("/payment/rest/register.do") or name ("register.do").
        prefix_default: Prefix of the REST endpoints.

    Returns:
        Absolute action path.
    """
    if not action.startswith("/"):
        return prefix_default + action
    return action


def is_rest_path(path: str, prefix_default: str) -> bool:
    """Check whether a resolved path belongs to the REST endpoint family."""
    return path.startswith(prefix_default)


# ============================================================================
# Body Encoding
# ============================================================================


def _scalar(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _flatten(key: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{key}[{index}]", item, pairs)
    else:
        pairs.append((key, _scalar(value)))


def encode_form(params: Mapping[str, Any]) -> str:
    """Encode parameters as application/x-www-form-urlencoded.

    None values are skipped, booleans become 1/0 and nested mappings or
    lists are expanded into bracketed keys (``items[0]=a``).

    Args:
        params: Request parameters.

    Returns:
        Encoded body, keys in insertion order.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten(str(key), value, pairs)
    return urlencode(pairs)


def encode_json(params: Any) -> str:
    """Encode a value as compact JSON.

    Raises:
        InvalidArgumentError: If the value holds something JSON cannot represent.
    """
    try:
        return json.dumps(params, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Parameters cannot be encoded as JSON: {e}") from e


# ============================================================================
# Request Encoding
# ============================================================================


def encode_request(config: ClientConfig, action: str, data: Mapping[str, Any] | None = None) -> EncodedRequest:
    """Build the wire request for an action.

    Language is added when the caller did not set one. REST requests get
    the credentials and the configured method; other requests are JSON
    over POST without credentials.

    Args:
        config: Client configuration.
        action: Action path or bare action name.
        data: Request parameters. Not modified.

    Returns:
        EncodedRequest.
    """
    path = resolve_path(action, config.prefix_default)
    rest = is_rest_path(path, config.prefix_default)

    params = dict(data or {})
    if params.get("language") is None and config.language is not None:
        params["language"] = config.language

    headers = {"Cache-Control": "no-cache"}

    if rest:
        params.update(config.auth.credentials())
        headers["Content-Type"] = CONTENT_TYPE_FORM
        body = encode_form(params)
        method = config.http_method
    else:
        headers["Content-Type"] = CONTENT_TYPE_JSON
        body = encode_json(params)
        method = HTTPMethod.POST

    return EncodedRequest(
        uri=config.api_uri + path,
        path=path,
        method=method,
        headers=headers,
        body=body,
        rest=rest,
    )
