"""Exceptions raised by the acquiring client."""

from __future__ import annotations


class AcquiringError(Exception):
    """Base class for all acquiring client errors.

    Attributes:
        message: Human-readable description.
        code: Numeric code. Meaning depends on the subclass.
    """

    def __init__(self, message: str, code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(AcquiringError, ValueError):
    """Raised when client options are unknown, conflicting or invalid."""

    pass


class InvalidArgumentError(AcquiringError, ValueError):
    """Raised when an operation receives a malformed parameter."""

    pass


class NetworkError(AcquiringError):
    """Raised by a transport when the request could not be performed."""

    pass


class BadResponseError(AcquiringError):
    """Raised when the gateway answers with an HTTP status other than 200.

    Attributes:
        code: The HTTP status code.
        response: Raw response body.
    """

    def __init__(self, message: str, code: int = 0, response: str | None = None) -> None:
        super().__init__(message, code)
        self.response = response


class ResponseParsingError(AcquiringError):
    """Raised when the response body is not a JSON object.

    Attributes:
        position: Offset of the parser failure in the body, if known.
        response: Raw response body.
    """

    def __init__(
        self,
        message: str,
        code: int = 0,
        position: int | None = None,
        response: str | None = None,
    ) -> None:
        super().__init__(message, code)
        self.position = position
        self.response = response


class ActionError(AcquiringError):
    """Raised when the gateway reports a non-zero error code for an action."""

    pass
