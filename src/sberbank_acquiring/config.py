"""Client configuration.

Options are validated eagerly when the configuration is built and the
resulting ClientConfig is immutable.

Example:
    ```python
    config = ClientConfig.from_options({
        "userName": "merchant-api",
        "password": "secret",
        "language": "en",
        "httpMethod": "GET",
    })
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .constants import (
    API_PREFIX_APPLE,
    API_PREFIX_DEFAULT,
    API_PREFIX_GOOGLE,
    API_PREFIX_SAMSUNG,
    API_URI,
)
from .errors import ConfigurationError
from .http.transport import HTTPMethod, Transport

# Option names accepted by ClientConfig.from_options. "httpClient" is the
# legacy name of "transport".
ALLOWED_OPTIONS = (
    "apiUri",
    "currency",
    "httpClient",
    "httpMethod",
    "language",
    "password",
    "token",
    "transport",
    "userName",
    "prefixDefault",
    "prefixApple",
    "prefixGoogle",
    "prefixSamsung",
)

SUPPORTED_HTTP_METHODS = (HTTPMethod.GET, HTTPMethod.POST)


# ============================================================================
# Authentication Modes
# ============================================================================


class UsernamePasswordAuth(BaseModel):
    """Authenticate with a merchant API login and password."""

    kind: Literal["password"] = "password"
    user_name: str
    password: str = Field(repr=False)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def credentials(self) -> dict[str, str]:
        """Request parameters carrying the credentials."""
        return {"userName": self.user_name, "password": self.password}


class TokenAuth(BaseModel):
    """Authenticate with a merchant token."""

    kind: Literal["token"] = "token"
    token: str = Field(repr=False)

    model_config = ConfigDict(frozen=True)

    def credentials(self) -> dict[str, str]:
        """Request parameters carrying the credentials."""
        return {"token": self.token}


AuthMode = Annotated[UsernamePasswordAuth | TokenAuth, Field(discriminator="kind")]


# ============================================================================
# Client Configuration
# ============================================================================


class ClientConfig(BaseModel):
    """Immutable settings of a Client.

    Attributes:
        auth: Credentials, either UsernamePasswordAuth or TokenAuth.
        api_uri: Gateway base URI, used verbatim.
        prefix_default: Path prefix of the REST endpoints.
        prefix_apple: Path prefix of the Apple Pay endpoints.
        prefix_google: Path prefix of the Google Pay endpoints.
        prefix_samsung: Path prefix of the Samsung Pay endpoints.
        http_method: HTTP method of REST requests.
        language: ISO 639-1 code added to every request that has none.
        currency: ISO 4217 numeric code added to order registrations that have none.
        transport: Transport to use. The client creates an HttpxTransport when None.
    """

    auth: AuthMode
    api_uri: str = API_URI
    prefix_default: str = API_PREFIX_DEFAULT
    prefix_apple: str = API_PREFIX_APPLE
    prefix_google: str = API_PREFIX_GOOGLE
    prefix_samsung: str = API_PREFIX_SAMSUNG
    http_method: HTTPMethod = HTTPMethod.POST
    language: str | None = None
    currency: int | None = None
    transport: Any = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    @field_validator("http_method", mode="before")
    @classmethod
    def validate_http_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, Transport):
            raise ValueError("A transport must implement the Transport protocol.")
        return v

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> ClientConfig:
        """Build a configuration from gateway-style option names.

        Args:
            options: Mapping of options, see ALLOWED_OPTIONS.

        Returns:
            Validated configuration.

        Raises:
            ConfigurationError: If an option is unknown, credentials are missing
                or conflicting, the HTTP method is unsupported, or the transport
                does not implement the Transport protocol.
        """
        options = dict(options or {})

        unknown = [key for key in options if key not in ALLOWED_OPTIONS]
        if unknown:
            raise ConfigurationError(
                'Unknown option "{}". Allowed options: "{}".'.format(
                    unknown[0], '", "'.join(ALLOWED_OPTIONS)
                )
            )

        try:
            auth = _resolve_auth(options)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid credentials: {e}") from e

        fields: dict[str, Any] = {"auth": auth}

        http_method = options.get("httpMethod")
        if http_method is not None:
            fields["http_method"] = _resolve_http_method(http_method)

        transport = _resolve_transport(options)
        if transport is not None:
            fields["transport"] = transport

        for option, field_name in (
            ("apiUri", "api_uri"),
            ("language", "language"),
            ("currency", "currency"),
            ("prefixDefault", "prefix_default"),
            ("prefixApple", "prefix_apple"),
            ("prefixGoogle", "prefix_google"),
            ("prefixSamsung", "prefix_samsung"),
        ):
            if options.get(option) is not None:
                fields[field_name] = options[option]

        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client options: {e}") from e


# ============================================================================
# Option Resolution
# ============================================================================


def _resolve_auth(options: dict[str, Any]) -> UsernamePasswordAuth | TokenAuth:
    user_name = options.get("userName")
    password = options.get("password")
    token = options.get("token")

    if user_name is not None and password is not None:
        if token is not None:
            raise ConfigurationError('You can use either "userName" and "password" or "token".')
        return UsernamePasswordAuth(user_name=user_name, password=password)

    if token is not None:
        return TokenAuth(token=token)

    raise ConfigurationError(
        'You must provide authentication credentials: "userName" and "password", or "token".'
    )


def _resolve_http_method(value: Any) -> HTTPMethod:
    normalized = value.upper() if isinstance(value, str) else value
    for method in SUPPORTED_HTTP_METHODS:
        if normalized == method or normalized == method.value:
            return method

    raise ConfigurationError(
        f'An HTTP method "{value}" is not supported. Use "GET" or "POST".'
    )


def _resolve_transport(options: dict[str, Any]) -> Transport | None:
    transport = options.get("transport")
    legacy = options.get("httpClient")

    if transport is not None and legacy is not None:
        raise ConfigurationError('You can use either "transport" or "httpClient".')

    transport = transport if transport is not None else legacy
    if transport is not None and not isinstance(transport, Transport):
        raise ConfigurationError("A transport must implement the Transport protocol.")

    return transport
