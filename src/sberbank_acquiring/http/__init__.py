"""HTTP layer: transport protocol and concrete transports."""

from .transport import HTTPMethod, Transport, build_get_uri

__all__ = [
    "HTTPMethod",
    "Transport",
    "build_get_uri",
]
