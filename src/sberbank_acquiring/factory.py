"""Preconfigured clients for known gateway installations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import Client
from .constants import ALFABANK_PROD_URI, ALFABANK_TEST_URI, API_URI, API_URI_TEST


class ClientFactory:
    """Builds clients for the Sberbank and Alfa-Bank gateways.

    Caller options take precedence over the preset values.
    """

    @staticmethod
    def _create(defaults: dict[str, Any], options: Mapping[str, Any]) -> Client:
        return Client({**defaults, **options})

    @classmethod
    def prod(cls, options: Mapping[str, Any]) -> Client:
        return cls._create({"apiUri": API_URI}, options)

    @classmethod
    def test(cls, options: Mapping[str, Any]) -> Client:
        return cls._create({"apiUri": API_URI_TEST}, options)

    @classmethod
    def alfabank_prod(cls, options: Mapping[str, Any]) -> Client:
        return cls._create(
            {
                "apiUri": ALFABANK_PROD_URI,
                "prefixDefault": "/payment/rest/",
                "prefixApple": "/payment/applepay/",
                "prefixGoogle": "/payment/google/",
                "prefixSamsung": "/payment/samsung/",
            },
            options,
        )

    @classmethod
    def alfabank_test(cls, options: Mapping[str, Any]) -> Client:
        return cls._create(
            {
                "apiUri": ALFABANK_TEST_URI,
                "prefixDefault": "/ab/rest/",
                "prefixApple": "/ab/applepay/",
                "prefixGoogle": "/ab/google/",
                "prefixSamsung": "/ab/samsung/",
            },
            options,
        )
