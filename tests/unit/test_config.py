"""Tests for ClientConfig option validation."""

import pytest
from pydantic import ValidationError

from sberbank_acquiring import (
    API_PREFIX_APPLE,
    API_PREFIX_DEFAULT,
    API_PREFIX_GOOGLE,
    API_PREFIX_SAMSUNG,
    API_URI,
    Client,
    ClientConfig,
    ConfigurationError,
    HTTPMethod,
    TokenAuth,
    UsernamePasswordAuth,
)


class DummyTransport:
    def send(self, uri, method, headers, body):
        return 200, "{}"


class TestUnknownOptions:
    """Test rejection of unknown options."""

    def test_should_name_unknown_option(self):
        with pytest.raises(ConfigurationError, match='Unknown option "foo".'):
            ClientConfig.from_options({"token": "token", "foo": "bar"})

    def test_should_list_allowed_options(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ClientConfig.from_options({"token": "token", "foo": "bar"})

        assert 'Allowed options: "apiUri", "currency"' in str(exc_info.value)
        assert '"prefixSamsung".' in str(exc_info.value)

    def test_should_be_a_value_error(self):
        with pytest.raises(ValueError):
            ClientConfig.from_options({"token": "token", "foo": "bar"})


class TestCredentials:
    """Test authentication mode resolution."""

    def test_username_and_password(self):
        config = ClientConfig.from_options({"userName": "oleg", "password": "qwerty123"})

        assert isinstance(config.auth, UsernamePasswordAuth)
        assert config.auth.credentials() == {"userName": "oleg", "password": "qwerty123"}

    def test_token(self):
        config = ClientConfig.from_options({"token": "abc"})

        assert isinstance(config.auth, TokenAuth)
        assert config.auth.credentials() == {"token": "abc"}

    def test_should_reject_both_password_and_token(self):
        with pytest.raises(
            ConfigurationError,
            match='You can use either "userName" and "password" or "token".',
        ):
            ClientConfig.from_options({"userName": "u", "password": "p", "token": "t"})

    def test_should_reject_missing_credentials(self):
        with pytest.raises(ConfigurationError, match="You must provide authentication credentials"):
            ClientConfig.from_options({})

    def test_should_reject_username_without_password(self):
        with pytest.raises(ConfigurationError, match="You must provide authentication credentials"):
            ClientConfig.from_options({"userName": "oleg"})

    def test_client_without_options_fails(self):
        with pytest.raises(ConfigurationError):
            Client()

    def test_password_is_not_in_repr(self):
        config = ClientConfig.from_options({"userName": "oleg", "password": "qwerty123"})

        assert "qwerty123" not in repr(config)


class TestHttpMethod:
    """Test HTTP method option."""

    def test_defaults_to_post(self):
        config = ClientConfig.from_options({"token": "t"})

        assert config.http_method is HTTPMethod.POST

    @pytest.mark.parametrize("value", ["GET", "get", HTTPMethod.GET])
    def test_accepts_get(self, value):
        config = ClientConfig.from_options({"token": "t", "httpMethod": value})

        assert config.http_method is HTTPMethod.GET

    def test_should_reject_unsupported_method(self):
        with pytest.raises(
            ConfigurationError,
            match='An HTTP method "PUT" is not supported. Use "GET" or "POST".',
        ):
            ClientConfig.from_options({"userName": "oleg", "password": "qwerty123", "httpMethod": "PUT"})


class TestTransport:
    """Test transport option."""

    def test_accepts_transport(self):
        transport = DummyTransport()
        config = ClientConfig.from_options({"token": "t", "transport": transport})

        assert config.transport is transport

    def test_accepts_legacy_http_client_option(self):
        transport = DummyTransport()
        config = ClientConfig.from_options({"token": "t", "httpClient": transport})

        assert config.transport is transport

    def test_should_reject_object_without_send(self):
        with pytest.raises(ConfigurationError, match="must implement the Transport protocol"):
            ClientConfig.from_options({"token": "t", "transport": object()})

    def test_should_reject_both_transport_options(self):
        with pytest.raises(ConfigurationError):
            ClientConfig.from_options(
                {"token": "t", "transport": DummyTransport(), "httpClient": DummyTransport()}
            )

    def test_direct_construction_validates_transport(self):
        with pytest.raises(ValueError):
            ClientConfig(auth=TokenAuth(token="t"), transport=object())


class TestDefaults:
    """Test default and overridden settings."""

    def test_defaults(self):
        config = ClientConfig.from_options({"token": "t"})

        assert config.api_uri == API_URI
        assert config.prefix_default == API_PREFIX_DEFAULT
        assert config.prefix_apple == API_PREFIX_APPLE
        assert config.prefix_google == API_PREFIX_GOOGLE
        assert config.prefix_samsung == API_PREFIX_SAMSUNG
        assert config.language is None
        assert config.currency is None
        assert config.transport is None

    def test_overrides(self):
        config = ClientConfig.from_options(
            {
                "token": "t",
                "apiUri": "https://example.com",
                "language": "en",
                "currency": 643,
                "prefixDefault": "/ab/rest/",
                "prefixGoogle": "/ab/google/",
            }
        )

        assert config.api_uri == "https://example.com"
        assert config.language == "en"
        assert config.currency == 643
        assert config.prefix_default == "/ab/rest/"
        assert config.prefix_google == "/ab/google/"
        assert config.prefix_apple == API_PREFIX_APPLE

    def test_invalid_currency_type(self):
        with pytest.raises(ConfigurationError, match="Invalid client options"):
            ClientConfig.from_options({"token": "t", "currency": "rubles"})

    def test_config_is_immutable(self):
        config = ClientConfig.from_options({"token": "t"})

        with pytest.raises(ValidationError):
            config.language = "ru"

    def test_client_accepts_config_instance(self):
        config = ClientConfig(auth=TokenAuth(token="t"), language="ru")
        client = Client(config)

        assert client.config is config
