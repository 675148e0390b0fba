import pytest
from pydantic import ValidationError

from storefront_client.infrastructure.config import StorefrontSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("STOREFRONT_BASE_URL", raising=False)
    settings = StorefrontSettings(_env_file=None)

    assert settings.request_timeout_seconds == 10.0
    assert settings.read_max_attempts == 3
    assert settings.currency_prefix == "$"
    assert settings.api_token is None


def test_environment_overrides_with_prefix(monkeypatch):
    monkeypatch.setenv("STOREFRONT_BASE_URL", "https://shop.example.com/api/")
    monkeypatch.setenv("STOREFRONT_API_TOKEN", "secret-token")
    monkeypatch.setenv("STOREFRONT_CURRENCY_PREFIX", "EUR ")

    settings = StorefrontSettings(_env_file=None)

    assert settings.base_url == "https://shop.example.com/api"
    assert settings.api_token.get_secret_value() == "secret-token"
    assert "secret-token" not in repr(settings)
    assert settings.currency_prefix == "EUR "


def test_read_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        StorefrontSettings(read_max_attempts=0, _env_file=None)
