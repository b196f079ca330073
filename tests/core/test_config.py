"""Tests for Settings parsing."""
import pytest
from pydantic import ValidationError

from imagestudio.core.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.image_provider == "openai"
    assert s.openai_api_key == ""
    assert s.openai_image_model == "dall-e-3"
    assert s.http_client_timeout == 120.0
    assert s.fallback_providers_list == []


def test_provider_is_normalized():
    assert Settings(_env_file=None, image_provider="  DeepAI ").image_provider == "deepai"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("deepai,pixelixe", ["deepai", "pixelixe"]),
        (" Pixelixe , , deepai ", ["pixelixe", "deepai"]),
        ("", []),
    ],
)
def test_fallback_providers_list(raw, expected):
    assert Settings(_env_file=None, image_fallback_providers=raw).fallback_providers_list == expected


def test_cors_origins_list():
    s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
    assert s.cors_origins_list == ["http://a.test", "http://b.test"]


def test_env_variables(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("PROXY_SERVER_ACCESS_TOKEN", "relay")
    s = Settings(_env_file=None)
    assert s.openai_api_key == "sk-env"
    assert s.proxy_server_access_token == "relay"


def test_unknown_provider_rejected_at_load():
    with pytest.raises(ValidationError, match="Unknown image provider"):
        Settings(_env_file=None, image_provider="dalle")


def test_unknown_fallback_rejected_at_load(monkeypatch):
    monkeypatch.setenv("IMAGE_FALLBACK_PROVIDERS", "deepai,pixelxe")
    with pytest.raises(ValidationError, match="pixelxe"):
        Settings(_env_file=None)
