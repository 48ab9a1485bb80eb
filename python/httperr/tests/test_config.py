import pytest

from httperr import ClientConfig


def test_defaults():
    config = ClientConfig(base_url="https://example.com/api")
    assert config.base_url == "https://example.com/api/"
    assert config.http_timeout == 30.0
    assert config.throw_exceptions is True
    assert config.is_unexceptional(200)
    assert config.is_unexceptional(307)
    assert config.is_unexceptional(304)
    assert config.is_unexceptional(308)
    assert not config.is_unexceptional(305)
    assert not config.is_unexceptional(503)


def test_rejects_invalid_values():
    with pytest.raises(ValueError):
        ClientConfig(base_url="example.com")
    with pytest.raises(ValueError):
        ClientConfig(base_url="ftp://example.com")
    with pytest.raises(ValueError):
        ClientConfig(base_url="https://example.com", http_timeout=0)
    with pytest.raises(ValueError):
        ClientConfig(base_url="https://example.com", unexceptional_statuses={200, 99})


def test_api_url_resolution():
    config = ClientConfig(base_url="https://example.com/api/")
    assert config.api_url("v1/items") == "https://example.com/api/v1/items"
    assert config.api_url("/v1/items") == "https://example.com/api/v1/items"
    assert config.api_url("https://other.test/x") == "https://other.test/x"


def test_from_env(monkeypatch):
    monkeypatch.setenv("HTTPERR_BASE_URL", "https://example.com")
    monkeypatch.setenv("HTTPERR_HTTP_TIMEOUT", "5")
    config = ClientConfig.from_env()
    assert config.base_url == "https://example.com/"
    assert config.http_timeout == 5.0


def test_from_env_requires_base_url(monkeypatch):
    monkeypatch.delenv("HTTPERR_BASE_URL", raising=False)
    with pytest.raises(ValueError):
        ClientConfig.from_env()


def test_from_env_rejects_non_numeric_timeout(monkeypatch):
    monkeypatch.setenv("HTTPERR_BASE_URL", "https://example.com")
    monkeypatch.setenv("HTTPERR_HTTP_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="invalid HTTPERR_HTTP_TIMEOUT") as info:
        ClientConfig.from_env()
    assert isinstance(info.value.__cause__, ValueError)
