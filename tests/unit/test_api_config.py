"""
Unit tests for the API config loader.
"""

import pytest
from pydantic import ValidationError

from src.api.api_config import ApiConfig, load_api_config

API_ENV_VARS = (
    "PORT",
    "API_PORT",
    "ENVIRONMENT",
    "ENV",
    "API_VERSION_PATH",
    "API_ENABLE_REQUEST_LOGGING",
    "API_ALLOWED_ORIGINS",
    "QUOTE_PRICING_CONFIG_PATH",
)


@pytest.fixture
def clean_api_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in API_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_api_env: pytest.MonkeyPatch) -> None:
    config = load_api_config(load_env=False)
    assert config.port == 3000
    assert config.environment == "local"
    assert config.api_version_path == "/api/v1"
    assert config.api_version_label() == "v1"
    assert config.pricing_config_path == "configs/pricing_tiers.yaml"
    assert config.allowed_origins == []


def test_port_and_environment_prefer_original_variables(clean_api_env: pytest.MonkeyPatch) -> None:
    clean_api_env.setenv("API_PORT", "8000")
    clean_api_env.setenv("ENV", "test")
    config = load_api_config(load_env=False)
    assert config.port == 8000
    assert config.environment == "test"

    clean_api_env.setenv("PORT", "5050")
    clean_api_env.setenv("ENVIRONMENT", "production")
    config = load_api_config(load_env=False)
    assert config.port == 5050
    assert config.environment == "production"


def test_boolean_and_list_parsing(clean_api_env: pytest.MonkeyPatch) -> None:
    clean_api_env.setenv("API_ENABLE_REQUEST_LOGGING", "yes")
    clean_api_env.setenv("API_ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    config = load_api_config(load_env=False)
    assert config.enable_request_logging is True
    assert config.allowed_origins == ["http://a.test", "http://b.test"]


def test_invalid_boolean_is_rejected(clean_api_env: pytest.MonkeyPatch) -> None:
    clean_api_env.setenv("API_ENABLE_REQUEST_LOGGING", "sometimes")
    with pytest.raises(ValueError, match="boolean-like"):
        load_api_config(load_env=False)


@pytest.mark.parametrize("path", ["api/v1", "/v1", "/api/latest"])
def test_version_path_must_look_versioned(path: str) -> None:
    with pytest.raises(ValidationError):
        ApiConfig(api_version_path=path)


def test_version_path_trailing_slash_is_trimmed() -> None:
    assert ApiConfig(api_version_path="/api/v2/").api_version_path == "/api/v2"


@pytest.mark.parametrize("port", [0, 70000])
def test_port_range_is_validated(port: int) -> None:
    with pytest.raises(ValidationError):
        ApiConfig(port=port)
