# This file provides shared helpers for API endpoint tests.
# It exists so tests can override config and services without relying on the process environment.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.dependencies import (
    get_agent_service,
    get_config,
    get_contact_service,
    get_quote_service,
)


def build_test_config(*, include_plain_language_fields: bool = True) -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Quote API",
        api_version_path="/api/v1",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=3000,
        environment="test",
        enable_request_logging=False,
        include_plain_language_fields=include_plain_language_fields,
        allowed_origins=[],
        pricing_config_path=None,
        app_version="0.1.0",
    )


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    quote_service: Any | None = None,
    agent_service: Any | None = None,
    contact_service: Any | None = None,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if quote_service is not None:
        app.dependency_overrides[get_quote_service] = lambda: quote_service
    if agent_service is not None:
        app.dependency_overrides[get_agent_service] = lambda: agent_service
    if contact_service is not None:
        app.dependency_overrides[get_contact_service] = lambda: contact_service

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
