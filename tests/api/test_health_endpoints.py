# This file tests API health, readiness, and version endpoints.
# It exists to validate operational contracts used by orchestration and monitoring.
# The tests confirm request IDs and version metadata are always returned.

from __future__ import annotations

from src.api.services.agent_service import AgentService
from src.api.services.quote_service import QuoteService
from src.quoting.pricing_tiers import DEFAULT_PRICING_TABLE
from tests.api.support import api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields() -> None:
    config = build_test_config()
    with api_test_client(config=config) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["api_version"] == "v1"
    assert payload["schema_version"] == config.schema_version
    assert payload["request_id"]
    assert "timestamp" in payload


def test_health_echoes_incoming_request_id() -> None:
    with api_test_client() as client:
        response = client.get("/health", headers={"x-request-id": "req-abc"})

    assert response.headers["x-request-id"] == "req-abc"
    assert response.json()["request_id"] == "req-abc"
    assert "x-response-time-ms" in response.headers


def test_ready_endpoint_reports_loaded_tables() -> None:
    with api_test_client() as client:
        response = client.get("/ready")

    assert response.status_code == 200
    payload = response.json()
    assert payload["agent_directory_ready"] is True
    assert payload["pricing_tiers_ready"] is True
    assert payload["agent_count"] == 16
    assert payload["tier_count"] == 3
    assert payload["ready"] is True


def test_ready_endpoint_not_ready_without_agents() -> None:
    with api_test_client(
        agent_service=AgentService(agents=()),
        quote_service=QuoteService(pricing=DEFAULT_PRICING_TABLE),
    ) as client:
        response = client.get("/ready")

    payload = response.json()
    assert payload["agent_directory_ready"] is False
    assert payload["ready"] is False


def test_version_endpoint_returns_version_metadata() -> None:
    config = build_test_config()
    with api_test_client(config=config) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["api_version_path"] == "/api/v1"
    assert payload["schema_version"] == config.schema_version
    assert payload["app_version"] == config.app_version
    assert payload["project"] == config.api_name
    assert payload["version"] == config.app_version


def test_metrics_endpoint_exposes_request_counters() -> None:
    with api_test_client() as client:
        client.get("/hello")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_http_requests_total" in response.text
