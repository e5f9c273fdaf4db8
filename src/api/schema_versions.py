# This file defines helpers for API path versioning and schema version metadata.
# It exists so every response can carry explicit version fields for consumers.
# The module also compares two OpenAPI snapshots and lists changes that would break clients.

from __future__ import annotations

from typing import Any

_HTTP_METHODS = ("get", "post", "put", "patch", "delete")


def api_version_label(api_version_path: str) -> str:
    """Convert `/api/v1` style paths into `v1` labels."""

    parts = [part for part in api_version_path.rstrip("/").split("/") if part]
    if not parts:
        raise ValueError(f"Invalid api_version_path: {api_version_path!r}")
    return parts[-1]


def build_version_fields(*, api_version_path: str, schema_version: str) -> dict[str, str]:
    return {
        "api_version": api_version_label(api_version_path),
        "schema_version": schema_version,
    }


def _operations(snapshot: dict[str, Any]) -> set[tuple[str, str]]:
    found: set[tuple[str, str]] = set()
    for path, item in snapshot.get("paths", {}).items():
        for method in _HTTP_METHODS:
            if method in item:
                found.add((method.upper(), path))
    return found


def _schema_findings(name: str, previous: dict[str, Any], current: dict[str, Any]) -> list[str]:
    findings: list[str] = []
    previous_props = previous.get("properties", {})
    current_props = current.get("properties", {})

    for prop in sorted(set(previous_props) - set(current_props)):
        findings.append(f"Schema {name} removed property: {prop}")

    for prop in sorted(set(previous.get("required", [])) - set(current.get("required", []))):
        if prop in current_props:
            findings.append(f"Schema {name} made field optional: {prop}")

    for prop in sorted(set(previous_props) & set(current_props)):
        before = previous_props[prop].get("type")
        after = current_props[prop].get("type")
        if before and after and before != after:
            findings.append(f"Schema {name} changed type of {prop}: {before} -> {after}")

    return findings


def detect_breaking_schema_changes(
    *,
    previous_snapshot: dict[str, Any],
    current_snapshot: dict[str, Any],
) -> list[str]:
    """List removed operations, removed schemas, and field-level breaking changes."""

    findings = [
        f"Removed API operation: {method} {path}"
        for method, path in sorted(_operations(previous_snapshot) - _operations(current_snapshot))
    ]

    previous_schemas = previous_snapshot.get("components", {}).get("schemas", {})
    current_schemas = current_snapshot.get("components", {}).get("schemas", {})
    for schema_name, previous_schema in previous_schemas.items():
        current_schema = current_schemas.get(schema_name)
        if current_schema is None:
            findings.append(f"Removed schema component: {schema_name}")
            continue
        findings.extend(_schema_findings(schema_name, previous_schema, current_schema))

    return findings
