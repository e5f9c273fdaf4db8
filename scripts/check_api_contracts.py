# This script compares the live OpenAPI document against a committed baseline snapshot.
# It fails when an operation, schema, or response field disappears without a version bump.
# Pass --update to rewrite the baseline after an intentional contract change.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import json
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.api.api_config import get_api_config
from src.api.app import app
from src.api.schema_versions import detect_breaking_schema_changes

DEFAULT_SNAPSHOT_PATH = Path("reports/api/openapi_snapshot.json")
DEFAULT_REPORT_PATH = Path("reports/api/contract_diff_report.md")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check API contract compatibility")
    parser.add_argument("--snapshot", type=Path, default=DEFAULT_SNAPSHOT_PATH)
    parser.add_argument("--report", type=Path, default=DEFAULT_REPORT_PATH)
    parser.add_argument("--update", action="store_true", help="Overwrite the baseline snapshot.")
    return parser.parse_args(argv)


def current_snapshot() -> dict[str, Any]:
    config = get_api_config()
    openapi_schema = app.openapi()
    return {
        "api_version_path": config.api_version_path,
        "schema_version": config.schema_version,
        "paths": openapi_schema.get("paths", {}),
        "components": openapi_schema.get("components", {}),
    }


def render_report(*, baseline: dict[str, Any], current: dict[str, Any], findings: list[str]) -> str:
    lines = [
        "# API Contract Report",
        "",
        f"Generated at: {datetime.now(tz=UTC).isoformat()}",
        f"Baseline: `{baseline.get('api_version_path')}` schema `{baseline.get('schema_version')}`",
        f"Current: `{current.get('api_version_path')}` schema `{current.get('schema_version')}`",
        "",
        "## Findings",
        "",
    ]
    if findings:
        lines.extend(f"- {item}" for item in findings)
    else:
        lines.append("No breaking differences were detected.")
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    current = current_snapshot()

    if args.update or not args.snapshot.exists():
        args.snapshot.parent.mkdir(parents=True, exist_ok=True)
        args.snapshot.write_text(json.dumps(current, indent=2, sort_keys=True), encoding="utf-8")
        print(f"Baseline snapshot written to {args.snapshot}.")
        return 0

    baseline = json.loads(args.snapshot.read_text(encoding="utf-8"))
    findings = detect_breaking_schema_changes(previous_snapshot=baseline, current_snapshot=current)

    args.report.parent.mkdir(parents=True, exist_ok=True)
    args.report.write_text(
        render_report(baseline=baseline, current=current, findings=findings),
        encoding="utf-8",
    )

    if not findings:
        print("No breaking API contract changes detected.")
        return 0

    if baseline.get("api_version_path") != current.get("api_version_path"):
        print(f"{len(findings)} breaking change(s) covered by an API version bump. See {args.report}.")
        return 0

    print("Breaking contract changes detected without API path version bump:")
    for item in findings:
        print(f"- {item}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
