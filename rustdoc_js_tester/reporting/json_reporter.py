"""JSON report generator for rustdoc-js test runs.

Generates structured JSON reports from the exit statuses of a run.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..runner.executor import RunResult


class JsonReporter:
    """Generates JSON reports from rustdoc-js test runs."""

    def generate(self, result: RunResult) -> dict[str, Any]:
        """Generate a JSON report from a run.

        Args:
            result: Exit statuses collected by the test runner.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "toolchain": result.toolchain,
            "status": "passed" if result.all_passed else "failed",
            "summary": {
                "total": result.total_count,
                "passed": result.passed_count,
                "failed": result.failed_count,
                "duration_ms": result.duration_ms,
            },
            "cases": [
                {
                    "name": c.name,
                    "status": "pass" if c.passed else "fail",
                    "generator_exit": c.generator_exit,
                    "checker_exit": c.checker_exit,
                    "duration_ms": c.duration_ms,
                }
                for c in result.cases
            ],
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)


def report_file_name(toolchain: str) -> str:
    return f"rustdoc_js_report_{toolchain}.json"
