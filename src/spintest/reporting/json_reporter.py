"""JSON reporter emitting structured session results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import TYPE_CHECKING, Any, Dict, Optional

from jsonschema import validate

from spintest.core.models import RunSummary, TestResult

from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION

if TYPE_CHECKING:  # pragma: no cover
    from spintest.core.session import SessionResult

class JsonReporter:
    """Builds a report validated against the schema and optionally writes it."""

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None

    @property
    def path(self) -> Optional[pathlib.Path]:
        return self._path

    def build(self, session: "SessionResult") -> Dict[str, Any]:
        summary = _summary_to_dict(session.summary)
        summary["suites"] = len(session.suites)
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "status": "passed" if session.all_passed else "failed",
            "error": session.error,
            "summary": summary,
            "suites": [
                {
                    "name": suite.name,
                    "summary": _summary_to_dict(suite.summary),
                    "results": [_result_to_dict(result) for result in suite.results],
                }
                for suite in session.suites
            ],
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        return payload

    def write(self, session: "SessionResult") -> str:
        """Serialize the report; writes to ``path`` when one was given."""

        text = json.dumps(self.build(session), indent=2, ensure_ascii=False)
        if self._path is None:
            return text
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        return text


def _summary_to_dict(summary: RunSummary) -> Dict[str, Any]:
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "success_rate": summary.success_rate_text,
    }


def _result_to_dict(result: TestResult) -> Dict[str, Any]:
    return {
        "name": result.name,
        "status": result.status.value,
        "error": result.error,
    }
