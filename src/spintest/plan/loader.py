"""YAML loader and validation for suite plans."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from spintest import bootstrap
from spintest.core import TestSession

from .custom import load_suite
from .models import SuiteConfig, SuitePlan

logger = logging.getLogger(__name__)


def load_plan(path: str) -> SuitePlan:
    """Load and validate a plan file."""
    plan_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(plan_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Plan file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Plan schema validation failed: {messages}")
    suites = tuple(_parse_suite(item, plan_path.parent) for item in raw["suites"])
    return SuitePlan(
        name=str(raw.get("name") or plan_path.stem),
        suites=suites,
        color=bool(raw.get("color", True)),
        interval_ms=int(raw.get("interval_ms", 80)),
        plan_dir=plan_path.parent,
    )


def build_session(
    plan: SuitePlan,
    *,
    use_color: bool | None = None,
    host: Any = None,
    plugins: bool = True,
) -> TestSession:
    """Create one runner per suite and let each suite register its tests.

    Plugin hooks from ``SPINTEST_PLUGINS`` run afterwards with the session,
    so suites they add execute after the plan's own.
    """

    color = plan.color if use_color is None else use_color
    session = TestSession(title=plan.name, use_color=color, interval=plan.interval_ms / 1000, host=host)
    for config in plan.suites:
        register = load_suite(config)
        runner = session.suite(config.name)
        register(runner)
        logger.debug("loaded suite %r from %s with %d test(s)", config.name, config.origin(), len(runner.tests))
    if plugins:
        for hook in bootstrap():
            hook(session)
            logger.debug("plugin hook %s.%s applied", hook.__module__, hook.__name__)
    return session


def _parse_suite(raw: Mapping[str, Any], base: Path) -> SuiteConfig:
    name = raw["name"].strip()
    if not name:
        raise ValueError("Suite name cannot be empty")
    module = raw.get("module")
    source = raw.get("source")
    if bool(module) == bool(source):
        raise ValueError(f"Suite '{name}' must set exactly one of 'module' or 'source'")
    source_path = None
    if source:
        source_path = Path(source).expanduser()
        if not source_path.is_absolute():
            source_path = base / source_path
    return SuiteConfig(
        name=name,
        module=module or None,
        source=source_path,
        function=raw.get("function", "register"),
    )


PLAN_SCHEMA = {
    "type": "object",
    "required": ["suites"],
    "properties": {
        "name": {"type": "string"},
        "color": {"type": "boolean"},
        "interval_ms": {"type": "integer", "minimum": 1},
        "suites": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "module": {"type": "string", "minLength": 1},
                    "source": {"type": "string", "minLength": 1},
                    "function": {"type": "string", "minLength": 1},
                },
                "additionalProperties": False,
            },
        },
    },
}
_validator = Draft7Validator(PLAN_SCHEMA)
