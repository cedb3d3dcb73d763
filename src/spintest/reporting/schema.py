"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

_SUMMARY = {
    "type": "object",
    "required": ["total", "passed", "failed", "success_rate"],
    "properties": {
        "total": {"type": "integer", "minimum": 0},
        "passed": {"type": "integer", "minimum": 0},
        "failed": {"type": "integer", "minimum": 0},
        "success_rate": {"type": "string", "pattern": "^[0-9]+\\.[0-9]$"},
    },
}

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "spintest report",
    "type": "object",
    "required": ["schema_version", "generated_at", "status", "summary", "suites"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "status": {"type": "string", "enum": ["passed", "failed"]},
        "error": {"type": ["string", "null"]},
        "summary": {
            "allOf": [
                _SUMMARY,
                {
                    "type": "object",
                    "required": ["suites"],
                    "properties": {"suites": {"type": "integer", "minimum": 0}},
                },
            ]
        },
        "suites": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "summary", "results"],
                "properties": {
                    "name": {"type": "string"},
                    "summary": _SUMMARY,
                    "results": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "status", "error"],
                            "properties": {
                                "name": {"type": "string", "minLength": 1},
                                "status": {"type": "string", "enum": ["PASS", "FAIL"]},
                                "error": {"type": ["string", "null"]},
                            },
                        },
                    },
                },
            },
        },
    },
}
