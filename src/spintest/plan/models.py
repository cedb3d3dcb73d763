"""Data models for suite plan files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence


@dataclass(frozen=True)
class SuiteConfig:
    name: str
    module: Optional[str] = None
    source: Optional[Path] = None
    function: str = "register"

    def origin(self) -> str:
        if self.module:
            return f"{self.module}:{self.function}"
        return f"{self.source}:{self.function}"


@dataclass(frozen=True)
class SuitePlan:
    name: str
    suites: Sequence[SuiteConfig] = field(default_factory=tuple)
    color: bool = True
    interval_ms: int = 80
    plan_dir: Optional[Path] = None
