"""Core dataclasses shared across spintest subsystems."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Optional, Union

# An action receives the runner (assertions + host access) and may be sync or async.
TestAction = Callable[[Any], Union[None, Awaitable[None]]]


class Status(str, enum.Enum):
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class TestCase:
    """A named unit of behaviour registered on a runner."""

    __test__ = False

    name: str
    action: TestAction


@dataclass(frozen=True)
class TestResult:
    """Recorded outcome of executing one test case."""

    __test__ = False

    name: str
    status: Status
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS


@dataclass(frozen=True)
class RunSummary:
    """Aggregate counts over a sequence of results."""

    total: int = 0
    passed: int = 0
    failed: int = 0

    @classmethod
    def from_results(cls, results: Iterable[TestResult]) -> "RunSummary":
        total = passed = 0
        for result in results:
            total += 1
            if result.passed:
                passed += 1
        return cls(total=total, passed=passed, failed=total - passed)

    @property
    def success_rate(self) -> float:
        if not self.total:
            return 0.0
        return self.passed / self.total * 100

    @property
    def success_rate_text(self) -> str:
        return f"{self.success_rate:.1f}"

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def __add__(self, other: "RunSummary") -> "RunSummary":
        return RunSummary(
            total=self.total + other.total,
            passed=self.passed + other.passed,
            failed=self.failed + other.failed,
        )
