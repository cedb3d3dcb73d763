"""Sequential asynchronous test runner with spinner progress."""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple

from spintest.reporting.terminal import TerminalRenderer

from .errors import AssertionFailure
from .models import RunSummary, Status, TestAction, TestCase, TestResult
from .progress import Emit, Spinner

logger = logging.getLogger(__name__)


class TestRunner:
    """Owns a named collection of test cases and executes them in order.

    Actions are called with the runner itself, which exposes the assertion
    helpers and the optional ``host`` collaborator. Results accumulate across
    repeated ``run`` calls on the same instance; build a new runner to start
    from an empty state.
    """

    __test__ = False

    def __init__(
        self,
        display_name: str = "Test Suite",
        *,
        host: Any = None,
        use_color: bool = True,
        interval: float = 0.08,
    ) -> None:
        self.display_name = display_name
        self.host = host
        self._renderer = TerminalRenderer(use_color=use_color)
        self._interval = interval
        self._tests: List[TestCase] = []
        self._results: List[TestResult] = []

    @property
    def tests(self) -> Tuple[TestCase, ...]:
        return tuple(self._tests)

    @property
    def results(self) -> Tuple[TestResult, ...]:
        return tuple(self._results)

    @property
    def passed_count(self) -> int:
        return sum(1 for result in self._results if result.status is Status.PASS)

    @property
    def failed_count(self) -> int:
        return sum(1 for result in self._results if result.status is Status.FAIL)

    def register(self, name: str, action: TestAction) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Test name must be a non-empty string")
        if not callable(action):
            raise TypeError(f"Action for test '{name}' is not callable")
        self._tests.append(TestCase(name=name, action=action))

    def test(self, name: str) -> Callable[[TestAction], TestAction]:
        """Decorator registering the decorated function under ``name``."""

        def decorator(action: TestAction) -> TestAction:
            self.register(name, action)
            return action

        return decorator

    def assert_true(self, condition: Any, message: str = "Assertion failed") -> None:
        if not condition:
            raise AssertionFailure(message)

    def assert_equal(self, actual: Any, expected: Any, message: Optional[str] = None) -> None:
        if not _strictly_equal(actual, expected):
            if message is None:
                message = f"Expected {expected!r}, got {actual!r}"
            raise AssertionFailure(message)

    async def run(self, emit: Emit) -> List[TestResult]:
        """Execute every registered test once, in order, and render the report.

        Returns the full accumulated result sequence. Failures raised by test
        actions are recorded, never propagated.
        """

        renderer = self._renderer
        run_results: List[TestResult] = []
        emit(renderer.banner(self.display_name))
        for case in list(self._tests):
            logger.debug("running test %r in %r", case.name, self.display_name)
            async with Spinner(emit, renderer, case.name, interval=self._interval):
                error = await self._execute(case)
            if error is None:
                result = TestResult(name=case.name, status=Status.PASS)
            else:
                result = TestResult(name=case.name, status=Status.FAIL, error=error)
            self._results.append(result)
            run_results.append(result)
            logger.debug("test %r -> %s", case.name, result.status.value)
            if result.passed:
                emit(renderer.passed(case.name))
            else:
                emit(renderer.failed(case.name, result.error or ""))
        emit(renderer.summary(RunSummary.from_results(run_results)))
        return list(self._results)

    def run_sync(self, emit: Emit) -> List[TestResult]:
        return asyncio.run(self.run(emit))

    def summary(self) -> RunSummary:
        return RunSummary.from_results(self._results)

    async def _execute(self, case: TestCase) -> Optional[str]:
        try:
            outcome = case.action(self)
            if inspect.isawaitable(outcome):
                await outcome
        except AssertionFailure as exc:
            return exc.message
        except Exception as exc:
            return str(exc) or type(exc).__name__
        return None


_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


def _strictly_equal(actual: Any, expected: Any) -> bool:
    # containers and other objects compare by identity, never structurally
    if not isinstance(actual, _PRIMITIVES) or not isinstance(expected, _PRIMITIVES):
        return actual is expected
    # bool is an int subclass; keep True/1 and False/0 apart
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    return actual == expected


def format_results(results: Sequence[TestResult]) -> str:
    """Compact one-line-per-result text, handy for logs and assertions."""

    lines = []
    for result in results:
        if result.error is None:
            lines.append(f"{result.status.value} {result.name}")
        else:
            lines.append(f"{result.status.value} {result.name}: {result.error}")
    return "\n".join(lines)
