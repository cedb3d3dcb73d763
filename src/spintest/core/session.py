"""Runs several test runners through one sink and aggregates their results."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence

from spintest.reporting.terminal import TerminalRenderer

from .models import RunSummary, TestResult
from .progress import Emit
from .runner import TestRunner, format_results

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuiteOutcome:
    """Results returned by one runner within a session."""

    name: str
    results: Sequence[TestResult]

    @property
    def summary(self) -> RunSummary:
        return RunSummary.from_results(self.results)


@dataclass
class SessionResult:
    """Aggregated outcome of a session run."""

    suites: List[SuiteOutcome] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def summary(self) -> RunSummary:
        total = RunSummary()
        for suite in self.suites:
            total = total + suite.summary
        return total

    @property
    def all_passed(self) -> bool:
        return self.error is None and self.summary.all_passed


class TestSession:
    """Executes runners one after another, never concurrently."""

    __test__ = False

    def __init__(
        self,
        runners: Iterable[TestRunner] = (),
        *,
        title: str = "spintest",
        use_color: bool = True,
        interval: float = 0.08,
        host: Any = None,
    ) -> None:
        self.title = title
        self.host = host
        self._use_color = use_color
        self._interval = interval
        self._runners: List[TestRunner] = list(runners)
        self._renderer = TerminalRenderer(use_color=use_color)

    @property
    def runners(self) -> List[TestRunner]:
        return list(self._runners)

    def add(self, runner: TestRunner) -> TestRunner:
        self._runners.append(runner)
        return runner

    def suite(self, display_name: str) -> TestRunner:
        """Create a runner sharing this session's settings and queue it."""

        runner = TestRunner(
            display_name,
            host=self.host,
            use_color=self._use_color,
            interval=self._interval,
        )
        return self.add(runner)

    async def run(self, emit: Emit) -> SessionResult:
        renderer = self._renderer
        outcome = SessionResult()
        emit(renderer.notice(f"🚀 {self.title}"))
        emit(renderer.notice("Starting test execution..."))
        try:
            for runner in self._runners:
                already_recorded = len(runner.results)
                results = (await runner.run(emit))[already_recorded:]
                logger.debug("suite %r finished:\n%s", runner.display_name, format_results(results))
                outcome.suites.append(SuiteOutcome(name=runner.display_name, results=tuple(results)))
        except Exception as exc:
            outcome.error = str(exc) or type(exc).__name__
            logger.debug("session aborted", exc_info=True)
            emit(renderer.execution_error(outcome.error))
            return outcome
        emit(renderer.notice("Tests completed!"))
        emit(renderer.session_summary(len(outcome.suites), outcome.summary))
        return outcome

    def run_sync(self, emit: Emit) -> SessionResult:
        return asyncio.run(self.run(emit))
