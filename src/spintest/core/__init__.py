"""Core models and the runner exposed at the package level."""
from .errors import AssertionFailure
from .models import RunSummary, Status, TestAction, TestCase, TestResult
from .runner import TestRunner
from .session import SessionResult, SuiteOutcome, TestSession

__all__ = [
    "AssertionFailure",
    "RunSummary",
    "Status",
    "TestAction",
    "TestCase",
    "TestResult",
    "TestRunner",
    "SessionResult",
    "SuiteOutcome",
    "TestSession",
]
