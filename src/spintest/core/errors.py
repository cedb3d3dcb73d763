"""Exceptions raised inside test actions."""
from __future__ import annotations


class AssertionFailure(Exception):
    """A test-local expectation was not met."""

    def __init__(self, message: str = "Assertion failed") -> None:
        super().__init__(message)
        self.message = message
