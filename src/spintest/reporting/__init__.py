"""Reporting exports."""
from .json_reporter import JsonReporter
from .terminal import SPINNER_FRAMES, TerminalRenderer

__all__ = [
    "JsonReporter",
    "SPINNER_FRAMES",
    "TerminalRenderer",
]
