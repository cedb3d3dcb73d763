"""Suite plan loading."""

from .custom import load_suite
from .loader import build_session, load_plan
from .models import SuiteConfig, SuitePlan

__all__ = [
    "SuiteConfig",
    "SuitePlan",
    "build_session",
    "load_plan",
    "load_suite",
]
