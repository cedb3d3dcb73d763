"""Helpers for loading user-provided suite registration functions."""
from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from typing import Callable

from .models import SuiteConfig


def load_suite(config: SuiteConfig) -> Callable:
    """Resolve the callable that registers a suite's tests on a runner."""

    if config.module:
        module = importlib.import_module(config.module)
        origin = config.module
    elif config.source is not None:
        module = _load_module_from_source(config.source)
        origin = str(config.source)
    else:
        raise ValueError(f"Suite '{config.name}' needs either a module or a source")
    if not hasattr(module, config.function):
        raise AttributeError(f"Function '{config.function}' not found in {origin}")
    func = getattr(module, config.function)
    if not callable(func):
        raise TypeError(f"Attribute '{config.function}' in {origin} is not callable")
    return func


def _load_module_from_source(source: Path):
    path = source.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Suite source file not found: {path}")
    module_name = f"spintest_suite_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module
