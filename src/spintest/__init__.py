"""spintest package initialization."""
from __future__ import annotations

import importlib
import os
from typing import Callable, Optional, Tuple

from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
]

PLUGIN_ENV = "SPINTEST_PLUGINS"

# register(session) callables exposed by plugin modules, loaded once
_PLUGIN_HOOKS: Optional[Tuple[Callable, ...]] = None


def bootstrap() -> Tuple[Callable, ...]:
    """Import the plugin modules named in ``SPINTEST_PLUGINS`` (idempotent).

    Returns each plugin's ``register`` hook. ``build_session`` calls every
    hook with the session so a plugin can add its own suites.
    """

    global _PLUGIN_HOOKS
    if _PLUGIN_HOOKS is None:
        _PLUGIN_HOOKS = tuple(_load_plugin_hooks(os.environ.get(PLUGIN_ENV, "")))
    return _PLUGIN_HOOKS


def _load_plugin_hooks(plugin_env: str) -> list[Callable]:
    hooks: list[Callable] = []
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if not callable(register):
            raise AttributeError(f"Plugin '{module_name}' does not define a callable register(session)")
        hooks.append(register)
    return hooks
