"""Transient progress indicator bound to the lifetime of one test."""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

from spintest.reporting.terminal import TerminalRenderer

Emit = Callable[[str], None]


class Spinner:
    """Redraws a single spinner line at a fixed interval until stopped.

    Use as ``async with Spinner(...)``: the redraw task starts on entry and is
    cancelled, awaited and its line cleared on exit, on both the normal and
    the error path, so the caller can emit the outcome line right after.
    """

    def __init__(
        self,
        emit: Emit,
        renderer: TerminalRenderer,
        label: str,
        *,
        interval: float = 0.08,
    ) -> None:
        self._emit = emit
        self._renderer = renderer
        self._label = label
        self._interval = interval
        self._task: Optional[asyncio.Task] = None
        self.frames_drawn = 0

    async def __aenter__(self) -> "Spinner":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        await self.stop()
        return False

    @property
    def running(self) -> bool:
        return self._task is not None

    def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.get_running_loop().create_task(self._spin())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        await asyncio.wait({task})
        self._emit(self._renderer.clear_line())
        if not task.cancelled():
            # the redraw loop only ends early when the sink itself raised
            task.result()

    async def _spin(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self._emit(self._renderer.spinner_frame(self._label, self.frames_drawn))
            self.frames_drawn += 1
