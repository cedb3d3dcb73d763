from __future__ import annotations

from typing import List

import pytest


class Sink:
    """Emit sink recording every chunk pushed by the runner."""

    def __init__(self) -> None:
        self.chunks: List[str] = []

    def __call__(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def sink() -> Sink:
    return Sink()
