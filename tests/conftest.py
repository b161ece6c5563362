from __future__ import annotations

import curses
import sys
from collections.abc import Iterable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeScreen:
    """Records what a curses window was asked to draw and replays queued keys."""

    def __init__(self, keys: Iterable[str | int | None] = (), size: tuple[int, int] = (10, 40)) -> None:
        self.keys = list(keys)
        self.size = size
        self.cells: dict[tuple[int, int], tuple[str, int]] = {}
        self.cursor: tuple[int, int] | None = None
        self.timeouts: list[int] = []
        self.refreshes = 0
        self.boxed = 0
        self.on_read = None

    def getmaxyx(self) -> tuple[int, int]:
        return self.size

    def erase(self) -> None:
        self.cells.clear()

    def box(self) -> None:
        self.boxed += 1

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        height, width = self.size
        if not (0 <= y < height and 0 <= x < width):
            raise curses.error("addstr outside window")
        for index, ch in enumerate(text):
            self.cells[(y, x + index)] = (ch, attr)

    def move(self, y: int, x: int) -> None:
        self.cursor = (y, x)

    def refresh(self) -> None:
        self.refreshes += 1

    def timeout(self, delay: int) -> None:
        self.timeouts.append(delay)

    def get_wch(self) -> str | int:
        if self.on_read is not None:
            self.on_read()
        if not self.keys:
            raise curses.error("no input")
        key = self.keys.pop(0)
        if key is None:
            raise curses.error("no input")
        return key

    def row_text(self, y: int) -> str:
        width = self.size[1]
        return "".join(self.cells.get((y, x), (" ", 0))[0] for x in range(width)).rstrip()

    def text(self) -> str:
        return "\n".join(self.row_text(y) for y in range(self.size[0]))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_screen_cls() -> type[FakeScreen]:
    return FakeScreen
