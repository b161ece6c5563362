"""Curses rendering for the typing test screen and the result screen."""

from __future__ import annotations

import curses
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .cursor import CursorWord
from .models import TypedState
from .session import SessionOutcome, SessionSummary, TypingSession

TITLE = "Speed Typing Test"
HELP_TEXT = "Esc quits"
PADDING = 2

Palette = dict[TypedState, int]
Cell = tuple[int, int]
Span = tuple[str, TypedState | None]

STATE_COLORS = {
    TypedState.UNTYPED: (1, curses.COLOR_WHITE),
    TypedState.CORRECT: (2, curses.COLOR_GREEN),
    TypedState.MISTYPE: (3, curses.COLOR_RED),
    TypedState.EXTRA_MISTYPE: (4, curses.COLOR_RED),
}

MONOCHROME_ATTRS = {
    TypedState.UNTYPED: curses.A_DIM,
    TypedState.CORRECT: curses.A_BOLD,
    TypedState.MISTYPE: curses.A_UNDERLINE,
    TypedState.EXTRA_MISTYPE: curses.A_REVERSE,
}

OUTCOME_HEADINGS = {
    SessionOutcome.COMPLETED: "All words typed",
    SessionOutcome.TIMED_OUT: "Time is up",
    SessionOutcome.QUIT: "Session ended early",
}


def init_palette() -> Palette:
    """Create colour pairs for each character state. Needs an initialised screen."""
    if not curses.has_colors():
        return dict(MONOCHROME_ATTRS)
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    palette: Palette = {}
    for state, (pair, color) in STATE_COLORS.items():
        curses.init_pair(pair, color, background)
        palette[state] = curses.color_pair(pair)
    palette[TypedState.UNTYPED] |= curses.A_DIM
    palette[TypedState.EXTRA_MISTYPE] |= curses.A_UNDERLINE
    return palette


@dataclass(frozen=True)
class Layout:
    """Spans placed on screen rows; ``cells[i]`` is where absolute column ``i`` landed."""

    rows: list[list[Span]]
    cells: list[Cell]

    def cursor_cell(self, position: int) -> Cell:
        if not self.cells:
            return (0, 0)
        return self.cells[min(position, len(self.cells) - 1)]


def layout_words(words: Sequence[CursorWord], width: int) -> Layout:
    """Wrap words to ``width`` columns, breaking only between words when possible."""
    width = max(1, width)
    rows: list[list[Span]] = [[]]
    cells: list[Cell] = []

    def place(span: Span) -> None:
        if len(rows[-1]) >= width:
            rows.append([])
        cells.append((len(rows) - 1, len(rows[-1])))
        rows[-1].append(span)

    for entry in words:
        characters = entry.word.characters
        if rows[-1] and len(rows[-1]) + len(characters) > width:
            rows.append([])
        for ch in characters:
            place((ch.value, ch.state))
        place((" ", None))
    return Layout(rows=rows, cells=cells)


class Renderer:
    """Draws a session onto a curses window."""

    def __init__(self, screen: Any, palette: Palette) -> None:
        self.screen = screen
        self.palette = palette

    def _put(self, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
        try:
            self.screen.addstr(y, x, text, attr)
        except curses.error:
            # writing the bottom-right cell or past a shrunk window
            pass

    def _frame(self, title: str) -> tuple[int, int]:
        self.screen.erase()
        height, width = self.screen.getmaxyx()
        self.screen.box()
        label = f" {title} "
        self._put(0, max(1, (width - len(label)) // 2), label, curses.A_BOLD)
        return height, width

    def draw(self, session: TypingSession) -> None:
        height, width = self._frame(TITLE)
        inner_width = max(1, width - 2 * PADDING)
        visible_rows = max(1, height - 4)
        layout = layout_words(session.words, inner_width)
        cursor_row, cursor_col = layout.cursor_cell(session.cursor.absolute_position())
        first_row = max(0, cursor_row - visible_rows + 1)

        for screen_row, row in enumerate(layout.rows[first_row : first_row + visible_rows]):
            for col, (text, state) in enumerate(row):
                attr = curses.A_NORMAL if state is None else self.palette[state]
                self._put(1 + screen_row, PADDING + col, text, attr)

        index, _ = session.position
        done = min(index, len(session.words))
        status = f"{session.remaining():5.1f}s left   {done}/{len(session.words)} words   {HELP_TEXT}"
        self._put(height - 2, PADDING, status[:inner_width])

        if not session.is_over:
            try:
                self.screen.move(1 + cursor_row - first_row, PADDING + cursor_col)
            except curses.error:
                pass
        self.screen.refresh()

    def draw_summary(self, summary: SessionSummary) -> None:
        height, width = self._frame("Results")
        heading = OUTCOME_HEADINGS.get(summary.outcome, "Results")
        lines = summary_lines(summary)
        top = max(1, (height - len(lines) - 2) // 2)
        self._put(top, PADDING, heading, curses.A_BOLD)
        for offset, line in enumerate(lines, start=2):
            self._put(top + offset, PADDING, line[: max(1, width - 2 * PADDING)])
        self._put(height - 2, PADDING, "Press any key to exit")
        self.screen.refresh()


def summary_lines(summary: SessionSummary) -> list[str]:
    """Plain-text result rows shared by the result screen and the CLI."""
    return [
        f"WPM:       {summary.wpm:.1f}",
        f"Accuracy:  {summary.accuracy:.1f}%",
        f"Words:     {summary.words_done}/{summary.total_words} ({summary.words_perfect} perfect)",
        f"Correct:   {summary.correct_chars}",
        f"Mistyped:  {summary.mistyped_chars}",
        f"Extra:     {summary.extra_chars}",
        f"Time:      {summary.elapsed_seconds:.1f}s",
    ]
