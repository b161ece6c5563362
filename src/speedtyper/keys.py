"""Translate raw curses key values into input events."""

from __future__ import annotations

import curses

from .cursor import InputEvent

ESCAPE = "\x1b"
BACKSPACE_CHARS = {"\x7f", "\b"}
BACKSPACE_CODES = {curses.KEY_BACKSPACE, curses.KEY_DC}


def decode_key(key: str | int) -> InputEvent | None:
    """Map one value from ``window.get_wch()`` to an event, or None to ignore it."""
    if isinstance(key, int):
        if key in BACKSPACE_CODES:
            return InputEvent.backspace()
        return None

    if key == " ":
        return InputEvent.space()
    if key == ESCAPE:
        return InputEvent.quit()
    if key in BACKSPACE_CHARS:
        return InputEvent.backspace()
    if len(key) == 1 and key.isprintable():
        return InputEvent.character(key)
    return None
