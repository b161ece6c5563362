"""Event loop that feeds terminal keystrokes into a typing session."""

from __future__ import annotations

import curses
import logging
from typing import Any

from .keys import decode_key
from .render import Renderer
from .session import SessionOutcome, SessionSummary, TypingSession

logger = logging.getLogger(__name__)


class TypingApp:
    """Runs one session on a curses screen: draw, read, apply, check time."""

    def __init__(self, session: TypingSession, screen: Any, renderer: Renderer, *, poll_ms: int = 100) -> None:
        self.session = session
        self.screen = screen
        self.renderer = renderer
        self.poll_ms = poll_ms

    def read_key(self) -> str | int | None:
        """Wait up to ``poll_ms`` for a key; None when nothing was pressed."""
        try:
            return self.screen.get_wch()
        except curses.error:
            return None

    def step(self) -> None:
        """Process at most one keystroke, then re-check the time limit."""
        key = self.read_key()
        if key is not None:
            event = decode_key(key)
            if event is not None:
                self.session.apply(event)
            else:
                logger.debug("Ignored key %r", key)
        self.session.check_timeout()

    def run(self) -> SessionSummary:
        self.screen.timeout(self.poll_ms)
        while not self.session.is_over:
            self.renderer.draw(self.session)
            self.step()

        summary = self.session.summary()
        if summary.outcome is not SessionOutcome.QUIT:
            self.renderer.draw_summary(summary)
            self.screen.timeout(-1)
            # keys typed before the session ended must not dismiss the results
            curses.flushinp()
            self.read_key()
        return summary
