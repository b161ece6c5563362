"""Typing session lifecycle: cursor, countdown timer, and results."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .cursor import CursorWord, EventKind, InputEvent, UserCursor
from .models import DEFAULT_MAX_EXTRA, TypedState, Word

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
DEFAULT_TIME_LIMIT = 20.0
CHARS_PER_WORD = 5


class SessionOutcome(enum.Enum):
    """Why a session stopped accepting input."""

    COMPLETED = "completed"
    TIMED_OUT = "timed_out"
    QUIT = "quit"


class SessionTimer:
    """Idle until the first keystroke, then measures elapsed time against a limit."""

    def __init__(self, time_limit: float = DEFAULT_TIME_LIMIT) -> None:
        if time_limit <= 0:
            raise ValueError("time_limit must be positive.")
        self.time_limit = time_limit
        self.started_at: float | None = None

    @property
    def is_active(self) -> bool:
        return self.started_at is not None

    def start(self, now: float) -> bool:
        """Record the first keystroke time. Later calls keep the original start."""
        if self.started_at is not None:
            return False
        self.started_at = now
        return True

    def elapsed(self, now: float) -> float:
        if self.started_at is None:
            return 0.0
        return max(0.0, now - self.started_at)

    def remaining(self, now: float) -> float:
        return max(0.0, self.time_limit - self.elapsed(now))

    def expired(self, now: float) -> bool:
        return self.started_at is not None and self.elapsed(now) > self.time_limit


@dataclass(frozen=True)
class SessionSummary:
    """Result counts for a finished (or running) session."""

    outcome: SessionOutcome | None
    correct_chars: int
    mistyped_chars: int
    extra_chars: int
    untyped_chars: int
    words_done: int
    words_perfect: int
    total_words: int
    elapsed_seconds: float

    @property
    def typed_chars(self) -> int:
        return self.correct_chars + self.mistyped_chars + self.extra_chars

    @property
    def accuracy(self) -> float:
        """Correct characters as a percentage of everything typed."""
        if self.typed_chars == 0:
            return 0.0
        return 100.0 * self.correct_chars / self.typed_chars

    @property
    def wpm(self) -> float:
        """Net words per minute, counting only correct characters."""
        if self.elapsed_seconds <= 0:
            return 0.0
        return (self.correct_chars / CHARS_PER_WORD) / (self.elapsed_seconds / 60.0)


class TypingSession:
    """One run of the typing test.

    The session is fed one ``InputEvent`` at a time by an outer loop, which also
    calls ``check_timeout`` once per iteration. Once ``is_over`` is True nothing
    mutates any more.
    """

    def __init__(
        self,
        words: Iterable[str],
        *,
        max_extra: int = DEFAULT_MAX_EXTRA,
        time_limit: float = DEFAULT_TIME_LIMIT,
        clock: Clock = time.monotonic,
    ) -> None:
        built = [Word.create(text, max_extra=max_extra) for text in words]
        if not built:
            raise ValueError("A typing session needs at least one word.")
        self.cursor = UserCursor(built)
        self.timer = SessionTimer(time_limit)
        self.clock = clock
        self.outcome: SessionOutcome | None = None
        self._ended_at: float | None = None

    @property
    def words(self) -> tuple[CursorWord, ...]:
        """Snapshot of the words for rendering; the list itself stays owned by the cursor."""
        return tuple(self.cursor.words)

    @property
    def position(self) -> tuple[int, int]:
        return (self.cursor.word_index, self.cursor.offset)

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    def apply(self, event: InputEvent) -> bool:
        """Apply one keystroke. Returns True when the visible state changed."""
        if self.is_over or self.check_timeout():
            return False

        if event.kind is EventKind.QUIT:
            self._finish(SessionOutcome.QUIT)
            return True
        if event.kind is EventKind.BACKSPACE:
            return self.cursor.handle_backspace()

        if self.timer.start(self.clock()):
            logger.info("Session started with %d words", len(self.cursor.words))
        if event.kind is EventKind.SPACE:
            self.cursor.handle_space()
            changed = True
        else:
            changed = self.cursor.handle_char(event.char)
        if self.cursor.is_complete:
            self._finish(SessionOutcome.COMPLETED)
        return changed

    def check_timeout(self) -> bool:
        """End the session if the time limit has passed. Safe to call every iteration."""
        if self.is_over:
            return self.outcome is SessionOutcome.TIMED_OUT
        if self.timer.expired(self.clock()):
            self._finish(SessionOutcome.TIMED_OUT)
            return True
        return False

    def remaining(self) -> float:
        if self._ended_at is not None:
            return self.timer.remaining(self._ended_at)
        return self.timer.remaining(self.clock())

    def elapsed(self) -> float:
        now = self._ended_at if self._ended_at is not None else self.clock()
        return min(self.timer.elapsed(now), self.timer.time_limit)

    def _finish(self, outcome: SessionOutcome) -> None:
        self.outcome = outcome
        self._ended_at = self.clock()
        logger.info("Session ended: %s after %.1fs", outcome.value, self.elapsed())

    def summary(self) -> SessionSummary:
        counts = dict.fromkeys(TypedState, 0)
        for entry in self.cursor.words:
            for ch in entry.word.characters:
                counts[ch.state] += 1
        done = self.cursor.words[: self.cursor.word_index]
        return SessionSummary(
            outcome=self.outcome,
            correct_chars=counts[TypedState.CORRECT],
            mistyped_chars=counts[TypedState.MISTYPE],
            extra_chars=counts[TypedState.EXTRA_MISTYPE],
            untyped_chars=counts[TypedState.UNTYPED],
            words_done=len(done),
            words_perfect=sum(1 for entry in done if entry.word.is_perfect()),
            total_words=len(self.cursor.words),
            elapsed_seconds=self.elapsed(),
        )
