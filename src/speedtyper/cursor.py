"""Cursor state machine that moves through the word list as the user types."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .models import InvariantViolation, TypedState, Word

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 1


class EventKind(enum.Enum):
    """Kinds of decoded input the cursor understands."""

    CHARACTER = "character"
    SPACE = "space"
    BACKSPACE = "backspace"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    """One decoded keystroke."""

    kind: EventKind
    char: str = ""

    @classmethod
    def character(cls, char: str) -> InputEvent:
        if len(char) != 1:
            raise ValueError(f"Character events carry exactly one code point, got {char!r}.")
        return cls(EventKind.CHARACTER, char)

    @classmethod
    def space(cls) -> InputEvent:
        return cls(EventKind.SPACE)

    @classmethod
    def backspace(cls) -> InputEvent:
        return cls(EventKind.BACKSPACE)

    @classmethod
    def quit(cls) -> InputEvent:
        return cls(EventKind.QUIT)


@dataclass
class CursorWord:
    """A word plus how far into it the user has typed."""

    word: Word
    offset: int = 0


class UserCursor:
    """Tracks ``(word_index, offset)`` and applies keystrokes to the words.

    Every word keeps its own offset, so leaving a word with space and coming
    back with backspace lands exactly where the user left it.
    """

    def __init__(self, words: Iterable[Word]) -> None:
        self.words = [CursorWord(word) for word in words]
        self.word_index = 0

    @property
    def is_complete(self) -> bool:
        return self.word_index >= len(self.words)

    @property
    def current(self) -> CursorWord | None:
        """Word under the cursor, or None once every word has been passed."""
        if self.is_complete:
            return None
        return self.words[self.word_index]

    @property
    def offset(self) -> int:
        current = self.current
        return 0 if current is None else current.offset

    def _require_current(self) -> CursorWord:
        current = self.current
        if current is None:
            raise InvariantViolation("Cursor is past the last word.")
        return current

    def handle_char(self, pressed: str) -> bool:
        """Classify one typed character; return False when saturation dropped it."""
        entry = self._require_current()
        word = entry.word
        if entry.offset < word.original_length:
            expected = word.target[entry.offset]
            word.set_state(entry.offset, TypedState.CORRECT if pressed == expected else TypedState.MISTYPE)
        elif not word.append_extra(pressed):
            logger.debug("Dropped extra %r on word %d: limit of %d reached", pressed, self.word_index, word.max_extra)
            return False
        entry.offset += 1
        return True

    def handle_space(self) -> None:
        """Move to the next word regardless of how much of this one was typed."""
        self._require_current()
        self.word_index += 1

    def handle_backspace(self) -> bool:
        """Step back one character, crossing into the previous word at offset zero."""
        entry = self._require_current()
        if entry.offset == 0:
            if self.word_index == 0:
                return False
            self.word_index -= 1
            return True

        entry.offset -= 1
        word = entry.word
        if entry.offset >= word.original_length:
            word.remove_last()
        else:
            word.set_state(entry.offset, TypedState.UNTYPED)
        return True

    def absolute_position(self) -> int:
        """Column of the cursor when all words are laid out on one line."""
        position = 0
        for entry in self.words[: self.word_index]:
            position += len(entry.word) + SEPARATOR_WIDTH
        return position + self.offset
