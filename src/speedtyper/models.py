"""Core typing models: classified characters and target words."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

DEFAULT_MAX_EXTRA = 5


class InvariantViolation(RuntimeError):
    """Raised when a caller breaks the word or cursor contract."""


class TypedState(enum.Enum):
    """Classification of one character slot."""

    UNTYPED = "untyped"
    CORRECT = "correct"
    MISTYPE = "mistype"
    EXTRA_MISTYPE = "extra_mistype"


@dataclass(frozen=True)
class TypedCharacter:
    """One character slot and how the user's input classified it."""

    value: str
    state: TypedState = TypedState.UNTYPED


class Word:
    """One target word as an ordered buffer of typed characters.

    The first ``original_length`` slots map 1:1 onto the target text and only
    ever change state. Slots past that are extra characters the user produced;
    at most ``max_extra`` of them may exist at a time.
    """

    def __init__(self, target: str, max_extra: int = DEFAULT_MAX_EXTRA) -> None:
        if not target:
            raise ValueError("Target word must not be empty.")
        if any(ch.isspace() for ch in target):
            raise ValueError(f"Target word {target!r} must not contain whitespace.")
        if max_extra < 0:
            raise ValueError("max_extra must be zero or greater.")
        self._target = target
        self._max_extra = max_extra
        self._characters = [TypedCharacter(ch) for ch in target]

    @classmethod
    def create(cls, target: str, max_extra: int = DEFAULT_MAX_EXTRA) -> Word:
        """Build a word with one untyped slot per target character."""
        return cls(target, max_extra=max_extra)

    def __repr__(self) -> str:
        typed = "".join(ch.value for ch in self._characters)
        return f"Word(target={self._target!r}, typed={typed!r})"

    def __len__(self) -> int:
        return len(self._characters)

    @property
    def target(self) -> str:
        return self._target

    @property
    def original_length(self) -> int:
        return len(self._target)

    @property
    def max_extra(self) -> int:
        return self._max_extra

    @property
    def extra_count(self) -> int:
        return len(self._characters) - len(self._target)

    @property
    def characters(self) -> tuple[TypedCharacter, ...]:
        """Read-only snapshot of the slots, for rendering."""
        return tuple(self._characters)

    def character_at(self, offset: int) -> TypedCharacter | None:
        """Return the slot at ``offset`` or None when the cursor would have to append."""
        if 0 <= offset < len(self._characters):
            return self._characters[offset]
        return None

    def set_state(self, offset: int, state: TypedState) -> None:
        """Re-classify the slot at ``offset``."""
        if not 0 <= offset < len(self._characters):
            raise InvariantViolation(f"Offset {offset} is outside word of length {len(self._characters)}.")
        self._characters[offset] = replace(self._characters[offset], state=state)

    def append_extra(self, value: str) -> bool:
        """Append an extra mistyped character; return False once the bound is reached."""
        if self.extra_count >= self._max_extra:
            return False
        self._characters.append(TypedCharacter(value, TypedState.EXTRA_MISTYPE))
        return True

    def remove_last(self) -> TypedCharacter:
        """Drop the final extra character. Original characters are never removed."""
        if self.extra_count <= 0:
            raise InvariantViolation(f"Cannot remove original character from {self._target!r}.")
        return self._characters.pop()

    def is_perfect(self) -> bool:
        """True when every original slot is correct and no extras remain."""
        return self.extra_count == 0 and all(ch.state is TypedState.CORRECT for ch in self._characters)
