"""Load word lists from bundled JSON resources or user files."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

WORDLIST_PACKAGE = "speedtyper.content.wordlists"
DEFAULT_WORDLIST = "python"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordList:
    """Named, ordered list of target words."""

    id: str
    title: str
    words: tuple[str, ...]


def _validate_words(source: str, raw_words: Any) -> tuple[str, ...]:
    """Check every entry is a single non-empty token."""
    if not isinstance(raw_words, list):
        raise ValueError(f"Word list '{source}' must contain a list of words.")
    words: list[str] = []
    for index, raw in enumerate(raw_words):
        if not isinstance(raw, str) or not raw:
            raise ValueError(f"Word list '{source}' has an empty or non-string entry at position {index}.")
        if any(ch.isspace() for ch in raw):
            raise ValueError(f"Word list '{source}' entry {raw!r} contains whitespace.")
        words.append(raw)
    if not words:
        raise ValueError(f"Word list '{source}' has no words.")
    return tuple(words)


def _wordlist_from_dict(source: str, raw: Any) -> WordList:
    if not isinstance(raw, dict):
        raise ValueError(f"Word list '{source}' root must be a JSON object.")
    list_id = str(raw.get("id", source))
    return WordList(
        id=list_id,
        title=str(raw.get("title", list_id)),
        words=_validate_words(list_id, raw.get("words")),
    )


def load_wordlists() -> dict[str, WordList]:
    """Load all bundled word lists keyed by id."""
    wordlists: dict[str, WordList] = {}
    for entry in sorted(resources.files(WORDLIST_PACKAGE).iterdir(), key=lambda item: item.name):
        if not entry.name.endswith(".json"):
            continue
        raw = json.loads(entry.read_text(encoding="utf-8-sig"))
        wordlist = _wordlist_from_dict(entry.name.removesuffix(".json"), raw)
        if wordlist.id in wordlists:
            raise ValueError(f"Duplicate word list id: {wordlist.id}")
        wordlists[wordlist.id] = wordlist
    return wordlists


def load_wordlist(list_id: str = DEFAULT_WORDLIST) -> WordList:
    """Return one bundled word list by id."""
    wordlists = load_wordlists()
    if list_id not in wordlists:
        raise KeyError(list_id)
    return wordlists[list_id]


def load_words_from_file(path: Path | str) -> WordList:
    """Load a word list from a JSON file or a whitespace separated text file."""
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8-sig")
    if file_path.suffix.lower() == ".json":
        wordlist = _wordlist_from_dict(file_path.stem, json.loads(text))
    else:
        tokens: list[str] = []
        for line in text.splitlines():
            if line.lstrip().startswith("#"):
                continue
            tokens.extend(line.split())
        wordlist = WordList(id=file_path.stem, title=file_path.name, words=_validate_words(file_path.stem, tokens))
    logger.debug("Loaded %d words from %s", len(wordlist.words), file_path)
    return wordlist


def sample_words(words: tuple[str, ...] | list[str], count: int | None, rng: random.Random | None = None) -> list[str]:
    """Pick ``count`` words in random order.

    Words are drawn without repeats until the list is exhausted; larger counts
    draw the remainder with replacement. ``count=None`` keeps the list as given.
    """
    if not words:
        raise ValueError("Cannot sample from an empty word list.")
    if count is None:
        return list(words)
    if count <= 0:
        raise ValueError("Word count must be positive.")
    chooser = rng if rng is not None else random.Random()
    if count <= len(words):
        return chooser.sample(list(words), count)
    picked = chooser.sample(list(words), len(words))
    picked.extend(chooser.choices(list(words), k=count - len(words)))
    return picked
