"""CLI entrypoint for the terminal speed typing test."""

from __future__ import annotations

import argparse
import curses
import logging
import random
from collections.abc import Callable
from pathlib import Path
from typing import Any

from . import __version__
from .app import TypingApp
from .config import LOG_LEVELS, AppConfig, config_from_args, configure_logging
from .render import Renderer, init_palette, summary_lines
from .session import SessionOutcome, SessionSummary, TypingSession
from .word_source import WordList, load_wordlist, load_wordlists, load_words_from_file, sample_words

PrintFn = Callable[[str], None]

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="speedtyper", description="Terminal speed typing test")
    parser.add_argument("command", nargs="?", default="play", choices=["play", "wordlists"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--wordlist", help="bundled word list id (see `speedtyper wordlists`)")
    parser.add_argument("--words-file", type=Path, help="load words from a .json or whitespace separated text file")
    parser.add_argument("--words", type=int, help="number of words to sample; 0 keeps the whole list in order")
    parser.add_argument("--time-limit", type=float, help="seconds allowed after the first keystroke")
    parser.add_argument("--max-extra", type=int, help="extra characters accepted past the end of a word")
    parser.add_argument("--seed", type=int, help="random seed for word sampling")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
    parser.add_argument("--log-file", type=Path)
    return parser


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run the CLI application."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.command == "wordlists":
        return list_wordlists(print_fn)

    try:
        config = config_from_args(args)
        words = choose_words(config)
        configure_logging(config)
    except KeyError as exc:
        parser.error(f"unknown word list {exc.args[0]!r}")
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    session = build_session(config, words)
    summary = curses.wrapper(_curses_main, session, config)
    report_summary(summary, print_fn)
    return 0


def list_wordlists(print_fn: PrintFn = print) -> int:
    """Print bundled word lists."""
    wordlists = load_wordlists()
    id_width = max(len("List"), max(len(item.id) for item in wordlists.values()))
    header = f"{'List':<{id_width}} {'Words':>5} Title"
    print_fn(header)
    print_fn("-" * len(header))
    for item in wordlists.values():
        print_fn(f"{item.id:<{id_width}} {len(item.words):>5} {item.title}")
    return 0


def choose_words(config: AppConfig) -> list[str]:
    """Resolve the configured word source and sample the session's words."""
    wordlist: WordList
    if config.words_file is not None:
        wordlist = load_words_from_file(config.words_file)
    else:
        wordlist = load_wordlist(config.wordlist)
    rng = random.Random(config.seed)
    return sample_words(wordlist.words, config.word_count, rng)


def build_session(config: AppConfig, words: list[str]) -> TypingSession:
    """Create the typing session for ``words``."""
    logger.info("Building session: %d words, %.1fs limit, %d max extra", len(words), config.time_limit, config.max_extra)
    return TypingSession(words, max_extra=config.max_extra, time_limit=config.time_limit)


def _curses_main(screen: Any, session: TypingSession, config: AppConfig) -> SessionSummary:
    """Body run inside ``curses.wrapper``."""
    try:
        curses.curs_set(1)
    except curses.error:
        logger.debug("Terminal cannot show the cursor")
    renderer = Renderer(screen, init_palette())
    return TypingApp(session, screen, renderer, poll_ms=config.poll_ms).run()


def report_summary(summary: SessionSummary, print_fn: PrintFn = print) -> None:
    """Print results after the terminal has been restored."""
    if summary.outcome is SessionOutcome.QUIT and summary.typed_chars == 0:
        print_fn("Quit before typing anything.")
        return
    for line in summary_lines(summary):
        print_fn(line)


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
