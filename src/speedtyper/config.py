"""Runtime configuration assembled from defaults, environment, and CLI flags."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, TypeVar

from .models import DEFAULT_MAX_EXTRA
from .session import DEFAULT_TIME_LIMIT
from .word_source import DEFAULT_WORDLIST

DEFAULT_WORD_COUNT = 25
DEFAULT_LOG_FILE = Path(".speedtyper") / "speedtyper.log"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_POLL_MS = 100
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_PREFIX = "SPEEDTYPER_"

T = TypeVar("T")


@dataclass(frozen=True)
class AppConfig:
    """Settings for one run of the typing test."""

    wordlist: str = DEFAULT_WORDLIST
    words_file: Path | None = None
    word_count: int | None = DEFAULT_WORD_COUNT
    time_limit: float = DEFAULT_TIME_LIMIT
    max_extra: int = DEFAULT_MAX_EXTRA
    seed: int | None = None
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    poll_ms: int = DEFAULT_POLL_MS

    def validate(self) -> AppConfig:
        """Raise ValueError for out-of-range settings; return self otherwise."""
        if self.time_limit <= 0:
            raise ValueError("Time limit must be greater than zero seconds.")
        if self.max_extra < 0:
            raise ValueError("Max extra characters must be zero or greater.")
        if self.word_count is not None and self.word_count <= 0:
            raise ValueError("Word count must be positive.")
        if self.poll_ms <= 0:
            raise ValueError("Poll interval must be positive.")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}.")
        return self


def _parse_env(environ: Mapping[str, str], name: str, parse: Callable[[str], T]) -> T | None:
    raw = environ.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return None
    try:
        return parse(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from None


def config_from_env(environ: Mapping[str, str] | None = None, base: AppConfig | None = None) -> AppConfig:
    """Apply ``SPEEDTYPER_*`` environment overrides on top of ``base``."""
    env = os.environ if environ is None else environ
    config = base if base is not None else AppConfig()
    overrides: dict[str, Any] = {}
    time_limit = _parse_env(env, "TIME_LIMIT", float)
    if time_limit is not None:
        overrides["time_limit"] = time_limit
    max_extra = _parse_env(env, "MAX_EXTRA", int)
    if max_extra is not None:
        overrides["max_extra"] = max_extra
    log_level = _parse_env(env, "LOG_LEVEL", str.upper)
    if log_level is not None:
        overrides["log_level"] = log_level
    return replace(config, **overrides).validate()


def config_from_args(args: Any, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build config from parsed CLI args; flags left unset fall back to env, then defaults."""
    config = config_from_env(environ)
    overrides: dict[str, Any] = {}
    for field_name in ("wordlist", "words_file", "time_limit", "max_extra", "seed", "log_file"):
        value = getattr(args, field_name, None)
        if value is not None:
            overrides[field_name] = value
    words = getattr(args, "words", None)
    if words is not None:
        overrides["word_count"] = None if words == 0 else words
    log_level = getattr(args, "log_level", None)
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    return replace(config, **overrides).validate()


def configure_logging(config: AppConfig) -> None:
    """Send log records to a file; curses owns the terminal while a session runs."""
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
