"""speedtyper package."""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

_VERSION_LINE = re.compile(r'^version\s*=\s*"([^"]+)"\s*$')


def _version_from_pyproject() -> str | None:
    """Read [project].version from a checkout's pyproject.toml, if there is one."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        section = ""
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped.startswith("[") and stripped.endswith("]"):
                section = stripped
                continue
            if section != "[project]":
                continue
            match = _VERSION_LINE.match(stripped)
            if match:
                return match.group(1)
    return None


def _resolve_version() -> str:
    source_version = _version_from_pyproject()
    if source_version is not None:
        return source_version
    try:
        return version("speedtyper")
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _resolve_version()
