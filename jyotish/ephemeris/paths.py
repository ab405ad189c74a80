"""Swiss ephemeris path discovery helpers."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

__all__ = [
    "DEFAULT_ENV_KEYS",
    "iter_candidate_paths",
    "get_se_ephe_path",
]

DEFAULT_ENV_KEYS: tuple[str, ...] = (
    "SE_EPHE_PATH",
    "SWE_EPH_PATH",
    "JYOTISH_EPHEMERIS_PATH",
)
"""Environment variables checked (in order) for Swiss ephemeris paths."""

_DEFAULT_HINTS: tuple[Path, ...] = (
    Path.home() / ".sweph",
    Path.home() / ".jyotish" / "ephe",
    Path("/usr/share/sweph"),
    Path("/usr/share/libswisseph"),
    Path("/usr/local/share/sweph"),
)


def _first_env(keys: Iterable[str]) -> str | None:
    for key in keys:
        value = os.environ.get(key)
        if value:
            return value
    return None


def _ensure_dir(path: os.PathLike[str] | str | None) -> str | None:
    """Expand ``path`` to an absolute directory string when it exists."""

    if not path:
        return None
    candidate = Path(path).expanduser()
    if candidate.is_dir():
        return str(candidate)
    return None


def iter_candidate_paths(
    default: str | os.PathLike[str] | None = None,
) -> Iterator[str]:
    """Yield existing ephemeris directories in priority order."""

    seen: set[str] = set()
    for hint in (default, *_DEFAULT_HINTS):
        candidate = _ensure_dir(hint)
        if candidate and candidate not in seen:
            seen.add(candidate)
            yield candidate


def get_se_ephe_path(default: str | os.PathLike[str] | None = None) -> str | None:
    """Return the Swiss ephemeris path or ``None`` when unavailable.

    Environment variables win over ``default``; when nothing exists on disk
    Swiss Ephemeris falls back to its built-in Moshier model.
    """

    env_path = _ensure_dir(_first_env(DEFAULT_ENV_KEYS))
    if env_path:
        return env_path
    return next(iter_candidate_paths(default), None)
