"""Lazy access to the :mod:`swisseph` extension module."""

from __future__ import annotations

import importlib
from typing import Any

from ..errors import NotInitializedError

__all__ = ["swe"]

_swe_mod: Any | None = None


def _load_swe() -> Any:
    global _swe_mod
    if _swe_mod is None:
        try:
            _swe_mod = importlib.import_module("swisseph")
        except ImportError as exc:
            raise NotInitializedError(
                "Swiss Ephemeris not available. Install pyswisseph (package: 'pyswisseph') "
                "and set SE_EPHE_PATH to your ephemeris data directory.",
                cause=exc,
            ) from exc
    return _swe_mod


class _SweProxy:
    """Proxy object exposing Swiss Ephemeris attributes lazily."""

    def __call__(self) -> Any:
        return _load_swe()

    def __getattr__(self, item: str) -> Any:
        return getattr(_load_swe(), item)


swe = _SweProxy()
