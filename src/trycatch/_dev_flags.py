"""Internal helpers for environment-driven logging toggles.

Centralizes how the wrappers read their opt-in/opt-out switches so the
semantics stay consistent. Flags are read on every call, not cached at import.
"""

from __future__ import annotations

import os

__all__ = ["log_failures_enabled", "log_tracebacks_enabled"]


def log_failures_enabled(*, override: bool | None = None) -> bool:
    """Return True when captured failures should be logged at DEBUG.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns False only when ``TRYCATCH_LOG_FAILURES`` is
      exactly ``"0"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("TRYCATCH_LOG_FAILURES") != "0"


def log_tracebacks_enabled(*, override: bool | None = None) -> bool:
    """Return True when failure records should carry ``exc_info``.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when ``TRYCATCH_LOG_TRACEBACKS`` is exactly
      ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("TRYCATCH_LOG_TRACEBACKS") == "1"
