"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_trycatch_env(monkeypatch):
    """Clear TRYCATCH_* env vars so logging toggles start from defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("TRYCATCH_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)


@pytest.fixture
def trycatch_debug_logs(caplog):
    """Capture DEBUG records from the trycatch logger."""
    caplog.set_level(logging.DEBUG, logger="trycatch")
    return caplog
