"""trycatch: value-based results for operations that may raise.

Public API:
    - try_catch(): Await an already-started operation
    - try_catch_fn(): Call a sync or async thunk
    - try_catch_sync(): Call a sync thunk outside an event loop
    - Success / Failure / Result: The returned union
"""

from __future__ import annotations

import logging

from trycatch.result import Failure, Result, Success, is_failure, is_success
from trycatch.wrap import try_catch, try_catch_fn, try_catch_sync

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("trycatch")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("trycatch").addHandler(logging.NullHandler())

__all__ = [
    "Failure",
    "Result",
    "Success",
    "is_failure",
    "is_success",
    "try_catch",
    "try_catch_fn",
    "try_catch_sync",
]
