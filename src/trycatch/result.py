"""Result primitives for value-based error handling.

A ``Result`` is either a ``Success`` carrying data or a ``Failure`` carrying
the exception that ended the operation. Both variants expose the same
``data``/``error`` shape, with ``None`` in the slot that does not apply, so
call sites can either pattern-match on the variant or unpack the pair:

    match await try_catch(fetch()):
        case Success(data):
            ...
        case Failure(error):
            ...

    data, error = await try_catch(fetch())
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Literal, TypeIs

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclasses.dataclass(frozen=True)
class Success[T]:
    """The operation completed normally."""

    data: T

    @property
    def error(self) -> None:
        return None

    @property
    def ok(self) -> Literal[True]:
        return True

    def __iter__(self) -> Iterator[T | None]:
        yield self.data
        yield None


@dataclasses.dataclass(frozen=True)
class Failure[E = Exception]:
    """The operation raised; ``error`` is the exception object, unchanged."""

    error: E

    @property
    def data(self) -> None:
        return None

    @property
    def ok(self) -> Literal[False]:
        return False

    def __iter__(self) -> Iterator[E | None]:
        yield None
        yield self.error


type Result[T, E = Exception] = Success[T] | Failure[E]


def is_success[T, E](result: Result[T, E]) -> TypeIs[Success[T]]:
    """Return True if *result* is a ``Success``."""
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeIs[Failure[E]]:
    """Return True if *result* is a ``Failure``."""
    return isinstance(result, Failure)


__all__ = ["Failure", "Result", "Success", "is_failure", "is_success"]
