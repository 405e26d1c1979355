"""Result type for explicit error handling.

Fallible operations return ``Ok(value)`` or ``Err(error)`` instead of raising,
so the CLI layer is the only place that turns a failure into an exit code.

Usage:
    match read_descriptor(path):
        case Ok(None):
            print("no key.properties")
        case Ok(contents):
            print(sorted(contents))
        case Err(error):
            print(error.reason)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeGuard, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply ``f`` to the contained value."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible step onto this value."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> None:
        """Raise ValueError; there is no value to return.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, f: Callable[[T], U]) -> Err[E]:
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error."""
        return Err(f(self.error))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Narrow ``result`` to Ok for static type checkers."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Narrow ``result`` to Err for static type checkers."""
    return isinstance(result, Err)
