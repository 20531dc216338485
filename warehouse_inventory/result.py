"""Outcome objects returned by repository operations.

Every repository operation reports its outcome as a value instead of raising:
either :class:`Success` holding the operation's value or :class:`Failure`
holding one of the repository error kinds. Callers that prefer exceptions can
call :meth:`unwrap`, which re-raises the held error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful outcome carrying the operation's value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Success[U]":
        return Success(func(self.value))

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """A failed outcome carrying the error kind that caused it."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable) -> "Failure[E]":
        return self

    def __bool__(self) -> bool:
        return False


Result = Union[Success[T], Failure[E]]


__all__ = ["Success", "Failure", "Result"]
