"""
Result values returned by every domain operation that can fail.
Expected failures travel as Failure values instead of raised exceptions.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Success(Generic[T]):

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result"]) -> "Result":
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default):
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, fn) -> "Failure[E]":
        return self

    def flat_map(self, fn) -> "Failure[E]":
        return self

    def unwrap(self):
        """Raise the carried error, for callers that want exception flow."""
        raise self.error

    def unwrap_or(self, default):
        return default


Result = Union[Success[T], Failure[E]]
