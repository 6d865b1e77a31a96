"""
Explicit success/failure values for code that prefers returning errors to
raising them.

``Ok`` passes through ``ctx``/``with_ctx`` untouched; ``Err`` gains one layer
of Context per call.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .context import Context, into_error, wrap

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
D = TypeVar("D")


class UnwrapError(Exception):
    """Raised when unwrap_err() is called on an Ok."""

    def __init__(self, value: Any):
        super().__init__(f"called unwrap_err() on Ok({value!r})")
        self.value = value


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def ctx(self, context: Any) -> "Ok[T]":
        return self

    def with_ctx(self, compute: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> "Ok[T]":
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise UnwrapError(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result holding an exception or an error message."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def ctx(self, context: D) -> "Err[Context[D]]":
        """Wrap the error with ``context``."""
        return Err(wrap(self.error, context))

    def with_ctx(self, compute: Callable[[E], D]) -> "Err[Context[D]]":
        """Invoke ``compute`` on the original error and wrap it with the result."""
        context = compute(self.error)
        return Err(wrap(self.error, context))

    def map(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        return Err(fn(self.error))

    def unwrap(self):
        """Raise the held error, converting a message into an exception."""
        raise into_error(self.error)

    def unwrap_err(self) -> E:
        return self.error


Result = Ok[T] | Err[E]


def try_call(fn: Callable[..., T], *args, **kwargs) -> Result[T, Exception]:
    """Run ``fn`` and capture any Exception it raises as an Err."""
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as e:
        return Err(e)
