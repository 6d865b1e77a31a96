"""
Contextual errors that display in the traditional "context: cause" format.

A Context pairs a caller-supplied annotation with the exception that caused
it. Contexts nest through ``__cause__``, so wrapping an already wrapped error
simply adds one more layer:

    >>> err = wrap(wrap("No such file", "reading foo.txt"), "loading config")
    >>> str(err)
    'loading config: reading foo.txt: No such file'
"""

from typing import Any, Generic, TypeVar

C = TypeVar("C")


class Message(Exception):
    """A plain error built from a string, displayed as exactly that string."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def into_error(value: Any) -> BaseException:
    """Convert a value into an exception suitable for use as a cause.

    Args:
        value: An exception instance or a string.

    Returns:
        The exception unchanged, or a Message wrapping the string.

    Raises:
        TypeError: If the value cannot act as an error.
    """
    if isinstance(value, BaseException):
        return value
    if isinstance(value, str):
        return Message(value)
    raise TypeError(
        f"{type(value).__name__} cannot be used as an error cause; "
        "expected an exception or a string"
    )


class Context(Exception, Generic[C]):
    """An error providing context for some underlying cause."""

    def __init__(self, context: C, cause: BaseException):
        if not isinstance(cause, BaseException):
            raise TypeError(
                f"Context cause must be an exception, got {type(cause).__name__}"
            )
        # args drive pickling, so keep them in constructor order
        super().__init__(context, cause)
        self._context = context
        self._cause = cause
        self.__cause__ = cause

    @property
    def context(self) -> C:
        """The annotation supplied by the caller."""
        return self._context

    @property
    def cause(self) -> BaseException:
        """The wrapped error."""
        return self._cause

    @property
    def source(self) -> BaseException:
        """Next error in the causal chain. Never None."""
        return self._cause

    def __str__(self) -> str:
        return f"{self._context}: {self._cause}"

    def __repr__(self) -> str:
        return f"Context(context={self._context!r}, source={self._cause!r})"


def wrap(error: Any, context: C) -> Context[C]:
    """Construct a Context wrapping ``error``.

    ``error`` may be an exception or a string; anything else raises TypeError.
    """
    return Context(context, into_error(error))
