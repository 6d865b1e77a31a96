"""
Error handling utilities for raising exceptions with context.

``ctx`` and ``with_ctx`` guard a block (or decorate a function) and re-raise
any Exception escaping it as a Context chained from the original:

    with ctx("reading foo.txt"):
        data = Path("foo.txt").read_bytes()

Only ``Exception`` subclasses are wrapped; KeyboardInterrupt, SystemExit and
GeneratorExit propagate unchanged.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import NoReturn, TypeVar

from .context import Context
from .safe_logger import get_safe_logger

D = TypeVar("D")

logger = get_safe_logger(__name__)


@contextmanager
def ctx(context: D) -> Iterator[None]:
    """If the guarded code raises, wrap the error with ``context``."""
    try:
        yield
    except Exception as e:
        logger.debug("Adding context %r to %s", context, type(e).__name__)
        raise Context(context, e) from e


@contextmanager
def with_ctx(compute: Callable[[Exception], D]) -> Iterator[None]:
    """If the guarded code raises, invoke ``compute`` and wrap the error with its result."""
    try:
        yield
    except Exception as e:
        context = compute(e)
        logger.debug("Adding computed context %r to %s", context, type(e).__name__)
        raise Context(context, e) from e


def raise_with_context(context: D, exc: BaseException) -> NoReturn:
    """Raise a Context wrapping ``exc``, chained from it."""
    raise Context(context, exc) from exc
