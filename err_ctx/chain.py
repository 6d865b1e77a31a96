"""
Walking and reporting causal chains.

Works with any exception, not only Context: the chain is whatever
``__cause__`` links together, which is also what Python's own traceback
printer follows for ``raise ... from ...``.
"""

import logging
import os
from collections.abc import Iterator, Mapping

from pydantic import BaseModel, Field

from .safe_logger import SafeLogger, get_safe_logger

ENV_PREFIX = "ERR_CTX_"


class ReportSettings(BaseModel):
    """Rendering options for format_chain."""

    header: str = "Error"
    caused_by: str = "Caused by"
    indent: int = Field(default=4, ge=0)
    max_depth: int | None = Field(default=None, ge=1)
    follow_implicit: bool = False
    show_type: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReportSettings":
        """Build settings from ERR_CTX_* environment variables.

        ERR_CTX_MAX_DEPTH=3 sets max_depth, ERR_CTX_SHOW_TYPE=true sets
        show_type, and so on. Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            key = f"{ENV_PREFIX}{field.upper()}"
            if key in environ:
                values[field] = environ[key]
        return cls.model_validate(values)


def iter_chain(error: BaseException, follow_implicit: bool = False) -> Iterator[BaseException]:
    """Yield ``error`` and then each cause behind it, outermost first.

    Args:
        error: The outermost error.
        follow_implicit: Also follow ``__context__`` (an exception raised
            while handling another) when there is no explicit cause and it
            was not suppressed.
    """
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif follow_implicit and not current.__suppress_context__:
            current = current.__context__
        else:
            current = None


def root_cause(error: BaseException, follow_implicit: bool = False) -> BaseException:
    """Return the innermost error of the chain."""
    *_, last = iter_chain(error, follow_implicit)
    return last


def chain_messages(error: BaseException, follow_implicit: bool = False) -> list[str]:
    """Display text of every error in the chain, outermost first."""
    return [str(e) for e in iter_chain(error, follow_implicit)]


def _describe(error: BaseException, show_type: bool) -> str:
    if show_type:
        return f"{type(error).__name__}: {error}"
    return str(error)


def format_chain(error: BaseException, settings: ReportSettings | None = None) -> str:
    """Render an error and its causes as a multi-line report.

    Example output for a twice-wrapped error:

        Error: loading config: reading foo.txt: No such file

        Caused by:
            0: reading foo.txt: No such file
            1: No such file
    """
    settings = settings or ReportSettings()
    chain = list(iter_chain(error, settings.follow_implicit))

    lines = [f"{settings.header}: {_describe(chain[0], settings.show_type)}"]
    causes = chain[1:]
    if not causes:
        return lines[0]

    truncated = 0
    if settings.max_depth is not None and len(causes) > settings.max_depth:
        truncated = len(causes) - settings.max_depth
        causes = causes[: settings.max_depth]

    pad = " " * settings.indent
    lines.append("")
    lines.append(f"{settings.caused_by}:")
    for i, cause in enumerate(causes):
        lines.append(f"{pad}{i}: {_describe(cause, settings.show_type)}")
    if truncated:
        lines.append(f"{pad}... {truncated} more")
    return "\n".join(lines)


def log_chain(
    error: BaseException,
    logger: SafeLogger | None = None,
    level: int = logging.ERROR,
    settings: ReportSettings | None = None,
) -> None:
    """Write the report for ``error`` to a safe logger."""
    logger = logger or get_safe_logger(__name__)
    logger.log(level, format_chain(error, settings))
