"""Logging for error reports that never raises.

Reporting an error must not fail because a handler is broken or the
interpreter is shutting down. SafeLogger wraps a standard ``logging.Logger``
and swallows failures inside logging itself, falling back to stderr.
"""

import contextlib
import logging
import sys
from typing import Any, TextIO


class SafeLogger:
    """A logger wrapper whose calls never propagate logging failures."""

    def __init__(self, name: str, fallback_to_stderr: bool = True):
        """Initialize a safe logger.

        Args:
            name: The name for the underlying logger.
            fallback_to_stderr: If True, write to stderr when logging fails.
        """
        self._name = name
        self._fallback_to_stderr = fallback_to_stderr
        self._logger: logging.Logger | None = None
        try:
            self._logger = logging.getLogger(name)
        except Exception as e:
            self._fallback_log(f"Failed to initialize logger '{name}': {e}")

    def _fallback_log(self, message: str) -> None:
        if self._fallback_to_stderr:
            with contextlib.suppress(Exception):
                print(f"[FALLBACK LOG] {message}", file=sys.stderr)

    def _safe_log(self, level: int, msg: Any, *args, **kwargs) -> None:
        try:
            if self._logger is None:
                level_name = logging.getLevelName(level)
                formatted_msg = str(msg) % args if args else str(msg)
                self._fallback_log(f"[{level_name}] {formatted_msg}")
                return

            # Attribute the record to whoever called the SafeLogger method
            kwargs.setdefault("stacklevel", 3)
            old_raise = logging.raiseExceptions
            try:
                logging.raiseExceptions = False
                self._logger.log(level, msg, *args, **kwargs)
            finally:
                logging.raiseExceptions = old_raise
        except Exception:
            # Already suppressed; stderr may be gone too during shutdown
            pass

    def debug(self, msg: Any, *args, **kwargs) -> None:
        self._safe_log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Any, *args, **kwargs) -> None:
        self._safe_log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: Any, *args, **kwargs) -> None:
        self._safe_log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Any, *args, **kwargs) -> None:
        self._safe_log(logging.ERROR, msg, *args, **kwargs)

    def log(self, level: int, msg: Any, *args, **kwargs) -> None:
        """Log a message at the specified level safely."""
        self._safe_log(level, msg, *args, **kwargs)

    def setLevel(self, level: int) -> None:
        try:
            if self._logger is not None:
                self._logger.setLevel(level)
        except Exception as e:
            self._fallback_log(f"Failed to set log level for '{self._name}': {e}")

    def isEnabledFor(self, level: int) -> bool:
        try:
            return self._logger is not None and self._logger.isEnabledFor(level)
        except Exception:
            return False

    @property
    def name(self) -> str:
        return self._name


def get_safe_logger(name: str, fallback_to_stderr: bool = True) -> SafeLogger:
    """Get a safe logger instance.

    Args:
        name: The name for the logger, typically __name__.
        fallback_to_stderr: If True, write to stderr when logging fails.

    Returns:
        A SafeLogger instance.
    """
    return SafeLogger(name, fallback_to_stderr)


def setup_safe_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    datefmt: str | None = None,
    debug: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger for applications reporting contextual errors.

    Args:
        level: The default logging level.
        format_string: The format string for log messages.
        datefmt: The date format string.
        debug: If True, use debug-level logging with verbose format.
        stream: Stream for the root handler; stderr when omitted.
    """
    try:
        if debug:
            level = logging.DEBUG
            format_string = format_string or (
                "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - "
                "[%(filename)s:%(lineno)d] - %(message)s"
            )
        else:
            format_string = format_string or (
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        datefmt = datefmt or "%Y-%m-%d %H:%M:%S"

        logging.basicConfig(
            level=level, format=format_string, datefmt=datefmt, stream=stream, force=True
        )
    except Exception as e:
        print(f"[FALLBACK LOG] Failed to configure logging: {e}", file=sys.stderr)
