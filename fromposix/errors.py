"""Error types and exit handling for from-posix.

Only the boundary can fail: a host value that is not text, or a file the
CLI cannot read. Malformed shell text is never an error.
"""

import logging
import sys
from typing import NoReturn

import typer

log = logging.getLogger(__name__)


class FromPosixError(Exception):
    """Base exception; carries the CLI exit code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class InputTypeError(FromPosixError):
    """Raised when the host hands over something that is not text."""

    def __init__(self, value: object, label: str = "expected string input") -> None:
        self.label = label
        self.type_name = type(value).__name__
        super().__init__("Input must be a string", exit_code=2)

    def __str__(self) -> str:
        return f"{self.message} ({self.label}, got {self.type_name})"


class InputReadError(FromPosixError):
    """Raised when an input file is missing, unreadable or not UTF-8."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ConfigError(FromPosixError):
    """Raised when a config file cannot be loaded."""


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report ``error`` on stderr and exit.

    Known errors exit with their own code. Anything else is reported with
    its type name and exits 1; the traceback goes to the debug log.
    """
    if isinstance(error, FromPosixError):
        exit_with_error(str(error), error.exit_code)

    log.debug("Unhandled error", exc_info=error)
    exit_with_error(f"unexpected {type(error).__name__}: {error}")
