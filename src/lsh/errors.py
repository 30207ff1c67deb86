"""Exception types and error reporting for lsh."""

from __future__ import annotations

import sys

ERROR_MESSAGE = "An error has occurred\n"


class ShellError(Exception):
    """Base exception for recoverable shell errors."""


class ShellSyntaxError(ShellError):
    """Raised when a redirection segment is malformed."""


class BuiltinArgumentError(ShellError):
    """Raised when a built-in gets the wrong arguments or cannot apply them."""


class ResolutionError(ShellError):
    """Raised when no search path entry holds an executable for a command."""


class SpawnError(ShellError):
    """Raised when the OS refuses to create a child process."""


class RedirectionError(ShellError):
    """Raised when the redirection target cannot be opened."""


class SetupError(ShellError):
    """Raised when the shell cannot start, e.g. an unreadable batch file."""


class ShellExit(Exception):  # noqa: N818
    """Raised by the exit built-in to unwind to the caller."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


def report_error() -> None:
    """Write the fixed error message to standard error."""
    sys.stderr.write(ERROR_MESSAGE)
    sys.stderr.flush()
