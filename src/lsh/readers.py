"""Line sources for interactive and batch mode."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from prompt_toolkit import PromptSession

from lsh.errors import SetupError


def interactive_lines(prompt: str) -> Iterator[str]:
    """Prompt for and yield lines from standard input until end of input."""
    if sys.stdin.isatty():
        yield from _terminal_lines(prompt)
        return

    while True:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return
        yield line.rstrip("\r\n")


def _terminal_lines(prompt: str) -> Iterator[str]:
    session: PromptSession[str] = PromptSession()
    while True:
        try:
            line = session.prompt(prompt)
        except KeyboardInterrupt:
            continue
        except EOFError:
            return
        yield line


def batch_lines(path: Path) -> Iterator[str]:
    """Yield the lines of a script file.

    Raises:
        SetupError: if the file cannot be opened.
    """
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape")  # noqa: SIM115
    except OSError as exc:
        raise SetupError(f"cannot open batch file {path}: {exc.strerror}") from exc
    return _read_lines(handle)


def _read_lines(handle: TextIO) -> Iterator[str]:
    with handle:
        for line in handle:
            yield line.rstrip("\r\n")
