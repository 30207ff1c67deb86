"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RedirectSpec:
    """A command segment paired with the file its output goes to."""

    command: str
    target: str


@dataclass(frozen=True)
class ChildProcess:
    """Handle for a spawned or forked child process."""

    pid: int
    label: str
