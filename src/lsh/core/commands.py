"""Command line splitting helpers."""

from __future__ import annotations

import re

from lsh.core.types import RedirectSpec
from lsh.errors import ShellSyntaxError

PARALLEL_OPERATOR = "&"
REDIRECT_OPERATOR = ">"
SEPARATOR_RE = re.compile(r"[ \t]+")


def tokenize(segment: str) -> list[str]:
    """Split a command segment on runs of spaces and tabs."""

    return [token for token in SEPARATOR_RE.split(segment) if token]


def split_parallel(line: str) -> list[str]:
    """Split a line on '&', dropping blank segments."""

    return [segment for segment in line.split(PARALLEL_OPERATOR) if tokenize(segment)]


def split_redirect(segment: str) -> RedirectSpec:
    """Split 'command > target' into its two halves.

    Raises:
        ShellSyntaxError: if the segment does not hold exactly one command
            half and one target token.
    """

    parts = segment.split(REDIRECT_OPERATOR)
    if len(parts) != 2:
        raise ShellSyntaxError(f"expected one '{REDIRECT_OPERATOR}', got {len(parts) - 1}")

    command, target_half = parts
    if not tokenize(command):
        raise ShellSyntaxError("missing command before redirection")

    targets = tokenize(target_half)
    if len(targets) != 1:
        raise ShellSyntaxError(f"expected one redirection target, got {len(targets)}")

    return RedirectSpec(command=command, target=targets[0])
