"""Standard output redirection."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from lsh.errors import RedirectionError

STDOUT_FD = 1
TARGET_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
TARGET_MODE = 0o644


@contextmanager
def redirect_stdout(filename: str) -> Iterator[None]:
    """Point file descriptor 1 at ``filename`` for the duration of the block.

    The file is truncated or created. The original descriptor is restored and
    the file closed on every exit path.
    """
    sys.stdout.flush()
    saved_fd = os.dup(STDOUT_FD)
    try:
        target_fd = os.open(filename, TARGET_FLAGS, TARGET_MODE)
    except OSError as exc:
        os.close(saved_fd)
        raise RedirectionError(f"cannot open {filename}: {exc.strerror}") from exc

    try:
        os.dup2(target_fd, STDOUT_FD)
        logger.debug("redirect.start target={}", filename)
        yield
    finally:
        sys.stdout.flush()
        os.dup2(saved_fd, STDOUT_FD)
        os.close(saved_fd)
        os.close(target_fd)
        logger.debug("redirect.end target={}", filename)
