"""Built-in commands: exit, cd and path."""

from __future__ import annotations

import os
from collections.abc import Callable

from loguru import logger

from lsh.core.search_path import SearchPath
from lsh.errors import BuiltinArgumentError, ShellExit


class BuiltinDispatcher:
    """Run shell-internal commands against a token list."""

    def __init__(self, search_path: SearchPath) -> None:
        self._search_path = search_path
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "exit": self._exit,
            "cd": self._cd,
            "path": self._path,
        }

    def dispatch(self, tokens: list[str]) -> bool:
        """Run the built-in named by tokens[0].

        Returns False when the command is not a built-in, so the caller can
        fall through to an external program.
        """
        handler = self._handlers.get(tokens[0])
        if handler is None:
            return False
        logger.debug("builtin.dispatch name={} args={}", tokens[0], tokens[1:])
        handler(tokens[1:])
        return True

    @staticmethod
    def _exit(args: list[str]) -> None:
        if args:
            raise BuiltinArgumentError(f"exit takes no arguments, got {len(args)}")
        raise ShellExit(0)

    @staticmethod
    def _cd(args: list[str]) -> None:
        if len(args) != 1:
            raise BuiltinArgumentError(f"cd takes exactly one argument, got {len(args)}")
        try:
            os.chdir(args[0])
        except OSError as exc:
            raise BuiltinArgumentError(f"cd: {exc.strerror}: {args[0]}") from exc

    def _path(self, args: list[str]) -> None:
        self._search_path.replace(args)
