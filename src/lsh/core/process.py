"""Process spawning and external program resolution."""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable

from loguru import logger

from lsh.core.search_path import SearchPath
from lsh.core.types import ChildProcess
from lsh.errors import ResolutionError, ShellExit, SpawnError, report_error

EXEC_FAILURE_STATUS = 127


class ProcessSpawner(ABC):
    """Capability to create child processes and wait on them."""

    @abstractmethod
    def spawn(self, executable: str, argv: list[str]) -> ChildProcess:
        """Start a child that replaces its image with ``executable``."""

    @abstractmethod
    def fork(self, target: Callable[[], int], label: str) -> ChildProcess:
        """Start a child that runs ``target`` and exits with its status."""

    @abstractmethod
    def wait(self, child: ChildProcess) -> int:
        """Block until ``child`` terminates and return its exit code."""


def _flush_stdio() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            continue


class PosixSpawner(ProcessSpawner):
    """ProcessSpawner backed by fork, execv and waitpid."""

    def spawn(self, executable: str, argv: list[str]) -> ChildProcess:
        def _exec() -> int:
            try:
                os.execv(executable, argv)
            except OSError as exc:
                logger.debug("process.exec.error executable={} error={}", executable, exc)
                report_error()
            return EXEC_FAILURE_STATUS

        return self.fork(_exec, label=executable)

    def fork(self, target: Callable[[], int], label: str) -> ChildProcess:
        _flush_stdio()
        try:
            pid = os.fork()
        except OSError as exc:
            raise SpawnError(f"fork failed for {label}: {exc}") from exc

        if pid == 0:
            status = 1
            try:
                status = _run_child(target)
            finally:
                _flush_stdio()
                os._exit(status)

        logger.debug("process.fork pid={} label={}", pid, label)
        return ChildProcess(pid=pid, label=label)

    def wait(self, child: ChildProcess) -> int:
        _, status = os.waitpid(child.pid, 0)
        code = os.waitstatus_to_exitcode(status)
        logger.debug("process.wait pid={} label={} status={}", child.pid, child.label, code)
        return code


def _run_child(target: Callable[[], int]) -> int:
    try:
        return target()
    except ShellExit as exc:
        return exc.status
    except Exception:
        logger.exception("process.child.error pid={}", os.getpid())
        report_error()
        return 1


class ProcessLauncher:
    """Resolve external programs on the search path and run them."""

    def __init__(self, search_path: SearchPath, spawner: ProcessSpawner) -> None:
        self._search_path = search_path
        self._spawner = spawner

    def resolve(self, name: str) -> str:
        """Return the first executable candidate for ``name``.

        Raises:
            ResolutionError: if no directory holds an executable match.
        """
        for directory in self._search_path:
            candidate = f"{directory}{os.sep}{name}"
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
        raise ResolutionError(f"{name}: not found in {list(self._search_path)}")

    def launch(self, tokens: list[str]) -> int:
        """Run tokens[0] with the full token list as argv and wait for it."""
        executable = self.resolve(tokens[0])
        logger.debug("process.launch executable={} argv={}", executable, tokens)
        child = self._spawner.spawn(executable, list(tokens))
        return self._spawner.wait(child)
