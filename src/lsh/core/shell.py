"""Line processing pipeline."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from loguru import logger

from lsh.config import Settings, load_settings
from lsh.core.builtins import BuiltinDispatcher
from lsh.core.commands import PARALLEL_OPERATOR, REDIRECT_OPERATOR, split_parallel, split_redirect, tokenize
from lsh.core.process import PosixSpawner, ProcessLauncher, ProcessSpawner
from lsh.core.redirect import redirect_stdout
from lsh.core.search_path import SearchPath
from lsh.core.types import ChildProcess
from lsh.errors import ShellError, report_error


class Shell:
    """Turn one input line at a time into built-in calls and child processes.

    Precedence is fixed: a line holding '&' is a parallel group, otherwise a
    line holding '>' is a redirected command, otherwise a plain command. A
    parallel segment is checked for '>' again inside its child.

    Local errors are reported with the fixed message and never stop the
    session. ``ShellExit`` from the exit built-in propagates to the caller.
    """

    def __init__(self, settings: Settings | None = None, spawner: ProcessSpawner | None = None) -> None:
        self.settings = settings or load_settings()
        self.search_path = SearchPath(self.settings.path)
        self._spawner = spawner or PosixSpawner()
        self._builtins = BuiltinDispatcher(self.search_path)
        self._launcher = ProcessLauncher(self.search_path, self._spawner)

    def execute(self, line: str) -> None:
        """Process one command line."""
        logger.debug("shell.execute line={!r}", line)
        if PARALLEL_OPERATOR in line:
            self.run_parallel(line)
        elif REDIRECT_OPERATOR in line:
            self._guarded(self.run_redirect, line)
        else:
            self._guarded(self.run_command, line)

    def run_parallel(self, line: str) -> list[int]:
        """Fork one child per segment, then wait on all of them.

        Returns the exit codes of the children that were started.
        """
        children: list[ChildProcess] = []
        for segment in split_parallel(line):
            try:
                children.append(self._spawner.fork(partial(self._run_forked_segment, segment), label=segment.strip()))
            except ShellError as exc:
                self._report(exc)
        return [self._spawner.wait(child) for child in children]

    def run_segment(self, segment: str) -> None:
        """Process one parallel segment in the current process."""
        if REDIRECT_OPERATOR in segment:
            self._guarded(self.run_redirect, segment)
        else:
            self._guarded(self.run_command, segment)

    def run_redirect(self, segment: str) -> None:
        spec = split_redirect(segment)
        self.run_command(spec.command, target=spec.target)

    def run_command(self, segment: str, target: str | None = None) -> None:
        tokens = tokenize(segment)
        if not tokens:
            return
        if target is None:
            self._dispatch(tokens)
            return
        with redirect_stdout(target):
            self._dispatch(tokens)

    def _dispatch(self, tokens: list[str]) -> None:
        if self._builtins.dispatch(tokens):
            return
        self._launcher.launch(tokens)

    def _run_forked_segment(self, segment: str) -> int:
        self.run_segment(segment)
        return 0

    def _guarded(self, func: Callable[[str], None], segment: str) -> None:
        try:
            func(segment)
        except ShellError as exc:
            self._report(exc)

    @staticmethod
    def _report(exc: ShellError) -> None:
        logger.debug("shell.error kind={} detail={}", type(exc).__name__, exc)
        report_error()
