from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from lsh.config import Settings
from lsh.core import ProcessSpawner, Shell
from lsh.core.types import ChildProcess
from lsh.errors import ShellExit, SpawnError
from lsh.logging_utils import configure_logging


@dataclass
class FakeSpawner(ProcessSpawner):
    """Records spawns and runs forked targets in-process."""

    statuses: dict[str, int] = field(default_factory=dict)
    failing_forks: set[str] = field(default_factory=set)
    fail_spawn: bool = False
    spawned: list[tuple[str, list[str]]] = field(default_factory=list)
    forked: list[ChildProcess] = field(default_factory=list)
    waited: list[ChildProcess] = field(default_factory=list)
    _next_pid: int = 1000

    def _child(self, label: str) -> ChildProcess:
        self._next_pid += 1
        return ChildProcess(pid=self._next_pid, label=label)

    def spawn(self, executable: str, argv: list[str]) -> ChildProcess:
        if self.fail_spawn:
            raise SpawnError(executable)
        self.spawned.append((executable, argv))
        return self._child(executable)

    def fork(self, target: Callable[[], int], label: str) -> ChildProcess:
        if label in self.failing_forks:
            raise SpawnError(label)
        try:
            target()
        except ShellExit:
            pass
        child = self._child(label)
        self.forked.append(child)
        return child

    def wait(self, child: ChildProcess) -> int:
        self.waited.append(child)
        return self.statuses.get(child.label, 0)


def _make_executable(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    os.chmod(path, 0o755)
    return path


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging() -> None:
    configure_logging("WARNING")


@pytest.fixture
def make_executable() -> Callable[[Path, str], Path]:
    return _make_executable


@pytest.fixture
def spawner() -> FakeSpawner:
    return FakeSpawner()


@pytest.fixture
def shell(spawner: FakeSpawner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Shell:
    monkeypatch.chdir(tmp_path)
    return Shell(Settings(path=["/bin"]), spawner=spawner)
