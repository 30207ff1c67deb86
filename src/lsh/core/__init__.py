"""Core parsing and execution pipeline."""

from .builtins import BuiltinDispatcher
from .process import PosixSpawner, ProcessLauncher, ProcessSpawner
from .search_path import SearchPath
from .shell import Shell

__all__ = ["BuiltinDispatcher", "PosixSpawner", "ProcessLauncher", "ProcessSpawner", "SearchPath", "Shell"]
