"""Search path used to resolve external programs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from lsh.config import DEFAULT_PATH


class SearchPath:
    """Ordered, replaceable list of directories."""

    def __init__(self, directories: Iterable[str] = DEFAULT_PATH) -> None:
        self._directories: list[str] = list(directories)

    def replace(self, directories: Iterable[str]) -> None:
        """Replace every entry; an empty iterable leaves nothing to search."""
        self._directories = list(directories)

    @property
    def directories(self) -> tuple[str, ...]:
        """Current entries in search order."""
        return tuple(self._directories)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._directories))

    def __len__(self) -> int:
        return len(self._directories)

    def __repr__(self) -> str:
        return f"SearchPath({self._directories!r})"
