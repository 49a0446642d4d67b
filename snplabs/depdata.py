"""Reading of include dependency listings as produced by ``gcc -H``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

MAX_LINE_LEN = 512
MAX_DIRS = 64
MAX_FILES = 256


class DependencyError(Exception):
    """The dependency listing exceeds the supported limits."""


@dataclass(frozen=True)
class FileEntry:
    """One file of the listing: its base name, directory index and level."""

    name: str
    dir: int
    level: int


@dataclass
class DependencyData:
    """All directories and all files of a dependency listing, in order."""

    dirs: list[str] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)

    def _dir_index(self, path: str) -> int:
        name = _dirname(path)
        try:
            return self.dirs.index(name)
        except ValueError:
            pass
        if len(self.dirs) >= MAX_DIRS:
            raise DependencyError("too many directories")
        self.dirs.append(name)
        return len(self.dirs) - 1

    def _add_file(self, path: str, level: int) -> None:
        name = _basename(path)
        if len(self.files) >= MAX_FILES:
            raise DependencyError("too many files")
        self.files.append(FileEntry(name=name, dir=self._dir_index(path), level=level))


def _dirname(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    head, sep, _ = stripped.rpartition("/")
    if not sep:
        return "."
    return head.rstrip("/") or "/"


def _basename(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rpartition("/")[2]


def _chunks(lines: Iterable[str]) -> Iterator[str]:
    """Split lines into pieces no longer than a line buffer holds."""
    limit = MAX_LINE_LEN - 1
    for line in lines:
        for start in range(0, len(line), limit):
            yield line[start:start + limit]


def read_dependencies(root: str, lines: Iterable[str]) -> DependencyData:
    """Collect the root file and every dependency line of the listing.

    Only complete lines starting with '.' count; the number of leading
    dots is the include level.
    """
    data = DependencyData()
    data._add_file(root, 0)
    for line in _chunks(lines):
        if not (line.endswith("\n") and line.startswith(".")):
            continue
        text = line[:-1]
        rest = text.lstrip(".")
        level = len(text) - len(rest)
        data._add_file(rest.lstrip(" \t"), level)
    return data