"""Paths with ``~`` expanded to the user's home directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExpandedPath:
    """A filesystem path; build it with :meth:`parse` to expand a leading ``~``."""

    path: Path = Path()

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def parse(cls, s: str) -> ExpandedPath:
        if not s.startswith("~"):
            return cls(Path(s))
        try:
            home = Path.home()
        except RuntimeError:
            raise ValueError("Failed to determine user's home directory") from None
        raw = s.encode()
        if len(raw) < 2:
            return cls(home)
        if len(raw) == 2:
            raise ValueError("Incorrect Path")
        try:
            rest = raw[2:].decode()
        except UnicodeDecodeError:
            raise ValueError("Incorrect Path") from None
        return cls(home / rest)

    def inner(self) -> Path:
        return self.path

    def parent(self) -> ExpandedPath | None:
        parent = self.path.parent
        if parent == self.path:
            return None
        return ExpandedPath(parent)

    def join(self, path: str | os.PathLike[str]) -> ExpandedPath:
        return ExpandedPath(self.path / path)

    def __fspath__(self) -> str:
        return os.fspath(self.path)

    def __str__(self) -> str:
        return str(self.path)