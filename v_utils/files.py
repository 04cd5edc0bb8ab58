"""Opening files in the user's editor or pager, optionally synced through git."""

from __future__ import annotations

import enum
import os
import subprocess
from pathlib import Path


class OpenMode(enum.Enum):
    """How a file is opened."""

    NORMAL = enum.auto()
    FORCE = enum.auto()
    READ = enum.auto()
    PAGER = enum.auto()


def _shell(command: str) -> subprocess.CompletedProcess:
    return subprocess.run(["sh", "-c", command], check=False)


def _require_exists(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError("File does not exist")


def _shell_or_fail(command: str, message: str) -> None:
    try:
        _shell(command)
    except OSError as e:
        raise RuntimeError(message) from e


def open_with_mode(path: str | os.PathLike[str], mode: OpenMode) -> None:
    """Open ``path`` with ``$EDITOR``, ``less`` or ``nvim -R`` depending on ``mode``."""
    path = Path(path)
    p = str(path)
    if mode is OpenMode.NORMAL:
        _require_exists(path)
        _shell_or_fail(f"$EDITOR {p}", "$EDITOR env variable is not defined")
    elif mode is OpenMode.FORCE:
        _shell_or_fail(
            f"$EDITOR {p}",
            f"$EDITOR env variable is not defined or permission lacking to create the file: {p}",
        )
    elif mode is OpenMode.PAGER:
        _require_exists(path)
        _shell(f"less {p}")
    elif mode is OpenMode.READ:
        # Only nvim's read-only flag is supported.
        _require_exists(path)
        _shell_or_fail(f"nvim -R {p}", "nvim is not found in path")
    else:
        raise ValueError(f"Unknown open mode: {mode!r}")


def sync_file_with_git(path: str | os.PathLike[str], open_mode: OpenMode | None = None) -> None:
    """Pull the repository holding ``path``, optionally open it, then commit and push."""
    path = Path(path)
    try:
        is_dir = path.is_dir() if os.stat(path) else False
    except OSError as e:
        if open_mode is not OpenMode.FORCE:
            raise RuntimeError(
                f"Failed to read metadata of file/directory at '{path}', which means we do not "
                "have sufficient permissions or it does not exist"
            ) from e
        try:
            with open(path, "w"):
                pass
        except OSError as create_error:
            raise RuntimeError(
                f"Failed to force-create file at '{path}'.\n{e}"
            ) from create_error
        is_dir = False

    sp = path if is_dir else path.parent

    _shell_or_fail(
        f'git -C "{sp}" pull',
        f"Failed to pull from Git repository at '{sp}'. Ensure a repository exists at this path "
        "or any of its parent directories and no merge conflicts are present.",
    )

    if open_mode is not None:
        try:
            open_with_mode(path, open_mode)
        except Exception as e:
            raise RuntimeError(
                f"Failed to open file at '{path}'. Use `OpenMode.FORCE` and ensure you have "
                "necessary permissions"
            ) from e

    _shell_or_fail(
        f'git -C "{sp}" add -A && git -C "{sp}" commit -m "." && git -C "{sp}" push',
        f"Failed to commit or push to Git repository at '{sp}'. Ensure you have the necessary "
        "permissions and the repository is correctly configured.",
    )


def open_path(path: str | os.PathLike[str]) -> None:
    """Open an existing file in ``$EDITOR``."""
    open_with_mode(path, OpenMode.NORMAL)