"""Process-wide JSON logging set up to stdout, a file or the user's state directory."""

from __future__ import annotations

import enum
import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import platformdirs

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_HANDLER_NAME = "v_utils"
_LEVEL_ENV = "LOG_LEVEL"


class _Kind(enum.Enum):
    STDOUT = enum.auto()
    FILE = enum.auto()
    XDG = enum.auto()


@dataclass(frozen=True)
class LogDestination:
    """Where logs go: stdout (the default), a file, or ``<state dir of name>/.log``."""

    kind: _Kind = _Kind.STDOUT
    path: Path | None = None
    name: str | None = None

    @classmethod
    def stdout(cls) -> LogDestination:
        return cls(_Kind.STDOUT)

    @classmethod
    def file(cls, path: str | os.PathLike[str]) -> LogDestination:
        return cls(_Kind.FILE, path=Path(path))

    @classmethod
    def xdg(cls, name: str) -> LogDestination:
        return cls(_Kind.XDG, name=str(name))


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "target": record.name,
            "filename": record.pathname,
            "line_number": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _level_from_env() -> int | None:
    raw = os.environ.get(_LEVEL_ENV)
    if raw is None:
        return None
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else None


def _truncate(path: Path) -> None:
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as e:
        raise RuntimeError(
            f"Couldn't open {path} for writing. If its parent directory doesn't exist, "
            "create it manually first"
        ) from e


def _trace_the_init(log: logging.Logger) -> None:
    log.log(TRACE, "Executed as %r in %r\n", sys.executable, os.getcwd())
    log.log(TRACE, "Arguments: %r\n", sys.argv)
    log.log(TRACE, "Environment: %r\n", dict(sorted(os.environ.items())))


def init_subscriber(log_destination: LogDestination | None = None) -> Path | None:
    """Install JSON logging on the root logger; returns the log file path, if any.

    The level comes from ``LOG_LEVEL`` and defaults to debug.
    """
    destination = log_destination or LogDestination.stdout()
    pending_warnings = []
    level = _level_from_env()
    if level is None:
        pending_warnings.append(
            f"Couldn't read a log level from the {_LEVEL_ENV} environment variable, "
            "defaulting to debug level logging"
        )
        level = logging.DEBUG

    log_path: Path | None = None
    if destination.kind is _Kind.STDOUT:
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
    else:
        if destination.kind is _Kind.FILE:
            log_path = destination.path
        else:
            state_dir = Path(platformdirs.user_state_dir(destination.name))
            state_dir.mkdir(parents=True, exist_ok=True)
            log_path = state_dir / ".log"
        _truncate(log_path)
        handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")

    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_JsonFormatter())

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
        old.close()
    root.addHandler(handler)
    root.setLevel(level)

    log = logging.getLogger(_HANDLER_NAME)
    for message in pending_warnings:
        log.warning(message)
    log.info("Starting ...")
    _trace_the_init(log)
    return log_path