"""Error presentation helpers: readable cause chains and size-capped messages."""

from __future__ import annotations

import inspect
from collections.abc import Iterator

_MAX_LINES = 50
_CHARS_IN_A_LINE = 150


def _chain(e: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = e
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__


def format_error_chain_for_user(e: BaseException) -> str:
    """List an exception and its causes, root cause first, one per line."""
    return "\n".join(f"-> {err}" for err in reversed(list(_chain(e))))


def _lines(s: str) -> list[str]:
    if not s:
        return []
    parts = s.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _truncate(s: str, location: str) -> str:
    marker = f"\n------------------------- // truncated at {location} by `truncate_msg`\n"
    lines = _lines(s)
    half_lines = _MAX_LINES // 2
    if len(lines) > _MAX_LINES:
        head = "\n".join(lines[:half_lines])
        tail = "\n".join(lines[-half_lines:])
        return f"{head}{marker}{tail}"
    half_chars = _MAX_LINES * _CHARS_IN_A_LINE // 2
    if len(s) > _MAX_LINES * _CHARS_IN_A_LINE:
        return f"{s[:half_chars]}{marker}{s[-half_chars:]}"
    return s


def _caller_location(depth: int) -> str:
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "<unknown>"
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def truncate_msg(s: str) -> str:
    """Cap ``s`` to a loggable size, keeping its head and tail."""
    return _truncate(s, _caller_location(1))


def report_msg(s: str) -> RuntimeError:
    """Build an error whose message is ``s`` capped in size."""
    return RuntimeError(_truncate(s, _caller_location(0)))