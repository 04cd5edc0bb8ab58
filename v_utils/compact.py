"""A compact, command-line-like string format for small dataclasses.

``TrailingStop(percent=-0.5, some_other_field=42)`` is written ``ts:p-0.5:s42``:
the class's acronym, then each field as its first letter followed by its value.
"""

from __future__ import annotations

import dataclasses
import re
from pathlib import Path, PurePath
from typing import Any

from v_utils.formatting import _display_float
from v_utils.percent import _parse_float

_INT_RE = re.compile(r"[+-]?[0-9]+")

_NAMED_TYPES: dict[str, Any] = {
    "float": float,
    "int": int,
    "str": str,
    "bool": bool,
    "Path": Path,
    "PurePath": PurePath,
}


def _resolve_type(tp: Any) -> Any:
    """Turn a field annotation into a type; string annotations of simple forms are resolved."""
    if not isinstance(tp, str):
        return tp
    text = tp.strip()
    if text.endswith("| None"):
        return _resolve_type(text[: -len("| None")]) | None
    if text.startswith("Optional[") and text.endswith("]"):
        return _resolve_type(text[len("Optional["):-1]) | None
    if text.startswith("list[") and text.endswith("]"):
        return list[_resolve_type(text[len("list["):-1])]
    if text in _NAMED_TYPES:
        return _NAMED_TYPES[text]
    raise TypeError(f"Cannot resolve the annotation {tp!r}; annotate the field with the type itself")


def _split_caps(name: str) -> list[str]:
    words: list[str] = []
    current = ""
    for c in name:
        if c.isupper() and current:
            words.append(current)
            current = ""
        current += c
    if current:
        words.append(current)
    return words


def graphemics(name: str) -> list[str]:
    """Ways to refer to a CamelCase name: acronym, lower/upper case, itself, snake_case.

    Duplicates and single-character forms are dropped.
    """
    words = _split_caps(name)
    acronym = "".join(w[0] for w in words).lower()
    snake_case = "_".join(w.lower() for w in words)
    candidates = [acronym, acronym.upper(), name.lower(), name.upper(), name, snake_case]
    unique = list(dict.fromkeys(candidates))
    return [s for s in unique if len(s.encode()) != 1]


def _parse_value(tp: Any, text: str) -> Any:
    """Read ``text`` as a value of type ``tp``; raises ValueError when it cannot."""
    if tp is float:
        return _parse_float(text)
    if tp is int:
        if not _INT_RE.fullmatch(text):
            raise ValueError(f"invalid integer: {text!r}")
        return int(text)
    if tp is bool:
        if text == "true":
            return True
        if text == "false":
            return False
        raise ValueError(f"invalid bool: {text!r}")
    if tp is str:
        return text
    parse = getattr(tp, "parse", None)
    if callable(parse):
        return parse(text)
    if callable(tp):
        return tp(text)
    raise TypeError(f"Don't know how to parse a value of type {tp!r}")


def _display_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _display_float(value)
    return str(value)


def compact_format(cls: type) -> type:
    """Give a dataclass a ``parse`` classmethod and a ``__str__`` in the compact format."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError("compact_format can only be applied to dataclasses")
    fields = dataclasses.fields(cls)
    first_chars = [f.name[0] for f in fields]
    if len(set(first_chars)) != len(first_chars):
        raise ValueError("Field names must be unique")

    name_forms = graphemics(cls.__name__)

    def parse(klass: type, s: str) -> Any:
        name, _, params_part = s.partition(":")
        params = [] if params_part in ("", "_") else params_part.split(":")
        if len(params) != len(fields):
            raise ValueError(f"Expected {len(fields)} fields, got {len(params)}")
        if name not in name_forms:
            raise ValueError(f"Incorrect name provided. Expected one of: {name_forms!r}")

        provided = {param[0]: param[1:] for param in params if param}
        values = {}
        for f in fields:
            key = f.name[0]
            if key not in provided:
                raise ValueError(f"Missing parameter '{key}' for field '{f.name}'")
            values[f.name] = _parse_value(_resolve_type(f.type), provided[key])
        return klass(**values)

    def to_str(self: Any) -> str:
        parts = [name_forms[0]]
        parts.extend(f":{f.name[0]}{_display_value(getattr(self, f.name))}" for f in fields)
        return "".join(parts)

    cls.parse = classmethod(parse)
    cls.__str__ = to_str
    return cls