"""Interactive confirmation prompts."""

from __future__ import annotations

import sys


def confirm(message: str) -> bool:
    """Ask for confirmation on the terminal; only ``y`` or ``yes`` proceeds."""
    sys.stdout.write(f"{message} [Y/n] ")
    sys.stdout.flush()
    answer = sys.stdin.readline().strip().lower()
    if answer in ("y", "yes"):
        return True
    print("Aborted by user.", file=sys.stderr)
    return False