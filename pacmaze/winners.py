"""The winners file: names appended one per line and read back in order."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_WINNERS_PATH = Path("winners.txt")

_PathLike = str | os.PathLike[str]


def _first_word(name: str) -> str:
    words = name.split()
    if not words:
        raise ValueError("a winner's name must contain at least one non-space character")
    return words[0]


def record_winner(
    name: str,
    path: _PathLike = DEFAULT_WINNERS_PATH,
    leading_newline: bool = False,
) -> str:
    """Append the first word of ``name`` to the winners file and return it.

    With ``leading_newline`` a blank line is written before the name.
    """
    word = _first_word(name)
    entry = f"\n{word}\n" if leading_newline else f"{word}\n"
    with open(path, "a", encoding="utf-8", newline="\n") as handle:
        handle.write(entry)
    return word


def read_winners(path: _PathLike = DEFAULT_WINNERS_PATH) -> list[str] | None:
    """The lines of the winners file in order, or None if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        return None
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines