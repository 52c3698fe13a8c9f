"""Line-oriented text helpers used when reading scene description files."""

from __future__ import annotations

import os
from collections.abc import Sequence

_ATOI_SPACE = frozenset(" \b\t\n\v\f\r")


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a file and return its lines, each keeping its trailing newline.

    A line is cut at its first NUL character. A final line without a newline
    that ends in a NUL character is dropped. Raises OSError when the file
    cannot be opened.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
        raw_lines = list(handle)
    lines: list[str] = []
    for raw in raw_lines:
        if not raw.endswith("\n") and raw.endswith("\0"):
            break
        lines.append(raw.split("\0", 1)[0])
    return lines


def flip_matrix(rows: Sequence[str], height: int, width: int) -> list[str]:
    """Transpose the first ``height`` rows into ``width`` columns.

    Missing cells, newlines and NUL characters become spaces, so every
    resulting row is exactly ``height`` characters long.
    """
    used = rows[:height]
    flipped = []
    for column in range(width):
        cells = []
        for row in used:
            char = row[column] if column < len(row) else " "
            cells.append(" " if char in "\n\0" else char)
        flipped.append("".join(cells))
    return flipped


def max_width(rows: Sequence[str]) -> int:
    """Return the length of the longest row, or 0 when there are none."""
    return max((len(row) for row in rows), default=0)


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and drop the empty pieces."""
    return [field for field in text.split(sep) if field]


def trim(text: str, chars: str) -> str:
    """Strip every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading blanks and control whitespace are skipped, one sign is accepted,
    and parsing stops at the first non-digit. Returns 0 when no digits follow.
    """
    rest = text.lstrip("".join(_ATOI_SPACE))
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value