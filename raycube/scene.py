"""Parsing of ``.cub`` scene description files."""

from __future__ import annotations

import itertools
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .textio import flip_matrix, max_width, parse_int, read_lines, split_fields, trim
from .textures import Texture, load_texture

EMPTY = "0"
WALL = "1"
PLAYER_DIRECTIONS = "NSEW"
MAP_CHARS = " \n012NSEW"
BLANKS = " \t\n"
SCENE_SUFFIX = ".cub"
DEFAULT_MAP = "default.cub"

TextureLoader = Callable[[str], Texture]

_TEXTURE_IDS = (("NO ", "north"), ("SO ", "south"), ("EA ", "east"), ("WE ", "west"))
_COLOR_IDS = (("C", "ceiling"), ("F", "floor"))
_HEADER_SIZE = len(_TEXTURE_IDS) + len(_COLOR_IDS)


class SceneError(ValueError):
    """Raised when a scene file or one of its parts is invalid."""


@dataclass(frozen=True)
class Scene:
    """Everything a scene file describes.

    ``start_x`` is the row and ``start_y`` the column of the player's start
    cell in ``grid``; that cell holds ``EMPTY``.
    """

    north: Texture
    south: Texture
    east: Texture
    west: Texture
    ceiling: tuple[int, int, int]
    floor: tuple[int, int, int]
    grid: tuple[str, ...]
    start_x: int
    start_y: int
    start_dir: str

    @property
    def map_width(self) -> int:
        return max_width(self.grid)

    @property
    def map_height(self) -> int:
        return len(self.grid)


def has_content(line: str | None) -> bool:
    """Tell whether ``line`` holds anything besides spaces, tabs and newlines.

    A missing line (None) counts as having content.
    """
    if line is None:
        return True
    return any(char not in BLANKS for char in line)


def has_cub_extension(path: str | os.PathLike[str]) -> bool:
    """Tell whether the path names a ``.cub`` file."""
    return os.fspath(path).endswith(SCENE_SUFFIX)


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse the ``R,G,B`` part of a colour line.

    Each component has at most three digits; spaces may precede a component
    and follow the last one. Raises SceneError on anything else.
    """
    if not text:
        raise SceneError("colour is empty")

    def at(index: int) -> str:
        return text[index] if index < len(text) else ""

    values = [0, 0, 0]
    pos = 0
    for component in range(3):
        if not at(pos):
            break
        while at(pos) == " ":
            pos += 1
        length = 0
        while length < 3 and "0" <= at(pos + length) <= "9":
            length += 1
        values[component] = parse_int(text[pos:pos + length])
        pos += length + 1
    pos -= 1
    while at(pos) == " ":
        pos += 1
    if at(pos):
        raise SceneError(f"invalid colour: {text!r}")
    return values[0], values[1], values[2]


def _parse_texture(entry: str, loader: TextureLoader) -> Texture:
    fields = split_fields(entry, " ")
    if len(fields) != 2:
        raise SceneError(f"texture line needs exactly one path: {entry!r}")
    try:
        return loader(fields[1])
    except OSError as exc:
        raise SceneError(f"cannot load texture {fields[1]!r}") from exc


def _parse_entry(entry: str, found: dict[str, object], loader: TextureLoader) -> None:
    for prefix, key in _TEXTURE_IDS:
        if entry.startswith(prefix):
            if key in found:
                raise SceneError(f"{key} texture given twice")
            found[key] = _parse_texture(entry, loader)
            return
    for prefix, key in _COLOR_IDS:
        if entry.startswith(prefix):
            if key in found:
                raise SceneError(f"{key} colour given twice")
            found[key] = parse_color(entry[len(prefix):])
            return
    raise SceneError(f"unexpected header line: {entry!r}")


def parse_header(
    lines: Sequence[str], loader: TextureLoader = load_texture
) -> tuple[dict[str, object], int]:
    """Parse the six header elements at the start of ``lines``.

    Returns a mapping with the keys north, south, east, west (textures) and
    ceiling, floor (colour triples), and the index of the first line after
    the header. Empty lines between elements are skipped.
    """
    found: dict[str, object] = {}
    end = 0
    while end < len(lines) and len(found) < _HEADER_SIZE:
        line = lines[end]
        end += 1
        if line.startswith("\n"):
            continue
        _parse_entry(trim(line, " \n"), found, loader)
    if len(found) < _HEADER_SIZE:
        raise SceneError("header is incomplete")
    return found, end


def _is_map_line(line: str) -> bool:
    return not has_content(line) or all(char in MAP_CHARS for char in line)


def _is_closed(rows: Sequence[str]) -> bool:
    for row in rows:
        if WALL not in row and EMPTY not in row:
            continue
        for field in split_fields(trim(row, " \n"), " "):
            if not (field.startswith(WALL) and field.endswith(WALL)):
                return False
    return True


def _extract_grid(lines: Sequence[str]) -> list[str]:
    grid = []
    for line in itertools.dropwhile(lambda text: not has_content(text), lines):
        if WALL not in line:
            break
        grid.append(trim(line, "\n").rstrip(" "))
    return grid


def _find_player(grid: Sequence[str]) -> tuple[int, int, str]:
    found: tuple[int, int, str] | None = None
    for row_index, row in enumerate(grid):
        for column, char in enumerate(row):
            if char in PLAYER_DIRECTIONS:
                if found is not None:
                    raise SceneError("more than one starting position")
                found = (row_index, column, char)
    if found is None:
        raise SceneError("no starting position")
    return found


def parse_map(lines: Sequence[str]) -> tuple[tuple[str, ...], int, int, str]:
    """Parse the map part of a scene file.

    Returns ``(grid, row, column, direction)``: the grid rows with trailing
    newlines and spaces removed and the start cell set to empty, and the
    player's start cell and facing letter.
    """
    for line in lines:
        if not _is_map_line(line):
            raise SceneError(f"invalid map line: {line!r}")
    flipped = flip_matrix(lines, len(lines), max_width(lines))
    if not (_is_closed(lines) and _is_closed(flipped)):
        raise SceneError("map is not enclosed by walls")
    grid = _extract_grid(lines)
    row, column, direction = _find_player(grid)
    grid[row] = grid[row][:column] + EMPTY + grid[row][column + 1:]
    return tuple(grid), row, column, direction


def load_scene(
    path: str | os.PathLike[str], loader: TextureLoader = load_texture
) -> Scene:
    """Read and validate a scene file.

    Raises SceneError with one of the messages "Invalid file", "Invalid file
    extension", "Invalid file header" or "Invalid map".
    """
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise SceneError("Invalid file") from exc
    if not lines:
        raise SceneError("Invalid file")
    if not has_cub_extension(path):
        raise SceneError("Invalid file extension")
    try:
        header, end = parse_header(lines, loader)
    except SceneError as exc:
        raise SceneError("Invalid file header") from exc
    try:
        grid, row, column, direction = parse_map(lines[end:])
    except SceneError as exc:
        raise SceneError("Invalid map") from exc
    return Scene(
        north=header["north"],
        south=header["south"],
        east=header["east"],
        west=header["west"],
        ceiling=header["ceiling"],
        floor=header["floor"],
        grid=grid,
        start_x=row,
        start_y=column,
        start_dir=direction,
    )