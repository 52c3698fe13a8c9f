"""Overhead minimap drawn in the corner of the frame."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .raycast import WIN_HEIGHT, WIN_WIDTH, Frame
from .scene import EMPTY, WALL
from .textio import max_width

if TYPE_CHECKING:
    from .player import Player

WALL_COLOR = 0xFFFFFF
FLOOR_COLOR = 0x000000
PLAYER_COLOR = 0xB000F5
MIN_CELL = 2
SCALE = 5


def cell_size(
    map_width: int,
    map_height: int,
    win_width: int = WIN_WIDTH,
    win_height: int = WIN_HEIGHT,
) -> int:
    """Return the side in pixels of one minimap cell.

    The minimap takes about a fifth of the window in each direction, cells
    are square and never smaller than ``MIN_CELL``.
    """
    if map_width <= 0 or map_height <= 0:
        raise ValueError("map dimensions must be positive")
    across = max(win_width // (map_width * SCALE), MIN_CELL)
    down = max(win_height // (map_height * SCALE), MIN_CELL)
    return min(across, down)


def _fill_square(frame: Frame, x: int, y: int, size: int, color: int) -> None:
    for px in range(x, min(x + size, frame.width)):
        for py in range(y, min(y + size, frame.height)):
            frame.put(px, py, color)


def draw_minimap(frame: Frame, grid: Sequence[str], player: Player) -> int:
    """Draw walls, floor cells and the player onto ``frame``.

    Cells that are neither wall nor floor are left untouched. Returns the
    cell size that was used.
    """
    size = cell_size(max_width(grid), len(grid), frame.width, frame.height)
    for row, line in enumerate(grid):
        for column, char in enumerate(line):
            if char == WALL:
                _fill_square(frame, column * size, row * size, size, WALL_COLOR)
            elif char == EMPTY:
                _fill_square(frame, column * size, row * size, size, FLOOR_COLOR)
    _fill_square(
        frame, int(player.y * size), int(player.x * size), size, PLAYER_COLOR
    )
    return size