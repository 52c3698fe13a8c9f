"""Player position, facing and the input handling that moves it."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .raycast import WIN_WIDTH
from .scene import EMPTY

MOVE_SPEED = 0.07
KEY_ROT_SPEED = 0.07
MOUSE_ROT_SLOW = 0.01
MOUSE_ROT_FAST = 0.03
SPAWN_OFFSET = 0.01


class Key(IntEnum):
    """Key codes understood by the game."""

    ESC = 65307
    RIGHT = 65363
    LEFT = 65361
    W = 119
    A = 97
    S = 115
    D = 100


_SPAWN_VECTORS = {
    "N": (-1.0, 0.0, 0.0, 0.66),
    "W": (0.0, -1.0, -0.66, 0.0),
    "S": (1.0, 0.0, 0.0, -0.66),
    "E": (0.0, 1.0, 0.66, 0.0),
}

_ACTIVE_KEYS = frozenset({Key.RIGHT, Key.LEFT, Key.W, Key.A, Key.S, Key.D})


def _is_empty(grid: Sequence[str], x: float, y: float) -> bool:
    row, column = int(x), int(y)
    if not 0 <= row < len(grid):
        return False
    line = grid[row]
    return 0 <= column < len(line) and line[column] == EMPTY


@dataclass
class Player:
    """Position (row ``x``, column ``y``), view direction and camera plane."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    start_dir: str = ""

    @classmethod
    def spawn(cls, x: float, y: float, start_dir: str) -> Player:
        """Create a player on cell (x, y) facing one of N, S, E or W."""
        try:
            dir_x, dir_y, plane_x, plane_y = _SPAWN_VECTORS[start_dir]
        except KeyError:
            raise ValueError(f"unknown start direction: {start_dir!r}") from None
        return cls(
            x=x + SPAWN_OFFSET,
            y=y + SPAWN_OFFSET,
            dir_x=dir_x,
            dir_y=dir_y,
            plane_x=plane_x,
            plane_y=plane_y,
            start_dir=start_dir,
        )

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def move(self, grid: Sequence[str], key: int, speed: float) -> None:
        """Walk or strafe for one of the W, A, S, D keys.

        Each axis moves only when the cell it leads into is empty. Raises
        ValueError for any other key.
        """
        key = Key(key)
        if key is Key.W:
            dx, dy = self.dir_x, self.dir_y
        elif key is Key.A:
            dx, dy = -self.dir_y, self.dir_x
        elif key is Key.S:
            dx, dy = -self.dir_x, -self.dir_y
        elif key is Key.D:
            dx, dy = self.dir_y, -self.dir_x
        else:
            raise ValueError(f"{key.name} is not a movement key")
        step_x = dx * speed
        if _is_empty(grid, self.x + step_x, self.y):
            self.x += step_x
        step_y = dy * speed
        if _is_empty(grid, self.x, self.y + step_y):
            self.y += step_y


@dataclass
class Controller:
    """Turns key presses and mouse motion into player updates."""

    player: Player
    grid: Sequence[str]
    mov_speed: float = MOVE_SPEED
    rot_speed: float = 0.0
    mouse_x: int = 0
    win_width: int = WIN_WIDTH
    closed: bool = False

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return True when the view has to be redrawn.

        Escape marks the controller as closed.
        """
        if key == Key.ESC:
            self.closed = True
            return False
        if key not in _ACTIVE_KEYS:
            return False
        if not self.mouse_x:
            self.rot_speed = KEY_ROT_SPEED
        if key == Key.RIGHT:
            self.player.rotate(-self.rot_speed)
        elif key == Key.LEFT:
            self.player.rotate(self.rot_speed)
        else:
            self.player.move(self.grid, key, self.mov_speed)
        return True

    def handle_mouse(self, x: int, y: int) -> bool:
        """Turn the player by horizontal mouse motion; return True on change."""
        self.rot_speed = MOUSE_ROT_SLOW
        old_x = self.mouse_x
        self.mouse_x = x
        zone = self.win_width // 7
        if x > zone:
            self.rot_speed = MOUSE_ROT_FAST
        if x > zone * 6:
            self.rot_speed = MOUSE_ROT_FAST
        if old_x < x:
            return self.handle_key(Key.RIGHT)
        if old_x > x:
            return self.handle_key(Key.LEFT)
        return False