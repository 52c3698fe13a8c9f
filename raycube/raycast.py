"""Ray casting of the scene into a frame of packed colours."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from .scene import WALL, Scene
from .textures import Texture, pack_rgb

if TYPE_CHECKING:
    from .player import Player

WIN_WIDTH = 800
WIN_HEIGHT = 500

_NO_HIT_DELTA = 1e30
_MIN_DISTANCE = 1e-9


class Side(IntEnum):
    """Which kind of grid line a ray crossed last."""

    N_S = 0
    E_W = 1


class WallDir(IntEnum):
    """Which face of a wall cell a ray hit."""

    NO = 0
    SO = 1
    EA = 2
    WE = 3


@dataclass(frozen=True)
class Ray:
    """The result of casting one screen column."""

    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    side: Side
    wall_dir: WallDir
    perp_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    wall_x: float


@dataclass
class Frame:
    """A width by height image of packed 32-bit colours."""

    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.pixels = [0] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y)."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        return self.pixels[self._index(x, y)]


def _is_wall(grid: Sequence[str], row: int, column: int) -> bool:
    # Cells outside the grid stop the ray as if they were walls.
    if not 0 <= row < len(grid):
        return True
    line = grid[row]
    if not 0 <= column < len(line):
        return True
    return line[column] == WALL


def cast_ray(
    grid: Sequence[str],
    player: Player,
    column: int,
    width: int = WIN_WIDTH,
    height: int = WIN_HEIGHT,
) -> Ray:
    """Cast the ray for one screen column and find the wall it meets."""
    camera_x = 2 * column / width - 1
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x, map_y = int(player.x), int(player.y)
    delta_x = _NO_HIT_DELTA if ray_x == 0 else abs(1 / ray_x)
    delta_y = _NO_HIT_DELTA if ray_y == 0 else abs(1 / ray_y)

    if ray_x < 0:
        step_x = -1
        side_x = (player.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.x) * delta_x
    if ray_y < 0:
        step_y = -1
        side_y = (player.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = Side.N_S
        else:
            side_y += delta_y
            map_y += step_y
            side = Side.E_W
        if _is_wall(grid, map_x, map_y):
            break

    if side is Side.N_S:
        wall_dir = WallDir.SO if step_x == -1 else WallDir.NO
        perp = side_x - delta_x
    else:
        wall_dir = WallDir.WE if step_y == -1 else WallDir.EA
        perp = side_y - delta_y

    line_height = int(height / max(perp, _MIN_DISTANCE))
    draw_start = max(-(line_height // 2) + height // 2, 0)
    draw_end = min(line_height // 2 + height // 2, height - 1)
    if side is Side.N_S:
        wall_x = player.y + perp * ray_y
    else:
        wall_x = player.x + perp * ray_x
    wall_x -= math.floor(wall_x)

    return Ray(
        dir_x=ray_x,
        dir_y=ray_y,
        map_x=map_x,
        map_y=map_y,
        side=side,
        wall_dir=wall_dir,
        perp_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        wall_x=wall_x,
    )


def _choose_texture(scene: Scene, wall_dir: WallDir) -> Texture:
    return {
        WallDir.NO: scene.north,
        WallDir.SO: scene.south,
        WallDir.WE: scene.east,
        WallDir.EA: scene.west,
    }[wall_dir]


def _draw_column(frame: Frame, ray: Ray, texture: Texture, column: int) -> None:
    tex_x = int(ray.wall_x * texture.width)
    if (ray.side is Side.N_S and ray.dir_x > 0) or (
        ray.side is Side.E_W and ray.dir_y < 0
    ):
        tex_x = texture.width - tex_x - 1
    step = texture.height / ray.line_height if ray.line_height else 0.0
    pos = (ray.draw_start - frame.height // 2 + ray.line_height // 2) * step
    mask = texture.height - 1
    for y in range(ray.draw_start, ray.draw_end + 1):
        tex_y = int(pos) & mask
        pos += step
        frame.put(column, y, texture.pixel(tex_x, tex_y))


def render_scene(frame: Frame, scene: Scene, player: Player) -> None:
    """Draw ceiling, floor and textured walls as seen by ``player``."""
    split = (frame.height // 2) * frame.width
    total = frame.width * frame.height
    frame.pixels[:split] = [pack_rgb(scene.ceiling, 0)] * split
    frame.pixels[split:] = [pack_rgb(scene.floor, 0)] * (total - split)
    for column in range(frame.width):
        ray = cast_ray(scene.grid, player, column, frame.width, frame.height)
        _draw_column(frame, ray, _choose_texture(scene, ray.wall_dir), column)