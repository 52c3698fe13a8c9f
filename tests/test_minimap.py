import pytest

from raycube.minimap import (
    FLOOR_COLOR,
    MIN_CELL,
    PLAYER_COLOR,
    WALL_COLOR,
    cell_size,
    draw_minimap,
)
from raycube.player import Player
from raycube.raycast import Frame

GRID = ("1111", "1001", "11 1")


def _player(x, y):
    return Player(x=x, y=y, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)


def _frame(width, height, fill=7):
    frame = Frame(width, height)
    frame.pixels = [fill] * (width * height)
    return frame


def test_cell_size_has_minimum():
    assert cell_size(1000, 1000, 800, 500) == MIN_CELL


def test_cell_size_shrinks_with_larger_maps():
    small = cell_size(5, 5, 800, 500)
    large = cell_size(20, 20, 800, 500)
    assert large <= small
    assert large >= MIN_CELL


def test_cell_size_limited_by_tighter_axis():
    wide = cell_size(4, 4, 4000, 500)
    assert wide == cell_size(4, 4, 500, 500)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_cell_size_rejects_empty_map(width, height):
    with pytest.raises(ValueError):
        cell_size(width, height, 800, 500)


def test_draw_minimap_colours_cells():
    frame = _frame(30, 30)
    size = draw_minimap(frame, GRID, _player(1.01, 1.01))
    assert size == MIN_CELL
    assert frame.get(0, 0) == WALL_COLOR
    assert frame.get(2 * size, 1 * size) == FLOOR_COLOR
    assert frame.get(2 * size, 2 * size) == 7
    assert frame.get(size, size) == PLAYER_COLOR


def test_draw_minimap_player_square_size():
    frame = _frame(30, 30)
    size = draw_minimap(frame, GRID, _player(1.01, 1.01))
    coloured = [p for p in frame.pixels if p == PLAYER_COLOR]
    assert len(coloured) == size * size


def test_draw_minimap_clips_to_frame():
    frame = _frame(3, 3)
    grid = ("1" * 10,) * 10
    draw_minimap(frame, grid, _player(5.0, 5.0))
    assert all(p == WALL_COLOR for p in frame.pixels)