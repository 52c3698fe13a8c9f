import pytest

from raycube.player import Player
from raycube.raycast import Frame, Side, WallDir, cast_ray, render_scene
from raycube.scene import Scene
from raycube.textures import Texture, pack_rgb


def _room(size):
    wall = "1" * size
    inner = "1" + "0" * (size - 2) + "1"
    return (wall,) + (inner,) * (size - 2) + (wall,)


def _solid(color):
    return Texture(1, 1, (color,))


NORTH, SOUTH, EAST, WEST = 0x111111, 0x222222, 0x333333, 0x444444
CEILING, FLOOR = (10, 20, 30), (40, 50, 60)


def _scene(start_dir="N"):
    return Scene(
        north=_solid(NORTH),
        south=_solid(SOUTH),
        east=_solid(EAST),
        west=_solid(WEST),
        ceiling=CEILING,
        floor=FLOOR,
        grid=_room(7),
        start_x=3,
        start_y=3,
        start_dir=start_dir,
    )


def test_center_ray_facing_north_hits_top_wall():
    grid = _room(7)
    player = Player.spawn(3, 3, "N")
    ray = cast_ray(grid, player, 50, 100, 100)
    assert ray.map_x == 0
    assert ray.map_y == 3
    assert ray.side is Side.N_S
    assert ray.wall_dir is WallDir.SO
    assert ray.perp_dist == pytest.approx(player.x - 1)


def test_center_ray_facing_east_hits_right_wall():
    grid = _room(7)
    player = Player.spawn(3, 3, "E")
    ray = cast_ray(grid, player, 50, 100, 100)
    assert ray.map_y == len(grid[0]) - 1
    assert ray.map_x == 3
    assert ray.side is Side.E_W
    assert ray.wall_dir is WallDir.EA
    assert ray.perp_dist == pytest.approx(len(grid[0]) - 1 - player.y)


@pytest.mark.parametrize("start_dir", ["N", "S", "E", "W"])
def test_every_column_hits_a_wall_within_bounds(start_dir):
    grid = _room(7)
    player = Player.spawn(2, 4, start_dir)
    height = 120
    for column in range(0, 160, 7):
        ray = cast_ray(grid, player, column, 160, height)
        assert grid[ray.map_x][ray.map_y] == "1"
        assert 0 <= ray.draw_start <= ray.draw_end <= height - 1
        assert 0.0 <= ray.wall_x < 1.0
        assert ray.perp_dist > 0


def test_ray_leaving_the_grid_stops():
    grid = ("000",)
    player = Player(x=0.5, y=0.5, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)
    ray = cast_ray(grid, player, 50, 100, 100)
    assert ray.map_x == -1


def test_frame_put_get_round_trip():
    frame = Frame(4, 3)
    frame.put(3, 2, 0xABCDEF)
    assert frame.get(3, 2) == 0xABCDEF
    assert frame.get(0, 0) == 0


def test_frame_masks_to_32_bits():
    frame = Frame(2, 2)
    frame.put(1, 1, -1)
    assert frame.get(1, 1) == 0xFFFFFFFF


def test_frame_rejects_out_of_bounds():
    frame = Frame(4, 3)
    with pytest.raises(IndexError):
        frame.put(4, 0, 1)
    with pytest.raises(IndexError):
        frame.get(0, -1)


def test_frame_rejects_empty_size():
    with pytest.raises(ValueError):
        Frame(0, 5)


def test_render_fills_ceiling_floor_and_south_face():
    scene = _scene("N")
    frame = Frame(100, 100)
    render_scene(frame, scene, Player.spawn(3, 3, "N"))
    assert frame.get(0, 0) == pack_rgb(CEILING, 0)
    assert frame.get(99, 99) == pack_rgb(FLOOR, 0)
    assert frame.get(50, 50) == SOUTH


def test_render_east_facing_uses_west_texture():
    scene = _scene("E")
    frame = Frame(100, 100)
    render_scene(frame, scene, Player.spawn(3, 3, "E"))
    assert frame.get(50, 50) == WEST


def test_render_west_facing_uses_east_texture():
    scene = _scene("W")
    frame = Frame(100, 100)
    render_scene(frame, scene, Player.spawn(3, 3, "W"))
    assert frame.get(50, 50) == EAST


def test_render_south_facing_uses_north_texture():
    scene = _scene("S")
    frame = Frame(100, 100)
    render_scene(frame, scene, Player.spawn(3, 3, "S"))
    assert frame.get(50, 50) == NORTH