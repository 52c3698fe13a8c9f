# raycube

raycube loads a `.cub` scene file and lets you walk through the maze it
describes in first person. Walls are drawn with a raycaster, and a minimap
in the top-left corner of the window shows the walls, the floor and where
you are.

## Installing

```
pip install .
```

The window and input come from pygame. Textures are read with Pillow.

## Running

```
raycube maps/level.cub
```

Give exactly one argument: the path of a scene file whose name ends in
`.cub`. If the argument is missing, or the file cannot be read, has the
wrong extension, has a bad header or a bad map, raycube writes `Error` and
a reason (`Invalid file`, `Invalid file extension`, `Invalid file header`,
`Invalid map`) to standard error and exits with status 1.

The window is 800 by 500 pixels.

## Controls

| Input            | Action                              |
|------------------|-------------------------------------|
| `W` / `S`        | move forward / back                 |
| `A` / `D`        | strafe                              |
| Left / Right     | turn                                |
| Mouse motion     | turn, faster once the pointer is past the first seventh of the window |
| `Esc`, close     | quit                                |

You can only step into open floor (`0`) cells. Each axis of a step is
checked on its own, so walking into a wall at an angle slides along it.

## Scene files

The file starts with a header of six entries. They may come in any order,
and blank lines may sit between them:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE` and `EA` are each followed by exactly one path to a wall
  texture. Any image Pillow can open will do. Texture rows are wrapped with
  a bit mask, so textures whose height is a power of two look right.
* `F` gives the floor colour and `C` the ceiling colour as `R,G,B`. Each
  component has at most three digits; spaces may come before a component
  and after the last one.

Each entry may appear only once, and no other lines may appear in the
header.

The map comes after the header:

```
        1111111111111
        1000000000001
111111111011000001101
100000000000000000001
1111111110110000011N1
        1111111111111
```

The map may hold only these characters:

* `1` for a wall.
* `0` for open floor.
* One of `N`, `S`, `E` or `W` for the start cell and the direction faced.
* `2`, which is accepted but cannot be walked into and is not drawn as a wall.
* Spaces for emptiness.

Every space-separated run of cells must start and end with a wall, both
along the rows and down the columns. There must be exactly one start
position. The map ends at the first line after it that holds no `1`.

## Using it as a library

The modules work without opening a window:

* `raycube.scene.load_scene(path, loader)` reads and checks a scene file
  and returns a `Scene`, or raises `SceneError`. `loader` turns a texture
  path into a `Texture` and defaults to `raycube.textures.load_texture`.
  `parse_header`, `parse_map` and `parse_color` check the parts on their own.
* `raycube.textures.Texture` holds packed colours; `pixel(x, y)` returns 0
  outside the image. `pack_rgb(color, alpha)` packs a colour as `0xAARRGGBB`.
* `raycube.player.Player.spawn(x, y, start_dir)` creates a player on a cell.
  `move(grid, key, speed)` walks for the `W`, `A`, `S` and `D` keys of
  `Key`, and `rotate(angle)` turns. `Controller` applies key presses and
  mouse motion to a player.
* `raycube.raycast.cast_ray(grid, player, column, width, height)` traces one
  screen column and returns a `Ray`.
* `raycube.raycast.render_scene(frame, scene, player)` draws ceiling, floor
  and textured walls into a `Frame`.
* `raycube.minimap.draw_minimap(frame, grid, player)` draws the overview map
  onto a frame and returns the cell size it used.
* `raycube.app.Game` ties these together; `redraw()` returns the rendered
  frame, and `run(scene)` opens the window.

## What it does not do

raycube is a maze walker only: there are no enemies, weapons, items, doors,
sound or saved games, and the window size is fixed.