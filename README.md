# cubecaster

A small first-person ray-casting renderer for grid maps. Each frame it
draws shaded wall strips in a pseudo-3D view, overlays a minimap with the
player and the cast rays, and lets you walk around with the keyboard in a
600 by 600 pygame window.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cubecaster path/to/level.cub
```

Run without a map argument, the command prints a usage message and exits
with status 1. A map that cannot be read, or that has no start mark,
prints an error and exits with status 1. Otherwise it prints the start
position (row and column) and opens the window.

Controls:

- `w` / `s` walk forward and backward
- `a` / `d` turn left and right
- close the window to quit

The player does not step into a wall tile; movement along each axis is
checked on its own, so you slide along walls.

## Map files

A map is a block of text rows. `1` is a wall, `0` is open floor, a space is
outside the map, and `P` marks where the player starts (if several rows
hold a `P`, the last one wins). For example:

```
1111111
1000001
10P0001
1000001
1111111
```

Tiles are 64 pixels wide. Blank lines in the file are dropped from the
grid but still count towards the map's height.

## Using it as a library

- `cubecaster.mapfile`
  - `load_map(path)` / `read_map(lines)` return a `GameMap` with `grid`,
    `width` (longest row), `height` and `start` as `(row, column)`.
  - `load_description(path)` checks that the name ends in `.cub`, then
    reads a scene description: six header lines (`NO`, `SO`, `WE`, `EA`
    texture paths and `F`, `C` colours written as `r,g,b`) followed by the
    map. It returns a `SceneDescription` with `textures`, `floor`,
    `ceiling`, `grid`, `width` and `height`. `parse_description(lines)`
    does the same for lines already in memory.
  - `check_file_name`, `parse_int`, `split_fields`, `find_longest_row` and
    `find_start` are the helpers these use.
  - Bad input raises `MapError`.
- `cubecaster.floodfill`
  - `explore(grid, row, col)` returns the set of `(row, column)` cells
    reachable from the start, without changing the grid. Walls (`1`) and
    spaces block the search, and it never enters the outermost rows and
    columns.
  - `flood_fill(grid, row, col, on_step=None)` runs the same search on a
    mutable list of rows, marking queued cells `5` and visited cells `6`,
    and calls `on_step(grid)` after each cell. It returns the visited set.
  - A start cell outside the map raises `ValueError`.
- `cubecaster.raycast`
  - `Player` holds position, heading and input; `Player.from_start(row,
    col)` centres it in a tile, `key_press` / `key_release` take key
    codes, and `move(grid)` applies one frame of turning and walking.
  - `cast_rays(player, grid, on_hit=None)` casts 60 rays across a 60°
    field of view and returns a list of `Ray`; `on_hit` receives the
    minimap line `(x, y, x1, y1)` for each hit.
  - `render_walls(frame, player, rays)` draws one distance-shaded strip
    per ray into a frame buffer.
  - `norm_angle`, `calc_dist` and `map_is_open` are the geometry helpers.
- `cubecaster.framebuffer.FrameBuffer(width, height)` is a flat list of
  packed colour pixels with `put_pixel`, `get_pixel`, `clear`,
  `fill_rect`, `fill_tile`, `draw_line`, `draw_circle` and `draw_map`.
- `cubecaster.colors` has named colour constants and `create_trgb`,
  `darken_color` and `wall_shade_color` for packed `0xTTRRGGBB` values.
- `cubecaster.app.Game(game_map)` ties these together; `render()` draws a
  frame and `update()` renders and then moves the player.

## What it does not do

- The `cubecaster` command reads a plain map with `load_map`; it does not
  read the header lines of a scene description. Texture paths and floor
  and ceiling colours can be parsed with `load_description`, but nothing
  renders them: walls are drawn in one violet colour, darkened with
  distance, on a black background.
- The map is only looked at within the 600 by 600 pixel window area, and
  rows past the eleventh count as walls to the ray caster, so large maps
  are not supported.
- There are no sprites, doors, sound or mouse controls.