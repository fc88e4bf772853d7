# cubemaze

cubemaze provides the parts of a small first-person maze game that uses
grid raycasting. It has no dependencies outside the standard library.

- `cubemaze.colors`: the named colour table used by XPM files.
- `cubemaze.image`: an in-memory image with 32-bit pixels.
- `cubemaze.xpm`: reads XPM pixmaps into images.
- `cubemaze.grid`: checks the map part of a `.cub` scene.
- `cubemaze.player`: sets the start position, and handles turning and walking.
- `cubemaze.raycast`: finds the wall that each screen column sees.

## Installing

```
pip install .
```

## Modules

### `cubemaze.colors`

`lookup_color(name)` returns the `0xRRGGBB` value of a named colour, or
`None` when the name is unknown. Case is ignored for ASCII letters. The
name `"none"` returns `-1`, which means transparent. The table includes
the numbered shades, such as `"red3"`, and the grey levels `gray0` to
`gray100`.

### `cubemaze.image`

`Image(width, height, endian=0)` holds `width × height` 32-bit pixels.
The `data` field is a `bytearray`, and `size_line` gives the number of
bytes in one row. With `endian` 0, each pixel is stored least significant
byte first. With `endian` 1, it is stored most significant byte first.

- `put_pixel(x, y, color)` and `get_pixel(x, y)` write and read one
  pixel. They raise `IndexError` when the pixel is outside the image.
- `to_rgb_bytes()` returns packed R, G, B bytes, row by row.

### `cubemaze.xpm`

- `load_xpm(path)` reads an XPM file and returns an `Image`.
- `parse_xpm(lines)` does the same from a list of the file's quoted
  strings: the header, then the colour lines, then the pixel rows.
- `strip_comments(text)` replaces `/* */` and `//` comments that are
  outside double quotes with spaces.
- `split_words(text)` splits text on spaces and tabs.
- `text_to_rgb(name, extra)` turns a colour word into a value.
  `#RRGGBB` is read as hex. Anything else is looked up by name: an
  unknown name gives 0, and `None` gives -1.

Transparent pixels are stored as `0xFF000000`. If the data cannot be read,
`XpmError` (a `ValueError`) is raised.

### `cubemaze.grid`

Map rows are plain strings that use `0` (floor), `1` (wall), a space
(outside the map) and one of `N`, `S`, `E`, `W` (the start).

- `has_cub_extension(path)`: checks that the path ends in `.cub`.
- `map_width(rows)`: returns the length of the longest row.
- `pad_map(rows, width)`: turns spaces into void cells (`"3"`) and pads
  every row to `width`.
- `check_letters(rows)` and `check_start_position(rows)`: raise
  `MapError` for a character that is not allowed, or when there is not
  exactly one start cell.
- `is_closed(grid)`: is true when no floor or start cell touches a void
  cell or the edge of the grid.
- `check_close(grid)` and `first_column_ok(grid)`: extra wall checks on
  a padded grid.
- `row_only(char, row)`: is true when the row holds only `char` and
  whitespace.
- `last_line_ok(lines)`: is true when the last non-empty line holds only
  `1` and spaces.

### `cubemaze.player`

- `find_start(grid)` returns `(row, column, facing)`.
- `Player.from_start(row, col, facing)` places the player in the centre
  of that cell.
- `rotate_left()` and `rotate_right()` turn the view by 0.07 radians.
- `move_forward(grid)`, `move_back(grid)`, `move_left(grid)` and
  `move_right(grid)` walk 0.1 cells. Each axis is checked separately, so
  the player slides along walls.

### `cubemaze.raycast`

`cast_ray(player, grid, column, width=1920, height=1000)` returns a
`RayHit`. Its fields are:

- the `Side` of the grid line that was hit (`NO`, `SO`, `WE` or `EA`);
- the wall cell;
- the perpendicular distance `wall_dist`;
- the on-screen `line_height`, `wall_start` and `wall_end`;
- `wall_x`, the fractional position along the wall.

If the ray leaves the grid without hitting a wall, `cast_ray` raises
`ValueError`.

## Example

```python
from cubemaze.grid import check_start_position, is_closed, map_width, pad_map
from cubemaze.player import Player, find_start
from cubemaze.raycast import cast_ray

rows = ["111", "1N1", "111"]
check_start_position(rows)
grid = pad_map(rows, map_width(rows))
assert is_closed(grid)

player = Player.from_start(*find_start(grid))
hit = cast_ray(player, grid, 960)
print(hit.side, hit.wall_dist)   # Side.WE 0.5
```

## What it does not do

The package has no command and no window. It does not read the texture,
floor and ceiling lines of a `.cub` file into a scene. It does not draw
frames, and it has no game loop that handles keyboard input. The modules
above are the building blocks, and a caller has to put them together.

## Tests

```
pip install .[test]
pytest
```