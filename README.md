# cubed

Reads and checks `.cub` scene files: the description of a small maze for a
first-person raycasting game. It comes with the small helpers it is built on:
C-style string functions, a buffered line reader and a singly linked list.
It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Reading a scene

```python
from cubed.parsing import ParseError, parse_scene

try:
    scene = parse_scene("maps/level.cub")
except ParseError as err:
    print(f"Error\n{err}")
else:
    print(scene.spawn_x, scene.spawn_y, scene.floor_rgb)
```

`parse_scene(filepath)` returns a `SceneConfig` with these fields:

| Field | Meaning |
| --- | --- |
| `grid` | the map rows, as strings |
| `floor_rgb`, `ceiling_rgb` | colours as `(r, g, b)` tuples |
| `north`, `south`, `west`, `east` | wall texture paths |
| `grid_width`, `grid_height` | length of the longest row, number of rows |
| `spawn_x`, `spawn_y` | column and row of the player marker |

If something is wrong, `ParseError` is raised. Its message gives the detail,
for example `Map not closed` or `Duplicate texture identifier`.

`parse_scene_lines(lines)` does the same work on an iterable of lines, each
with its trailing newline, so you don't need a file.

### The file format

The path must end in `.cub`. The first six lines that are not blank are
configuration entries. Each is trimmed and holds exactly two space-separated
tokens:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name wall textures. The file must exist, and each
  direction may appear only once.
- `F` sets the floor colour and `C` sets the ceiling colour. Each appears only
  once. A colour is three decimal components from 0 to 255, separated by commas.
- Any other identifier is an error.

Everything after those six entries is the map. A blank line inside the map is
an error. The map uses these characters:

| Character | Meaning |
| --- | --- |
| `1` | wall |
| `0` | floor |
| space | void |
| `N`, `S`, `E`, `W` | player start |
| `D` | door |

`validate_map(grid)` checks the map and returns the player's `(col, row)`:

- the top row holds only walls and spaces;
- on every row except the first and the last, no floor or player cell has a
  space directly above, below, left or right of it;
- there is exactly one player marker.

`check_doors(grid)` runs as part of that check and returns the number of
doors. A door may not be on the first or last row. It needs a wall on its
left and on its right, and floor or the player above and below it.

`parse_color(text)` and `is_player(char)` are available on their own too.

## Helpers

- `cubed.text` has character tests and conversions (`is_alpha`, `is_digit`,
  `to_upper`, …), `atoi` with 32-bit wrap-around, `itoa`, and the search and
  compare functions `find_char`, `rfind_char`, `strncmp` and `strnstr`. These
  return indices or `None`. There are also `strmapi` and `striteri`.
- `cubed.strops` has `split` (drops empty pieces), `join`, `strtrim`, `substr`,
  and the bounded copies `strlcpy` and `strlcat`. These two return the text
  together with the length the full result would have had.
- `cubed.linereader.LineReader(stream, buffer_size=42)` reads a text or binary
  stream in fixed-size chunks and yields lines that keep their newlines.
- `cubed.linkedlist.LinkedList` is a singly linked list of `Node`s, with
  `push_front`, `push_back`, `last`, `for_each`, `map`, `clear`, `len()` and
  iteration.

## What this package does not do

This package parses and validates scenes only. It does not open a window,
cast rays, draw walls, sprites or a minimap, or handle keyboard and mouse
input. It also installs no command to run.

## Tests

```
pip install .[test]
pytest
```