# minirt

Building blocks of a small ray tracer, in pure Python with no third-party
dependencies.

## Modules

- `minirt.vector`: the immutable `Vec3` dataclass, used both for positions and
  directions. It has `dot`, `cross`, `magnitude` and `normalized` (which raises
  `ZeroDivisionError` for the zero vector), and supports `+`, `-`, unary `-`,
  multiplication by a number on either side and division by a number.
  `signum(value)` returns -1.0, 0.0 or 1.0.
- `minirt.quaternion`: the `Quaternion` dataclass (`w`, `x`, `y`, `z`) with
  `normalized`, `conjugate`, the Hamilton product as `*`, and `rotate(vec)`.
  `rotation_to_negative_z(direction)` returns the rotation that turns a unit
  direction onto (0, 0, -1); it raises `ZeroDivisionError` when the direction
  points exactly along +Z.
- `minirt.text`: `split(text, sep)` splits on a separator and on newlines and
  drops empty words; `strncmp(first, second, n)` compares at most `n`
  characters and returns the difference of the first mismatching character
  codes. `LineReader(stream, buffer_size=1)` reads a text or binary stream in
  chunks of `buffer_size` and returns one line at a time from `read_line()`
  (newline kept, `None` at the end); it is also iterable. A `buffer_size` below
  1 raises `ValueError`.
- `minirt.scene`: the scene model: `Scene` holding an `Ambient`, a `Camera`, a
  `Light` and lists of `Sphere`, `Plane` and `Cylinder`, plus `Color` (channels
  checked to be in 0..255). Elements are addressed by `Target` and an index:
  `get_color`/`set_color`, `get_position`/`set_position` and
  `get_direction`/`set_direction` raise `ValueError` for an element that has no
  such property and `IndexError` for a missing object. `Scene.copy()` returns
  a deep copy.
- `minirt.menu`: `Menu(scene, write=None, clear=None)`, a state machine that
  edits the given scene in place from X11 keysyms passed to `handle_key`.
  `select(target, index)` opens the main menu for an element; from there the
  colour, position, direction and value (FOV, brightness, ambient ratio,
  diameter, height) menus are reached with letter keys, values are stepped
  with `Key.UP`/`Key.DOWN`, applied with `Key.ENTER` and left with
  `Key.ESCAPE`. The current menu is in `menu.mode` (a `Mode`). Output goes to
  `write` (standard output by default); `clear` defaults to running the
  `clear` command.
- `minirt.colornames`: `find_color(name)` looks up an X11 colour name without
  regard to case and returns 0xRRGGBB, -1 for `"none"`, or `None` if unknown.
- `minirt.pixel`: `VisualFormat` describes where the channels sit in a pixel;
  `VisualFormat.from_masks(depth, red_mask, green_mask, blue_mask)` builds one
  from channel masks and `convert(color)` packs a 0xRRGGBB colour (unchanged at
  depth 24 or more). `gradient_color(x, y, width, height, kind=1)` gives the
  colour of a test gradient.
- `minirt.xpm`: an XPM reader. `read_xpm_file(path)`, `parse_xpm_text(text)`
  and `parse_xpm_lines(lines)` return an `XpmImage` (`width`, `height`,
  `pixels`, and `pixel(x, y)`); malformed data raises `XpmError`. Colours may
  be `#hex` values or colour names; `None` pixels become `0xFF000000`.

## Installing

```
pip install .
```

## Examples

```python
from minirt.vector import Vec3
from minirt.quaternion import rotation_to_negative_z

forward = Vec3(1.0, 0.0, 0.0)
q = rotation_to_negative_z(forward)
print(q.rotate(forward))          # approximately Vec3(0, 0, -1)
```

```python
from minirt.xpm import parse_xpm_lines

image = parse_xpm_lines([
    "2 1 2 1",
    "a c #ff0000",
    "b c blue",
    "ab",
])
print(hex(image.pixel(0, 0)), hex(image.pixel(1, 0)))   # 0xff0000 0xff
```

```python
from minirt.colornames import find_color

print(hex(find_color("Dodger Blue")))   # 0x1e90ff
```

## What it does not do

The package does not render images: it casts no rays, computes no
intersections or shading, and opens no window. It has no reader for scene
files and no command to run; a `Scene` is built in code, and the `Menu` only
reacts to keysyms that the caller passes in.

## Running the tests

```
pip install .[test]
pytest
```