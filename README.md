# isowire

A small viewer that draws a height map as an isometric wireframe.

A map file is plain text: each line is a row of the grid and each
space-separated number on it is the height of one point. For example:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Heights are read leniently: leading blanks and one sign are accepted, reading
stops at the first non-digit, and an entry without digits counts as 0. The
number of columns is taken from the last row of the file.

Every point is joined to its right-hand neighbour and to the point one row
below, projected with a 30° isometric projection and drawn in green on black.
The grid spacing shrinks from 50 pixels down to a minimum of 5 until the
drawing plus its margins fits a 1280×720 window; the window is clamped to that
size and the picture is centred in it.

## Installing

```
pip install .
```

The window is drawn with pygame.

## Running

```
isowire path/to/map.fdf
```

The window is titled `isowire`. Press Escape, or close the window, to quit.
The command expects exactly one argument and exits with status 1 otherwise.

## Using it as a library

The pieces behind the viewer can be used on their own:

- `isowire.mapfile`: `read_rows(path)` splits a map file into rows of entries,
  `measure(rows)` returns a `MapSize` (`size`, `columns`, `rows`),
  `parse_rows(rows)` gives the `Point3D` values, and `load_map(path)` returns a
  `HeightMap` holding both.
- `isowire.projection`: `Projection(spacing, offset_x, offset_y)` with
  `project` and `project_all` turns `Point3D` values into `Point2D` values;
  `bounds(points, projection)` gives the projected extremes and
  `fit_window(points)` returns a `Layout` (`width`, `height`, `projection`).
- `isowire.raster`: `line_points(start, end)` yields the pixels of a line,
  start included and end excluded; `Canvas(width, height)` is an in-memory
  grid of integer colours with `put_pixel` (points outside are ignored),
  `get_pixel`, `draw_line` and `clear`.
- `isowire.app`: `wire_edges(count, columns)` yields the pairs of point
  indices that make up the wireframe, `render(canvas, points, columns)` draws
  them, `build_scene(path)` returns a `Scene` with the map, its layout and its
  projected points, and `main(argv)` runs the viewer.
- `isowire.lines.LineReader(stream, buffer_size=42)` reads a text or binary
  stream line by line with `read_line()` or by iteration, keeping newlines.
- `isowire.linked.LinkedList` is a singly linked list of `Node` values with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.
- `isowire.ascii`, `isowire.strings`, `isowire.memory` and `isowire.output`
  hold small helpers for character tests, integer text conversion
  (`parse_int`, `format_int`), bounded string operations, byte buffers and
  writing to text streams.

## What it does not do

The viewer shows one fixed picture. It has no zoom, rotation, panning or
change of projection, does not colour points by height, and does not check
that the rows of a map have the same length.

## Tests

```
pip install ".[test]"
pytest
```