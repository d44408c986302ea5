# rasterpad

rasterpad is a small raster drawing pad. It draws lines, circles and polygons
pixel by pixel on an RGBA canvas, using one of three rasterisers
(`rasterpad.canvas.LineAlgorithm`):

- `DDA` – digital differential analyser
- `BRESENHAM` – integer Bresenham
- `CIRCLE` – midpoint circle; the first point is the centre and the distance
  to the second point (truncated to an integer) is the radius

Polygons can be dragged, rotated, scaled, sheared and reflected. The canvas
can be loaded from an image file and saved to one; Pillow handles the file
formats.

## Installing

```
pip install .
```

The graphical front end uses Tk, so the Python installation needs `tkinter`.

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running the application

```
rasterpad
rasterpad --width 800 --height 600
```

This opens a window with a white canvas (500×500 by default; `--width` and
`--height` must be positive). The left panel holds:

- a Polygon / Move tool choice,
- the line algorithm (DDA, Bresenham, Circle),
- a colour button (blue to start with),
- rotation, scale and shear controls.

Mouse input:

- **Polygon tool.** A left click adds a vertex and draws a segment from the
  previous vertex. A right click finishes the polygon, closing it when it has
  three or more vertices. With the Circle algorithm the second click draws the
  circle and finishes it. A left click after a finished shape wipes the canvas
  and starts a new one.
- **Move tool.** Once a shape is finished, a left click starts dragging and a
  right click stops it. While dragging, the polygon's vertices are shifted with
  the mouse, the canvas is wiped, and the canvas's transformed points are drawn
  with DDA.

The File menu has Open, Save as (format from the file extension), Clear and
Exit; Exit and closing the window ask for confirmation.

## Using the library

```python
from rasterpad.canvas import Canvas, LineAlgorithm, ShearAxis
from rasterpad.editor import Editor, MouseButton, Tool

canvas = Canvas(200, 200)
canvas.draw_line((10, 10), (150, 80), (0, 0, 255, 255), LineAlgorithm.BRESENHAM)
canvas.draw_polygon([(20, 20), (120, 30), (60, 140)], (255, 0, 0, 255),
                    LineAlgorithm.DDA, True)
canvas.to_image().save("drawing.png")

editor = Editor(canvas)
editor.press(10, 10, MouseButton.LEFT)
editor.press(90, 10, MouseButton.LEFT)
editor.press(50, 80, MouseButton.LEFT)
editor.press(50, 80, MouseButton.RIGHT)
editor.save_image("polygon.png")
```

### `Canvas`

- `set_pixel(x, y, color)` takes an `(r, g, b)` or `(r, g, b, a)` tuple,
  clamps components to 0..255 and ignores points outside the canvas;
  `set_pixel_float` takes components in 0..1. `get_pixel` raises `IndexError`
  outside the canvas.
- `set_image(image)` copies a Pillow image (converted to RGBA); `to_image()`
  returns a new Pillow image. `change_size(w, h)` replaces the raster with a
  white one; `clear()` fills it with white and forgets the polygon.
- The polygon being edited is kept in `polygon_points`; `transformed_points`
  holds the points the transforms work on.
- `rotate(points, angle)` returns `points` rotated by `angle` degrees about the
  first vertex of `polygon_points` (raises `ValueError` if there is none).
- `scale(points, sx, sy)` and `shear(points, factor, axis)` compute their
  result from `polygon_points`, not from `points` (which only has to be
  non-empty). `scale` works about the polygon's centroid; when exactly one
  factor is zero it scales along the other axis only and also writes the
  result back into `polygon_points`; when both are zero it returns an empty
  list. `shear` uses `ShearAxis.X` or `ShearAxis.Y`.
- `reflect(start, end)` changes `polygon_points` in place using the axis
  through two points; it raises `ValueError` if the points coincide.
- `move_polygon(dx, dy)` shifts `polygon_points`.

### `Editor`

`Editor.rotate`, `Editor.scale` and `Editor.shear` apply the canvas transform
to `canvas.transformed_points`, store the result there and return it; they do
nothing and return `[]` while that list is empty. `rotate` also draws the
result. `redraw()` wipes the canvas and draws `transformed_points` with DDA.
`open_image` and `save_image` read and write files through Pillow.

### `rasterpad.app`

`color_to_hex(color)` turns an RGB(A) tuple into a `#rrggbb` string.
`ViewerApp(root, editor)` builds the Tk window; `main(argv=None)` is the
`rasterpad` command.

## What it does not do

- Nothing fills `transformed_points` from the drawn polygon; the rotate, scale
  and shear buttons act only once that list has been set through the library.
- The last folders used in the open and save dialogs are remembered only while
  the window is open.
- There is no zoom, undo, or polygon filling.