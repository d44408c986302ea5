"""Editing state that turns mouse input and tool commands into drawing on a canvas."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from PIL import Image

from .canvas import Canvas, Color, LineAlgorithm, Point

BLUE: Color = (0, 0, 255, 255)


class Tool(Enum):
    """The active drawing tool."""

    POLYGON = "polygon"
    MOVE = "move"


class MouseButton(Enum):
    """Mouse buttons the editor reacts to."""

    LEFT = 1
    RIGHT = 3


class Editor:
    """Builds, drags and transforms a polygon on a :class:`Canvas`."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.color: Color = BLUE
        self.tool = Tool.POLYGON
        self.line_algorithm = LineAlgorithm.DDA

    # Mouse input

    def press(self, x: int, y: int, button: MouseButton) -> None:
        """Handle a mouse button press at a canvas point."""
        point = (x, y)
        if self.tool is Tool.POLYGON:
            if button is MouseButton.LEFT:
                self._add_vertex(point)
            elif button is MouseButton.RIGHT:
                self._finish_polygon()
        elif self.tool is Tool.MOVE and self.canvas.polygon_finished:
            if button is MouseButton.LEFT:
                self.canvas.dragging_polygon = True
                self.canvas.last_mouse_pos = point
            elif button is MouseButton.RIGHT:
                self.canvas.dragging_polygon = False
                self.canvas.last_mouse_pos = point

    def move(self, x: int, y: int) -> None:
        """Handle mouse movement; drags the polygon while dragging is on."""
        if not self.canvas.dragging_polygon:
            return
        last_x, last_y = self.canvas.last_mouse_pos
        self.canvas.move_polygon(x - last_x, y - last_y)
        self.canvas.last_mouse_pos = (x, y)
        self.redraw()

    def _add_vertex(self, point: Point) -> None:
        canvas = self.canvas
        if canvas.polygon_finished:
            canvas.clear()
            canvas.polygon_finished = False
        canvas.polygon_points.append(point)
        canvas.set_pixel(point[0], point[1], self.color)
        points = canvas.polygon_points
        if len(points) >= 2:
            canvas.draw_line(points[-2], points[-1], self.color, self.line_algorithm)
            if self.line_algorithm == LineAlgorithm.CIRCLE:
                canvas.polygon_finished = True

    def _finish_polygon(self) -> None:
        canvas = self.canvas
        points = canvas.polygon_points
        if len(points) > 2:
            canvas.draw_polygon(points, self.color, self.line_algorithm, True)
        elif len(points) == 2:
            canvas.draw_line(points[0], points[1], self.color, self.line_algorithm)
        canvas.polygon_finished = True

    # Transforms

    def rotate(self, angle: float) -> list[Point]:
        """Rotate the transformed polygon by ``angle`` degrees and draw it."""
        canvas = self.canvas
        if not canvas.transformed_points:
            return []
        canvas.transformed_points = canvas.rotate(canvas.transformed_points, angle)
        canvas.draw_polygon(canvas.transformed_points, self.color, self.line_algorithm)
        return list(canvas.transformed_points)

    def scale(self, sx: float, sy: float) -> list[Point]:
        """Scale the transformed polygon around the polygon's centroid."""
        canvas = self.canvas
        if not canvas.transformed_points:
            return []
        canvas.transformed_points = canvas.scale(canvas.transformed_points, sx, sy)
        return list(canvas.transformed_points)

    def shear(self, factor: float, axis: int) -> list[Point]:
        """Shear the transformed polygon along ``axis``."""
        canvas = self.canvas
        if not canvas.transformed_points:
            return []
        canvas.transformed_points = canvas.shear(canvas.transformed_points, factor, axis)
        return list(canvas.transformed_points)

    def redraw(self) -> None:
        """Wipe the canvas and draw the transformed polygon."""
        self.canvas.clear()
        # Clearing leaves the polygon unfinished, which selects the DDA rasteriser.
        self.canvas.draw_polygon(
            self.canvas.transformed_points, self.color, LineAlgorithm.DDA
        )

    def clear(self) -> None:
        self.canvas.clear()

    # Files

    def open_image(self, path: str | Path) -> None:
        """Load an image file onto the canvas."""
        with Image.open(path) as image:
            image.load()
            self.canvas.set_image(image)

    def save_image(self, path: str | Path) -> None:
        """Save the canvas; the format follows the file extension."""
        self.canvas.to_image().save(path)