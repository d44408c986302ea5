"""An RGBA pixel canvas with line, circle and polygon rasterisers and 2D transforms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum

from PIL import Image

Point = tuple[int, int]
Color = tuple[int, ...]

WHITE: Color = (255, 255, 255, 255)


class LineAlgorithm(IntEnum):
    """How a segment between two points is rasterised."""

    DDA = 0
    BRESENHAM = 1
    CIRCLE = 2


class ShearAxis(IntEnum):
    """Axis along which a shear moves the points."""

    X = 0
    Y = 1


def _qround(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return high if value > high else (low if value < low else value)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


class Canvas:
    """A fixed-size RGBA raster with the drawing state of one polygon."""

    def __init__(self, width: int = 500, height: int = 500) -> None:
        self.width = 0
        self.height = 0
        self._pixels: bytearray | None = None
        self.polygon_points: list[Point] = []
        self.transformed_points: list[Point] = []
        self.polygon_finished = False
        self.dragging_polygon = False
        self.last_mouse_pos: Point = (0, 0)
        if (width, height) != (0, 0):
            self._allocate(width, height)

    def _allocate(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = bytearray(bytes(WHITE) * (width * height))

    # Image functions

    def set_image(self, image: Image.Image) -> None:
        """Replace the raster with a copy of ``image`` converted to RGBA."""
        if image.width == 0 or image.height == 0:
            raise ValueError("cannot load an empty image")
        rgba = image.convert("RGBA")
        self.width, self.height = rgba.size
        self._pixels = bytearray(rgba.tobytes())

    def to_image(self) -> Image.Image:
        """Return the raster as a new RGBA image."""
        if self._pixels is None:
            raise ValueError("canvas has no image")
        return Image.frombytes("RGBA", (self.width, self.height), bytes(self._pixels))

    def is_empty(self) -> bool:
        return self._pixels is None or (self.width, self.height) == (0, 0)

    def change_size(self, width: int, height: int) -> None:
        """Replace the raster with a white one of the given size; 0x0 leaves it alone."""
        if (width, height) != (0, 0):
            self._allocate(width, height)

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        """Paint one pixel with an (r, g, b) or (r, g, b, a) colour, clamped to 0..255."""
        if len(color) not in (3, 4):
            raise ValueError(f"colour needs 3 or 4 components, got {len(color)}")
        if self._pixels is None or not self.is_inside(x, y):
            return
        r, g, b = color[:3]
        a = color[3] if len(color) == 4 else 255
        start = (y * self.width + x) * 4
        self._pixels[start:start + 4] = bytes(int(_clamp(c, 0, 255)) for c in (r, g, b, a))

    def set_pixel_float(
        self, x: int, y: int, r: float, g: float, b: float, a: float = 1.0
    ) -> None:
        """Paint one pixel with components in 0..1."""
        components = (int(255 * _clamp(c, 0.0, 1.0) + 0.5) for c in (r, g, b, a))
        self.set_pixel(x, y, tuple(components))

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the (r, g, b, a) colour at a point."""
        if self._pixels is None or not self.is_inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        start = (y * self.width + x) * 4
        return tuple(self._pixels[start:start + 4])

    def is_inside(self, x: int, y: int) -> bool:
        return self._pixels is not None and 0 <= x < self.width and 0 <= y < self.height

    # Drawing

    def draw_line(
        self, start: Point, end: Point, color: Color, algorithm: int = LineAlgorithm.DDA
    ) -> None:
        """Draw a segment, or a circle through ``end`` around ``start``."""
        if self._pixels is None:
            return
        if algorithm == LineAlgorithm.DDA:
            self.draw_line_dda(start, end, color)
        elif algorithm == LineAlgorithm.BRESENHAM:
            self.draw_line_bresenham(start, end, color)
        else:
            self.draw_line_circle(start, end, color)

    def clear(self) -> None:
        """Fill with white and forget the polygon."""
        if self._pixels is None:
            return
        self._pixels[:] = bytes(WHITE) * (self.width * self.height)
        self.polygon_points.clear()
        self.polygon_finished = False

    def draw_line_dda(self, start: Point, end: Point, color: Color) -> None:
        if self._pixels is None:
            return
        x0, y0 = start
        x1, y1 = end
        dx = x1 - x0
        dy = y1 - y0

        if dx == 0 and dy == 0:
            self.set_pixel(x0, y0, color)
            return
        if dx == 0:
            step = 1 if y1 >= y0 else -1
            for y in range(y0, y1 + step, step):
                self.set_pixel(x0, y, color)
            return
        if dy == 0:
            step = 1 if x1 >= x0 else -1
            for x in range(x0, x1 + step, step):
                self.set_pixel(x, y0, color)
            return

        slope = dy / dx
        x, y = float(x0), float(y0)
        if abs(slope) <= 1.0:
            step = 1 if x1 >= x0 else -1
            while True:
                xi, yi = int(x + 0.5), int(y + 0.5)
                self.set_pixel(xi, yi, color)
                if xi == x1:
                    break
                x += step
                y += slope * step
        else:
            step = 1 if y1 >= y0 else -1
            inverse = dx / dy
            while True:
                xi, yi = int(x + 0.5), int(y + 0.5)
                self.set_pixel(xi, yi, color)
                if yi == y1:
                    break
                y += step
                x += inverse * step

    def draw_line_bresenham(self, start: Point, end: Point, color: Color) -> None:
        x, y = start
        x2, y2 = end
        dx = x2 - x
        dy = y2 - y
        step_x = 1 if x2 >= x else -1
        step_y = 1 if y2 >= y else -1
        adx, ady = abs(dx), abs(dy)

        if adx >= ady:
            p = 2 * ady - adx
            k1 = 2 * ady
            k2 = 2 * (ady - adx)
            for _ in range(adx + 1):
                self.set_pixel(x, y, color)
                x += step_x
                if p > 0:
                    y += step_y
                    p += k2
                else:
                    p += k1
        else:
            p = 2 * adx - ady
            k1 = 2 * adx
            k2 = 2 * (adx - ady)
            for _ in range(ady + 1):
                self.set_pixel(x, y, color)
                y += step_y
                if p > 0:
                    x += step_x
                    p += k2
                else:
                    p += k1

    def draw_line_circle(self, center: Point, rim: Point, color: Color) -> None:
        """Midpoint circle around ``center`` passing near ``rim``."""
        xc, yc = center
        xr, yr = rim
        r = int(math.sqrt((xr - xc) ** 2 + (yr - yc) ** 2))
        two_x = 3
        two_y = 2 * r - 2
        x, y = 0, r
        p = 1 - r
        while x <= y:
            self.draw_circle_points(xc, yc, x, y, color)
            if p > 0:
                p -= two_y
                y -= 1
                two_y -= 2
            p += two_x
            two_x += 2
            x += 1

    def draw_circle_points(self, xc: int, yc: int, x: int, y: int, color: Color) -> None:
        """Paint the eight symmetric points of a circle octant."""
        for px, py in (
            (xc + x, yc + y), (xc - x, yc + y), (xc + x, yc - y), (xc - x, yc - y),
            (xc + y, yc + x), (xc - y, yc + x), (xc + y, yc - x), (xc - y, yc - x),
        ):
            self.set_pixel(px, py, color)

    def draw_polygon(
        self, points: Sequence[Point], color: Color, algorithm: int, closed: bool = True
    ) -> None:
        """Draw a polyline, closing it when asked; the circle algorithm uses the first two points."""
        if self._pixels is None or len(points) < 2:
            return
        start = points[0]
        if algorithm != LineAlgorithm.CIRCLE:
            for end in points[1:]:
                if algorithm == LineAlgorithm.DDA:
                    self.draw_line_dda(start, end, color)
                elif algorithm == LineAlgorithm.BRESENHAM:
                    self.draw_line_bresenham(start, end, color)
                start = end
        else:
            self.draw_line_circle(points[0], points[1], color)
        if closed and len(points) >= 3:
            if algorithm == LineAlgorithm.DDA:
                self.draw_line_dda(start, points[0], color)
            elif algorithm == LineAlgorithm.BRESENHAM:
                self.draw_line_bresenham(start, points[0], color)

    # Transforms

    def move_polygon(self, dx: int, dy: int) -> None:
        self.polygon_points = [(x + dx, y + dy) for x, y in self.polygon_points]

    def rotate(self, points: Sequence[Point], angle: float) -> list[Point]:
        """Rotate ``points`` by ``angle`` degrees around the first polygon point."""
        if not points:
            return list(points)
        if not self.polygon_points:
            raise ValueError("rotation needs a polygon to take its centre from")
        rad = math.radians(angle)
        cos_a, sin_a = math.cos(rad), math.sin(rad)
        cx, cy = self.polygon_points[0]
        rotated = []
        for px, py in points:
            x, y = px - cx, py - cy
            rotated.append(
                (_qround(x * cos_a - y * sin_a + cx), _qround(x * sin_a + y * cos_a + cy))
            )
        return rotated

    def scale(self, points: Sequence[Point], sx: float, sy: float) -> list[Point]:
        """Scale the polygon around its centroid.

        With only one factor non-zero the polygon itself is changed along that axis
        as well; with both zero nothing is returned.
        """
        if not points:
            return list(points)
        if not self.polygon_points:
            return []
        count = len(self.polygon_points)
        cx = sum(x for x, _ in self.polygon_points) / count
        cy = sum(y for _, y in self.polygon_points) / count

        if sx != 0 and sy != 0:
            return [
                (_qround(cx + (x - cx) * sx), _qround(cy + (y - cy) * sy))
                for x, y in self.polygon_points
            ]
        if sx != 0:
            self.polygon_points = [(int(cx + (x - cx) * sx), y) for x, y in self.polygon_points]
            return list(self.polygon_points)
        if sy != 0:
            self.polygon_points = [(x, int(cy + (y - cy) * sy)) for x, y in self.polygon_points]
            return list(self.polygon_points)
        return []

    def shear(self, points: Sequence[Point], factor: float, axis: int) -> list[Point]:
        """Shear the polygon along the given axis."""
        if not points:
            return list(points)
        if axis == ShearAxis.X:
            return [(_qround(x + y * factor), y) for x, y in self.polygon_points]
        if axis == ShearAxis.Y:
            return [(x, int(y + x * factor)) for x, y in self.polygon_points]
        return []

    def reflect(self, start: Point, end: Point) -> None:
        """Reflect the polygon in place about the axis given by two points."""
        a = end[0] - start[0]
        b = -(end[1] - start[1])
        denominator = a * a + b * b
        if denominator == 0:
            raise ValueError("reflection axis needs two distinct points")
        c = -a * start[0] - b * start[1]
        reflected = []
        for x, y in self.polygon_points:
            q = _trunc_div(a * x + b * y + c, denominator)
            reflected.append((x - 2 * a * q, x - 2 * b * q))
        self.polygon_points = reflected