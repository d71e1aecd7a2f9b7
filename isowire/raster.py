"""A pixel canvas with clipped pixel writes and straight-line drawing."""

from __future__ import annotations

from collections.abc import Iterator

from isowire.projection import Point2D

LINE_COLOR = 0x00FF00
BACKGROUND = 0x000000


def line_points(start: Point2D, end: Point2D) -> Iterator[Point2D]:
    """Yield the points of the line from start toward end.

    The start point is included and the end point is not, so a line whose
    ends coincide yields nothing.
    """
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    sx = 1 if start.x < end.x else -1
    sy = 1 if start.y < end.y else -1
    err = dx - dy
    x, y = start.x, start.y
    while (x, y) != (end.x, end.y):
        yield Point2D(x, y)
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


class Canvas:
    """A width by height grid of integer colours, row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self.pixels: list[int] = [BACKGROUND] * (width * height)

    def __repr__(self) -> str:
        return f"Canvas({self.width}, {self.height})"

    def _inside(self, point: Point2D) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def put_pixel(self, point: Point2D, color: int) -> None:
        """Set one pixel; points outside the canvas are ignored."""
        if self._inside(point):
            self.pixels[point.y * self.width + point.x] = color

    def get_pixel(self, point: Point2D) -> int:
        """Return the colour of one pixel."""
        if not self._inside(point):
            raise IndexError(f"{point} lies outside a {self.width}x{self.height} canvas")
        return self.pixels[point.y * self.width + point.x]

    def draw_line(self, start: Point2D, end: Point2D, color: int = LINE_COLOR) -> None:
        """Draw the line from start toward end, end point excluded."""
        for point in line_points(start, end):
            self.put_pixel(point, color)

    def clear(self) -> None:
        """Reset every pixel to the background colour."""
        self.pixels = [BACKGROUND] * (self.width * self.height)