"""Isometric projection of map points and fitting of the map into a window."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from isowire.mapfile import Point3D

DEFAULT_SPACING = 50
MIN_SPACING = 5
MAX_WIDTH = 1280
MAX_HEIGHT = 720

_ANGLE = 30 * (math.pi / 180)
_BOUND_START = 1_000_000


@dataclass(frozen=True)
class Point2D:
    """A point on screen."""

    x: int
    y: int


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class Projection:
    """Isometric projection with a grid spacing and a screen offset."""

    spacing: int = DEFAULT_SPACING
    offset_x: int = 0
    offset_y: int = 0

    def project(self, point: Point3D) -> Point2D:
        """Project a map point onto the screen, truncating toward zero."""
        s = self.spacing
        iso_x = (point.x * s - point.y * s) * math.cos(_ANGLE)
        iso_y = (point.x * s + point.y * s) * math.sin(_ANGLE) - point.z * _trunc_div(s, 5)
        return Point2D(int(iso_x + self.offset_x), int(iso_y + self.offset_y))

    def project_all(self, points: Iterable[Point3D]) -> list[Point2D]:
        """Project every point, keeping their order."""
        return [self.project(point) for point in points]


@dataclass(frozen=True)
class Layout:
    """Window size and the projection that centres the map in it."""

    width: int
    height: int
    projection: Projection


def bounds(points: Iterable[Point3D], projection: Projection) -> tuple[int, int, int, int]:
    """Return (min_x, min_y, max_x, max_y) of the projected points.

    The extremes start from one million and minus one million, so an empty
    input yields those values.
    """
    min_x = min_y = _BOUND_START
    max_x = max_y = -_BOUND_START
    for screen in map(projection.project, points):
        min_x = min(min_x, screen.x)
        max_x = max(max_x, screen.x)
        min_y = min(min_y, screen.y)
        max_y = max(max_y, screen.y)
    return min_x, min_y, max_x, max_y


def fit_window(points: Iterable[Point3D]) -> Layout:
    """Choose spacing, window size and offsets so the map fits and is centred.

    The spacing shrinks from the default until the map plus margins fits the
    maximum window or the minimum spacing is reached; the window is then
    clamped to the maximum size.
    """
    points = list(points)

    def measure(spacing: int) -> tuple[tuple[int, int, int, int], int, int]:
        box = bounds(points, Projection(spacing))
        return box, box[2] - box[0], box[3] - box[1]

    spacing = DEFAULT_SPACING
    box, map_w, map_h = measure(spacing)
    while (
        map_w + spacing * 4 > MAX_WIDTH or map_h + spacing * 2 > MAX_HEIGHT
    ) and spacing > MIN_SPACING:
        spacing -= 1
        box, map_w, map_h = measure(spacing)

    width = min(map_w + spacing * 4 * 2, MAX_WIDTH)
    height = min(map_h + spacing * 2 * 2, MAX_HEIGHT)
    offset_x = _trunc_div(width - map_w, 2) - box[0]
    offset_y = _trunc_div(height - map_h, 2) - box[1]
    return Layout(width, height, Projection(spacing, offset_x, offset_y))