"""Build a wireframe scene from a map file and show it in a window."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from isowire.mapfile import HeightMap, load_map
from isowire.projection import Layout, Point2D, fit_window
from isowire.raster import Canvas

WINDOW_TITLE = "isowire"
_ESCAPE_FRAME_RATE = 60


@dataclass
class Scene:
    """A loaded map, the layout that fits it and its projected points."""

    height_map: HeightMap
    layout: Layout
    points: list[Point2D]

    @property
    def columns(self) -> int:
        return self.height_map.size.columns


def wire_edges(count: int, columns: int) -> Iterator[tuple[int, int]]:
    """Yield index pairs to join: right neighbours and the point one row below."""
    if count <= 0:
        return
    if columns <= 0:
        raise ValueError("columns must be positive")
    i = 0
    while i + columns < count:
        if (i + 1) % columns >= 1:
            yield i, i + 1
        yield i, i + columns
        i += 1
    while i + 1 < count:
        if (i + 1) % columns >= 1:
            yield i, i + 1
        i += 1


def render(canvas: Canvas, points: Sequence[Point2D], columns: int) -> Canvas:
    """Clear canvas and draw the wireframe joining points."""
    canvas.clear()
    for a, b in wire_edges(len(points), columns):
        canvas.draw_line(points[a], points[b])
    return canvas


def build_scene(path: str | os.PathLike[str]) -> Scene:
    """Load the map at path, fit it to a window and project its points."""
    height_map = load_map(path)
    layout = fit_window(height_map.points)
    points = layout.projection.project_all(height_map.points)
    return Scene(height_map, layout, points)


def _rgb_bytes(canvas: Canvas) -> bytes:
    return b"".join(color.to_bytes(3, "big") for color in canvas.pixels)


def main(argv: Sequence[str] | None = None) -> int:
    """Show the map file named by the single argument; Escape closes the window."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    scene = build_scene(args[0])
    width, height = scene.layout.width, scene.layout.height
    canvas = render(Canvas(width, height), scene.points, scene.columns)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        image = pygame.image.frombuffer(_rgb_bytes(canvas), (width, height), "RGB")
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    return 0
            screen.blit(image, (0, 0))
            pygame.display.flip()
            clock.tick(_ESCAPE_FRAME_RATE)
    finally:
        pygame.quit()