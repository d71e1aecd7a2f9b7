"""Load a height map: rows of whitespace-separated altitudes, one point per entry."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from isowire.ascii import parse_int
from isowire.lines import LineReader
from isowire.strings import split


@dataclass(frozen=True)
class Point3D:
    """A grid point: column x, row y and altitude z."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class MapSize:
    """Dimensions of a map.

    size is the total number of points, columns the number of entries on the
    last row and rows the number of rows.
    """

    size: int
    columns: int
    rows: int


@dataclass
class HeightMap:
    """The points of a map in row order, with its dimensions."""

    points: list[Point3D] = field(default_factory=list)
    size: MapSize = field(default_factory=lambda: MapSize(0, 0, 0))


def read_rows(path: str | os.PathLike[str]) -> list[list[str]]:
    """Read a map file and split every line on spaces into its entries.

    Empty pieces are dropped; the line ending stays attached to the last
    entry of a line, as a separate entry when a space precedes it.
    """
    with open(path, encoding="utf-8", newline="") as stream:
        return [split(line, " ") for line in LineReader(stream)]


def measure(rows: list[list[str]]) -> MapSize:
    """Count the entries of rows; the column count is taken from the last row."""
    total = sum(len(row) for row in rows)
    columns = len(rows[-1]) if rows else 0
    return MapSize(size=total, columns=columns, rows=len(rows))


def parse_rows(rows: list[list[str]]) -> list[Point3D]:
    """Turn every entry into a point at its column and row, altitude read leniently."""
    return [
        Point3D(x, y, parse_int(entry))
        for y, row in enumerate(rows)
        for x, entry in enumerate(row)
    ]


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at path."""
    rows = read_rows(path)
    return HeightMap(points=parse_rows(rows), size=measure(rows))