import pytest

from isowire.mapfile import Point3D
from isowire.projection import (
    DEFAULT_SPACING,
    MAX_HEIGHT,
    MAX_WIDTH,
    MIN_SPACING,
    Layout,
    Point2D,
    Projection,
    bounds,
    fit_window,
)


def _grid(columns, rows, z=0):
    return [Point3D(x, y, z) for y in range(rows) for x in range(columns)]


def test_origin_projects_to_offset():
    assert Projection(50).project(Point3D(0, 0, 0)) == Point2D(0, 0)
    assert Projection(50, 10, 20).project(Point3D(0, 0, 0)) == Point2D(10, 20)


def test_altitude_lifts_by_fifth_of_spacing():
    assert Projection(50).project(Point3D(0, 0, 5)) == Point2D(0, -50)


@pytest.mark.parametrize("spacing", [5, 17, 50])
def test_swapping_axes_mirrors_x(spacing):
    projection = Projection(spacing)
    a = projection.project(Point3D(3, 1, 2))
    b = projection.project(Point3D(1, 3, 2))
    assert a.x == -b.x
    assert a.y == b.y


def test_offset_shifts_uniformly():
    point = Point3D(4, 2, 7)
    base = Projection(30).project(point)
    moved = Projection(30, 100, -40).project(point)
    assert (moved.x - base.x, moved.y - base.y) == (100, -40)


def test_project_all_keeps_order():
    projection = Projection(20)
    points = _grid(3, 2)
    assert projection.project_all(points) == [projection.project(p) for p in points]


def test_bounds_of_empty_uses_start_values():
    assert bounds([], Projection()) == (1000000, 1000000, -1000000, -1000000)


def test_bounds_contain_every_point():
    projection = Projection(25)
    points = _grid(4, 3, z=3)
    min_x, min_y, max_x, max_y = bounds(points, projection)
    screens = projection.project_all(points)
    assert min_x == min(p.x for p in screens)
    assert max_y == max(p.y for p in screens)
    assert all(min_x <= p.x <= max_x and min_y <= p.y <= max_y for p in screens)


def test_single_point_window():
    layout = fit_window([Point3D(0, 0, 0)])
    assert isinstance(layout, Layout)
    assert layout.projection.spacing == DEFAULT_SPACING
    assert (layout.width, layout.height) == (400, 200)


def test_small_map_is_centred_inside_window():
    points = _grid(3, 3)
    layout = fit_window(points)
    assert layout.projection.spacing == DEFAULT_SPACING
    screens = layout.projection.project_all(points)
    assert all(0 <= p.x < layout.width and 0 <= p.y < layout.height for p in screens)
    min_x, _, max_x, _ = bounds(points, layout.projection)
    assert abs(min_x - (layout.width - max_x)) <= 1


def test_large_map_shrinks_spacing_and_clamps_window():
    layout = fit_window(_grid(100, 100))
    assert MIN_SPACING <= layout.projection.spacing < DEFAULT_SPACING
    assert layout.width <= MAX_WIDTH
    assert layout.height <= MAX_HEIGHT


def test_moderate_map_fits_with_margins():
    points = _grid(20, 10)
    layout = fit_window(points)
    spacing = layout.projection.spacing
    min_x, min_y, max_x, max_y = bounds(points, Projection(spacing))
    if spacing > MIN_SPACING:
        assert (max_x - min_x) + spacing * 4 <= MAX_WIDTH
        assert (max_y - min_y) + spacing * 2 <= MAX_HEIGHT
    assert layout.width <= MAX_WIDTH and layout.height <= MAX_HEIGHT