import pytest

from isowire.mapfile import (
    HeightMap,
    MapSize,
    Point3D,
    load_map,
    measure,
    parse_rows,
    read_rows,
)


@pytest.fixture
def grid_file(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 0 0\n0 10 0\n", encoding="utf-8")
    return path


def test_read_rows_splits_on_spaces(grid_file):
    rows = read_rows(grid_file)
    assert len(rows) == 2
    assert rows[0][:2] == ["0", "0"]
    assert rows[1][1] == "10"
    assert rows[1][2] == "0\n"


def test_read_rows_keeps_line_ending_piece_after_trailing_space(tmp_path):
    path = tmp_path / "trail.fdf"
    path.write_text("1 2 \n", encoding="utf-8")
    assert read_rows(path) == [["1", "2", "\n"]]


def test_read_rows_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_rows(tmp_path / "absent.fdf")


def test_measure_counts_rows_and_last_row_columns():
    rows = [["1", "2", "3"], ["4"]]
    assert measure(rows) == MapSize(size=4, columns=1, rows=2)


def test_measure_empty():
    assert measure([]) == MapSize(0, 0, 0)


def test_parse_rows_positions_and_altitudes():
    points = parse_rows([["-5", "+7"], ["abc", "12,0xFF"]])
    assert points == [
        Point3D(0, 0, -5),
        Point3D(1, 0, 7),
        Point3D(0, 1, 0),
        Point3D(1, 1, 12),
    ]


def test_parse_rows_count_matches_measure():
    rows = [["1", "2"], ["3", "4", "5"], ["6"]]
    assert len(parse_rows(rows)) == measure(rows).size


def test_load_map(grid_file):
    height_map = load_map(grid_file)
    assert isinstance(height_map, HeightMap)
    assert height_map.size == MapSize(size=6, columns=3, rows=2)
    assert height_map.points[4] == Point3D(1, 1, 10)
    assert all(p.z == 0 for i, p in enumerate(height_map.points) if i != 4)


def test_load_map_row_major_order(grid_file):
    points = load_map(grid_file).points
    assert [(p.x, p.y) for p in points] == sorted(
        ((p.x, p.y) for p in points), key=lambda xy: (xy[1], xy[0])
    )


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("", encoding="utf-8")
    height_map = load_map(path)
    assert height_map.points == []
    assert height_map.size == MapSize(0, 0, 0)