import io

import pytest

from isowire.lines import LineReader

TEXT = "0 0 1\n2 3 4\n\nlast line without newline"


def test_lines_keep_newlines_and_round_trip():
    lines = list(LineReader(io.StringIO(TEXT)))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


def test_returns_none_at_end_and_stays_none():
    reader = LineReader(io.StringIO("a\n"))
    assert reader.read_line() == "a\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_buffer_size_does_not_change_result(size):
    lines = list(LineReader(io.StringIO(TEXT), buffer_size=size))
    assert lines == TEXT.splitlines(keepends=True)


def test_binary_stream():
    data = b"10 20\n30 40\n"
    lines = list(LineReader(io.BytesIO(data), buffer_size=4))
    assert lines == data.splitlines(keepends=True)
    assert all(isinstance(line, bytes) for line in lines)


def test_long_line_beyond_buffer():
    line = "x" * 500 + "\n"
    reader = LineReader(io.StringIO(line * 2), buffer_size=7)
    assert reader.read_line() == line
    assert reader.read_line() == line
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), buffer_size=size)


class _FailingStream:
    def read(self, n):
        raise OSError("read failed")


def test_read_error_propagates():
    with pytest.raises(OSError):
        LineReader(_FailingStream()).read_line()