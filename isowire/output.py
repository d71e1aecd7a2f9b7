"""Write characters, text and integers to a text stream."""

from __future__ import annotations

from typing import TextIO

from isowire.ascii import format_int


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character to stream."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: str | None, stream: TextIO) -> None:
    """Write s to stream; None writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_line(s: str | None, stream: TextIO) -> None:
    """Write s followed by a newline; None writes nothing at all."""
    if s is None:
        return
    stream.write(s)
    stream.write("\n")


def put_number(n: int, stream: TextIO) -> None:
    """Write the decimal text of a signed 32-bit integer to stream."""
    stream.write(format_int(n))