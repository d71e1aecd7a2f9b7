"""String helpers: searching, bounded copies, slicing, splitting and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

_NUL = "\0"


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_text(s: str, name: str = "s") -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a string, not {type(s).__name__}")
    return s


def _check_size(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def find_char(s: str, c: str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_text(s)
    _check_char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _NUL else None


def find_last_char(s: str, c: str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_text(s)
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch.

    The end of a string compares as code 0, and comparison stops there.
    """
    _check_text(s1, "s1")
    _check_text(s2, "s2")
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of needle lying wholly within the first length characters.

    An empty needle is found at index 0. None when there is no match.
    """
    _check_text(haystack, "haystack")
    _check_text(needle, "needle")
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters, empty for size 0)
    and the full length of src, which shows whether truncation happened.
    """
    _check_text(src, "src")
    _check_size(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def concat_bounded(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create: the length
    of src plus the smaller of size and the length of dest.
    """
    _check_text(dest, "dest")
    _check_text(src, "src")
    _check_size(size, "size")
    dest_len = len(dest)
    total = len(src) + min(size, dest_len)
    room = max(size - 1 - dest_len, 0)
    return dest + src[:room], total


def substring(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from start; empty past the end."""
    _check_text(s)
    _check_size(start, "start")
    _check_size(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def join(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _check_text(s1, "s1") + _check_text(s2, "s2")


def trim(s: str, charset: str) -> str:
    """Strip every character found in charset from both ends of s."""
    _check_text(s)
    _check_text(charset, "charset")
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split s on the single character sep, dropping empty pieces."""
    _check_text(s)
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to each character."""
    _check_text(s)
    return "".join(func(index, char) for index, char in enumerate(s))


def each_indexed(s: MutableSequence[Any] | str, func: Callable[[int, Any], Any]) -> None:
    """Call func(index, item) on each item of s.

    When func returns something other than None, that value replaces the item,
    so s must then be a mutable sequence such as a list of characters.
    """
    for index, item in enumerate(list(s)):
        result = func(index, item)
        if result is not None:
            if isinstance(s, str):
                raise TypeError("cannot replace characters of an immutable string")
            s[index] = result