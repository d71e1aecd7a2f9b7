"""Character classification and integer text conversion for the ASCII range."""

from __future__ import annotations

import operator
import re

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _wrap32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, wrapping around."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 31 < _code(c) < 127


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def parse_int(text: str) -> int:
    """Read a leading decimal integer the lenient way.

    Leading blanks (space and codes 9 to 13) are skipped, one optional sign is
    taken, then digits are read until the first non-digit. Text without digits
    yields 0. The result wraps into the signed 32-bit range.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap32(value)


def format_int(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    value = operator.index(n)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"{value} does not fit in a signed 32-bit integer")
    return str(value)