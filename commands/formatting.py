"""Culture-invariant number parsing and formatting for console text."""

from __future__ import annotations

import re

from core.exceptions import MalformedNumberError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_int(text: str) -> int:
    """Parse a whole line as a signed decimal integer.

    Surrounding whitespace is allowed. Only ASCII digits are accepted and the
    value must fit in 32 bits; anything else raises
    :class:`MalformedNumberError`.
    """
    stripped = (text or "").strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise MalformedNumberError(text)
    value = int(stripped)
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedNumberError(
            text, f"Integer {stripped} is outside the 32-bit range."
        )
    return value


def format_number(value) -> str:
    """Render ``value`` the way results are shown to the user.

    Integers print as plain digits. Reals print without a fractional part when
    they are integral (``2.0`` -> ``"2"``) and in shortest round-trip form
    otherwise (``2.5`` -> ``"2.5"``).
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(int(value))
