"""Scan number literals out of SVG path data.

Numbers may run together without separators: a sign or a second decimal
point always starts a new literal, so ``"10-20"`` holds two numbers and so
does ``".2.3"``.
"""

from __future__ import annotations

import math

from .constants import NUMBER_PATTERN, NUMBER_START, SEPARATOR_PATTERN
from .errors import NumberRangeError


def skip_separators(d: str, pos: int) -> int:
    """Return the position of the next character that is not a separator.

    Examples:
        >>> skip_separators("M 10, 20", 4)
        6
        >>> skip_separators("M10", 1)
        1
    """
    # the pattern matches the empty string, so there is always a match
    return SEPARATOR_PATTERN.match(d, pos).end()  # type: ignore[union-attr]


def starts_number(d: str, pos: int) -> bool:
    """Check if the character at ``pos`` can start a number literal."""
    return pos < len(d) and d[pos] in NUMBER_START


def scan_number(d: str, pos: int) -> tuple[float, int] | None:
    """Scan a single number literal.

    Separators before the literal are skipped.

    Args:
        d: The path data.
        pos: The position to start scanning at.

    Returns:
        The number and the position right after it, or None if no number
        starts at ``pos``.

    Raises:
        NumberRangeError: If the literal is too large for a float.

    Examples:
        >>> scan_number("10-20", 0)
        (10.0, 2)
        >>> scan_number("10-20", 2)
        (-20.0, 5)
        >>> scan_number(".2.3", 2)
        (0.3, 4)
        >>> scan_number("L 10", 0) is None
        True
    """
    pos = skip_separators(d, pos)
    match = NUMBER_PATTERN.match(d, pos)
    if match is None:
        return None

    value = float(match.group())
    if not math.isfinite(value):
        raise NumberRangeError(match.group(), pos)

    return value, match.end()


def scan_numbers(d: str) -> list[float]:
    """Scan all numbers of a separator delimited list.

    Raises:
        ValueError: If anything but numbers and separators is found.

    Examples:
        >>> scan_numbers("10-20.5.5")
        [10.0, -20.5, 0.5]
        >>> scan_numbers(" ")
        []
    """
    values: list[float] = []
    pos = skip_separators(d, 0)
    while pos < len(d):
        result = scan_number(d, pos)
        if result is None:
            raise ValueError(f"Invalid number list {d!r} at position {pos}")
        value, pos = result
        values.append(value)
        pos = skip_separators(d, pos)

    return values
