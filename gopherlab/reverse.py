"""Reversal of strings (code point by code point) and of decimal integers."""

_INT64_MAX = 2**63 - 1


def reverse_string(s: str) -> str:
    """Return ``s`` reversed character by character, left to right."""
    return s[::-1]


def reverse_int(i: int) -> int:
    """Return the decimal reversal of ``i``.

    A negative number reverses to text with a trailing minus sign, which is
    not a valid number, so the result is 0. A reversal that does not fit in a
    signed 64-bit integer is clamped to the largest such value.
    """
    text = reverse_string(str(i))
    if not text.isdigit():
        return 0
    return min(int(text), _INT64_MAX)