"""String routines: reversal, Roman numerals and substring search."""

from __future__ import annotations

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def reverse_string(text: str) -> str:
    """Return ``text`` reversed; the text must not be empty."""
    if not text:
        raise ValueError("cannot reverse an empty string")
    return "".join(reversed(text))


def reverse_string_recursive(text: str) -> str:
    """Return ``text`` reversed, built recursively from its tail."""
    if not text:
        return ""
    return reverse_string_recursive(text[1:]) + text[0]


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    if not s:
        raise ValueError("empty Roman numeral")
    total = 0
    previous = 0
    for char in reversed(s):
        try:
            value = _ROMAN_VALUES[char]
        except KeyError:
            raise ValueError(f"invalid Roman numeral character: {char!r}") from None
        if value < previous:
            total -= value
        else:
            total += value
        previous = value
    return total


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)