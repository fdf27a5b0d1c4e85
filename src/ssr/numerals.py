"""Positional numerals in bases 2-16 <-> Python ints."""

from __future__ import annotations

from ssr.errors import InvalidDigit, InvalidRadix

MIN_RADIX = 2
MAX_RADIX = 16

_DIGITS = "0123456789abcdef"
_DIGIT_VALUES = {c: i for i, c in enumerate(_DIGITS)}


def _check_radix(radix: int) -> None:
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadix(f"Radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}")


def digit_value(char: str) -> int | None:
    """Value of a single digit character, or None if it is not one."""
    return _DIGIT_VALUES.get(char.lower()) if len(char) == 1 else None


def decode(digits: str, radix: int) -> int:
    """Decode a most-significant-first digit string in the given radix.

    Letters are case-insensitive and stand for 10-15. Raises InvalidDigit on
    the first character that is not a digit of ``radix``.
    """
    _check_radix(radix)
    if not digits:
        raise InvalidDigit("", radix)

    result = 0
    for char in digits:
        value = digit_value(char)
        if value is None or value >= radix:
            raise InvalidDigit(char, radix)
        result = result * radix + value
    return result


def encode(value: int, radix: int) -> str:
    """Lower-case digit string of a non-negative int in the given radix."""
    _check_radix(radix)
    if value < 0:
        raise ValueError(f"Only non-negative values can be encoded, got {value}")
    if value == 0:
        return "0"

    out: list[str] = []
    while value:
        value, rem = divmod(value, radix)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))
