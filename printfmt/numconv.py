"""Integer parsing and formatting helpers."""

from __future__ import annotations

_WHITESPACE = "\t\n \v\f\r"
_DIGIT_CHARS = "0123456789abcdef"


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; the result wraps to 32 bits.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for char in text[pos:]:
        if not "0" <= char <= "9":
            break
        value = value * 10 + int(char)
    return _wrap32(value * sign)


def _digit_value(char: str, base: int) -> int:
    max_digit = chr(base + ord("0")) if base <= 10 else chr(base - 10 + ord("a"))
    if "0" <= char <= "9" and char <= max_digit:
        return ord(char) - ord("0")
    if "a" <= char <= "f" and char <= max_digit:
        return 10 + ord(char) - ord("a")
    return -1


def atoi_base(text: str, base: int) -> int:
    """Parse an integer in ``base`` with an optional leading minus.

    Digits are case-insensitive and a digit equal to the base is still
    accepted; parsing stops at the first invalid character.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    value = 0
    for char in text:
        digit = _digit_value(char.lower(), base)
        if digit < 0:
            break
        value = value * base + digit * sign
    return _wrap32(value)


def itoa_base(number: int, base: int, upper: bool) -> str:
    """Render ``number`` in ``base`` (2 to 16).

    Negative numbers are only accepted in base 10.
    """
    if base < 2 or base > 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if number < 0:
        if base != 10:
            raise ValueError("negative numbers can only be rendered in base 10")
        return "-" + itoa_base(-number, base, upper)
    digits = []
    while True:
        number, rest = divmod(number, base)
        digits.append(_DIGIT_CHARS[rest])
        if number == 0:
            break
    text = "".join(reversed(digits))
    return text.upper() if upper else text


def number_length(number: int) -> int:
    """Count the characters of ``number`` in decimal, sign included."""
    length = 1 if number >= 0 else 2
    number = abs(number)
    while number > 9:
        number //= 10
        length += 1
    return length


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``; a negative exponent gives 0."""
    if exponent < 0:
        return 0
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def next_number(text: str, stop: str) -> int:
    """Read a number from the start of ``text``.

    Reading ends at ``stop``, whitespace, the end of the text or any other
    character that is neither a digit nor a sign. Every ``-`` met flips the
    sign and the digits around signs run together.
    """
    sign = 1
    value = 0
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == stop or char in _WHITESPACE:
            break
        if char in "+-":
            if char == "-":
                sign = -sign
            pos += 1
        elif "0" <= char <= "9":
            while pos < len(text) and "0" <= text[pos] <= "9":
                value = value * 10 + int(text[pos])
                pos += 1
        else:
            break
    return value * sign