"""Rendering of single conversion specifications into text."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, Callable, Iterator

from printfmt.numconv import itoa_base
from printfmt.spec import Flags, Length, Spec

_INT64_MAX = 2**63 - 1
_INT64_MIN_DIGITS = "9223372036854775808"

_SIGNED_BITS = {
    Length.NONE: 32,
    Length.HH: 8,
    Length.H: 16,
    Length.L: 64,
    Length.LL: 64,
}
_INTEGER_CONVERSIONS = frozenset("diouxX")


class ConversionError(ValueError):
    """Raised when a specification names an unsupported conversion."""

    def __init__(self, conversion: str) -> None:
        self.conversion = conversion
        super().__init__(f"%{conversion} is not a conversion type")


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _as_int64(value: int) -> int:
    return value - 2**64 if value > _INT64_MAX else value


def signed_arg(length: Length, value: Any) -> int:
    """Narrow ``value`` to the signed integer type the length modifier names.

    The long-double modifier does not apply to integers and yields 0.
    """
    bits = _SIGNED_BITS.get(length)
    if bits is None:
        return 0
    return _wrap_signed(int(value), bits)


def unsigned_arg(length: Length, value: Any) -> int:
    """Narrow ``value`` to the unsigned integer type the length modifier names.

    The long-double modifier does not apply to integers and yields 0.
    """
    bits = _SIGNED_BITS.get(length)
    if bits is None:
        return 0
    return int(value) & ((1 << bits) - 1)


def _lead_size(conversion: str, flags: Flags, number: int) -> int:
    if flags.pound:
        if conversion == "o":
            return 1
        if conversion in ("x", "X") and number != 0:
            return 2
        return 0
    if flags.plus or flags.space:
        return 1
    if number < 0 and conversion in ("i", "d", "f"):
        return 1
    return 0


def _lead_text(conversion: str, flags: Flags, has_precision: bool, number: int) -> str:
    if flags.pound:
        if conversion == "o" and not (number == 0 and not has_precision):
            return "0"
        if conversion == "x" and number != 0:
            return "0x"
        if conversion == "X" and number != 0:
            return "0X"
        return ""
    if flags.plus:
        return "-" if number < 0 else "+"
    if number < 0:
        return "-"
    if flags.space:
        return " "
    return ""


def _pad_char(flags: Flags, precision: int, digits: str) -> str:
    if flags.zero and not flags.minus and len(digits) > precision:
        return "0"
    return " "


def _join(text: str, pad: str, left: bool) -> str:
    return text + pad if left else pad + text


def _with_lead(prefix: str, digits: str, pad: str, flags: Flags, precision: int) -> str:
    if _pad_char(flags, precision, digits) == "0":
        return prefix + _join(digits, pad, flags.minus)
    return _join(prefix + digits, pad, flags.minus)


def decimal_digits(number: float, precision: int) -> str:
    """Return the fractional digits of a non-negative ``number``.

    A precision of -1 means 6. The last digit is rounded from the next one,
    leading zeros of the fraction are not kept and a carry does not reach
    the integer part.
    """
    fraction = number - int(number)
    if precision == -1:
        precision = 6
    for _ in range(precision + 1):
        fraction *= 10
    check = int(fraction)
    fraction /= 10
    if check % 10 > 4:
        fraction += 1
    return str(int(fraction))


def format_char(spec: Spec, value: Any) -> str:
    """Render a ``c`` conversion, or a literal ``%`` for ``%%``."""
    if spec.conversion == "%":
        char = "%"
    elif isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        char = value
    else:
        char = chr(int(value) & 0xFF)
    width = spec.width if spec.has_width else 1
    return _join(char, " " * (width - 1), spec.flags.minus)


def format_string(spec: Spec, value: Any) -> str:
    """Render an ``s`` conversion; ``None`` becomes ``(null)`` unpadded."""
    if value is None:
        return "(null)"
    text = str(value)
    if spec.has_precision:
        text = text[: spec.precision]
    return _join(text, " " * (spec.width - len(text)), spec.flags.minus)


def format_pointer(spec: Spec, value: Any) -> str:
    """Render a ``p`` conversion as ``0x`` followed by lowercase hex."""
    number = 0 if value is None else int(value) & (2**64 - 1)
    precision = spec.precision
    digits = "" if precision == 0 and number == 0 else itoa_base(number, 16, False)
    size = max(precision, len(digits))
    width = spec.width if spec.has_width else len(digits) + 2
    pad = " " * (width - size - 2)
    digits = digits.rjust(precision, "0")
    return _join("0x" + digits, pad, spec.flags.minus)


def format_signed(spec: Spec, value: Any) -> str:
    """Render a ``d`` or ``i`` conversion."""
    flags = replace(spec.flags, pound=False)
    precision = spec.precision
    number = signed_arg(spec.length, value)
    lead = _lead_size("d", flags, number)
    if number < -_INT64_MAX:
        digits = _INT64_MIN_DIGITS
    elif precision == 0 and number == 0:
        digits = ""
    else:
        digits = str(abs(number))
    size = max(precision + lead, len(digits))
    pad = _pad_char(flags, precision, digits) * (spec.width - size - lead)
    digits = digits.rjust(precision, "0")
    if len(digits) + len(pad) + lead < spec.width:
        pad = _pad_char(flags, precision, digits) + pad
    if lead:
        prefix = _lead_text("d", flags, spec.has_precision, number)
        return _with_lead(prefix, digits, pad, flags, precision)
    return _join(digits, pad, flags.minus)


def format_octal(spec: Spec, value: Any) -> str:
    """Render an ``o`` conversion."""
    flags = replace(spec.flags, plus=False, space=False)
    precision = spec.precision
    number = unsigned_arg(spec.length, value)
    digits = "" if precision == 0 and number == 0 else itoa_base(number, 8, False)
    signed = _as_int64(number)
    lead = _lead_size("o", flags, signed)
    size = max(precision + lead, len(digits))
    pad = _pad_char(flags, precision, digits) * (spec.width - size - lead)
    digits = digits.rjust(precision, "0")
    if lead and not digits.startswith("0"):
        prefix = _lead_text("o", flags, spec.has_precision, signed)
        return _join(prefix + digits, pad, flags.minus)
    return _join(digits, pad, flags.minus)


def format_unsigned(spec: Spec, value: Any) -> str:
    """Render a ``u`` conversion."""
    flags = replace(spec.flags, plus=False, space=False, pound=False)
    precision = spec.precision
    number = unsigned_arg(spec.length, value)
    digits = "" if precision == 0 and number == 0 else str(number)
    size = max(precision, len(digits))
    pad = _pad_char(flags, precision, digits) * (spec.width - size)
    digits = digits.rjust(precision, "0")
    return _join(digits, pad, flags.minus)


def format_hex(spec: Spec, value: Any) -> str:
    """Render an ``x`` or ``X`` conversion."""
    conversion = "X" if spec.conversion == "X" else "x"
    flags = replace(spec.flags, plus=False, space=False)
    precision = spec.precision
    number = unsigned_arg(spec.length, value)
    digits = (
        "" if precision == 0 and number == 0
        else itoa_base(number, 16, conversion == "X")
    )
    signed = _as_int64(number)
    lead = _lead_size(conversion, flags, signed)
    size = max(precision + lead, len(digits))
    pad = _pad_char(flags, precision, digits) * (spec.width - size - lead)
    digits = digits.rjust(precision, "0")
    if lead:
        prefix = _lead_text(conversion, flags, spec.has_precision, signed)
        return _with_lead(prefix, digits, pad, flags, precision)
    return _join(digits, pad, flags.minus)


def format_float(spec: Spec, value: Any) -> str:
    """Render an ``f`` conversion.

    The sign is taken from the truncated integer part, and padding is
    computed as if at least six fractional digits were shown.
    """
    number = float(value)
    if not math.isfinite(number):
        raise ValueError("cannot format a non-finite number")
    flags = spec.flags
    truncated = int(number)
    whole = str(abs(truncated))
    lead = _lead_size("f", flags, truncated)
    size = max(spec.precision, 6) + len(whole) + 1 + lead
    pad = " " * (spec.width - size - lead)
    body = f"{whole}.{decimal_digits(abs(number), spec.precision)}"
    if lead:
        body = _lead_text("f", flags, spec.has_precision, truncated) + body
    return _join(body, pad, flags.minus)


_FORMATTERS: dict[str, Callable[[Spec, Any], str]] = {
    "c": format_char,
    "%": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "o": format_octal,
    "u": format_unsigned,
    "x": format_hex,
    "X": format_hex,
    "f": format_float,
}


def render(spec: Spec, args: Iterator[Any]) -> str:
    """Render ``spec``, drawing its argument from the iterator ``args``.

    ``%%`` takes no argument, nor does an integer conversion with the
    long-double modifier, which renders as 0.
    """
    formatter = _FORMATTERS.get(spec.conversion)
    if formatter is None:
        raise ConversionError(spec.conversion)
    takes_no_argument = spec.conversion == "%" or (
        spec.conversion in _INTEGER_CONVERSIONS
        and spec.length == Length.LONG_DOUBLE
    )
    if takes_no_argument:
        value = None
    else:
        try:
            value = next(args)
        except StopIteration:
            raise TypeError("not enough arguments for format template") from None
    return formatter(spec, value)