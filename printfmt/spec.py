"""Parsing of conversion specifications in a format template."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

CONVERSIONS = "cspdiouxXf%"
FLAG_CHARS = "-0+ #"

_FLAG_NAMES = {
    "-": "minus",
    "+": "plus",
    "0": "zero",
    " ": "space",
    "#": "pound",
}

_DIGITS = re.compile(r"\d+")
_SPEC_BODY = re.compile(
    "[^{0}]*[{0}]?".format(re.escape(CONVERSIONS)), re.DOTALL
)


class Length(IntEnum):
    """Length modifier of a conversion."""

    NONE = 0
    HH = 1
    H = 2
    L = 3
    LL = 4
    LONG_DOUBLE = 5


_LENGTHS = (
    ("hh", Length.HH),
    ("ll", Length.LL),
    ("h", Length.H),
    ("l", Length.L),
    ("L", Length.LONG_DOUBLE),
)


@dataclass
class Flags:
    """Flag characters given in a conversion specification."""

    minus: bool = False
    plus: bool = False
    space: bool = False
    zero: bool = False
    pound: bool = False


@dataclass
class Spec:
    """One conversion specification.

    ``text`` is everything after the ``%`` up to and including the
    conversion character. ``width`` and ``precision`` are -1 when absent.
    """

    text: str
    conversion: str
    flags: Flags = field(default_factory=Flags)
    width: int = -1
    precision: int = -1
    has_width: bool = False
    has_precision: bool = False
    length: Length = Length.NONE


def _read_number(text: str, pos: int) -> tuple[int, int]:
    match = _DIGITS.match(text, pos)
    if match is None:
        return 0, pos
    return int(match.group()), match.end()


def parse_spec(text: str) -> Spec:
    """Parse the part of a specification that follows the ``%``."""
    flags = Flags()
    pos = 0
    while pos < len(text) and text[pos] in FLAG_CHARS:
        setattr(flags, _FLAG_NAMES[text[pos]], True)
        pos += 1

    width = -1
    has_width = pos < len(text) and text[pos].isdigit()
    if has_width:
        width, pos = _read_number(text, pos)

    precision = -1
    has_precision = text.startswith(".", pos)
    if has_precision:
        precision, pos = _read_number(text, pos + 1)

    length = Length.NONE
    for marker, value in _LENGTHS:
        if text.startswith(marker, pos):
            length = value
            pos += len(marker)
            break

    conversion = text[pos] if pos < len(text) else ""
    return Spec(
        text=text,
        conversion=conversion,
        flags=flags,
        width=width,
        precision=precision,
        has_width=has_width,
        has_precision=has_precision,
        length=length,
    )


def parse_template(template: str) -> list[Spec]:
    """Return the specifications of a template in the order they appear.

    A specification runs from the character after ``%`` to the next
    conversion character; an unterminated one takes the rest of the
    template and ends the scan.
    """
    specs: list[Spec] = []
    pos = template.find("%")
    while pos != -1:
        start = pos + 1
        body = _SPEC_BODY.match(template, start).group()
        specs.append(parse_spec(body))
        end = start + len(body)
        if not body or body[-1] not in CONVERSIONS:
            break
        pos = template.find("%", end)
    return specs