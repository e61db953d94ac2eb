"""Formatting of whole templates, to a string or to standard output."""

from __future__ import annotations

import sys
from typing import Any

from printfmt.convert import render
from printfmt.spec import Spec, parse_template


def _char_output(spec: Spec, rendered: str) -> str:
    """Adjust a rendered ``%c`` so that a NUL character is written out.

    The padding is kept on its own, and a NUL is added on the side the
    character belongs to whenever the result is empty or padded.
    """
    text = rendered.replace("\0", "")
    if not text:
        return "\0"
    if text[0] == " " and text[-1] == " " and (len(text) > 1 or spec.width > 1):
        return "\0" + text if spec.flags.minus else text + "\0"
    return text


def sprintf(template: str, *args: Any) -> str:
    """Return ``template`` with every conversion replaced by its argument.

    Every conversion is rendered before any text is put together, so an
    unsupported conversion raises
    :class:`~printfmt.convert.ConversionError` and nothing is produced.
    Arguments left over are ignored.
    """
    specs = parse_template(template)
    arg_iter = iter(args)
    rendered = [render(spec, arg_iter) for spec in specs]

    pieces: list[str] = []
    pos = 0
    for spec, text in zip(specs, rendered):
        start = template.find("%", pos)
        pieces.append(template[pos:start])
        pieces.append(_char_output(spec, text) if spec.conversion == "c" else text)
        pos = start + 1 + len(spec.text)
    pieces.append(template[pos:])
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the formatted template to standard output.

    Returns the number of characters written.
    """
    text = sprintf(template, *args)
    sys.stdout.write(text)
    return len(text)