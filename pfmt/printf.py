"""A printf-style formatter writing to a stream."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Sequence, TextIO

from .convert import render_directive
from .spec import Directive, parse_directive

_DEMO_FORMAT = "%z"
_NUL = "\0"


def _place_nul(spec: Directive, text: str) -> str:
    """Add the NUL a zero ``%c`` prints, before or after its padding."""
    if spec.conversion == "c" and spec.zero_value:
        return _NUL + text if spec.minus else text + _NUL
    return text


def _chunks(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    pending = iter(args)
    literal_start = pos = 0
    length = len(fmt)
    while pos < length:
        spec = parse_directive(fmt, pos) if fmt[pos] == "%" else None
        if spec is None:
            pos += 1
            continue
        if literal_start < pos:
            yield fmt[literal_start:pos]
        if spec.conversion == "%":
            arg = None
        else:
            try:
                arg = next(pending)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
        yield _place_nul(spec, render_directive(spec, arg))
        pos = literal_start = spec.end
    if literal_start < length:
        yield fmt[literal_start:]


def render(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    A ``%`` that does not start a valid directive is kept literally.
    Raises ``TypeError`` when arguments run out and ``ValueError`` for an
    out-of-range width or precision.
    """
    return "".join(_chunks(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written. Text before a failing
    directive has already been written when an error is raised.
    """
    out = sys.stdout if stream is None else stream
    total = 0
    for chunk in _chunks(fmt, args):
        out.write(chunk)
        total += len(chunk)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration format string; takes no options."""
    printf(_DEMO_FORMAT)
    return 0