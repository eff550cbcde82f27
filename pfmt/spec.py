"""Parsing of a single conversion directive such as ``%-08.3x``."""

from __future__ import annotations

from dataclasses import dataclass

from .numconv import parse_long

CONVERSIONS = "ocspdiuxX%"
FLAG_CHARACTERS = "-+#0 "
INT_MAX = 2**31 - 1
_FIELD_LIMIT = INT_MAX - 32


@dataclass(slots=True)
class Directive:
    """A parsed conversion directive together with per-conversion state.

    ``width`` and ``precision`` are ``None`` when absent and ``-1`` when given
    but out of range. ``end`` is the index just past the conversion character.
    ``is_positive`` and ``zero_value`` are filled in while the argument is
    converted.
    """

    conversion: str
    end: int
    minus: bool = False
    plus: bool = False
    hashtag: bool = False
    zero: bool = False
    blank: bool = False
    width: int | None = None
    precision: int | None = None
    is_positive: bool = True
    zero_value: bool = False

    def is_hex_shape(self) -> bool:
        """Whether the converted text carries a ``0x``/``0X`` prefix."""
        if self.zero_value:
            return False
        if self.conversion == "p":
            return True
        return self.hashtag and self.conversion in "xX"


def _bounded(value: int) -> int:
    return -1 if value < 0 or value >= _FIELD_LIMIT else value


def parse_directive(fmt: str, pos: int) -> Directive | None:
    """Parse the directive starting at ``fmt[pos]``.

    Returns ``None`` when ``fmt[pos]`` is not ``%`` or when no valid
    conversion character follows the flags, width and precision.
    """
    if not 0 <= pos < len(fmt) or fmt[pos] != "%":
        return None
    i = pos + 1
    length = len(fmt)
    flags = {"minus": False, "plus": False, "hashtag": False, "zero": False, "blank": False}
    width: int | None = None
    precision: int | None = None

    if i < length and fmt[i] != "%":
        names = dict(zip(FLAG_CHARACTERS, ("minus", "plus", "hashtag", "zero", "blank")))
        while i < length and fmt[i] in names:
            flags[names[fmt[i]]] = True
            i += 1

        if i < length and fmt[i].isascii() and fmt[i].isdigit():
            value, consumed = parse_long(fmt[i:], 10)
            width = _bounded(value)
            i += consumed

        if i < length and fmt[i] == ".":
            i += 1
            value, consumed = parse_long(fmt[i:], 10)
            precision = _bounded(value)
            i += consumed

    if i >= length or fmt[i] not in CONVERSIONS:
        return None
    return Directive(
        conversion=fmt[i],
        end=i + 1,
        width=width,
        precision=precision,
        **flags,
    )