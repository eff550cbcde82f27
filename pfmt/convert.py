"""Conversion of a single argument according to a parsed directive."""

from __future__ import annotations

import operator
from typing import Any

from .layout import apply_padding, apply_precision
from .numconv import ULONG_MASK, to_base
from .spec import Directive

_UINT_MASK = 0xFFFFFFFF
_INT_OFFSET = 2**31
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _as_int(arg: Any) -> int:
    try:
        return operator.index(arg)
    except TypeError:
        raise TypeError(f"an integer is required, not {type(arg).__name__}") from None


def _signed32(value: int) -> int:
    return ((value + _INT_OFFSET) & _UINT_MASK) - _INT_OFFSET


def _convert_char(spec: Directive, arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires a single character")
        code = ord(arg)
    else:
        code = _as_int(arg) & 0xFF
    if code == 0:
        spec.zero_value = True
        return ""
    return chr(code)


def _convert_string(arg: Any) -> str:
    if arg is None:
        return _NULL_STRING
    if not isinstance(arg, str):
        raise TypeError(f"%s requires a string, not {type(arg).__name__}")
    return arg.split("\0", 1)[0]


def convert_argument(spec: Directive, arg: Any) -> str:
    """Turn ``arg`` into its bare text form for the directive's conversion.

    Records on ``spec`` whether the value was zero and whether it was
    negative; the sign itself is not part of the returned text.
    """
    conversion = spec.conversion
    if conversion in "di":
        value = _signed32(_as_int(arg))
        if value == 0:
            spec.zero_value = True
        if value < 0:
            spec.is_positive = False
            return str(-value)
        return str(value)
    if conversion in "xX":
        value = _as_int(arg) & _UINT_MASK
        if value == 0:
            spec.zero_value = True
        text = to_base(value, 16)
        return text.upper() if conversion == "X" else text
    if conversion == "o":
        value = _as_int(arg) & _UINT_MASK
        if value == 0:
            spec.zero_value = True
        return to_base(value, 8)
    if conversion == "u":
        value = _as_int(arg) & _UINT_MASK
        if value == 0:
            spec.zero_value = True
        return str(value)
    if conversion == "c":
        return _convert_char(spec, arg)
    if conversion == "s":
        return _convert_string(arg)
    if conversion == "p":
        value = 0 if arg is None else _as_int(arg) & ULONG_MASK
        if value == 0:
            spec.zero_value = True
            return _NULL_POINTER
        return to_base(value, 16)
    if conversion == "%":
        return "%"
    raise ValueError(f"unknown conversion {conversion!r}")


def add_hex_prefix(spec: Directive, text: str) -> str:
    """Prefix a pointer's digits with ``0x``; ``(nil)`` stays as it is."""
    if spec.conversion == "p" and text != _NULL_POINTER:
        return "0x" + text
    return text


def add_minus_sign(spec: Directive, text: str) -> str:
    """Put the minus sign back in front of a negative ``%d``/``%i`` value."""
    if spec.conversion in "di" and not spec.is_positive:
        return "-" + text
    return text


def add_plus(spec: Directive, text: str) -> str:
    """Apply the ``+`` flag to signed integers and pointers."""
    if not spec.plus or (spec.zero_value and not text):
        return text
    if (spec.conversion in "id" and spec.is_positive) or spec.conversion == "p":
        return ("+" if spec.is_positive else "-") + text
    return text


def add_hashtag(spec: Directive, text: str) -> str:
    """Apply the ``#`` flag: ``0x``/``0X`` for hex, ``0`` for octal."""
    if not spec.hashtag or spec.zero_value:
        return text
    prefix = {"x": "0x", "X": "0X", "o": "0"}.get(spec.conversion)
    return text if prefix is None else prefix + text


def add_blank(spec: Directive, text: str) -> str:
    """Apply the space flag to non-negative signed integers and pointers."""
    if (
        not spec.blank
        or spec.plus
        or not spec.is_positive
        or (spec.zero_value and not text)
    ):
        return text
    if spec.conversion in "idp":
        return " " + text
    return text


def apply_flag_options(spec: Directive, text: str) -> str:
    """Apply the ``+``, ``#`` and space flags in that order."""
    text = add_plus(spec, text)
    text = add_hashtag(spec, text)
    return add_blank(spec, text)


def render_directive(spec: Directive, arg: Any) -> str:
    """Produce the full text for one directive applied to ``arg``.

    A NUL character produced by ``%c`` is not included; it is placed by the
    caller. Raises ``ValueError`` for an out-of-range width or precision.
    """
    text = convert_argument(spec, arg)
    text = apply_precision(spec, text)
    text = add_hex_prefix(spec, text)
    text = add_minus_sign(spec, text)
    text = apply_flag_options(spec, text)
    return apply_padding(spec, text)