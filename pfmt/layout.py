"""Precision and field-width handling for converted directive text."""

from __future__ import annotations

from .spec import Directive

_ZERO_DROPPING = "xXiodu"
_NUMERIC = "xXiodup"


def _effective(value: int | None) -> int:
    return 0 if value is None else value


def build_precision(spec: Directive, text: str) -> str:
    """Zeros needed to bring ``text`` up to the requested precision.

    Raises ``ValueError`` when the precision was given but is out of range.
    """
    precision = _effective(spec.precision)
    if precision < 0:
        raise ValueError("precision out of range")
    return "0" * max(precision - len(text), 0)


def apply_precision(spec: Directive, text: str) -> str:
    """Apply the directive's precision to the converted ``text``.

    Numbers get leading zeros, a zero value with precision 0 vanishes and
    strings are truncated. Other conversions are left alone.
    """
    if spec.precision is None:
        return text
    conversion = spec.conversion
    if spec.precision == 0 and text == "0" and conversion in _ZERO_DROPPING:
        return ""
    if conversion == "s":
        return text if spec.precision < 0 else text[: spec.precision]
    if conversion in _NUMERIC:
        return build_precision(spec, text) + text
    return text


def build_padding(spec: Directive, text: str) -> str:
    """Padding that brings ``text`` up to the directive's width.

    A NUL produced by ``%c`` is not part of ``text`` but still takes one
    column. Raises ``ValueError`` when the width is out of range.
    """
    width = _effective(spec.width)
    if width < 0:
        raise ValueError("width out of range")
    extra = -1 if spec.zero_value and spec.conversion == "c" else 0
    size = max(width - len(text) + extra, 0)
    if spec.precision is not None or spec.minus:
        fill = " "
    elif spec.conversion in "cs":
        fill = " "
    elif spec.zero:
        fill = "0"
    else:
        fill = " "
    return fill * size


def _pad_hex(spec: Directive, text: str, padding: str) -> str:
    if not (spec.zero and spec.precision is None):
        return padding + text
    split_at = 0
    if spec.conversion == "X":
        split_at = text.rfind("X") + 1
    elif spec.conversion in "xp":
        split_at = text.rfind("x") + 1
    return text[:split_at] + padding + text[split_at:]


def _pad_signed(text: str, padding: str) -> str:
    if padding.startswith("0"):
        return text[:1] + padding + text[1:]
    return padding + text


def apply_padding(spec: Directive, text: str) -> str:
    """Pad ``text`` to the directive's width, honouring ``-`` and ``0``.

    Zero padding goes after a sign or a ``0x``/``0X`` prefix.
    """
    if spec.width is None or 0 <= spec.width <= len(text):
        return text
    padding = build_padding(spec, text)
    if spec.minus:
        return text + padding
    if spec.is_hex_shape():
        return _pad_hex(spec, text, padding)
    if spec.conversion in "di" and text[:1] in " +-":
        return _pad_signed(text, padding)
    return padding + text