"""Number parsing and formatting helpers used by the formatter."""

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
ULONG_MASK = 2**64 - 1
LONG_BITS = 64

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WHITESPACE = " \t\n\v\f\r"


def _detect_base(text: str) -> int:
    if text.startswith(("0x", "0X")):
        return 16
    if text.startswith("0"):
        return 8
    return 10


def _limit_reached(value: int, sign: int, base: int) -> int | None:
    """Return the clamped result once the accumulated value hits the limit check."""
    magnitude = 0
    remaining = value
    while remaining > 1:
        remaining //= 10
        magnitude += 1
    if magnitude * base != LONG_BITS:
        return None
    if sign == 1:
        return LONG_MAX
    if value != LONG_MIN:
        return LONG_MIN
    return None


def parse_long(text: str, base: int = 10) -> tuple[int, int]:
    """Parse a signed integer from the start of ``text``.

    Returns ``(value, end)`` where ``end`` is the index just past the parsed
    digits. A base of 0 is detected from a ``0x``/``0`` prefix. Only lowercase
    letters count as digits above 9. An out-of-range base yields ``(0, 0)``.
    """
    pos = 0
    if base == 0:
        base = _detect_base(text)
    elif not 2 <= base <= 36:
        return 0, 0
    if base == 16 and text.startswith(("0x", "0X")):
        pos = 2

    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1

    digits = _DIGITS[:base]
    result = 0
    while pos < length and (digit := digits.find(text[pos])) >= 0:
        clamped = _limit_reached(result, sign, base)
        if clamped is not None:
            return clamped, length
        result = result * base + digit
        pos += 1
    return result * sign, pos


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one sign."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def to_base(n: int, base: int) -> str:
    """Render ``n`` as an unsigned 64-bit number in ``base`` with lowercase digits.

    Zero or a base outside 2..36 gives ``"0"``.
    """
    n &= ULONG_MASK
    if not n or not 2 <= base <= 36:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def digit_count(n: int) -> int:
    """Number of characters in the decimal form of ``n``, minus sign included."""
    count = 1
    magnitude = abs(n)
    while magnitude >= 10:
        magnitude //= 10
        count += 1
    return count + (1 if n < 0 else 0)