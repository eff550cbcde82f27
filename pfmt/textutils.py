"""String helpers: splitting, trimming, joining, comparing and searching."""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Callable, Iterator


def _codes(text: str) -> Iterator[int]:
    """Code points of ``text`` followed by an endless run of zeros."""
    return chain(map(ord, text), repeat(0))


def _fold(code: int) -> int:
    """Lower-case an ASCII upper-case letter; leave everything else alone."""
    return code + 32 if 65 <= code <= 90 else code


def _compare(a: str, b: str, n: int | None, key: Callable[[int], int]) -> int:
    pairs = zip(_codes(a), _codes(b))
    if n is not None:
        pairs = islice(pairs, n)
    for ca, cb in pairs:
        ka, kb = key(ca), key(cb)
        if ka != kb or not ca:
            return ka - kb
    return 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if not sep:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return text.strip(chars)


def strrtrim(text: str, chars: str) -> str:
    """Keep the span from the first to the last character found in ``chars``.

    Characters outside ``chars`` are cut from both ends; if none of the
    characters of ``text`` is in ``chars`` the result is empty.
    """
    inside = [pos for pos, ch in enumerate(text) if ch in chars]
    if not inside:
        return ""
    return text[inside[0] : inside[-1] + 1]


def join_all(*args: str | None) -> str:
    """Concatenate all arguments, skipping any that are ``None``."""
    return "".join(part for part in args if part is not None)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    if n <= 0:
        return 0
    return _compare(a, b, n, int)


def strcasecmp(a: str, b: str) -> int:
    """Compare two strings ignoring ASCII letter case."""
    return _compare(a, b, None, _fold)


def strcasencmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters ignoring ASCII letter case."""
    if n <= 0:
        return 0
    return _compare(a, b, n, _fold)


def strnstr(big: str, little: str, n: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``n`` characters of ``big``."""
    if not little:
        return 0
    found = big.find(little, 0, max(n, 0))
    return None if found < 0 else found


def strcasestr(haystack: str, needle: str) -> int | None:
    """Index of ``needle`` in ``haystack`` ignoring case after an exact first character.

    The first character of a match must equal the first character of
    ``needle`` exactly; the remaining characters are compared without
    regard to ASCII letter case.
    """
    if not needle:
        return 0
    size = len(needle)
    first = needle[0]
    return next(
        (
            pos
            for pos, ch in enumerate(haystack)
            if ch == first and strcasencmp(haystack[pos:], needle, size) == 0
        ),
        None,
    )


def index_or_end(text: str, ch: str) -> int:
    """Index of the first ``ch`` in ``text``, or ``len(text)`` if absent."""
    if not ch:
        return len(text)
    found = text.find(ch)
    return len(text) if found < 0 else found