"""String length, character search and comparison.

Comparisons follow the classic terminated-string rules: the end of a
string behaves like a NUL character, and characters compare by their
unsigned codes. Searches return an index into the string, or None when
nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _as_char(c: Char) -> str:
    """Turn a one-character string or a character code into a string."""
    if isinstance(c, bool):
        raise TypeError("a character must be a one-character string or an int")
    if isinstance(c, int):
        return chr(c % 256)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("a character must be a one-character string or an int")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strnlen(s: str, maxlen: int) -> int:
    """Return the length of ``s``, but never more than ``maxlen``."""
    if maxlen < 0:
        raise ValueError(f"maxlen must not be negative, got {maxlen}")
    return min(len(s), maxlen)


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    The terminator counts as part of the string, so searching for NUL
    gives ``len(s)``. Returns None when ``c`` does not occur.
    """
    ch = _as_char(c)
    if ch == _NUL:
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``; NUL gives ``len(s)``."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _compare(s1: str, s2: str) -> int:
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Return the code difference at the first mismatch, or 0 if equal."""
    return _compare(s1, s2)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    return _compare(s1[:n], s2[:n]) if len(s1) >= n and len(s2) >= n else _compare(
        s1[:n], s2[:n]
    )


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``n`` characters of ``haystack``.

    An empty needle matches at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    limit = min(n, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def lastchr(s: str) -> str:
    """Return the last character of ``s``; an empty string has none."""
    if not s:
        raise ValueError("an empty string has no last character")
    return s[-1]