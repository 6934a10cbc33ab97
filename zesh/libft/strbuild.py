"""Building new strings from existing ones.

Functions that in a fixed-size buffer world would write into a
destination return the resulting string together with the length the
caller would have needed, so truncation can be detected by comparing
that length with the buffer size.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters.

    Room is kept for the terminator, so at most ``dstsize - 1``
    characters are copied. Returns the copied text and ``len(src)``;
    a length of ``dstsize`` or more means the copy was truncated.
    """
    _check_size("dstsize", dstsize)
    if dstsize == 0:
        return "", len(src)
    return src[: dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length of the string that was
    attempted: the initial length of ``dst`` (capped at ``dstsize``)
    plus ``len(src)``.
    """
    _check_size("dstsize", dstsize)
    dst_len = min(len(dst), dstsize)
    if dst_len == dstsize:
        return dst, len(src) + dstsize
    room = dstsize - dst_len - 1
    return dst[:dst_len] + src[:room], dst_len + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end of ``s`` gives the empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """Remove the characters of ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each character of the mutable sequence ``s`` by ``f(index, char)``."""
    for index, ch in enumerate(s):
        s[index] = f(index, ch)