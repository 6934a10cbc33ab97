"""Splitting strings into words.

Runs of separators never produce empty words: leading, trailing and
repeated separators are all skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from itertools import takewhile
from typing import Optional

from zesh.libft.charclass import is_space

_SPACE_RUN = re.compile(r"[\t\n\v\f\r ]+")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in s.split(sep) if part]


def split_space(s: str) -> list[str]:
    """Split ``s`` on runs of ASCII white space."""
    return [part for part in _SPACE_RUN.split(s) if part]


def word_counter(s: str) -> int:
    """Count the words of ``s`` separated by ASCII white space."""
    count = 0
    in_word = False
    for ch in s:
        if is_space(ch):
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def split_size(parts: Iterable[Optional[str]]) -> int:
    """Count the entries of ``parts`` up to the first None, if any."""
    return sum(1 for _ in takewhile(lambda part: part is not None, parts))