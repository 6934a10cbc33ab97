"""Splitting a line of shell input into word tokens.

Words are separated by spaces and tabs. Double and single quotes group
characters, white space included, into one word, and the quotes
themselves are dropped. A newline is a token of its own.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from zesh.source import EOS, Source

_QUOTES = ("\"", "'")
_BLANKS = (" ", "\t")


@dataclass(frozen=True)
class Token:
    """A word read from a source; empty text marks the end of input."""

    text: str
    src: Optional[Source] = field(default=None, compare=False, repr=False)

    @property
    def is_eof(self) -> bool:
        """True for the end-of-input token."""
        return not self.text


EOF_TOKEN = Token("")
"""The token returned once no more words can be read."""


def fill_token(src: Source) -> Optional[str]:
    """Read the characters of the next word from ``src``.

    Returns the word's text, which is empty when only blanks remained,
    or None when the input is exhausted or a quote is left unterminated.
    """
    nc = src.get_next_char()
    if nc is EOS:
        return None
    chars: list[str] = []
    while nc is not EOS:
        if nc in _QUOTES:
            quote = nc
            nc = src.get_next_char()
            while nc != quote and not src.at_end:
                chars.append(nc)
                nc = src.get_next_char()
            if src.at_end:
                return None
        elif nc in _BLANKS:
            if chars:
                break
        elif nc == "\n":
            if chars:
                src.give_back_char()
            else:
                chars.append(nc)
            break
        else:
            chars.append(nc)
        nc = src.get_next_char()
    return "".join(chars)


def tokenize(src: Source) -> Token:
    """Return the next token of ``src``, or ``EOF_TOKEN`` when there is none."""
    if not src.buffer:
        return EOF_TOKEN
    text = fill_token(src)
    if not text:
        return EOF_TOKEN
    return Token(text, src)


def iter_tokens(src: Source) -> Iterator[Token]:
    """Yield the tokens of ``src`` until the end of input."""
    while True:
        token = tokenize(src)
        if token.is_eof:
            return
        yield token