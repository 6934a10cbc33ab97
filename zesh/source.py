"""A character cursor over one line of shell input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zesh.libft.charclass import is_space

EOS: Optional[str] = None
"""Returned by the cursor once the end of the input is reached."""


@dataclass
class Source:
    """Input text with a cursor that starts just before the first character."""

    buffer: str
    pos: int = -1

    def __post_init__(self) -> None:
        if not isinstance(self.buffer, str):
            raise TypeError("source buffer must be a string")

    @property
    def size(self) -> int:
        """Number of characters in the buffer."""
        return len(self.buffer)

    @property
    def at_end(self) -> bool:
        """True once the cursor has moved past the last character."""
        return self.pos >= self.size

    def get_next_char(self) -> Optional[str]:
        """Advance the cursor and return the character under it, or EOS."""
        if self.pos >= self.size:
            return EOS
        self.pos += 1
        if self.pos >= self.size:
            return EOS
        return self.buffer[self.pos]

    def peek_next_char(self) -> Optional[str]:
        """Return the next character without moving the cursor, or EOS."""
        following = self.pos + 1
        if following >= self.size:
            return EOS
        return self.buffer[following]

    def give_back_char(self) -> None:
        """Move the cursor back by one; nothing happens before the start."""
        if self.pos < 0:
            return
        self.pos -= 1

    def skip_white_spaces(self) -> None:
        """Advance the cursor over any white space that follows it."""
        c = self.peek_next_char()
        while c is not EOS and is_space(c):
            self.get_next_char()
            c = self.peek_next_char()