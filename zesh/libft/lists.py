"""A singly linked list of arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Cell:
    content: Any
    next: Optional[_Cell] = None


class LinkedList:
    """A singly linked list that can grow at either end."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self._head: Optional[_Cell] = None
        self._tail: Optional[_Cell] = None
        self._size = 0
        for content in contents:
            self.push_back(content)

    def push_front(self, content: Any) -> None:
        """Add ``content`` at the beginning of the list."""
        cell = _Cell(content, self._head)
        self._head = cell
        if self._tail is None:
            self._tail = cell
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Add ``content`` at the end of the list."""
        cell = _Cell(content)
        if self._tail is None:
            self._head = cell
        else:
            self._tail.next = cell
        self._tail = cell
        self._size += 1

    def last(self) -> Any:
        """Return the content of the last element, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every element, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``f(content)`` for every element."""
        return LinkedList(f(content) for content in self)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each content to ``delete`` if given."""
        cell = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while cell is not None:
            following = cell.next
            if delete is not None:
                delete(cell.content)
            cell.next = None
            cell = following

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        cell = self._head
        while cell is not None:
            yield cell.content
            cell = cell.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"