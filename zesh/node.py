"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class NodeType(enum.Enum):
    """Kinds of syntax tree node."""

    COMMAND = enum.auto()
    """A simple command whose children are its words."""
    VAR = enum.auto()
    """A single word."""


@dataclass
class Node:
    """A tree node with an optional string value and ordered children."""

    type: NodeType
    value: Optional[str] = None
    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        """Append ``child`` after the existing children."""
        if not isinstance(child, Node):
            raise TypeError("a child must be a Node")
        self.children.append(child)

    def set_str(self, value: Optional[str]) -> None:
        """Set the node's value to a string, or clear it with None."""
        if value is not None and not isinstance(value, str):
            raise TypeError("node value must be a string or None")
        self.value = value

    def words(self) -> list[str]:
        """Return the string values of the children, in order."""
        return [child.value for child in self.children if child.value is not None]