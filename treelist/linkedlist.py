"""Singly linked list of character nodes, each carrying a binary tree."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from treelist.tree import BinaryTree

PAGE_SIZE = 10
_GAP = " " * 5
_CELL_WIDTH = 11
_CELL_STRIDE = len(_GAP) + _CELL_WIDTH

MIRRORED = "Selected node's tree mirrored!"
NO_SELECTED_NODE = "No selected node!"
NO_TREE = "Current node has no attached tree!"


@dataclass(eq=False)
class ListNode:
    """A list element holding a character and the tree built from its line."""

    value: str
    next: Optional[ListNode] = field(default=None, repr=False)
    tree: BinaryTree = field(default_factory=BinaryTree, repr=False)


class TreeList:
    """Linked list of tree-carrying nodes with a cursor and pages of ten."""

    def __init__(self) -> None:
        self.first: Optional[ListNode] = None
        self.last: Optional[ListNode] = None
        self.current: Optional[ListNode] = None
        self.page = 0
        self._loaded = 0

    def __iter__(self) -> Iterator[ListNode]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def add(self, node: ListNode) -> None:
        """Append a node; the first node added to an empty list becomes current."""
        if self.first is None:
            self.first = node
            self.last = node
            self.current = node
        else:
            assert self.last is not None
            self.last.next = node
            self.last = node

    def add_line(self, line: str) -> Optional[ListNode]:
        """Build a node from a line of text; empty lines are ignored."""
        if not line:
            return None
        node = ListNode(line[0])
        for ch in line:
            node.tree.insert(ch)
        self.add(node)
        self._loaded += 1
        return node

    def load(self, path: Union[str, os.PathLike]) -> int:
        """Add one node per non-empty line of a text file; return how many were added."""
        added = 0
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if self.add_line(line.rstrip("\n")) is not None:
                    added += 1
        return added

    def index_of(self, node: ListNode) -> int:
        """Position of a node in the list; ValueError if it is not in it."""
        for index, candidate in enumerate(self):
            if candidate is node:
                return index
        raise ValueError("node is not in the list")

    def _predecessor(self, node: ListNode) -> ListNode:
        for candidate in self:
            if candidate.next is node:
                return candidate
        raise ValueError("node has no predecessor in the list")

    def delete_current(self) -> Optional[ListNode]:
        """Unlink the node under the cursor and return it; None if the list is empty."""
        node = self.current
        if node is None:
            return None
        if node is self.first:
            self.first = node.next
            if self.first is None:
                self.last = None
            self.current = node.next
        else:
            previous = self._predecessor(node)
            previous.next = node.next
            if node.next is None:
                self.current = previous
                self.last = previous
            else:
                self.current = node.next
        node.next = None
        return node

    def _move_back(self) -> None:
        if self.current is None or self.current is self.first:
            return
        self.current = self._predecessor(self.current)
        if self.index_of(self.current) < self.page * PAGE_SIZE:
            self.page -= 1

    def _move_forward(self) -> None:
        if self.current is None or self.current.next is None:
            return
        self.current = self.current.next
        if self.index_of(self.current) >= (self.page + 1) * PAGE_SIZE:
            self.page += 1

    def _mirror_current(self) -> str:
        if self.current is None:
            return NO_TREE
        if not self.current.tree.mirror():
            return NO_SELECTED_NODE
        return MIRRORED

    def handle_key(self, key: str) -> Optional[str]:
        """Apply a command key: a/d move, s deletes, w mirrors; returns a message or None."""
        command = key.lower()
        if command == "a":
            self._move_back()
        elif command == "d":
            self._move_forward()
        elif command == "s":
            self.delete_current()
        elif command == "w":
            return self._mirror_current()
        return None

    @staticmethod
    def _address(node: ListNode) -> str:
        return hex(id(node))

    def render(self) -> str:
        """Draw the current page of the list, the cursor and the current node's tree."""
        start = self.page * PAGE_SIZE
        page_nodes = list(self)[start:start + PAGE_SIZE]
        border = (_GAP + "*" * _CELL_WIDTH) * self._loaded + "\n"

        addresses = "".join(f"{_GAP}*{self._address(n)}*" for n in page_nodes)
        values = "".join(f"{_GAP}*{n.tree.total_value():>9}*" for n in page_nodes)
        nexts = "".join(
            f"{_GAP}*NULL      *" if n.next is None else f"{_GAP}*{self._address(n.next)}*"
            for n in page_nodes
        )

        parts = [
            border, addresses, "\n",
            border, values, "\n",
            border, nexts, "\n\n",
            border,
        ]

        position = next(
            (i for i, n in enumerate(page_nodes) if n is self.current), None
        )
        if position is not None:
            offset = _GAP + " " * (position * _CELL_STRIDE)
            parts.append(
                f"{offset}{'^' * _CELL_WIDTH}\n"
                f"{offset}{'|' * _CELL_WIDTH}\n"
                f"{offset}{'|' * _CELL_WIDTH}"
            )
        parts.append("\n\n\n")

        if self.current is not None:
            parts.append(self.current.tree.render())
        else:
            parts.append(" \n")
        return "".join(parts)