"""Binary search tree of characters with a level-by-level text rendering."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A single character held in a binary search tree."""

    value: str
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _check_char(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"tree values must be str, not {type(value).__name__}")
    if len(value) != 1:
        raise ValueError(f"tree values must be a single character, got {value!r}")
    return value


class BinaryTree:
    """A binary search tree of single characters; duplicates are ignored."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: str) -> None:
        """Insert a character, ordered by code point; an existing value is left alone."""
        value = _check_char(value)
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        key = ord(value)
        while True:
            current = ord(node.value)
            if current > key:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif current < key:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def height(self) -> int:
        """Height of the tree in edges; an empty tree has height -1."""

        def _height(node: Optional[TreeNode]) -> int:
            if node is None:
                return -1
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self.root)

    def total_value(self) -> int:
        """Weighted sum of character codes.

        Every node adds its own code; in addition a left child adds twice its
        code and a right child once more to the sum of its parent.
        """

        def _total(node: Optional[TreeNode]) -> int:
            if node is None:
                return 0
            total = ord(node.value)
            if node.left is not None:
                total += 2 * ord(node.left.value) + _total(node.left)
            if node.right is not None:
                total += ord(node.right.value) + _total(node.right)
            return total

        return _total(self.root)

    def mirror(self) -> bool:
        """Swap left and right children throughout; False if the tree is empty."""
        if self.root is None:
            return False
        stack = [self.root]
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child)
        return True

    def inorder(self) -> list[str]:
        """Values in in-order (left, node, right) sequence."""
        return list(self._walk_inorder(self.root))

    def _walk_inorder(self, node: Optional[TreeNode]) -> Iterator[str]:
        if node is None:
            return
        yield from self._walk_inorder(node.left)
        yield node.value
        yield from self._walk_inorder(node.right)

    def render(self) -> str:
        """Draw the tree one level per pair of lines: values, then link dots.

        Returns an empty string for an empty tree.
        """
        if self.root is None:
            return ""
        depth = self.height() + 1
        width = (1 << depth) - 1
        queue: deque[tuple[TreeNode, int]] = deque([(self.root, width // 2)])
        lines: list[str] = []
        level = 0
        while queue:
            nodes_line = [" "] * width
            links_line = [" "] * width
            for _ in range(len(queue)):
                node, pos = queue.popleft()
                nodes_line[pos] = node.value
                step = 1 << (depth - level - 2) if node.left or node.right else 0
                if node.left is not None:
                    child_pos = pos - step
                    queue.append((node.left, child_pos))
                    links_line[(pos + child_pos) // 2] = "."
                if node.right is not None:
                    child_pos = pos + step
                    queue.append((node.right, child_pos))
                    links_line[(pos + child_pos) // 2] = "."
            lines.append("".join(nodes_line))
            lines.append("".join(links_line))
            level += 1
        return "".join(line + "\n" for line in lines)