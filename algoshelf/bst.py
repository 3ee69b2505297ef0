"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["BinarySearchTree"]


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree in which equal values go to the left subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())

    def insert(self, value: int) -> None:
        """Add ``value``; values not greater than a node go to its left."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def __contains__(self, value: object) -> bool:
        current = self._root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if current.value > value else current.right
        return False

    def _extreme(self, side: str) -> int:
        if self._root is None:
            raise ValueError("tree is empty")
        current = self._root
        while (child := getattr(current, side)) is not None:
            current = child
        return current.value

    def minimum(self) -> int:
        """Return the leftmost value; raise ValueError on an empty tree."""
        return self._extreme("left")

    def maximum(self) -> int:
        """Return the rightmost value; raise ValueError on an empty tree."""
        return self._extreme("right")

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path, -1 if empty."""
        level = [self._root] if self._root is not None else []
        height = -1
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def inorder(self) -> list[int]:
        """Return the values in left, node, right order (ascending)."""
        result: list[int] = []
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.value)
            current = current.right
        return result

    def preorder(self) -> list[int]:
        """Return the values in node, left, right order."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[int]:
        """Return the values in left, right, node order."""
        result: deque[int] = deque()
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.appendleft(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return list(result)