"""Binary tree nodes with depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional

__all__ = ["Node", "inorder", "preorder", "postorder", "level_order"]


@dataclass
class Node:
    """A binary tree node holding an integer value."""

    value: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def inorder(root: Optional[Node]) -> list[int]:
    """Return values in left, node, right order."""
    result: list[int] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def preorder(root: Optional[Node]) -> list[int]:
    """Return values in node, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Optional[Node]) -> list[int]:
    """Return values in left, right, node order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Return values grouped by depth, each level read left to right."""
    levels: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels