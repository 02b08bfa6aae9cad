"""Breadth-first walks over binary trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _children(nodes):
    return [child for node in nodes for child in (node.left, node.right) if child is not None]


def level_order(root):
    """Node values level by level, left to right."""
    levels = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = _children(current)
    return levels


def max_depth(root):
    """Number of nodes on the longest root-to-leaf path."""
    depth = 0
    current = [root] if root is not None else []
    while current:
        depth += 1
        current = _children(current)
    return depth