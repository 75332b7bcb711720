"""Binary-tree exercises: vertical order traversal."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Values column by column from left to right.

    Within a column values go top to bottom; values sharing a row and a
    column are sorted.
    """
    if root is None:
        return []
    cells: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, level = queue.popleft()
        cells[column, level].append(node.val)
        if node.left is not None:
            queue.append((node.left, column - 1, level + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, level + 1))

    columns: defaultdict[int, list[int]] = defaultdict(list)
    for column, level in sorted(cells):
        columns[column].extend(sorted(cells[column, level]))
    return [columns[column] for column in sorted(columns)]