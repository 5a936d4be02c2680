"""Binary tree nodes with traversals, depth measures and simple queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, node, right order (recursive)."""

    def walk(node: Optional[TreeNode]) -> Iterator[int]:
        if node is None:
            return
        yield from walk(node.left)
        yield node.val
        yield from walk(node.right)

    return list(walk(root))


def inorder_iter(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, node, right order using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        # Descend as far as possible along the left spine.
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.val)
        current = current.right
    return result


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return node values in node, left, right order (recursive)."""

    def walk(node: Optional[TreeNode]) -> Iterator[int]:
        if node is None:
            return
        yield node.val
        yield from walk(node.left)
        yield from walk(node.right)

    return list(walk(root))


def preorder_iter(root: Optional[TreeNode]) -> list[int]:
    """Return node values in node, left, right order using an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, right, node order (recursive)."""

    def walk(node: Optional[TreeNode]) -> Iterator[int]:
        if node is None:
            return
        yield from walk(node.left)
        yield from walk(node.right)
        yield node.val

    return list(walk(root))


def postorder_iter(root: Optional[TreeNode]) -> list[int]:
    """Return node values in left, right, node order using an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack: list[TreeNode] = []
    current: Optional[TreeNode] = root
    last_visited: Optional[TreeNode] = None
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        peek = stack[-1]
        if peek.right is not None and last_visited is not peek.right:
            current = peek.right
        else:
            result.append(peek.val)
            last_visited = stack.pop()
    return result


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path (recursive)."""
    if root is None:
        return 0
    # A node with a single child is not a leaf; follow the existing child.
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))


def min_depth_bfs(root: Optional[TreeNode]) -> int:
    """Return the shortest root-to-leaf depth by breadth-first search."""
    if root is None:
        return 0
    depth = 1
    queue: deque[TreeNode] = deque([root])
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is None and node.right is None:
                return depth
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        depth += 1
    return depth


def sum_values(root: Optional[TreeNode]) -> int:
    """Return the sum of all values in the tree."""
    if root is None:
        return 0
    return root.val + sum_values(root.left) + sum_values(root.right)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if p is None and q is None:
        return True
    if p is None or q is None:
        return False
    if p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def find_value(root: Optional[TreeNode], val: int) -> bool:
    """Search a binary search tree for a value."""
    node = root
    while node is not None:
        if val == node.val:
            return True
        node = node.left if val < node.val else node.right
    return False


def flatten(root: Optional[TreeNode]) -> None:
    """Rearrange the tree in place into a right-linked chain in preorder."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
        if not stack:
            return
        node.right = stack[-1]
        node.left = None


def first_child(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return the left child, else the right child, else the node itself."""
    if root is None:
        return None
    if root.left is not None:
        return root.left
    if root.right is not None:
        return root.right
    return root