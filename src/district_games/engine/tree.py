"""Elimination tree: an unbalanced binary search tree of active districts.

Districts are keyed by ``district_id``.  Insertion descends right on a
strictly greater key and left otherwise, so the tree shape is purely a
function of admission order; no rotation or rebalancing is ever done.

Deletion uses the textbook three cases:

* leaf -- the parent's link (or the root) becomes empty;
* one child -- the parent's link (or the root) is rewired to that child;
* two children -- the in-order successor's district is copied into the
  target node, and the successor node is spliced out of the right subtree
  (it has no left child, so the splice is itself a one-child removal).

Every walk loops over an explicit stack, so a chain built from ids admitted
in ascending order is as safe to query as a bushy tree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from district_games.engine.population import District

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TreeNode:
    """Node of the elimination tree.

    Attributes:
        district: The district payload.  Replaced in place when a
            two-child delete pulls up the in-order successor.
        left: Subtree of districts with ids less than or equal to this one.
        right: Subtree of districts with ids greater than this one.
    """

    district: District
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def key(self) -> int:
        return self.district.district_id

    @property
    def is_leaf(self) -> bool:
        """Return ``True`` if the node has no children."""
        return self.left is None and self.right is None


class EliminationTree:
    """Binary search tree of the districts still in the tournament."""

    def __init__(self) -> None:
        self._root: TreeNode | None = None
        self._size = 0

    @property
    def root(self) -> TreeNode | None:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __contains__(self, district_id: object) -> bool:
        return isinstance(district_id, int) and self.find(district_id) is not None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, district: District) -> None:
        """Add *district* as a new leaf at the first free slot on its search path."""
        node = TreeNode(district)
        self._size += 1
        if self._root is None:
            self._root = node
            return

        key = district.district_id
        current = self._root
        while True:
            if key > current.key:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def delete(self, district_id: int) -> None:
        """Remove the district keyed *district_id*; a no-op when absent."""
        parent, target = self._locate(district_id)
        if target is None:
            logger.debug("delete(%d): district not in tree", district_id)
            return

        if target.left is not None and target.right is not None:
            successor_parent = target
            successor = target.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            target.district = successor.district
            if successor_parent is target:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = target.left if target.left is not None else target.right
            self._replace_child(parent, target, child)

        self._size -= 1

    def _replace_child(self, parent: TreeNode | None, target: TreeNode, child: TreeNode | None) -> None:
        if parent is None:
            self._root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, district_id: int) -> District | None:
        """Return the district keyed *district_id*, or ``None`` if absent."""
        _, node = self._locate(district_id)
        return node.district if node is not None else None

    def _locate(self, district_id: int) -> tuple[TreeNode | None, TreeNode | None]:
        """Return ``(parent, node)`` for *district_id*; ``node`` is ``None`` if absent."""
        parent: TreeNode | None = None
        current = self._root
        while current is not None and current.key != district_id:
            parent = current
            current = current.right if district_id > current.key else current.left
        return parent, current

    def iter_preorder(self) -> Iterator[TreeNode]:
        """Yield nodes root first, then the left subtree, then the right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> list[District]:
        """Return all districts sorted by the tree ordering."""
        result: list[District] = []
        stack: list[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.district)
            node = node.right
        return result

    def district_ids(self) -> list[int]:
        """Return the in-order sequence of district ids."""
        return [d.district_id for d in self.in_order()]

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        best = 0
        stack: list[tuple[TreeNode, int]] = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return best

    def is_valid(self) -> bool:
        """Check the ordering invariant over the whole tree.

        Every key in a left subtree must be less than or equal to its
        ancestor's key and every key in a right subtree strictly greater.
        """
        stack: list[tuple[TreeNode | None, int | None, int | None]] = [(self._root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if node is None:
                continue
            if low is not None and node.key <= low:
                return False
            if high is not None and node.key > high:
                return False
            stack.append((node.left, low, node.key))
            stack.append((node.right, node.key, high))
        return True
