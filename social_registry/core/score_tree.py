"""Binary search tree of client names keyed by score."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ScoreTreeNode:
    """A tree node holding every client name that shares one score."""

    score: int
    clients: List[str] = field(default_factory=list)
    left: Optional['ScoreTreeNode'] = None
    right: Optional['ScoreTreeNode'] = None


class ScoreTree:
    """
    Unbalanced binary search tree ordered by score.

    Clients with an equal score share a node, in insertion order. The shape
    of the tree depends on the order of insertions, so depth queries do too.
    Traversals are iterative; a sorted insertion sequence degrades the tree
    into a list.
    """

    def __init__(self):
        self.root: Optional[ScoreTreeNode] = None
        self.size = 0

    def insert(self, name: str, score: int) -> None:
        """Insert *name* under *score*, appending to an existing node on ties."""
        self.size += 1
        if self.root is None:
            self.root = ScoreTreeNode(score, [name])
            return

        node = self.root
        while True:
            if score < node.score:
                if node.left is None:
                    node.left = ScoreTreeNode(score, [name])
                    return
                node = node.left
            elif score > node.score:
                if node.right is None:
                    node.right = ScoreTreeNode(score, [name])
                    return
                node = node.right
            else:
                node.clients.append(name)
                return

    def remove(self, name: str, score: int) -> bool:
        """
        Remove *name* from the node keyed by *score*.

        A node left without clients is deleted; a node with two children is
        replaced by its in-order successor. Returns whether *name* was found.
        """
        parent = None
        node = self.root
        while node is not None and node.score != score:
            parent = node
            node = node.left if score < node.score else node.right

        if node is None or name not in node.clients:
            return False

        node.clients.remove(name)
        self.size -= 1
        if not node.clients:
            self._delete_node(node, parent)
            logger.debug(f"Deleted empty score node {score}")
        return True

    def _delete_node(self, node: ScoreTreeNode, parent: Optional[ScoreTreeNode]) -> None:
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.score = successor.score
            node.clients = successor.clients
            self._replace_child(successor_parent, successor, successor.right)
            return

        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)

    def _replace_child(self, parent: Optional[ScoreTreeNode], old: ScoreTreeNode,
                       new: Optional[ScoreTreeNode]) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def at_depth(self, depth: int) -> List[str]:
        """
        Return the names held by every node at *depth*, left to right.

        The root is at depth 0. An out of range depth gives an empty list.
        """
        if self.root is None or depth < 0:
            return []

        level = [self.root]
        for _ in range(depth):
            level = [child for node in level for child in (node.left, node.right) if child is not None]
            if not level:
                return []

        result = []
        for node in level:
            result.extend(node.clients)
        return result

    def ranked_at_depth(self, depth: int, followers_of: Callable[[str], int]) -> List[str]:
        """Names at *depth* sorted by follower count, highest first (stable)."""
        return sorted(self.at_depth(depth), key=followers_of, reverse=True)

    def level_four_by_followers(self, followers_of: Callable[[str], int]) -> List[str]:
        return self.ranked_at_depth(4, followers_of)

    def inorder(self) -> List[str]:
        """Return every name in ascending score order."""
        result = []
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.extend(node.clients)
            node = node.right
        return result

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 when empty."""
        if self.root is None:
            return -1
        height = -1
        queue = deque([self.root])
        while queue:
            height += 1
            for _ in range(len(queue)):
                node = queue.popleft()
                if node.left is not None:
                    queue.append(node.left)
                if node.right is not None:
                    queue.append(node.right)
        return height

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self.size
