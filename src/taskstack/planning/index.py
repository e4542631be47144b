"""Binary search tree of tasks keyed by case-insensitive name."""

from dataclasses import dataclass
from typing import Iterator, Optional

from .task import Task
from ..exceptions import DuplicateNameError


@dataclass
class TaskNode:
    """A tree node owning its left and right subtrees."""
    task: Task
    left: Optional["TaskNode"] = None
    right: Optional["TaskNode"] = None


class NameIndex:
    """
    Unbalanced binary search tree over task names.

    Every comparison uses the casefolded name. Lookup is O(log n) on
    average but degrades to O(n) when names arrive in sorted order,
    because the tree is never rebalanced.

    Duplicate names are rejected with DuplicateNameError.
    """

    def __init__(self):
        self._root: Optional[TaskNode] = None
        self._size = 0

    def insert(self, task: Task):
        """
        Insert a task.

        Raises:
            DuplicateNameError: A task with the same name is already indexed
        """
        if self._root is None:
            self._root = TaskNode(task)
            self._size += 1
            return

        node = self._root
        while True:
            if task.key == node.task.key:
                raise DuplicateNameError(task.name)
            if task.key < node.task.key:
                if node.left is None:
                    node.left = TaskNode(task)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TaskNode(task)
                    break
                node = node.right
        self._size += 1

    def search(self, name: str) -> Optional[Task]:
        """Find a task by name, ignoring case."""
        key = name.casefold()
        node = self._root
        while node is not None:
            if key == node.task.key:
                return node.task
            node = node.left if key < node.task.key else node.right
        return None

    def remove(self, name: str) -> Optional[Task]:
        """
        Remove a task by name.

        Returns:
            The removed task, or None if nothing matched
        """
        key = name.casefold()
        parent: Optional[TaskNode] = None
        node = self._root
        while node is not None and key != node.task.key:
            parent = node
            node = node.left if key < node.task.key else node.right

        if node is None:
            return None

        found = node.task
        if node.left is not None and node.right is not None:
            # Two children: take over the in-order successor's task, then
            # unlink the successor, which has no left child.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            node.task = successor.task
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child

        self._size -= 1
        return found

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        height = 0
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def __iter__(self) -> Iterator[Task]:
        """Iterate in name order."""
        stack: list[TaskNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.task
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: str) -> bool:
        return self.search(name) is not None
