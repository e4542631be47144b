"""Insertion-ordered task sequence."""

from typing import Iterator, Optional

from .task import Task


class OrderedTaskSequence:
    """
    Keeps tasks in the order they were added.

    This is the authoritative membership list and the order used for
    display. Lookups by name are linear; fast lookup is the job of
    NameIndex.
    """

    def __init__(self):
        self._tasks: list[Task] = []

    def append(self, task: Task):
        """Add a task at the tail."""
        self._tasks.append(task)

    def insert(self, position: int, task: Task):
        """Insert a task at position, clamped to the current bounds."""
        position = max(0, min(position, len(self._tasks)))
        self._tasks.insert(position, task)

    def remove_by_name(self, name: str) -> Optional[tuple[int, Task]]:
        """
        Remove the first task whose name matches, ignoring case.

        Args:
            name: Task name

        Returns:
            (position, task) of the removed entry, or None if absent
        """
        for position, task in enumerate(self._tasks):
            if task.matches(name):
                del self._tasks[position]
                return position, task
        return None

    def position_of(self, name: str) -> Optional[int]:
        """Index of the first task matching name, or None if absent."""
        for position, task in enumerate(self._tasks):
            if task.matches(name):
                return position
        return None

    def iterate(self) -> Iterator[Task]:
        """Iterate over tasks in insertion order."""
        return iter(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: str) -> bool:
        return self.position_of(name) is not None
