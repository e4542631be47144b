"""Task registry keeping the ordered list, name index and undo log in sync."""

import logging
from typing import Optional

from .exceptions import DuplicateNameError, NotFoundError
from .history.actions import ActionRecord, AppliedAction
from .history.log import ActionLog
from .planning.index import NameIndex
from .planning.sequence import OrderedTaskSequence
from .planning.task import Task
from .config import config

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    In-memory task registry with linear undo/redo.

    Every task lives in two structures: an OrderedTaskSequence (display
    order, authoritative membership) and a NameIndex (case-insensitive
    lookup). All mutation goes through this class so both stay in sync,
    and every successful add or remove records its inverse in the
    ActionLog. Undo and redo apply records through the same internal
    paths, without logging them as new edits.

    A task restored by undo/redo goes back to the position it was removed
    from, so undoing a remove reproduces the previous order exactly.
    """

    def __init__(self, max_history: Optional[int] = None):
        self._sequence = OrderedTaskSequence()
        self._index = NameIndex()
        self._log = ActionLog(
            max_history=config.history.max_undo if max_history is None else max_history
        )

    # ==================== Edits ====================

    def add_task(self, name: str, description: str = "") -> Task:
        """
        Add a task.

        Args:
            name: Task name, unique ignoring case
            description: Task description

        Returns:
            The added Task

        Raises:
            DuplicateNameError: A task with this name already exists
            ValueError: The name is empty
        """
        task = self._add(name.strip(), description)
        self._log.record(ActionRecord.remove(task.name))
        return task

    def remove_task(self, name: str) -> Task:
        """
        Remove a task by name.

        Args:
            name: Task name, ignoring case

        Returns:
            The removed Task

        Raises:
            NotFoundError: No such task; the undo history is left untouched
        """
        position, task = self._remove(name.strip())
        self._log.record(ActionRecord.add(task.name, task.description, position))
        return task

    def search_task(self, name: str) -> Optional[Task]:
        """Find a task by name, ignoring case."""
        return self._index.search(name.strip())

    def list_tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return list(self._sequence.iterate())

    # ==================== Undo / Redo ====================

    def undo(self) -> AppliedAction:
        """
        Revert the most recent edit.

        Raises:
            NoHistoryError: Nothing to undo
        """
        record = self._log.pop_undo()
        try:
            task, inverse = self._apply(record)
        except (DuplicateNameError, NotFoundError):
            self._log.push_undo(record)
            raise

        self._log.push_redo(inverse)
        logger.debug("Undo %s (%s)", record.id, record.describe())
        return AppliedAction(direction="undo", record=record, task=task)

    def redo(self) -> AppliedAction:
        """
        Re-apply the most recently undone edit.

        Raises:
            NoHistoryError: Nothing to redo
        """
        record = self._log.pop_redo()
        try:
            task, inverse = self._apply(record)
        except (DuplicateNameError, NotFoundError):
            self._log.push_redo(record)
            raise

        self._log.push_undo(inverse)
        logger.debug("Redo %s (%s)", record.id, record.describe())
        return AppliedAction(direction="redo", record=record, task=task)

    @property
    def can_undo(self) -> bool:
        return self._log.can_undo

    @property
    def can_redo(self) -> bool:
        return self._log.can_redo

    def history(self, limit: Optional[int] = 20) -> list[ActionRecord]:
        """Pending undo records, newest first."""
        return self._log.get_history(limit)

    # ==================== Internals ====================

    def _apply(self, record: ActionRecord) -> tuple[Task, ActionRecord]:
        """Apply a record and return the affected task and the record's inverse."""
        if record.is_add:
            task = self._add(record.name, record.description or "", record.position)
            return task, ActionRecord.remove(task.name)

        position, task = self._remove(record.name)
        return task, ActionRecord.add(task.name, task.description, position)

    def _add(self, name: str, description: str, position: Optional[int] = None) -> Task:
        task = Task(name=name, description=description)

        # The index rejects duplicates before anything is changed
        self._index.insert(task)
        if position is None:
            self._sequence.append(task)
        else:
            self._sequence.insert(position, task)

        logger.debug("Added task %r", task.name)
        return task

    def _remove(self, name: str) -> tuple[int, Task]:
        if self._index.search(name) is None:
            raise NotFoundError(name)

        self._index.remove(name)
        position, task = self._sequence.remove_by_name(name)

        logger.debug("Removed task %r from position %d", task.name, position)
        return position, task

    def __len__(self) -> int:
        return len(self._sequence)

    def __contains__(self, name: str) -> bool:
        return name.strip() in self._index
