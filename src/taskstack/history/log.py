"""Undo/redo stacks of action records."""

import logging
from typing import Optional

from .actions import ActionRecord
from ..exceptions import NoHistoryError

logger = logging.getLogger(__name__)


class ActionLog:
    """
    Linear undo history.

    Features:
    - Undo and redo stacks of ActionRecord (LIFO)
    - Recording a new edit clears the redo stack
    - Optional bound on undo depth, dropping the oldest entries
    """

    def __init__(self, max_history: int = 100):
        if max_history < 0:
            raise ValueError(f"max_history must be >= 0, got {max_history}")
        self.max_history = max_history
        self._undo_stack: list[ActionRecord] = []
        self._redo_stack: list[ActionRecord] = []

    def record(self, record: ActionRecord):
        """
        Record the inverse of a user edit.

        Args:
            record: Record that reverts the edit
        """
        self._undo_stack.append(record)
        self._redo_stack.clear()  # Clear redo on new change
        self._trim()
        logger.debug("Recorded %s (%s)", record.id, record.describe())

    def _trim(self):
        if self.max_history and len(self._undo_stack) > self.max_history:
            dropped = len(self._undo_stack) - self.max_history
            del self._undo_stack[:dropped]
            logger.debug("Dropped %d oldest undo record(s)", dropped)

    def pop_undo(self) -> ActionRecord:
        """
        Pop the most recent undo record.

        Raises:
            NoHistoryError: Nothing to undo
        """
        if not self._undo_stack:
            raise NoHistoryError("undo")
        return self._undo_stack.pop()

    def pop_redo(self) -> ActionRecord:
        """
        Pop the most recent redo record.

        Raises:
            NoHistoryError: Nothing to redo
        """
        if not self._redo_stack:
            raise NoHistoryError("redo")
        return self._redo_stack.pop()

    def push_undo(self, record: ActionRecord):
        """Push onto the undo stack without touching redo."""
        self._undo_stack.append(record)
        self._trim()

    def push_redo(self, record: ActionRecord):
        """Push onto the redo stack."""
        self._redo_stack.append(record)

    def get_history(self, limit: Optional[int] = 20) -> list[ActionRecord]:
        """Get recent undo records, newest first."""
        records = list(reversed(self._undo_stack))
        return records if limit is None else records[:limit]

    def get_undoable(self) -> list[ActionRecord]:
        """Get records that can be undone, oldest first."""
        return self._undo_stack.copy()

    def get_redoable(self) -> list[ActionRecord]:
        """Get records that can be redone, oldest first."""
        return self._redo_stack.copy()

    @property
    def can_undo(self) -> bool:
        """Check if undo is available."""
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        """Check if redo is available."""
        return len(self._redo_stack) > 0

    def clear(self):
        """Clear all history."""
        self._undo_stack.clear()
        self._redo_stack.clear()
