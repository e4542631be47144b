"""In-memory task registry with undo/redo."""

from .exceptions import (
    TaskRegistryError,
    DuplicateNameError,
    NotFoundError,
    NoHistoryError,
)
from .planning import Task, OrderedTaskSequence, NameIndex
from .history import ActionLog, ActionRecord, ActionType, AppliedAction
from .registry import TaskRegistry

__all__ = [
    "TaskRegistryError",
    "DuplicateNameError",
    "NotFoundError",
    "NoHistoryError",
    "Task",
    "OrderedTaskSequence",
    "NameIndex",
    "ActionLog",
    "ActionRecord",
    "ActionType",
    "AppliedAction",
    "TaskRegistry",
]
__version__ = "0.1.0"
