"""Undo/redo history."""

from .actions import ActionRecord, ActionType, AppliedAction
from .log import ActionLog

__all__ = [
    "ActionRecord",
    "ActionType",
    "AppliedAction",
    "ActionLog",
]
