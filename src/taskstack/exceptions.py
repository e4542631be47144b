"""Exceptions raised by the task registry."""

from dataclasses import dataclass


class TaskRegistryError(Exception):
    """Base class for recoverable registry errors."""


@dataclass
class DuplicateNameError(TaskRegistryError):
    """
    Raised when adding a task whose name is already registered.

    Names are compared case-insensitively, so "Homework" and "HOMEWORK"
    collide.
    """
    name: str

    def __str__(self):
        return f"Task already exists: {self.name}"


@dataclass
class NotFoundError(TaskRegistryError):
    """Raised when a task name is not present in the registry."""
    name: str

    def __str__(self):
        return f"Task not found: {self.name}"


@dataclass
class NoHistoryError(TaskRegistryError):
    """Raised by undo/redo when the corresponding stack is empty."""
    direction: str  # undo, redo

    def __str__(self):
        return f"No actions to {self.direction}."
