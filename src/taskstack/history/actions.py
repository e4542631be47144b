"""Reversible edit records for undo/redo."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from itertools import count
from typing import Optional

from ..planning.task import Task


_ids = count(1)


def _generate_id() -> str:
    """Generate unique action ID."""
    return f"act_{next(_ids):06d}"


class ActionType(Enum):
    """What applying a record does to the registry."""
    ADD = "add"
    REMOVE = "remove"


@dataclass
class ActionRecord:
    """
    An edit that can be applied to a registry.

    The undo stack holds the inverse of each edit the user made: adding
    a task records REMOVE(name), removing one records ADD(name, description)
    with the description captured before the task was deleted.

    Attributes:
        action_type: ADD or REMOVE
        name: Task name
        description: Task description (ADD only)
        position: Index in the ordered sequence to restore at (ADD only,
            None means the tail)
        id: Sequential action identifier
        timestamp: When the record was created
    """
    action_type: ActionType
    name: str
    description: Optional[str] = None
    position: Optional[int] = None
    id: str = field(default_factory=_generate_id)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def add(
        cls,
        name: str,
        description: str,
        position: Optional[int] = None,
    ) -> "ActionRecord":
        """Create a record that adds a task back."""
        return cls(
            action_type=ActionType.ADD,
            name=name,
            description=description,
            position=position,
        )

    @classmethod
    def remove(cls, name: str) -> "ActionRecord":
        """Create a record that removes a task."""
        return cls(action_type=ActionType.REMOVE, name=name)

    @property
    def is_add(self) -> bool:
        return self.action_type == ActionType.ADD

    def describe(self) -> str:
        """Short human-readable summary."""
        if self.is_add:
            return f"add {self.name}: {self.description}"
        return f"remove {self.name}"


@dataclass
class AppliedAction:
    """
    Result of an undo or redo.

    Attributes:
        direction: "undo" or "redo"
        record: The record that was applied
        task: The task that was added or removed
    """
    direction: str
    record: ActionRecord
    task: Task

    @property
    def added(self) -> bool:
        """True if applying the record put a task back."""
        return self.record.is_add
