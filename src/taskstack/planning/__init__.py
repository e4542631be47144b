"""Task storage structures."""

from .task import Task
from .sequence import OrderedTaskSequence
from .index import NameIndex

__all__ = [
    "Task",
    "OrderedTaskSequence",
    "NameIndex",
]
