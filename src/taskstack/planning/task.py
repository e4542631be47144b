"""Task value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """
    A named unit of work.

    Attributes:
        name: Unique key, compared case-insensitively
        description: Free-form text shown next to the name
    """
    name: str
    description: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Task name must not be empty")

    @property
    def key(self) -> str:
        """Case-insensitive comparison key."""
        return self.name.casefold()

    def matches(self, name: str) -> bool:
        """Check if this task has the given name, ignoring case."""
        return self.key == name.casefold()

    def display(self) -> str:
        """Render as a single list line."""
        return f"{self.name}: {self.description}"
