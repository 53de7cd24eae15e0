"""Domain enumerations for taskdesk.

Enums represent fixed sets of domain values. They are serialized to and
from plain strings only at the HTTP and persistence boundaries.
"""

from enum import Enum


class TaskType(str, Enum):
    """Kind of follow-up a task asks for."""

    CALL = "call"
    EMAIL = "email"
    REVIEW = "review"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid task types as strings, in declaration order."""
        return [task_type.value for task_type in cls]


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Tasks start OPEN and may move to COMPLETED once; COMPLETED is terminal.
    """

    OPEN = "open"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]

    def can_transition_to(self, target: "TaskStatus") -> bool:
        """Return True if moving from this status to target is allowed."""
        return self is TaskStatus.OPEN and target is TaskStatus.COMPLETED
