"""
Result objects returned by the role workflows.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ActionStatus(Enum):
    """Outcome of a workflow action."""
    OK = "ok"
    INVALID_INDEX = "invalid_index"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    NOT_ENROLLED = "not_enrolled"
    DUPLICATE = "duplicate"
    EMPTY = "empty"
    TEACHER_NOT_REGISTERED = "teacher_not_registered"
    TEACHER_ALREADY_ASSIGNED = "teacher_already_assigned"


@dataclass
class ActionResult:
    """Result of a workflow action, ready to be shown to the user."""
    success: bool
    status: ActionStatus
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, **data: Any) -> "ActionResult":
        return cls(success=True, status=ActionStatus.OK, message=message, data=data)

    @classmethod
    def fail(cls, status: ActionStatus, message: str, **data: Any) -> "ActionResult":
        return cls(success=False, status=status, message=message, data=data)
