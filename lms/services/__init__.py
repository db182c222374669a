"""
Services module containing the role workflows.
"""

from .context import LMSContext
from .results import ActionResult, ActionStatus
from .admin_service import AdminService
from .teacher_service import TeacherService
from .student_service import StudentService
from .session_service import SessionService

__all__ = [
    "LMSContext",
    "ActionResult",
    "ActionStatus",
    "AdminService",
    "TeacherService",
    "StudentService",
    "SessionService",
]
