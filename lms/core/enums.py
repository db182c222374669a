"""
Enumerations and constants for the LMS.
"""

from enum import Enum


class Role(Enum):
    """Roles a user can log in with."""
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"

    @property
    def label(self) -> str:
        return self.value.capitalize()
