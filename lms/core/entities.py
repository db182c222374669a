"""
Core entities for the LMS: users, grade records and courses.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .enums import Role
from .exceptions import (
    ValidationError, InvalidIndexError, DuplicateEnrollmentError, StudentNotFoundError
)
from .interfaces import Reportable
from .validator import is_valid_email, is_valid_grade, is_valid_index, is_valid_string


class AbstractEntity:
    """Base abstract entity with universal ID, timestamps, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class User(AbstractEntity):
    """A person who can log in. The ``role`` decides which menu they reach."""

    def __init__(self, username: str, email: str, password: str, role: Role, **kwargs):
        super().__init__(**kwargs)
        self._username = username
        self._email = email
        self._password = password
        self._role = role

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password(self) -> str:
        return self._password

    @property
    def role(self) -> Role:
        return self._role

    def check_password(self, password: str) -> bool:
        """Plaintext comparison; credentials are demo data only."""
        return self._password == password

    def __repr__(self) -> str:
        return f"User(email={self._email!r}, role={self._role.value})"


@dataclass(frozen=True)
class GradeRecord:
    """A single score given to a student in a course."""
    student_email: str
    score: int

    def __str__(self) -> str:
        return f"{self.student_email}: {self.score}%"


class Course(AbstractEntity, Reportable):
    """Course with its content items, grade records and enrolled students."""

    def __init__(self, name: str, teacher_email: str, **kwargs):
        super().__init__(**kwargs)
        self._name = name
        self._teacher_email = teacher_email
        self._contents: List[str] = []
        self._grades: List[GradeRecord] = []
        self._enrolled_students: List[str] = []

        if not is_valid_string(name):
            raise ValidationError("Invalid course name", error_code="invalid_course_name")
        if not is_valid_email(teacher_email):
            raise ValidationError("Invalid teacher email", error_code="invalid_email")

    @property
    def name(self) -> str:
        return self._name

    @property
    def teacher_email(self) -> str:
        return self._teacher_email

    @property
    def summary(self) -> str:
        return f"{self._name} (Teacher: {self._teacher_email})"

    @property
    def contents(self) -> Tuple[str, ...]:
        return tuple(self._contents)

    @property
    def grades(self) -> Tuple[GradeRecord, ...]:
        return tuple(self._grades)

    @property
    def enrolled_students(self) -> Tuple[str, ...]:
        return tuple(self._enrolled_students)

    def add_content(self, content: str) -> None:
        """Append a content item."""
        if not is_valid_string(content):
            raise ValidationError("Invalid content", error_code="invalid_content")
        self._contents.append(content)
        self.touch()

    def remove_content(self, index: int) -> str:
        """Remove the content item at a 0-based index and return it."""
        if not is_valid_index(index, len(self._contents)):
            raise InvalidIndexError("Invalid content index!", details={'index': index})
        removed = self._contents.pop(index)
        self.touch()
        return removed

    def add_grade(self, student_email: str, grade: int) -> GradeRecord:
        """Append a grade record.

        Enrollment is not checked here and earlier records for the same
        student are kept.
        """
        if not is_valid_email(student_email):
            raise ValidationError("Invalid student email", error_code="invalid_email")
        if not is_valid_grade(grade):
            raise ValidationError("Invalid grade", error_code="invalid_grade",
                                  details={'grade': grade})
        record = GradeRecord(student_email, grade)
        self._grades.append(record)
        self.touch()
        return record

    def grade_for(self, student_email: str) -> Optional[GradeRecord]:
        """First grade record for the student, if any."""
        for record in self._grades:
            if record.student_email == student_email:
                return record
        return None

    def enroll_student(self, student_email: str) -> None:
        if not is_valid_email(student_email):
            raise ValidationError("Invalid student email", error_code="invalid_email")
        if student_email in self._enrolled_students:
            raise DuplicateEnrollmentError("Student already enrolled", error_code="duplicate_enrollment")
        self._enrolled_students.append(student_email)
        self.touch()

    def remove_student(self, student_email: str) -> None:
        if student_email not in self._enrolled_students:
            raise StudentNotFoundError("Student not found", error_code="student_not_found")
        self._enrolled_students.remove(student_email)
        self.touch()

    def is_enrolled(self, student_email: str) -> bool:
        return student_email in self._enrolled_students

    def generate_report(self) -> str:
        """Enrolled students and grades as printable text."""
        lines = [f"Course: {self._name} (Teacher: {self._teacher_email})", "Enrolled Students:"]
        if self._enrolled_students:
            lines.extend(self._enrolled_students)
        else:
            lines.append("(none)")
        lines.append("Grades:")
        if self._grades:
            lines.extend(str(record) for record in self._grades)
        else:
            lines.append("(none)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Course(name={self._name!r}, teacher_email={self._teacher_email!r})"
