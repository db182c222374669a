"""
Admin workflows: course management, account creation and reports.
"""

import logging
from typing import Optional, Tuple

from ..core.entities import Course, User
from ..core.enums import Role
from ..core.exceptions import InvalidIndexError, StudentNotFoundError, ValidationError
from ..core.validator import is_valid_email, is_valid_string
from .base import WorkflowService, format_course_list
from .results import ActionResult, ActionStatus

logger = logging.getLogger(__name__)

NO_COURSES = "There are no courses available."
DUPLICATE_ACCOUNT = "Student with this email already exists. Cannot create a duplicate account."


class AdminService(WorkflowService):
    """Operations available from the admin menu. Positions are 1-based."""

    def is_registered(self, email: str) -> bool:
        """Check whether any account already uses this email."""
        return self._context.users.exists(email)

    def course_at(self, position: int) -> Course:
        """Course at a 1-based registry position."""
        return self._context.courses.get_course(position - 1)

    def list_courses(self) -> ActionResult:
        courses = self._context.courses.list_courses()
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NO_COURSES)
        return ActionResult.ok(format_course_list(courses), count=len(courses))

    def add_course(self, name: str, teacher_email: str,
                   register_teacher: Optional[Tuple[str, str]] = None) -> ActionResult:
        """Create a course for a teacher.

        If no account uses ``teacher_email`` and ``register_teacher`` holds a
        ``(name, password)`` pair, a teacher account is created first. A
        teacher may only be assigned to one course.
        """
        registered_teacher = None
        if not is_valid_string(name):
            return ActionResult.fail(ActionStatus.INVALID_INPUT, "Invalid course name")
        if not is_valid_email(teacher_email):
            return ActionResult.fail(ActionStatus.INVALID_INPUT, "Invalid teacher email")

        if not self.is_registered(teacher_email):
            if register_teacher is None:
                return ActionResult.fail(
                    ActionStatus.TEACHER_NOT_REGISTERED,
                    "Error: The email does not belong to a registered teacher."
                )
            teacher_name, teacher_password = register_teacher
            if not is_valid_string(teacher_name) or not teacher_password:
                return ActionResult.fail(ActionStatus.INVALID_INPUT, "Invalid teacher name or password")
            registered_teacher = self._context.users.register(
                User(teacher_name, teacher_email, teacher_password, Role.TEACHER)
            )
            logger.info("Teacher %s registered during course creation", teacher_email)

        assigned = self._context.courses.find_by_teacher(teacher_email)
        if assigned is not None:
            logger.warning("Refused course %r: %s already teaches %r", name, teacher_email, assigned.name)
            return ActionResult.fail(
                ActionStatus.TEACHER_ALREADY_ASSIGNED,
                "Error: Teacher is already assigned to another course.",
                assigned_course=assigned.name
            )

        try:
            course = Course(name, teacher_email)
        except ValidationError as e:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, e.message)
        self._context.courses.add_course(course)
        return ActionResult.ok("Course added successfully.", course=course,
                               registered_teacher=registered_teacher)

    def delete_course(self, position: int) -> ActionResult:
        if self._context.courses.is_empty():
            return ActionResult.fail(ActionStatus.EMPTY, "There are no courses to delete.")
        try:
            course = self._context.courses.remove_course(position - 1)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        return ActionResult.ok(f"Successfully deleted course: {course.name}", course=course)

    def edit_course_add_content(self, position: int, content: str) -> ActionResult:
        try:
            course = self.course_at(position)
            course.add_content(content)
        except InvalidIndexError:
            return self._invalid_course_index()
        except ValidationError as e:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, e.message)
        logger.info("Admin added content to %s", course.name)
        return ActionResult.ok("Content added successfully.", course=course)

    def edit_course_remove_content(self, position: int, content_position: int) -> ActionResult:
        try:
            course = self.course_at(position)
        except InvalidIndexError:
            return self._invalid_course_index()
        if not course.contents:
            return ActionResult.fail(ActionStatus.EMPTY, "There is no content to remove.")
        try:
            removed = course.remove_content(content_position - 1)
        except InvalidIndexError:
            return ActionResult.fail(
                ActionStatus.INVALID_INDEX,
                f"Invalid content index. Please enter a number between 1 and {len(course.contents)}."
            )
        logger.info("Admin removed content %r from %s", removed, course.name)
        return ActionResult.ok("Content removed successfully.", removed=removed)

    def enroll_student(self, position: int, student_email: str, password: str) -> ActionResult:
        """Create a student account and enroll it in the chosen course.

        The username is the local part of the email. Existing accounts are
        never reused.
        """
        if self._context.courses.is_empty():
            return ActionResult.fail(ActionStatus.EMPTY, NO_COURSES)
        try:
            course = self.course_at(position)
        except InvalidIndexError:
            return self._invalid_course_index()

        if not is_valid_email(student_email):
            return ActionResult.fail(ActionStatus.INVALID_INPUT, "Invalid email format. Please try again.")
        if self.is_registered(student_email):
            logger.warning("Refused duplicate account for %s", student_email)
            return ActionResult.fail(ActionStatus.DUPLICATE, DUPLICATE_ACCOUNT)
        if not password:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, "Password cannot be empty.")

        student = User(student_email.split('@', 1)[0], student_email, password, Role.STUDENT)
        try:
            course.enroll_student(student_email)
        except ValidationError as e:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, e.message)
        self._context.users.register(student)
        return ActionResult.ok(
            "Student enrolled successfully and account created.",
            student=student,
            course=course
        )

    def remove_student(self, position: int, student_email: str) -> ActionResult:
        if self._context.courses.is_empty():
            return ActionResult.fail(ActionStatus.EMPTY, NO_COURSES)
        try:
            course = self.course_at(position)
        except InvalidIndexError:
            return self._invalid_course_index()
        if not course.enrolled_students:
            return ActionResult.fail(ActionStatus.EMPTY, "There is no student here.")
        try:
            course.remove_student(student_email)
        except StudentNotFoundError:
            return ActionResult.fail(ActionStatus.NOT_FOUND, "Student not found in the course.")
        logger.info("Removed %s from %s", student_email, course.name)
        return ActionResult.ok("Student removed successfully.", course=course)

    def view_reports(self) -> ActionResult:
        courses = self._context.courses.list_courses()
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, "No courses available to generate reports.")
        separator = "\n----------------------\n"
        body = separator.join(course.generate_report() for course in courses)
        return ActionResult.ok(f"Courses Report:\n{body}{separator.rstrip()}")

    def _invalid_course_index(self) -> ActionResult:
        return ActionResult.fail(
            ActionStatus.INVALID_INDEX,
            f"Invalid course index. Please enter a number between 1 and {len(self._context.courses)}."
        )
