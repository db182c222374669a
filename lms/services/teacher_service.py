"""
Teacher workflows. A teacher only sees the courses assigned to them.
"""

import logging
from typing import List

from ..core.entities import Course, User
from ..core.exceptions import InvalidIndexError, ValidationError
from ..core.validator import is_valid_email
from .base import WorkflowService, format_contents
from .results import ActionResult, ActionStatus

logger = logging.getLogger(__name__)

NO_ASSIGNED_COURSES = "You are not assigned to any courses."


class TeacherService(WorkflowService):
    """Operations available from the teacher menu.

    Positions refer to the teacher's own course list, starting at 1.
    """

    def assigned_courses(self, teacher: User) -> List[Course]:
        return self._context.courses.courses_taught_by(teacher.email)

    def view_course(self, teacher: User, position: int) -> ActionResult:
        courses = self.assigned_courses(teacher)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NO_ASSIGNED_COURSES)
        try:
            course = self._select(courses, position)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        return ActionResult.ok(
            f"Viewing course: {course.name}\n{format_contents(course)}",
            course=course
        )

    def add_content(self, teacher: User, position: int, content: str) -> ActionResult:
        courses = self.assigned_courses(teacher)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NO_ASSIGNED_COURSES)
        try:
            course = self._select(courses, position)
            course.add_content(content)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        except ValidationError as e:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, e.message)
        logger.info("%s added content to %s", teacher.email, course.name)
        return ActionResult.ok(f"Content added to the course: {course.name}", course=course)

    def add_grade(self, teacher: User, position: int, student_email: str, grade: int) -> ActionResult:
        """Grade a student who is enrolled in one of the teacher's courses."""
        courses = self.assigned_courses(teacher)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NO_ASSIGNED_COURSES)
        try:
            course = self._select(courses, position)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        if not is_valid_email(student_email):
            return ActionResult.fail(ActionStatus.INVALID_INPUT, "Invalid email format. Please try again.")
        if not course.is_enrolled(student_email):
            logger.warning("%s tried to grade %s outside %s", teacher.email, student_email, course.name)
            return ActionResult.fail(ActionStatus.NOT_ENROLLED, "Student is not enrolled in this course.")
        try:
            record = course.add_grade(student_email, grade)
        except ValidationError as e:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, e.message)
        logger.info("%s graded %s in %s: %d", teacher.email, student_email, course.name, grade)
        return ActionResult.ok(f"Grade added successfully for student: {student_email}", record=record)

    def view_assigned_students(self, teacher: User, position: int) -> ActionResult:
        courses = self.assigned_courses(teacher)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NO_ASSIGNED_COURSES)
        try:
            course = self._select(courses, position)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        students = course.enrolled_students
        header = f"Course: {course.name} has {len(students)} students."
        if not students:
            return ActionResult.ok(f"{header}\nThere are no students enrolled in this course.", students=students)
        return ActionResult.ok("\n".join((header,) + students), students=students)

    def view_reports(self, teacher: User) -> ActionResult:
        courses = self.assigned_courses(teacher)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NO_ASSIGNED_COURSES)
        separator = "\n----------------------\n"
        body = separator.join(course.generate_report() for course in courses)
        return ActionResult.ok(f"Courses Report for {teacher.email}:\n{body}{separator.rstrip()}")
