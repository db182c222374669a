"""
Student workflows: browsing enrolled courses, grades and self-enrollment.
"""

import logging
from typing import List

from ..core.entities import Course, User
from ..core.exceptions import InvalidIndexError, ValidationError
from .base import WorkflowService, format_contents
from .results import ActionResult, ActionStatus

logger = logging.getLogger(__name__)

NOT_ENROLLED_ANYWHERE = "You are not enrolled in any courses."
NOTHING_TO_ENROLL = "No courses available for enrollment."


class StudentService(WorkflowService):
    """Operations available from the student menu."""

    def enrolled_courses(self, student: User) -> List[Course]:
        return self._context.courses.courses_enrolling(student.email)

    def available_courses(self, student: User) -> List[Course]:
        return self._context.courses.courses_not_enrolling(student.email)

    def view_course_contents(self, student: User, position: int) -> ActionResult:
        courses = self.enrolled_courses(student)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NOT_ENROLLED_ANYWHERE)
        try:
            course = self._select(courses, position)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        return ActionResult.ok(
            f"Selected course: {course.name}\n{format_contents(course)}",
            course=course
        )

    def view_grade(self, student: User, position: int) -> ActionResult:
        """Show the first grade recorded for the student in the chosen course."""
        courses = self.enrolled_courses(student)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NOT_ENROLLED_ANYWHERE)
        try:
            course = self._select(courses, position)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        record = course.grade_for(student.email)
        if record is None:
            return ActionResult.fail(ActionStatus.NOT_FOUND, "No grade available for this course.")
        return ActionResult.ok(f"Your Grade in {course.name}: {record.score}%", record=record)

    def enroll(self, student: User, position: int) -> ActionResult:
        """Enroll in a course picked from the courses the student is not in yet."""
        courses = self.available_courses(student)
        if not courses:
            return ActionResult.fail(ActionStatus.EMPTY, NOTHING_TO_ENROLL)
        try:
            course = self._select(courses, position)
            course.enroll_student(student.email)
        except InvalidIndexError:
            return ActionResult.fail(ActionStatus.INVALID_INDEX, "Invalid course index.")
        except ValidationError as e:
            return ActionResult.fail(ActionStatus.INVALID_INPUT, e.message)
        logger.info("%s enrolled in %s", student.email, course.name)
        return ActionResult.ok(f"Successfully enrolled in the course: {course.name}", course=course)
