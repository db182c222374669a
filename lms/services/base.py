"""
Shared plumbing for the role workflow services.
"""

from typing import Sequence

from ..core.entities import Course
from ..core.exceptions import InvalidIndexError
from ..core.validator import is_valid_index
from .context import LMSContext


def format_contents(course: Course) -> str:
    """Printable content listing for a course."""
    if not course.contents:
        return "No content available for this course."
    return "\n".join(["Course Contents:"] + [f"- {item}" for item in course.contents])


def format_course_list(courses: Sequence[Course]) -> str:
    """Numbered course listing, 1-based as shown to the user."""
    return "\n".join(f"{position}: {course.summary}" for position, course in enumerate(courses, 1))


class WorkflowService:
    """Base class giving every workflow access to the registries."""
    
    def __init__(self, context: LMSContext):
        self._context = context
    
    @property
    def context(self) -> LMSContext:
        return self._context
    
    @staticmethod
    def _select(courses: Sequence[Course], position: int) -> Course:
        """Pick a course from a filtered list by its 1-based position."""
        index = position - 1
        if not is_valid_index(index, len(courses)):
            raise InvalidIndexError(details={'position': position, 'size': len(courses)})
        return courses[index]
