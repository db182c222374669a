"""
In-memory course registry.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from ..core.entities import Course
from ..core.exceptions import InvalidIndexError
from ..core.validator import is_valid_index

logger = logging.getLogger(__name__)


class LMSManager:
    """Ordered registry of every course, addressed by 0-based position.

    One instance is built per application and handed to the workflows
    through the context object.
    """
    
    def __init__(self, courses: Optional[List[Course]] = None):
        self._courses: List[Course] = list(courses or [])
    
    def add_course(self, course: Course) -> Course:
        """Append a course. Names are not required to be unique."""
        self._courses.append(course)
        logger.info("Course added: %s (teacher %s)", course.name, course.teacher_email)
        return course
    
    def get_course(self, index: int) -> Course:
        """Get the course at a 0-based position."""
        if not is_valid_index(index, len(self._courses)):
            raise InvalidIndexError(details={'index': index, 'size': len(self._courses)})
        return self._courses[index]
    
    def remove_course(self, index: int) -> Course:
        """Remove the course at a 0-based position; later courses shift down."""
        if not is_valid_index(index, len(self._courses)):
            raise InvalidIndexError(details={'index': index, 'size': len(self._courses)})
        course = self._courses.pop(index)
        logger.info("Course removed: %s", course.name)
        return course
    
    def list_courses(self) -> Tuple[Course, ...]:
        return tuple(self._courses)
    
    def find_by_teacher(self, teacher_email: str) -> Optional[Course]:
        """First course assigned to the teacher, if any."""
        for course in self._courses:
            if course.teacher_email == teacher_email:
                return course
        return None
    
    def courses_taught_by(self, teacher_email: str) -> List[Course]:
        return [course for course in self._courses if course.teacher_email == teacher_email]
    
    def courses_enrolling(self, student_email: str) -> List[Course]:
        """Courses the student is enrolled in."""
        return [course for course in self._courses if course.is_enrolled(student_email)]
    
    def courses_not_enrolling(self, student_email: str) -> List[Course]:
        """Courses still open to the student."""
        return [course for course in self._courses if not course.is_enrolled(student_email)]
    
    def is_empty(self) -> bool:
        return not self._courses
    
    def __len__(self) -> int:
        return len(self._courses)
    
    def __iter__(self) -> Iterator[Course]:
        return iter(tuple(self._courses))
