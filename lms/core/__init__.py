"""
Core module containing the object model, validation and exceptions.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .validator import *

__all__ = [
    # Entities
    "AbstractEntity",
    "User",
    "GradeRecord",
    "Course",
    
    # Interfaces
    "Reportable",
    
    # Enums
    "Role",
    
    # Validation
    "Validator",
    "is_valid_email",
    "is_valid_grade",
    "is_valid_index",
    "is_valid_string",
    "read_bounded_int",
    "MAX_STRING_LENGTH",
    
    # Exceptions
    "LMSException",
    "ValidationError",
    "DuplicateEnrollmentError",
    "StudentNotFoundError",
    "InvalidIndexError",
    "DuplicateEntityError",
    "AuthenticationError",
    "ConfigurationError",
]
