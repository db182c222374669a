"""
Custom exceptions for the LMS.
"""

from typing import Optional, Any, Dict


class LMSException(Exception):
    """Base exception for all LMS-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(LMSException):
    """Raised when data validation fails."""
    pass


class DuplicateEnrollmentError(ValidationError):
    """Raised when a student is enrolled twice in the same course."""
    pass


class StudentNotFoundError(ValidationError):
    """Raised when a student is not enrolled in the course."""
    pass


class InvalidIndexError(LMSException, IndexError):
    """Raised when a course or content position is out of range."""
    
    def __init__(self, message: str = "Invalid course index!", **kwargs):
        super().__init__(message, **kwargs)


class DuplicateEntityError(LMSException):
    """Raised when attempting to create a duplicate entity."""
    pass


class AuthenticationError(LMSException):
    """Raised when login credentials do not match any user."""
    pass


class ConfigurationError(LMSException):
    """Raised when configuration is invalid."""
    pass
