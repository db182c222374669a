"""
Persistence module holding the in-memory registries.
"""

from .course_registry import LMSManager
from .user_registry import UserRegistry

__all__ = [
    "LMSManager",
    "UserRegistry",
]
