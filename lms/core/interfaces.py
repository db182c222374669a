"""
Core interfaces for the LMS.
"""

from abc import ABC, abstractmethod


class Reportable(ABC):
    """Interface for entities that can generate reports."""

    @abstractmethod
    def generate_report(self) -> str:
        """Generate a human-readable report."""
        pass
