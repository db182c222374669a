"""
Terminal LMS: an in-memory Learning Management System for the console.

Admins manage courses and accounts, teachers publish content and grades,
and students enroll and review their results. All state lives for the
lifetime of the process only.
"""

__version__ = "1.0.0"
__author__ = "LMS Development Team"
__description__ = "In-memory terminal Learning Management System"
