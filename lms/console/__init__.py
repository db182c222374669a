"""
Console front end: prompts, role menus and the login loop.
"""

from .io import Console
from .menus import ROLE_MENUS, run_admin_menu, run_teacher_menu, run_student_menu
from .session import login, run_session

__all__ = [
    "Console",
    "ROLE_MENUS",
    "run_admin_menu",
    "run_teacher_menu",
    "run_student_menu",
    "login",
    "run_session",
]
