"""
Login loop: authenticate, hand over to the role menu, repeat.
"""

import logging
from typing import Optional

from ..core.entities import User
from ..core.exceptions import AuthenticationError
from ..services import LMSContext, SessionService
from .io import Console
from .menus import ROLE_MENUS

logger = logging.getLogger(__name__)

EXIT_CHOICE = "0"


def login(console: Console, session: SessionService) -> Optional[User]:
    """Ask for credentials until they match; ``None`` means the user chose to exit."""
    while True:
        console.write("Learning Management System Login\n================================")
        email = console.prompt("Enter your email (or type '0' to exit): ")
        if email == EXIT_CHOICE:
            return None
        password = console.prompt("Enter your password: ")
        try:
            return session.login(email, password)
        except AuthenticationError as e:
            console.write(e.message)


def run_session(console: Console, context: LMSContext) -> int:
    """Run logins until the user exits. Returns the process exit status."""
    session = SessionService(context)
    while True:
        user = login(console, session)
        if user is None:
            console.write("Exiting program...")
            return 0

        ROLE_MENUS[user.role](console, context, user)
        logger.info("%s logged out", user.email)

        answer = console.prompt("Do you want to log in as a different role? (y/n): ")
        if answer.lower().startswith('n'):
            console.write("Logging out...")
            return 0
