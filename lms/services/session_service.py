"""
Login: match credentials against the user registry.
"""

import logging

from ..core.entities import User
from ..core.exceptions import AuthenticationError
from .base import WorkflowService

logger = logging.getLogger(__name__)


class SessionService(WorkflowService):
    """Authenticates users for the console session."""
    
    def login(self, email: str, password: str) -> User:
        user = self._context.users.authenticate(email, password)
        if user is None:
            logger.warning("Failed login for %s", email)
            raise AuthenticationError(
                "Invalid login credentials. Please try again.",
                error_code="invalid_credentials",
                details={'email': email}
            )
        logger.info("%s logged in as %s", email, user.role.value)
        return user
