"""
In-memory user registry keyed by email.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..core.entities import User
from ..core.enums import Role
from ..core.exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)


class UserRegistry:
    """Owns every user account. Email is the identity."""
    
    def __init__(self):
        self._users: Dict[str, User] = {}
    
    def register(self, user: User) -> User:
        """Add a new account."""
        if user.email in self._users:
            raise DuplicateEntityError(
                f"A user with email {user.email} already exists",
                error_code="duplicate_user",
                details={'email': user.email}
            )
        self._users[user.email] = user
        logger.info("Registered %s account for %s", user.role.value, user.email)
        return user
    
    def find_by_email(self, email: str) -> Optional[User]:
        return self._users.get(email)
    
    def exists(self, email: str) -> bool:
        return email in self._users
    
    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user whose email and password both match."""
        user = self._users.get(email)
        if user is not None and user.check_password(password):
            return user
        return None
    
    def list_users(self, role: Optional[Role] = None) -> List[User]:
        """All users in registration order, optionally filtered by role."""
        if role is None:
            return list(self._users.values())
        return [user for user in self._users.values() if user.role is role]
    
    def __len__(self) -> int:
        return len(self._users)
    
    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users.values()))
