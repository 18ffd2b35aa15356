"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def find_by_email(self, email: str) -> Optional[User]:
        """Get the user with exactly this email, if any."""
        ...

    def find_by_phone(self, phone: str) -> Optional[User]:
        """Get the user with exactly this phone, if any."""
        ...

    def list_all_ordered_by_created_at_desc(self) -> List[User]:
        """Get every user, most recently created first."""
        ...
