"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_phone(self, phone: str) -> Optional[User]:
        return self.db.query(User).filter(User.phone == phone).first()

    def list_all_ordered_by_created_at_desc(self) -> List[User]:
        """Get every user, newest first. Equal timestamps fall back to id."""
        return (
            self.db.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .all()
        )
