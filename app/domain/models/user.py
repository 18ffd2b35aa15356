"""User domain model — maps to the 'users' table."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime

from app.infrastructure.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    # NULLs never collide on a unique index, so any number of users may omit it
    phone = Column(String(50), unique=True, nullable=True, index=True)
    company = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    def __repr__(self):
        return f"<User {self.id} - {self.email}>"
