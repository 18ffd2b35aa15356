"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, Type, TypeVar

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictException
from app.domain.repositories.base import BaseRepository
from app.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)

logger = structlog.get_logger(__name__)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def insert(self, obj_in: Any) -> ModelType:
        # obj_in is a dict or pydantic model
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump(exclude_unset=True)
        else:
            obj_data = obj_in

        db_obj = self.model(**obj_data)
        self.db.add(db_obj)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # A concurrent writer got past the application-level checks first
            self.db.rollback()
            logger.warning(
                "Insert rejected by unique constraint",
                table=self.model.__tablename__,
            )
            raise ConflictException() from exc
        self.db.refresh(db_obj)
        return db_obj
