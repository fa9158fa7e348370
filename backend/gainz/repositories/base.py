# gainz/repositories/base.py
from __future__ import annotations
import logging
import uuid
from typing import Generic, Optional, TypeVar

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gainz.errors import PersistenceError

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """
    Lightweight base for repositories using SQLAlchemy 2.0 style.

    All repositories built on the same ``Session`` share one unit of work. Mutations
    stage their changes and finish with ``commit()``; if that fails the whole unit
    is rolled back, so nothing half-applied survives in memory or on disk.
    """
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, uid: uuid.UUID) -> Optional[T]:
        stmt = select(self.model).where(self.model.uid == uid)
        return self.db.execute(stmt).scalar_one_or_none()

    def count_where(self, *criteria) -> int:
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        return self.db.execute(stmt).scalar_one()

    def commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.exception("commit failed during %s", action)
            raise PersistenceError(f"{action} failed") from e

    def add_and_commit(self, entity: T, action: str) -> T:
        self.db.add(entity)
        self.commit(action)
        self.db.refresh(entity)
        return entity
