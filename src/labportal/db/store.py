# File location: src/labportal/db/store.py
"""
Record store: generic CRUD over the portal's named collections.

Each collection maps a string id to a record. Writes to a collection go
through that collection's lock and a single transaction, so two concurrent
submissions can no longer overwrite each other's read-modify-write.
"""
import logging
import threading
from typing import Any, Dict, Generic, List, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..models import Assignment, Student, Submission, Teacher
from ..models.base import Record
from ..utils.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)


class Collection(Generic[T]):
    def __init__(self, model: Type[T], name: str, label: str):
        self.model = model
        self.name = name
        self.label = label  # used in "<label> not found"
        self._write_lock = threading.Lock()

    # --- Reads ---

    def all(self, db: Session, *where) -> List[T]:
        stmt = select(self.model)
        for clause in where:
            stmt = stmt.where(clause)
        stmt = stmt.order_by(self.model.seq)
        try:
            return list(db.exec(stmt).all())
        except SQLAlchemyError as e:
            logger.error(f"Failed reading collection '{self.name}': {e}", exc_info=True)
            raise StorageError(f"Could not read {self.name}") from e

    def first(self, db: Session, *where) -> T | None:
        records = self.all(db, *where)
        return records[0] if records else None

    def get(self, db: Session, record_id: str) -> T:
        try:
            record = db.get(self.model, record_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed reading {self.name}/{record_id}: {e}", exc_info=True)
            raise StorageError(f"Could not read {self.name}") from e
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    # --- Writes ---

    def insert(self, db: Session, record: T) -> T:
        with self._write_lock:
            try:
                last = db.exec(select(func.max(self.model.seq))).one()
                record.seq = (last or 0) + 1
                db.add(record)
                db.commit()
                db.refresh(record)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Failed inserting into '{self.name}': {e}", exc_info=True)
                raise StorageError(f"Could not save to {self.name}") from e
        return record

    def update(self, db: Session, record_id: str, changes: Dict[str, Any]) -> T:
        with self._write_lock:
            record = self.get(db, record_id)
            for key, value in changes.items():
                setattr(record, key, value)
            try:
                db.add(record)
                db.commit()
                db.refresh(record)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Failed updating {self.name}/{record_id}: {e}", exc_info=True)
                raise StorageError(f"Could not update {self.name}") from e
        return record

    def delete(self, db: Session, record_id: str) -> None:
        with self._write_lock:
            record = self.get(db, record_id)
            try:
                db.delete(record)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Failed deleting {self.name}/{record_id}: {e}", exc_info=True)
                raise StorageError(f"Could not delete from {self.name}") from e


students = Collection(Student, "students", "Student")
teachers = Collection(Teacher, "teachers", "Teacher")
assignments = Collection(Assignment, "assignments", "Assignment")
submissions = Collection(Submission, "submissions", "Submission")

COLLECTIONS = {c.name: c for c in (students, teachers, assignments, submissions)}
