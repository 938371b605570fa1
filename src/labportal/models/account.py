# account.py
from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.labportal.models.base import Record
from src.labportal.utils.time import utc_now


class Student(Record, table=True):
    __table_args__ = {"extend_existing": True}
    email: str = Field(index=True, unique=True)
    password_hash: str
    batch: str
    created_at: datetime = Field(default_factory=utc_now)


class Teacher(Record, table=True):
    __table_args__ = {"extend_existing": True}
    email: str = Field(index=True, unique=True)
    password_hash: str
    name: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
