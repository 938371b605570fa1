# assignment.py
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import Column, JSON
from sqlmodel import Field

from src.labportal.models.base import Record
from src.labportal.utils.time import utc_now


class Assignment(Record, table=True):
    __table_args__ = {"extend_existing": True}
    subject_code: str = Field(index=True)
    batch: str = Field(index=True)
    assignment_number: int
    # Ordered list of question objects; order is the display order
    questions: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_by: str = Field(index=True)
    created_at: datetime = Field(default_factory=utc_now)
