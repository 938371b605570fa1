# submission.py
from datetime import datetime
from typing import Optional

from sqlmodel import Field

from src.labportal.models.base import Record
from src.labportal.utils.time import utc_now


class Submission(Record, table=True):
    __table_args__ = {"extend_existing": True}
    student_email: str = Field(index=True)
    subject_code: str
    assignment_number: int
    question_id: str
    code: str
    language: str
    input: str = ""
    output: str = ""
    time_complexity: str
    space_complexity: str
    # None until a teacher grades it
    score: Optional[int] = Field(default=None, nullable=True)
    timestamp: datetime = Field(default_factory=utc_now)
