# File: src/labportal/schemas/submission.py

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from ..models.enums import Language, SpaceComplexity, TimeComplexity
from .base import CamelModel


class SubmissionCreate(CamelModel):
    student_email: str = Field(min_length=1)
    subject_code: str
    assignment_number: int
    question_id: str
    code: str
    language: Language
    input: str = ""
    output: str = ""
    time_complexity: TimeComplexity
    space_complexity: SpaceComplexity


class SubmissionRead(CamelModel):
    id: str
    student_email: str
    subject_code: str
    assignment_number: int
    question_id: str
    code: str
    language: Language
    input: str
    output: str
    time_complexity: TimeComplexity
    space_complexity: SpaceComplexity
    score: Optional[int] = None
    timestamp: datetime


class SubmissionDetail(SubmissionRead):
    question_title: str


class SubmissionGrade(CamelModel):
    # Range and integrality are checked by the controller
    score: Any = None


class SubmissionStats(CamelModel):
    total: int
    graded: int
    ungraded: int
