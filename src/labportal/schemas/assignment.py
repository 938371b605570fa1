# File: src/labportal/schemas/assignment.py

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from ..models.base import new_id
from ..models.enums import Batch, SpaceComplexity, TimeComplexity
from .base import CamelModel


class QuestionSchema(CamelModel):
    # Clients usually send their own stable id; one is generated otherwise
    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    expected_time_complexity: TimeComplexity = TimeComplexity.LINEAR
    expected_space_complexity: SpaceComplexity = SpaceComplexity.CONSTANT


def _unique_question_ids(questions: Optional[List[QuestionSchema]]):
    if questions is None:
        return questions
    seen = set()
    for q in questions:
        if q.id in seen:
            raise ValueError(f"Duplicate question id '{q.id}'")
        seen.add(q.id)
    return questions


class AssignmentCreate(CamelModel):
    subject_code: str = Field(min_length=1)
    batch: Batch
    assignment_number: int = Field(gt=0)
    questions: List[QuestionSchema] = []
    created_by: str

    @field_validator("questions")
    @classmethod
    def unique_question_ids(cls, questions):
        return _unique_question_ids(questions)


class AssignmentUpdate(CamelModel):
    subject_code: Optional[str] = Field(default=None, min_length=1)
    batch: Optional[Batch] = None
    assignment_number: Optional[int] = Field(default=None, gt=0)
    # Replaces the whole list; nested questions are not merged
    questions: Optional[List[QuestionSchema]] = None

    @field_validator("questions")
    @classmethod
    def unique_question_ids(cls, questions):
        return _unique_question_ids(questions)


class AssignmentRead(CamelModel):
    id: str
    subject_code: str
    batch: Batch
    assignment_number: int
    questions: List[QuestionSchema]
    created_by: str
    created_at: datetime


class DeleteResponse(CamelModel):
    success: bool = True
